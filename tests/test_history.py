from datetime import timedelta

import pytest
from django.utils import timezone

from apps.locations.models import LocationRecord

pytestmark = pytest.mark.django_db


def _backdate(record_id, **delta):
    LocationRecord.objects.filter(pk=record_id).update(created_at=timezone.now() - timedelta(**delta))


def test_machine_filter_returns_newest_first(client, post_location):
    ids = [post_location().json()['id'] for _ in range(5)]
    post_location(MachineName='OTHER')

    body = client.get('/api/locations', {'machine': 'LAPTOP-ABC123', 'limit': 5}).json()

    assert body['count'] == 5
    assert [r['id'] for r in body['locations']] == list(reversed(ids))
    created = [r['created_at'] for r in body['locations']]
    assert created == sorted(created, reverse=True)


def test_limit_caps_results(client, post_location):
    for _ in range(4):
        post_location()

    body = client.get('/api/locations', {'machine': 'LAPTOP-ABC123', 'limit': 2}).json()

    assert body['count'] == 2


def test_machine_filter_takes_precedence_over_date(client, post_location):
    post_location(MachineName='A', Timestamp='2025-11-20T08:00:00Z')
    post_location(MachineName='A', Timestamp='2025-11-21T08:00:00Z')
    post_location(MachineName='B', Timestamp='2025-11-20T08:00:00Z')

    body = client.get('/api/locations', {'machine': 'A', 'date': '2025-11-20'}).json()

    assert body['count'] == 2
    assert {r['machine_name'] for r in body['locations']} == {'A'}
    assert body['filters'] == {'date': '2025-11-20', 'machine': 'A', 'limit': 100, 'offset': 0}


def test_date_filter_matches_observation_date(client, post_location):
    post_location(Timestamp='2025-11-20T08:00:00Z')
    post_location(Timestamp='2025-11-20 23:59:59')
    post_location(Timestamp='2025-11-21T00:00:01Z')
    post_location(Timestamp='not a date')

    body = client.get('/api/locations', {'date': '2025-11-20'}).json()

    assert body['count'] == 2
    assert all(r['timestamp'].startswith('2025-11-20') for r in body['locations'])


def test_pagination(client, post_location):
    ids = [post_location().json()['id'] for _ in range(5)]

    body = client.get('/api/locations', {'limit': 2, 'offset': 2}).json()

    assert [r['id'] for r in body['locations']] == [ids[2], ids[1]]
    assert body['filters']['offset'] == 2


def test_default_listing(client, post_location):
    post_location()

    body = client.get('/api/locations').json()

    assert body['count'] == 1
    assert body['filters'] == {'date': None, 'machine': None, 'limit': 100, 'offset': 0}


@pytest.mark.parametrize('params', [{'limit': 'abc'}, {'offset': '-1'}, {'limit': '1.5'}])
def test_bad_paging_parameters(client, params):
    response = client.get('/api/locations', params)

    assert response.status_code == 400


class TestMachineWindow:
    def test_excludes_records_before_window(self, client, post_location):
        old = post_location().json()['id']
        recent = post_location().json()['id']
        _backdate(old, hours=5)

        body = client.get('/api/locations/machine/LAPTOP-ABC123', {'hours': 1}).json()

        assert [r['id'] for r in body['locations']] == [recent]
        assert body['machine'] == 'LAPTOP-ABC123'
        assert body['hours'] == 1
        assert body['limit'] == 100

    def test_default_window_is_24_hours(self, client, post_location):
        inside = post_location().json()['id']
        outside = post_location().json()['id']
        _backdate(inside, hours=23)
        _backdate(outside, hours=25)

        body = client.get('/api/locations/machine/LAPTOP-ABC123').json()

        assert body['hours'] == 24
        assert [r['id'] for r in body['locations']] == [inside]

    def test_zero_hours_is_empty(self, client, post_location):
        record = post_location().json()['id']
        _backdate(record, minutes=1)

        body = client.get('/api/locations/machine/LAPTOP-ABC123', {'hours': 0}).json()

        assert body['count'] == 0

    def test_window_past_calendar_start_returns_everything(self, client, post_location):
        record = post_location().json()['id']
        _backdate(record, days=400)

        response = client.get('/api/locations/machine/LAPTOP-ABC123', {'hours': 100000000})

        body = response.json()
        assert response.status_code == 200
        assert body['hours'] == 100000000
        assert [r['id'] for r in body['locations']] == [record]

    def test_only_named_machine(self, client, post_location):
        post_location(MachineName='OTHER')

        body = client.get('/api/locations/machine/LAPTOP-ABC123').json()

        assert body['count'] == 0

    def test_limit(self, client, post_location):
        for _ in range(3):
            post_location()

        body = client.get('/api/locations/machine/LAPTOP-ABC123', {'limit': 2}).json()

        assert body['count'] == 2

    def test_machine_name_with_spaces(self, client, post_location):
        post_location(MachineName='Office PC')

        body = client.get('/api/locations/machine/Office%20PC').json()

        assert body['count'] == 1
