import logging
from datetime import date

import pytest
from django.db import DatabaseError

from apps.locations.log_handlers import DailyFileHandler

pytestmark = pytest.mark.django_db


def test_unknown_route_lists_endpoints(client):
    response = client.get('/api/nothing-here')

    body = response.json()
    assert response.status_code == 404
    assert body['error'] == 'Endpoint not found'
    assert body['method'] == 'GET'
    assert body['path'] == '/api/nothing-here'
    assert 'GET /api/locations' in body['availableEndpoints']
    assert 'DELETE /api/admin/clear-database' in body['availableEndpoints']


def test_unknown_method_on_known_path(client):
    response = client.put('/api/machines')

    assert response.status_code == 404


def test_dashboard(client, post_location):
    post_location()

    response = client.get('/')

    assert response.status_code == 200
    assert response['Content-Type'].startswith('text/html')
    content = response.content.decode()
    assert 'Location Tracker API' in content
    assert '/api/database/info' in content
    assert 'API_KEY' in content


def test_dashboard_shows_api_key_requirement(client, api_key):
    content = client.get('/').content.decode()

    assert 'x-api-key' in content


def test_cross_origin_reads_are_allowed(client):
    response = client.get('/api/stats', HTTP_ORIGIN='http://example.com')

    assert response.status_code == 200
    assert response['Access-Control-Allow-Origin'] == '*'


def test_preflight_allows_api_key_header(client):
    response = client.options(
        '/api/location',
        HTTP_ORIGIN='http://example.com',
        HTTP_ACCESS_CONTROL_REQUEST_METHOD='POST',
        HTTP_ACCESS_CONTROL_REQUEST_HEADERS='content-type, x-api-key',
    )

    assert response.status_code == 200
    assert response['Access-Control-Allow-Origin'] == '*'
    assert 'x-api-key' in response['Access-Control-Allow-Headers']
    assert 'DELETE' in response['Access-Control-Allow-Methods']


def test_storage_failure_is_a_server_error(client, store, monkeypatch):
    def broken(*args, **kwargs):
        raise DatabaseError('disk I/O error')

    monkeypatch.setattr(store, 'roster', broken)

    response = client.get('/api/machines')

    assert response.status_code == 500
    assert response.json()['message'] == 'disk I/O error'


def test_unexpected_failure_is_caught_by_middleware(client, store, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError('boom')

    monkeypatch.setattr(store, 'page', broken)

    response = client.get('/api/locations')

    body = response.json()
    assert response.status_code == 500
    assert body['error'] == 'Internal server error'
    assert body['message'] == 'boom'


def test_daily_file_handler(tmp_path):
    handler = DailyFileHandler(tmp_path, prefix='api')
    handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    record = logging.LogRecord('apps.locations', logging.INFO, __file__, 1, 'hello', None, None)

    handler.emit(record)
    handler.close()

    log_file = tmp_path / f"api_{date.today().isoformat()}.log"
    assert log_file.read_text(encoding='utf-8') == '[INFO] hello\n'


def test_daily_file_handler_switches_day(tmp_path):
    handler = DailyFileHandler(tmp_path, prefix='api')
    handler.current_day = date(2000, 1, 1)
    handler.baseFilename = str(tmp_path / 'api_2000-01-01.log')
    record = logging.LogRecord('apps.locations', logging.WARNING, __file__, 1, 'rolled', None, None)

    handler.emit(record)
    handler.close()

    assert handler.current_day == date.today()
    assert (tmp_path / f"api_{date.today().isoformat()}.log").exists()
    assert not (tmp_path / 'api_2000-01-01.log').exists()
