import pytest

from apps.locations.store import get_store


def location_payload(**overrides):
    payload = {
        'Latitude': 40.4168,
        'Longitude': -3.7038,
        'Altitude': 650.0,
        'Timestamp': '2025-11-20T10:15:00Z',
        'MachineName': 'LAPTOP-ABC123',
        'UserName': 'jdoe',
        'LocationSource': 'WiFi',
        'PublicIP': '203.0.113.7',
        'City': 'Madrid',
        'Country': 'Spain',
        'Accuracy': 25.0,
        'Speed': 1.5,
    }
    payload.update(overrides)
    return {k: v for k, v in payload.items() if v is not ...}


@pytest.fixture
def store():
    return get_store()


@pytest.fixture
def post_location(client):
    """POST a location report; keyword overrides replace payload fields (``...`` drops one)."""
    def _post(extra_headers=None, **overrides):
        return client.post(
            '/api/location',
            data=location_payload(**overrides),
            content_type='application/json',
            **(extra_headers or {}),
        )
    return _post


@pytest.fixture
def api_key(settings):
    settings.LOCATION_TRACKER_API_KEY = 'secret-key'
    return 'secret-key'


@pytest.fixture(autouse=True)
def open_api(settings):
    # Tests run without an API key unless they ask for the api_key fixture
    settings.LOCATION_TRACKER_API_KEY = ''
