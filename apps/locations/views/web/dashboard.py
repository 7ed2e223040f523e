"""
Dashboard Web View
Renders the human-readable status page
"""
from django.conf import settings
from django.db import DatabaseError
from django.shortcuts import render
from django.utils import timezone

from ...store import get_store
from ..api.base import ENDPOINTS, allow_methods


@allow_methods('GET')
def dashboard_view(request):
    """
    Render service status, live counts and the endpoint catalogue
    """
    store = get_store()
    try:
        totals = store.totals()
    except DatabaseError:
        totals = None

    return render(request, 'locations/dashboard.html', {
        'port': settings.LOCATION_TRACKER_PORT,
        'server_time': timezone.localtime(),
        'data_dir': settings.DATA_DIR,
        'log_dir': settings.LOG_DIR,
        'database_path': store.path,
        'api_key_required': bool(settings.LOCATION_TRACKER_API_KEY),
        'totals': totals,
        'endpoints': [
            {'method': method, 'path': path, 'description': description}
            for method, path, description in ENDPOINTS
        ],
        'ingest_url': request.build_absolute_uri('/api/location'),
    })
