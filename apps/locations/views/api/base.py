"""
Shared pieces for the location API views
Response helpers, request parsing and the access guards
"""
import json
import logging
from functools import wraps

from django.conf import settings
from django.http import JsonResponse
from django.utils import timezone

from ...exceptions import AuthError, InternalError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

ENDPOINTS = [
    ('POST', '/api/location', 'Receive and store a location report'),
    ('GET', '/api/locations', 'Stored locations; ?date=YYYY-MM-DD&machine=NAME&limit=100&offset=0'),
    ('GET', '/api/locations/machine/{name}', 'Recent locations of one machine; ?limit=100&hours=24'),
    ('GET', '/api/machines', 'Every machine with record counts'),
    ('GET', '/api/stats', 'Global statistics'),
    ('GET', '/api/database/size', 'Quick database size'),
    ('GET', '/api/database/info', 'Detailed database information'),
    ('DELETE', '/api/admin/clear-database', 'Delete every record; body {"confirm": "DELETE_ALL_DATA"}'),
    ('DELETE', '/api/admin/clear-machine/{name}', 'Delete one machine; body {"confirm": "DELETE_MACHINE_DATA"}'),
    ('GET', '/', 'Dashboard'),
]


def available_endpoints():
    return [f"{method} {path}" for method, path, _ in ENDPOINTS]


def success(status=200, **payload):
    """JSON success envelope with a server timestamp."""
    body = {'status': 'success'}
    body.update(payload)
    body.setdefault('timestamp', timezone.now().isoformat())
    return JsonResponse(body, status=status)


def internal_error(context, exc):
    """Log a storage failure and build the 500 returned to the caller."""
    logger.error(f"[ERROR] {context}: {exc}")
    return InternalError(str(exc)).to_response()


def not_found(request):
    logger.warning(f"[404] Route not found: {request.method} {request.get_full_path()} from IP: {client_ip(request)}")
    return NotFoundError(
        'No endpoint matches this method and path',
        method=request.method,
        path=request.get_full_path(),
        availableEndpoints=available_endpoints(),
    ).to_response()


def client_ip(request):
    return request.META.get('REMOTE_ADDR')


def read_json(request):
    """
    Parse the request body as a JSON object (cached on the request).
    An empty body reads as {}.
    """
    if not hasattr(request, '_json_body'):
        raw = request.body
        if not raw:
            data = {}
        else:
            try:
                data = json.loads(raw.decode('utf-8'))
            except (UnicodeDecodeError, ValueError):
                raise ValidationError('Request body is not valid JSON')
            if not isinstance(data, dict):
                raise ValidationError('Request body must be a JSON object')
        request._json_body = data
    return request._json_body


def int_param(request, name, default):
    """Read a non-negative integer query parameter."""
    raw = request.GET.get(name)
    if raw is None or raw == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(f"'{name}' must be an integer", parameter=name, value=raw)
    if value < 0:
        raise ValidationError(f"'{name}' must not be negative", parameter=name, value=raw)
    return value


def allow_methods(*methods):
    """
    Restrict a view to the given HTTP methods.
    Any other method is answered like an unknown route (JSON 404 with the
    endpoint list), which Django's require_GET/require_POST 405s can't give.
    """
    def decorator(view):
        @wraps(view)
        def wrapper(request, *args, **kwargs):
            if request.method not in methods:
                return not_found(request)
            return view(request, *args, **kwargs)
        return wrapper
    return decorator


def require_api_key(view):
    """
    Enforce LOCATION_TRACKER_API_KEY when it is set.
    The key is read from the x-api-key header, then the ApiKey body field.
    """
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        required = settings.LOCATION_TRACKER_API_KEY
        if not required:
            return view(request, *args, **kwargs)

        supplied = request.headers.get('x-api-key')
        if not supplied:
            try:
                supplied = read_json(request).get('ApiKey')
            except ValidationError:
                supplied = None

        if supplied != required:
            logger.warning(f"[AUTH] Access denied - invalid API key from IP: {client_ip(request)}")
            raise AuthError('Provide a valid key in the x-api-key header or the ApiKey field')
        return view(request, *args, **kwargs)
    return wrapper
