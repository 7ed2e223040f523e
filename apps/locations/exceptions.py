"""
API error taxonomy
Each error knows the HTTP status it maps to
"""
from django.http import JsonResponse
from django.utils import timezone


class ApiError(Exception):
    status = 500
    summary = 'Internal server error'

    def __init__(self, message='', **extra):
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_response(self):
        payload = {
            'error': self.summary,
            'message': self.message,
            'timestamp': timezone.now().isoformat(),
        }
        payload.update(self.extra)
        return JsonResponse(payload, status=self.status)


class ValidationError(ApiError):
    """Missing or malformed input; nothing was changed."""
    status = 400
    summary = 'Invalid request'


class AuthError(ApiError):
    status = 401
    summary = 'API key required or invalid'


class NotFoundError(ApiError):
    status = 404
    summary = 'Endpoint not found'


class InternalError(ApiError):
    status = 500
    summary = 'Internal server error'
