"""
Top-level error handling
Turns anything a view raises into a JSON error response
"""
import logging

from .exceptions import ApiError, InternalError

logger = logging.getLogger(__name__)


class ApiErrorMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, ApiError):
            return exception.to_response()

        logger.error(f"[ERROR] Unhandled error: {exception} in {request.method} {request.get_full_path()}")
        return InternalError(str(exception)).to_response()
