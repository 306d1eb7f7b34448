"""
Request logging and last-resort error handling
"""

import logging
import time
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(MiddlewareMixin):
    """
    Logs one line per request: method, path, status and duration
    """

    def process_request(self, request):
        request._started_at = time.monotonic()

    def process_response(self, request, response):
        started_at = getattr(request, '_started_at', None)
        if started_at is not None:
            duration_ms = (time.monotonic() - started_at) * 1000
            logger.info(f"{request.method} {request.path} {response.status_code} {duration_ms:.1f}ms")
        return response


class ErrorHandlingMiddleware(MiddlewareMixin):
    """
    Turns exceptions that escaped DRF into a generic JSON error on API paths
    """

    def process_exception(self, request, exception):
        # Log the actual exception for debugging
        logger.error(f"Exception in {request.path}: {exception}", exc_info=True)

        # Return generic error response without exposing internal details
        if request.path.startswith('/api/'):
            return JsonResponse({'error': 'Internal server error'}, status=500)

        return None  # Let Django handle non-API errors normally
