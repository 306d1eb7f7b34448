"""
Liveness endpoint for load balancers and uptime monitors.
"""
import logging
import time

from django.conf import settings
from django.db import connection, DatabaseError
from django.http import JsonResponse
from django.utils import timezone
from django.views import View

logger = logging.getLogger(__name__)

VERSION = '1.0.0'


def check_store():
    """Round-trip a trivial query through the configured database backend."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            row = cursor.fetchone()
    except DatabaseError as e:
        logger.error(f"Store health check failed: {e}")
        return {'status': 'unhealthy', 'vendor': connection.vendor, 'message': 'Database connection failed'}

    if not row or row[0] != 1:
        logger.error(f"Store health check returned {row!r}")
        return {'status': 'unhealthy', 'vendor': connection.vendor, 'message': 'Unexpected database response'}
    return {'status': 'healthy', 'vendor': connection.vendor}


class BasicHealthCheckView(View):
    """
    GET /health/ with no authentication.

    Only the database decides the status code; push and federated login
    are reported as configured or not and never fail the check.
    """

    def get(self, request):
        started = time.monotonic()
        database = check_store()
        healthy = database['status'] == 'healthy'

        body = {
            'status': 'healthy' if healthy else 'unhealthy',
            'timestamp': timezone.now().isoformat(),
            'version': VERSION,
            'database': database,
            'features': {
                'push': bool(settings.VAPID_PUBLIC_KEY and settings.VAPID_PRIVATE_KEY),
                'federated_login': any(settings.GOOGLE_CLIENT_ID),
            },
            'response_time_ms': round((time.monotonic() - started) * 1000, 2),
        }
        return JsonResponse(body, status=200 if healthy else 503)
