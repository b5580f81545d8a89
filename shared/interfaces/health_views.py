"""
Health check views.
"""
import logging

from django.db import DatabaseError, connection
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


class HealthCheckView(APIView):
    """Basic health check endpoint."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'healthy'}, status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe: the database answers and the order tables exist."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        checks = {
            'database': self._check_database(),
            'order_store': self._check_order_store(),
        }

        all_healthy = all(check['healthy'] for check in checks.values())
        status_code = status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE

        return Response(
            {
                'status': 'ready' if all_healthy else 'not_ready',
                'checks': checks,
            },
            status=status_code,
        )

    def _check_database(self):
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
            return {'healthy': True}
        except DatabaseError as e:
            logger.warning(f"Readiness database check failed: {e}")
            return {'healthy': False, 'error': str(e)}

    def _check_order_store(self):
        try:
            tables = set(connection.introspection.table_names())
        except DatabaseError as e:
            return {'healthy': False, 'error': str(e)}
        missing = sorted({'orders', 'order_events'} - tables)
        if missing:
            return {'healthy': False, 'error': f"missing tables: {', '.join(missing)}"}
        return {'healthy': True}


class LivenessCheckView(APIView):
    """Liveness probe."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'alive'}, status=status.HTTP_200_OK)
