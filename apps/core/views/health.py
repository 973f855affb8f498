from django.db import DatabaseError, connection
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.credentials.models import KubernetesProvider


class HealthView(APIView):
    """
    Health check endpoint to verify service health.

    Checks database connectivity and that the provider table is readable,
    and returns overall health status.
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        health_status: dict = {"status": "healthy", "checks": {}}

        try:
            connection.ensure_connection()
            health_status["checks"]["database"] = "ok"
            health_status["checks"]["providers"] = KubernetesProvider.objects.count()
        except DatabaseError as e:
            health_status["status"] = "unhealthy"
            health_status["checks"]["database"] = f"error: {str(e)}"

        http_status = (
            status.HTTP_200_OK if health_status["status"] == "healthy" else status.HTTP_503_SERVICE_UNAVAILABLE
        )

        return Response(health_status, status=http_status)
