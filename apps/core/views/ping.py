from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView


class PingView(APIView):
    """Liveness probe: returns "pong" without touching the database."""

    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({"ping": "pong"}, status=status.HTTP_200_OK)
