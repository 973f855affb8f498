from unittest import mock

from django.db import DatabaseError
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from apps.credentials.models import KubernetesProvider


class TestPingEndpoint(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_ping_returns_pong(self):
        response = self.client.get("/ping/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"ping": "pong"})


class TestHealthEndpoint(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_health_returns_healthy(self):
        KubernetesProvider.objects.create(name="alpha", host="https://alpha:6443")
        response = self.client.get("/health/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()
        self.assertEqual(data["status"], "healthy")
        self.assertEqual(data["checks"]["database"], "ok")
        self.assertEqual(data["checks"]["providers"], 1)

    def test_health_reports_database_errors(self):
        with mock.patch.object(KubernetesProvider.objects, "count", side_effect=DatabaseError("no such table")):
            response = self.client.get("/health/")
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        data = response.json()
        self.assertEqual(data["status"], "unhealthy")
        self.assertEqual(data["checks"]["database"], "error: no such table")
