"""API tests for the logs proxy endpoints."""

from __future__ import annotations

from unittest import mock

from django.core.cache import cache
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


def _response(status_code=200, payload=None, text=""):
    response = mock.Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    response.json.return_value = payload
    return response


@mock.patch("apps.logs.client.requests.get")
class LogsAPITests(APITestCase):
    def setUp(self) -> None:
        cache.clear()
        self.user = User.objects.create_user(email="ops@example.com", password="StrongPass123")
        self.client.force_authenticate(self.user)

    def test_list_passes_known_filters(self, get) -> None:
        get.return_value = _response(200, {"data": []})

        response = self.client.get(reverse("logs-list"), {"level": "info", "junk": "x", "source": ""})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "success")
        self.assertEqual(get.call_args.kwargs["params"], {"level": "info"})

    def test_service_error_is_forwarded(self, get) -> None:
        get.return_value = _response(502, text="bad gateway")

        response = self.client.get(reverse("logs-list"))

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(response.data["status"], "error")
        self.assertEqual(response.data["details"], "bad gateway")

    def test_paginated_validates_bounds(self, get) -> None:
        get.return_value = _response(200, {})

        ok = self.client.get(reverse("logs-paginated"), {"page": 3})
        too_big = self.client.get(reverse("logs-paginated"), {"per_page": 500})

        self.assertEqual(ok.status_code, status.HTTP_200_OK)
        self.assertEqual(get.call_args.kwargs["params"], {"page": 3, "per_page": 15})
        self.assertEqual(too_big.status_code, status.HTTP_400_BAD_REQUEST)

    def test_level_must_be_known(self, get) -> None:
        get.return_value = _response(200, {})

        ok = self.client.get(reverse("logs-by-level", kwargs={"level": "warning"}))
        bad = self.client.get(reverse("logs-by-level", kwargs={"level": "fatal"}))

        self.assertEqual(ok.status_code, status.HTTP_200_OK)
        self.assertEqual(bad.status_code, status.HTTP_400_BAD_REQUEST)
        get.assert_called_once()

    def test_my_logs_use_current_user(self, get) -> None:
        get.return_value = _response(200, {})

        self.client.get(reverse("logs-me"), {"user_id": "999"})

        self.assertEqual(get.call_args.kwargs["params"], {"user_id": str(self.user.id)})

    def test_stats_request(self, get) -> None:
        get.return_value = _response(200, {"total": 4})

        response = self.client.get(reverse("logs-stats"), {"application_name": "Hotel Booking Service"})

        self.assertEqual(response.data["data"], {"total": 4})
        self.assertEqual(get.call_args.kwargs["params"]["stats"], "true")

    def test_cache_endpoints(self, get) -> None:
        get.return_value = _response(200, {})
        self.client.get(reverse("logs-by-application", kwargs={"application_name": "billing"}))
        self.client.get(reverse("logs-by-user", kwargs={"user_id": 4}))

        stats = self.client.get(reverse("logs-cache-stats"))
        invalidated = self.client.post(
            reverse("logs-cache-invalidate"), {"application_name": "billing"}, format="json"
        )
        cleared = self.client.delete(reverse("logs-cache-clear"))

        self.assertEqual(stats.data["data"]["cached_keys"], 2)
        self.assertEqual(invalidated.data["data"]["removed"], 1)
        self.assertEqual(cleared.data["data"]["removed"], 1)

    def test_refresh_bypasses_cache(self, get) -> None:
        get.return_value = _response(200, {})

        self.client.get(reverse("logs-list"))
        self.client.get(reverse("logs-refresh"))
        self.client.get(reverse("logs-refresh"))

        self.assertEqual(get.call_count, 3)

    def test_requires_authentication(self, get) -> None:
        self.client.force_authenticate(None)

        response = self.client.get(reverse("logs-list"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        get.assert_not_called()
