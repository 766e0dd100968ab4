"""Tests for the logging-service client."""

from __future__ import annotations

from decimal import Decimal
from unittest import mock

import requests
from django.core.cache import cache
from django.test import SimpleTestCase, override_settings

from apps.logs.client import LogServiceClient
from apps.logs.tasks import ship_log


def _response(status_code=200, payload=None, text=""):
    response = mock.Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    response.json.return_value = payload
    return response


@override_settings(LOGS_SERVICE_ENABLED=True, LOGS_CACHE_ENABLED=True)
class SendLogTests(SimpleTestCase):
    @mock.patch("apps.logs.client.requests.post")
    def test_posts_payload(self, post) -> None:
        post.return_value = _response(201)

        sent = LogServiceClient().send_log(
            "info", "Booking created", {"total_amount": Decimal("300.00")}, "bookings", 7
        )

        self.assertTrue(sent)
        url = post.call_args.args[0]
        payload = post.call_args.kwargs["json"]
        self.assertEqual(url, "http://logs.test/api/logs")
        self.assertEqual(payload["application_name"], "Hotel Booking Service")
        self.assertEqual(payload["context"], {"total_amount": "300.00"})
        self.assertEqual(payload["user_id"], "7")
        self.assertEqual(post.call_args.kwargs["timeout"], 5)

    @mock.patch("apps.logs.client.requests.post")
    def test_failures_are_swallowed(self, post) -> None:
        client = LogServiceClient()

        post.return_value = _response(500, text="boom")
        self.assertFalse(client.send_log("error", "x"))

        post.side_effect = requests.ConnectionError("refused")
        self.assertFalse(client.send_log("warning", "y"))

    @mock.patch("apps.logs.client.requests.post")
    def test_disabled_client_sends_nothing(self, post) -> None:
        self.assertFalse(LogServiceClient(enabled=False).send_log("info", "x"))
        post.assert_not_called()

    @mock.patch("apps.logs.client.requests.post")
    def test_ship_log_task(self, post) -> None:
        post.return_value = _response(200)

        self.assertTrue(ship_log("info", "Transaction deposit", {"amount": "5.00"}, "wallets", 2))
        self.assertEqual(post.call_args.kwargs["json"]["source"], "wallets")


@override_settings(LOGS_CACHE_ENABLED=True)
class FetchLogsTests(SimpleTestCase):
    def setUp(self) -> None:
        cache.clear()
        self.client_ = LogServiceClient()

    @mock.patch("apps.logs.client.requests.get")
    def test_successful_fetch_is_cached(self, get) -> None:
        get.return_value = _response(200, {"data": [{"id": 1}]})

        first = self.client_.fetch_logs({"level": "info"})
        second = self.client_.fetch_logs({"level": "info"})

        self.assertEqual(first, {"success": True, "data": {"data": [{"id": 1}]}, "status": 200})
        self.assertEqual(second, first)
        get.assert_called_once_with("http://logs.test/api/logs", params={"level": "info"}, timeout=10)
        stats = self.client_.get_cache_stats()
        self.assertEqual((stats["hits"], stats["misses"], stats["cached_keys"]), (1, 1, 1))

    @mock.patch("apps.logs.client.requests.get")
    def test_failed_fetch_is_not_cached(self, get) -> None:
        get.return_value = _response(503, text="unavailable")

        result = self.client_.fetch_logs()
        self.client_.fetch_logs()

        self.assertFalse(result["success"])
        self.assertEqual(result["status"], 503)
        self.assertEqual(get.call_count, 2)

    @mock.patch("apps.logs.client.requests.get")
    def test_exception_during_fetch(self, get) -> None:
        get.side_effect = requests.Timeout("slow")

        result = self.client_.fetch_logs()

        self.assertFalse(result["success"])
        self.assertEqual(result["message"], "slow")

    @mock.patch("apps.logs.client.requests.get")
    def test_helpers_add_their_filter(self, get) -> None:
        get.return_value = _response(200, {})

        self.client_.fetch_logs_paginated(2, 50, {"level": "error"})
        self.client_.fetch_logs_by_user(9)

        self.assertEqual(
            get.call_args_list[0].kwargs["params"],
            {"level": "error", "page": 2, "per_page": 50},
        )
        self.assertEqual(get.call_args_list[1].kwargs["params"], {"user_id": "9"})

    @mock.patch("apps.logs.client.requests.get")
    def test_invalidate_only_matching_entries(self, get) -> None:
        get.return_value = _response(200, {})
        self.client_.fetch_logs_by_level("info")
        self.client_.fetch_logs_by_level("info", {"page": 2})
        self.client_.fetch_logs_by_level("error")

        removed = self.client_.invalidate_cache({"level": "info"})

        self.assertEqual(removed, 2)
        self.assertEqual(self.client_.get_cache_stats()["cached_keys"], 1)

    @mock.patch("apps.logs.client.requests.get")
    def test_clear_and_bypass(self, get) -> None:
        get.return_value = _response(200, {})
        self.client_.fetch_logs()

        self.assertEqual(self.client_.clear_cache(), 1)
        self.assertEqual(self.client_.get_cache_stats()["cached_keys"], 0)

        self.client_.set_cache_enabled(False)
        self.client_.fetch_logs()
        self.client_.fetch_logs()
        self.assertEqual(get.call_count, 3)
        self.assertEqual(self.client_.get_cache_stats()["cached_keys"], 0)
