"""HTTP client for the sibling logging service."""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict, List, Optional

import requests
import structlog
from django.conf import settings
from django.core.cache import cache
from django.core.serializers.json import DjangoJSONEncoder

logger = structlog.get_logger(__name__)

LOG_LEVELS = ("info", "warning", "error", "debug")


def jsonable(value: Any) -> Any:
    """Round-trip through DjangoJSONEncoder so Decimals and dates become plain JSON."""
    return json.loads(json.dumps(value, cls=DjangoJSONEncoder))


class LogServiceClient:
    """
    Ships log records to the logging service and fetches them back.

    ``send_log`` never raises: a failed delivery is recorded with the local
    logger and reported as ``False``. ``fetch_logs`` returns a result dict
    instead of raising, and successful results are cached per filter set.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        application_name: Optional[str] = None,
        enabled: Optional[bool] = None,
        cache_enabled: Optional[bool] = None,
    ):
        self.url = url or settings.LOGS_SERVICE_URL
        self.application_name = application_name or settings.LOGS_APPLICATION_NAME
        self.enabled = settings.LOGS_SERVICE_ENABLED if enabled is None else enabled
        self.cache_enabled = settings.LOGS_CACHE_ENABLED if cache_enabled is None else cache_enabled
        self.timeout = settings.LOGS_SERVICE_TIMEOUT
        self.fetch_timeout = settings.LOGS_SERVICE_FETCH_TIMEOUT
        self.cache_timeout = settings.LOGS_CACHE_TIMEOUT
        self.cache_prefix = settings.LOGS_CACHE_PREFIX

    # ===== Shipping =====

    def send_log(
        self,
        level: str,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> bool:
        if not self.enabled:
            logger.debug("logs.ship.disabled", level=level, message=message)
            return False

        payload = {
            "application_name": self.application_name,
            "level": level,
            "message": message,
            "context": jsonable(context or {}),
            "source": source,
            "user_id": str(user_id) if user_id is not None else None,
        }

        try:
            response = requests.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("logs.ship.exception", error=str(exc), level=level, message=message)
            return False

        if not response.ok:
            logger.warning(
                "logs.ship.failed",
                status=response.status_code,
                response=response.text[:500],
                level=level,
                message=message,
            )
            return False
        return True

    # ===== Reading =====

    def fetch_logs(self, filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        filters = dict(filters or {})
        key = self._cache_key(filters)

        if self.cache_enabled:
            cached = cache.get(key)
            if cached is not None:
                self._count("hits")
                return cached
            self._count("misses")

        try:
            response = requests.get(self.url, params=filters, timeout=self.fetch_timeout)
        except requests.RequestException as exc:
            logger.error("logs.fetch.exception", error=str(exc), filters=filters)
            return {
                "success": False,
                "error": "Exception occurred while fetching logs",
                "message": str(exc),
                "status": 503,
            }

        if not response.ok:
            logger.warning(
                "logs.fetch.failed",
                status=response.status_code,
                response=response.text[:500],
                filters=filters,
            )
            return {
                "success": False,
                "error": "Failed to fetch logs",
                "message": response.text,
                "status": response.status_code,
            }

        try:
            data = response.json()
        except ValueError:
            return {
                "success": False,
                "error": "Logging service returned invalid JSON",
                "message": response.text[:500],
                "status": 502,
            }

        result = {"success": True, "data": data, "status": response.status_code}
        if self.cache_enabled:
            cache.set(key, result, self.cache_timeout)
            self._register_key(key, filters)
        return result

    def fetch_logs_paginated(self, page: int = 1, per_page: int = 15, filters=None) -> Dict[str, Any]:
        return self.fetch_logs({**(filters or {}), "page": page, "per_page": per_page})

    def fetch_logs_by_application(self, application_name: str, filters=None) -> Dict[str, Any]:
        return self.fetch_logs({**(filters or {}), "application_name": application_name})

    def fetch_logs_by_level(self, level: str, filters=None) -> Dict[str, Any]:
        return self.fetch_logs({**(filters or {}), "level": level})

    def fetch_logs_by_user(self, user_id, filters=None) -> Dict[str, Any]:
        return self.fetch_logs({**(filters or {}), "user_id": str(user_id)})

    # ===== Cache management =====

    @property
    def _registry_key(self) -> str:
        return f"{self.cache_prefix}:keys"

    def _cache_key(self, filters: Dict[str, Any]) -> str:
        normalized_parts = [f"{key}={filters[key]}" for key in sorted(filters)]
        fingerprint = "|".join(normalized_parts)
        digest = hashlib.sha1(fingerprint.encode("utf-8")).hexdigest()
        return f"{self.cache_prefix}:{digest}"

    def _register_key(self, key: str, filters: Dict[str, Any]) -> None:
        registry: Dict[str, Dict[str, str]] = cache.get(self._registry_key) or {}
        registry[key] = {name: str(value) for name, value in filters.items()}
        cache.set(self._registry_key, registry, None)

    def _count(self, counter: str) -> None:
        key = f"{self.cache_prefix}:{counter}"
        cache.add(key, 0, None)
        try:
            cache.incr(key)
        except ValueError:
            # Evicted between add() and incr()
            cache.set(key, 1, None)

    def get_cache_stats(self) -> Dict[str, Any]:
        registry = cache.get(self._registry_key) or {}
        live_keys = [key for key in registry if cache.get(key) is not None]
        return {
            "enabled": self.cache_enabled,
            "timeout": self.cache_timeout,
            "prefix": self.cache_prefix,
            "cached_keys": len(live_keys),
            "hits": cache.get(f"{self.cache_prefix}:hits", 0),
            "misses": cache.get(f"{self.cache_prefix}:misses", 0),
        }

    def clear_cache(self) -> int:
        """Drop every cached fetch result and reset the counters; returns keys removed."""
        registry = cache.get(self._registry_key) or {}
        keys: List[str] = list(registry)
        if keys:
            cache.delete_many(keys)
        cache.delete_many(
            [self._registry_key, f"{self.cache_prefix}:hits", f"{self.cache_prefix}:misses"]
        )
        logger.info("logs.cache.cleared", keys=len(keys))
        return len(keys)

    def invalidate_cache(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Drop cached results whose filters include every given filter; returns keys removed."""
        wanted = {name: str(value) for name, value in (filters or {}).items()}
        registry: Dict[str, Dict[str, str]] = cache.get(self._registry_key) or {}
        stale = [
            key
            for key, cached_filters in registry.items()
            if all(cached_filters.get(name) == value for name, value in wanted.items())
        ]
        if stale:
            cache.delete_many(stale)
            for key in stale:
                registry.pop(key)
            cache.set(self._registry_key, registry, None)
        logger.info("logs.cache.invalidated", keys=len(stale), filters=wanted)
        return len(stale)

    def set_cache_enabled(self, enabled: bool) -> None:
        self.cache_enabled = enabled
