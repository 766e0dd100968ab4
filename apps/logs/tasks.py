"""Celery tasks for the logs domain."""

from __future__ import annotations

from typing import Any, Dict, Optional

from celery import shared_task  # type: ignore

from .client import LogServiceClient


@shared_task(name="logs.ship_log", ignore_result=True)
def ship_log(
    level: str,
    message: str,
    context: Optional[Dict[str, Any]] = None,
    source: Optional[str] = None,
    user_id: Optional[int] = None,
) -> bool:
    """Deliver one record to the logging service; failures are logged, never raised."""

    return LogServiceClient().send_log(level, message, context, source, user_id)
