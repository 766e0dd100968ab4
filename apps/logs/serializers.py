"""Query-parameter serializers for the logs endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .client import LOG_LEVELS

FILTER_FIELDS = (
    "application_name",
    "level",
    "user_id",
    "source",
    "date_from",
    "date_to",
    "page",
    "per_page",
)


class PaginationSerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, default=1)
    per_page = serializers.IntegerField(min_value=1, max_value=100, default=15)


class LevelSerializer(serializers.Serializer):
    level = serializers.ChoiceField(choices=LOG_LEVELS)


def collect_filters(params, *, exclude=(), allowed=FILTER_FIELDS) -> dict:
    """Pick the known, non-empty filters out of the query string."""
    return {
        name: params.get(name)
        for name in allowed
        if name not in exclude and params.get(name) not in (None, "")
    }
