"""Views proxying the sibling logging service."""

from __future__ import annotations

from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from .client import LogServiceClient
from .serializers import LevelSerializer, PaginationSerializer, collect_filters


def _fetch_response(result: dict, message: str) -> Response:
    if result["success"]:
        return Response({"status": "success", "message": message, "data": result["data"]})
    return Response(
        {"status": "error", "message": result["error"], "details": result.get("message")},
        status=result.get("status") or status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _invalid(errors) -> Response:
    return Response(
        {"status": "error", "message": "Invalid parameters", "details": errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


class LogsView(APIView):
    permission_classes = [permissions.IsAuthenticated]
    client_class = LogServiceClient

    def get_client(self) -> LogServiceClient:
        return self.client_class()


class LogListView(LogsView):
    def get(self, request):  # type: ignore
        result = self.get_client().fetch_logs(collect_filters(request.query_params))
        return _fetch_response(result, "Logs fetched successfully")


class LogPaginatedView(LogsView):
    def get(self, request):  # type: ignore
        pagination = PaginationSerializer(data=request.query_params)
        if not pagination.is_valid():
            return _invalid(pagination.errors)
        filters = collect_filters(request.query_params, exclude=("page", "per_page"))
        result = self.get_client().fetch_logs_paginated(
            pagination.validated_data["page"],
            pagination.validated_data["per_page"],
            filters,
        )
        return _fetch_response(result, "Logs fetched successfully")


class LogByApplicationView(LogsView):
    def get(self, request, application_name: str):  # type: ignore
        filters = collect_filters(request.query_params, exclude=("application_name",))
        result = self.get_client().fetch_logs_by_application(application_name, filters)
        return _fetch_response(result, f"Logs for application '{application_name}' fetched successfully")


class LogByLevelView(LogsView):
    def get(self, request, level: str):  # type: ignore
        level_check = LevelSerializer(data={"level": level})
        if not level_check.is_valid():
            return _invalid(level_check.errors)
        filters = collect_filters(request.query_params, exclude=("level",))
        result = self.get_client().fetch_logs_by_level(level, filters)
        return _fetch_response(result, f"Logs with level '{level}' fetched successfully")


class LogByUserView(LogsView):
    def get(self, request, user_id: int):  # type: ignore
        filters = collect_filters(request.query_params, exclude=("user_id",))
        result = self.get_client().fetch_logs_by_user(user_id, filters)
        return _fetch_response(result, f"Logs for user '{user_id}' fetched successfully")


class MyLogsView(LogsView):
    def get(self, request):  # type: ignore
        filters = collect_filters(request.query_params, exclude=("user_id",))
        result = self.get_client().fetch_logs_by_user(request.user.pk, filters)
        return _fetch_response(result, "Your logs fetched successfully")


class LogStatsView(LogsView):
    def get(self, request):  # type: ignore
        filters = collect_filters(request.query_params, exclude=("level", "page", "per_page"))
        filters["stats"] = "true"
        result = self.get_client().fetch_logs(filters)
        return _fetch_response(result, "Logs statistics fetched successfully")


class LogCacheStatsView(LogsView):
    def get(self, request):  # type: ignore
        return Response(
            {
                "status": "success",
                "message": "Cache statistics fetched successfully",
                "data": self.get_client().get_cache_stats(),
            }
        )


class LogCacheClearView(LogsView):
    def delete(self, request):  # type: ignore
        removed = self.get_client().clear_cache()
        return Response(
            {
                "status": "success",
                "message": "Logs cache cleared successfully",
                "data": {"removed": removed},
            }
        )


class LogCacheInvalidateView(LogsView):
    def post(self, request):  # type: ignore
        filters = collect_filters(request.data, exclude=("page", "per_page"))
        removed = self.get_client().invalidate_cache(filters)
        return Response(
            {
                "status": "success",
                "message": "Cache invalidated successfully",
                "data": {"filters": filters, "removed": removed},
            }
        )


class LogRefreshView(LogsView):
    """Fetch straight from the service, ignoring and not populating the cache."""

    def get(self, request):  # type: ignore
        client = self.get_client()
        client.set_cache_enabled(False)
        result = client.fetch_logs(collect_filters(request.query_params))
        return _fetch_response(result, "Logs refreshed successfully (cache bypassed)")
