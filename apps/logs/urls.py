"""URL routing for the logs proxy."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import (
    LogByApplicationView,
    LogByLevelView,
    LogByUserView,
    LogCacheClearView,
    LogCacheInvalidateView,
    LogCacheStatsView,
    LogListView,
    LogPaginatedView,
    LogRefreshView,
    LogStatsView,
    MyLogsView,
)

urlpatterns = [
    path("", LogListView.as_view(), name="logs-list"),
    path("paginated/", LogPaginatedView.as_view(), name="logs-paginated"),
    path("application/<str:application_name>/", LogByApplicationView.as_view(), name="logs-by-application"),
    path("level/<str:level>/", LogByLevelView.as_view(), name="logs-by-level"),
    path("user/<int:user_id>/", LogByUserView.as_view(), name="logs-by-user"),
    path("me/", MyLogsView.as_view(), name="logs-me"),
    path("stats/", LogStatsView.as_view(), name="logs-stats"),
    path("cache/stats/", LogCacheStatsView.as_view(), name="logs-cache-stats"),
    path("cache/", LogCacheClearView.as_view(), name="logs-cache-clear"),
    path("cache/invalidate/", LogCacheInvalidateView.as_view(), name="logs-cache-invalidate"),
    path("refresh/", LogRefreshView.as_view(), name="logs-refresh"),
]
