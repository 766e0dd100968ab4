"""Logs app package.

Client for the sibling logging service: ships business events to it and
reads aggregated logs back, caching read results in the Django cache.
Shipping is best-effort and never affects the operation being logged.
"""
