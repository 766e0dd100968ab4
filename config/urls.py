"""URL configuration for the hotel booking service.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the OpenAPI schema and the application-level URLs of each domain app.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    # API schema and docs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    # Application URLs
    path('api/v1/auth/', include(('apps.users.auth_urls', 'auth'), namespace='auth')),
    path('api/v1/', include('apps.hotels.urls')),
    path('api/v1/', include('apps.bookings.urls')),
    path('api/v1/wallet/', include('apps.wallets.urls')),
    path('api/v1/logs/', include('apps.logs.urls')),
]
