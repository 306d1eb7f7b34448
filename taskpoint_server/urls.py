"""
URL configuration for taskpoint_server project.

API paths carry no trailing slash to match the single-page client.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
)

from apps.common.health_views import BasicHealthCheckView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('health/', BasicHealthCheckView.as_view(), name='health'),
    path('api/auth/', include('apps.users.urls')),
    path('api/', include('apps.activities.urls')),
    path('api/', include('apps.ledger.urls')),
    path('api/push/', include('apps.push.urls')),
    path('api/', include('apps.common.urls')),  # admin routes
    # OpenAPI documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/schema/swagger-ui/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
