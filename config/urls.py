"""
URL configuration for the bakery orders service.
"""
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from shared.interfaces.health_views import HealthCheckView, LivenessCheckView, ReadinessCheckView

urlpatterns = [
    path('admin/', admin.site.urls),

    # API
    path('api/', include('apps.orders.interfaces.api.urls')),
    path('api/v1/auth/token/', TokenObtainPairView.as_view(), name='token-obtain'),
    path('api/v1/auth/token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),

    # Schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),

    # Health
    path('health/', HealthCheckView.as_view(), name='health'),
    path('health/ready/', ReadinessCheckView.as_view(), name='health-ready'),
    path('health/live/', LivenessCheckView.as_view(), name='health-live'),
]
