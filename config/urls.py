"""URL configuration for the TMB service.

The `urlpatterns` list routes URLs to views. It includes both Django admin
and application‑level routers provided by Django Rest Framework and each app.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from apps.administration.views import HealthCheckView

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('django-admin/', admin.site.urls),
    # Application URLs
    path('api/v1/bookings/', include('apps.bookings.urls')),
    path('api/v1/reviews/', include('apps.reviews.urls')),
    path('api/v1/newsletter/', include('apps.newsletter.urls')),
    path('api/v1/contact/', include('apps.contacts.urls')),
    path('api/v1/health/', HealthCheckView.as_view(), name='health'),
    # Privileged API, gated by the administrator token
    path('api/v1/admin/', include('apps.administration.urls')),
    # Schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
