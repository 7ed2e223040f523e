"""
Main URL Configuration
Routes to the location tracker application
"""
from django.urls import path, include

urlpatterns = [
    # Location tracker routes
    # Includes the dashboard, /api/... endpoints and the JSON 404 fallback
    path('', include('apps.locations.urls')),
]
