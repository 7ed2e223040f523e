"""
URL Configuration for Location Tracker
Location-specific routes
"""
from django.urls import path, re_path
from .views.web import dashboard_view
from .views.api import (
    clear_database,
    clear_machine,
    get_database_info,
    get_database_size,
    get_locations,
    get_machine_locations,
    get_machines,
    get_stats,
    not_found,
    receive_location,
)

app_name = 'locations'

urlpatterns = [
    # Dashboard (HTML)
    path('', dashboard_view, name='dashboard'),

    # Location receiver endpoint (POST)
    # Usage: POST JSON with Latitude, Longitude, MachineName, ...
    path('api/location', receive_location, name='receive_location'),

    # Stored locations (GET)
    # Usage: GET /api/locations?date=2025-11-20&machine=LAPTOP&limit=50&offset=0
    path('api/locations', get_locations, name='locations'),

    # Recent locations of one machine (GET)
    # Usage: GET /api/locations/machine/LAPTOP-ABC123?hours=12
    path('api/locations/machine/<str:machine_name>', get_machine_locations, name='machine_locations'),

    # Machine roster and statistics (GET)
    path('api/machines', get_machines, name='machines'),
    path('api/stats', get_stats, name='stats'),

    # Database introspection (GET)
    path('api/database/size', get_database_size, name='database_size'),
    path('api/database/info', get_database_info, name='database_info'),

    # Admin deletes (DELETE), body must carry the confirmation token
    path('api/admin/clear-database', clear_database, name='clear_database'),
    path('api/admin/clear-machine/<str:machine_name>', clear_machine, name='clear_machine'),

    # Anything else: JSON 404 with the endpoint list
    re_path(r'^.*$', not_found, name='not_found'),
]
