"""
Location Views Package
Provides web and API views for the location tracker
"""
# Import API views
from .api import (
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

# Import web views
from .web import dashboard_view

__all__ = [
    # API endpoints
    'receive_location',
    'get_locations',
    'get_machine_locations',
    'get_machines',
    'get_stats',
    'get_database_size',
    'get_database_info',
    'clear_database',
    'clear_machine',
    'not_found',

    # Web views
    'dashboard_view',
]
