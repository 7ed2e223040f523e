"""
Location API Views Package
"""
from .admin import clear_database, clear_machine
from .base import not_found
from .database import get_database_info, get_database_size
from .history import get_locations, get_machine_locations
from .receiver import receive_location
from .statistics import get_machines, get_stats

__all__ = [
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
]
