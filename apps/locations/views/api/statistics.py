"""
Machine Roster and Statistics API
Views computed on read by grouping the locations table
"""
import logging

from django.db import DatabaseError

from ...store import get_store
from .base import allow_methods, internal_error, success

logger = logging.getLogger(__name__)


@allow_methods('GET')
def get_machines(request):
    """
    List every machine with its record count, first and last report,
    most recently seen first.
    """
    try:
        machines = get_store().roster()
    except DatabaseError as e:
        return internal_error('Error fetching machines', e)

    logger.info(f"[QUERY] Machines - Total: {len(machines)}")

    return success(count=len(machines), machines=machines)


@allow_methods('GET')
def get_stats(request):
    """
    Global statistics: record count, distinct machines and users,
    oldest/newest record, the machine roster and the database file size.
    """
    store = get_store()
    try:
        totals = store.totals()
        machines = store.roster()
        size = store.file_size()
    except (DatabaseError, OSError) as e:
        return internal_error('Error fetching statistics', e)

    statistics = dict(totals)
    statistics['machines'] = [
        {
            'name': m['machine_name'],
            'locations_count': m['count'],
            'last_seen': m['last_seen'],
            'first_seen': m['first_seen'],
        }
        for m in machines
    ]
    statistics['database'] = {'path': store.path, 'size': size}

    logger.info(
        f"[QUERY] Stats - Locations: {totals['total_locations']}, Machines: {totals['unique_machines']}"
    )

    return success(statistics=statistics)
