"""
Location History API

Read paths over stored locations: by machine, by observation date,
paginated, and a per-machine recent window.
"""
import logging

from django.db import DatabaseError

from ...store import get_store
from .base import allow_methods, int_param, internal_error, success

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100
DEFAULT_HOURS = 24


@allow_methods('GET')
def get_locations(request):
    """
    Get stored locations, newest first.

    Query parameters (first match wins):
        machine: exact machine name
        date: YYYY-MM-DD compared with the date part of the client timestamp
        (neither): paginate over everything with offset

        limit: maximum records (default: 100)
        offset: records to skip when paginating (default: 0)
    """
    machine = request.GET.get('machine') or None
    date = request.GET.get('date') or None
    limit = int_param(request, 'limit', DEFAULT_LIMIT)
    offset = int_param(request, 'offset', 0)

    store = get_store()
    try:
        if machine:
            locations = store.by_machine(machine, limit=limit)
        elif date:
            locations = store.by_date(date, limit=limit)
        else:
            locations = store.page(limit=limit, offset=offset)
    except DatabaseError as e:
        return internal_error('Error fetching locations', e)

    logger.info(
        f"[QUERY] Locations - Results: {len(locations)}, Filters: date={date}, "
        f"machine={machine}, limit={limit}, offset={offset}"
    )

    return success(
        count=len(locations),
        filters={'date': date, 'machine': machine, 'limit': limit, 'offset': offset},
        locations=locations,
    )


@allow_methods('GET')
def get_machine_locations(request, machine_name):
    """
    Get the most recent locations of one machine created in the last N hours.

    Query parameters:
        hours: Number of hours to look back (default: 24)
        limit: maximum records (default: 100)
    """
    hours = int_param(request, 'hours', DEFAULT_HOURS)
    limit = int_param(request, 'limit', DEFAULT_LIMIT)

    try:
        locations = get_store().recent_for_machine(machine_name, hours=hours, limit=limit)
    except DatabaseError as e:
        return internal_error('Error fetching machine locations', e)

    logger.info(f"[QUERY] Machine {machine_name} - Results: {len(locations)}, last {hours} hours")

    return success(
        machine=machine_name,
        count=len(locations),
        hours=hours,
        limit=limit,
        locations=locations,
    )
