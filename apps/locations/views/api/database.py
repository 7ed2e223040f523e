"""
Database Introspection API
File size, SQLite page metrics, schema and activity summaries
"""
import logging

from django.db import DatabaseError

from ...functions import bytes_to_mb, format_file_size, round_half_up
from ...store import get_store
from .base import allow_methods, internal_error, success

logger = logging.getLogger(__name__)


def _avg_bytes_per_record(file_bytes, records):
    return int(round_half_up(file_bytes / records)) if records > 0 else 0


@allow_methods('GET')
def get_database_size(request):
    """
    Quick size report; avoids the grouped scans of /api/database/info.
    """
    store = get_store()
    try:
        file_bytes = store.file_size()
        pages = store.page_stats()
        records = store.count()
    except (DatabaseError, OSError) as e:
        return internal_error('Error fetching database size', e)

    logger.info(f"[QUERY] Database size - {format_file_size(file_bytes)}, Records: {records}")

    return success(size={
        'file': {
            'bytes': file_bytes,
            'mb': bytes_to_mb(file_bytes),
            'human': format_file_size(file_bytes),
        },
        'sqlite': {
            'pages': pages['page_count'],
            'page_size': pages['page_size'],
            'bytes': pages['bytes'],
            'mb': bytes_to_mb(pages['bytes']),
            'human': format_file_size(pages['bytes']),
        },
        'records': records,
        'avg_bytes_per_record': _avg_bytes_per_record(file_bytes, records),
    })


@allow_methods('GET')
def get_database_info(request):
    """
    Detailed database report.

    Returns:
        file: path, size and file times
        sqlite: page count/size and the size they imply
        structure: column and index metadata of the locations table
        statistics: last 30 days of daily activity and a per-machine summary
    """
    store = get_store()
    try:
        file_bytes = store.file_size()
        file_times = store.file_times()
        pages = store.page_stats()
        columns = store.columns()
        indexes = store.indexes()
        daily = store.daily_activity(days=30)
        machines = store.machine_summary()
    except (DatabaseError, OSError) as e:
        return internal_error('Error fetching database info', e)

    total_records = sum(m['total_locations'] for m in machines)

    logger.info(f"[QUERY] Database info - Records: {total_records}, Machines: {len(machines)}")

    return success(database={
        'file': {
            'path': store.path,
            'size_bytes': file_bytes,
            'size_mb': bytes_to_mb(file_bytes),
            'size_human': format_file_size(file_bytes),
            'last_modified': file_times['last_modified'],
            'created': file_times['created'],
        },
        'sqlite': {
            'page_count': pages['page_count'],
            'page_size': pages['page_size'],
            'calculated_size_bytes': pages['bytes'],
            'calculated_size_mb': bytes_to_mb(pages['bytes']),
            'calculated_size_human': format_file_size(pages['bytes']),
        },
        'structure': {
            'tables': ['locations'],
            'columns': len(columns),
            'indexes': len(indexes),
            'column_details': columns,
            'index_details': indexes,
        },
        'statistics': {
            'daily_activity': daily,
            'machine_summary': machines,
            'total_records': total_records,
            'avg_bytes_per_record': _avg_bytes_per_record(file_bytes, total_records),
        },
    })
