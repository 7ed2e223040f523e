"""
Admin API
Destructive bulk deletes, each gated by a literal confirmation token
"""
import logging

from django.db import DatabaseError

from ...exceptions import ValidationError
from ...store import get_store
from .base import allow_methods, internal_error, read_json, require_api_key, success

logger = logging.getLogger(__name__)

CONFIRM_ALL = 'DELETE_ALL_DATA'
CONFIRM_MACHINE = 'DELETE_MACHINE_DATA'


def _require_confirmation(request, token):
    if read_json(request).get('confirm') != token:
        raise ValidationError(f'Include "confirm": "{token}" in the body to confirm')


@allow_methods('DELETE')
@require_api_key
def clear_database(request):
    """
    Delete every location and restart ids at 1.

    JSON body:
        confirm: "DELETE_ALL_DATA"
    """
    _require_confirmation(request, CONFIRM_ALL)

    try:
        deleted = get_store().clear_all()
    except DatabaseError as e:
        return internal_error('Error clearing database', e)

    logger.warning(f"[ADMIN] Database cleared - {deleted} records deleted")

    return success(message='Database cleared', deleted_records=deleted)


@allow_methods('DELETE')
@require_api_key
def clear_machine(request, machine_name):
    """
    Delete every location of one machine. Ids are not reset.

    JSON body:
        confirm: "DELETE_MACHINE_DATA"
    """
    _require_confirmation(request, CONFIRM_MACHINE)

    try:
        deleted = get_store().clear_machine(machine_name)
    except DatabaseError as e:
        return internal_error('Error clearing machine data', e)

    logger.warning(f"[ADMIN] Machine data deleted - {machine_name}: {deleted} records")

    return success(
        message=f'Data for machine {machine_name} deleted',
        machine_name=machine_name,
        deleted_records=deleted,
    )
