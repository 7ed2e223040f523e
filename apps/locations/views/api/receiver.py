"""
Location Receiver API

Receives location reports from Location Tracker clients via POST requests
and stores them in the locations table.
"""
import logging

from django.db import DatabaseError

from ...exceptions import ValidationError
from ...schemas import parse_location_report
from ...store import get_store
from .base import allow_methods, client_ip, internal_error, read_json, require_api_key, success

logger = logging.getLogger(__name__)


@allow_methods('POST')
@require_api_key
def receive_location(request):
    """
    Receive and store one location report

    JSON body:
        Latitude, Longitude, MachineName: required
        Altitude, Timestamp, UserName, LocationSource, PublicIP,
        City, Country, Accuracy, Speed: optional

    Returns:
        JSON response with the assigned id and the echoed required fields
    """
    payload = read_json(request)
    report, error = parse_location_report(payload)
    if error:
        logger.error(f"[INGEST] Invalid location data: {payload}")
        raise ValidationError(error)

    try:
        record = get_store().insert(
            report,
            server_ip=client_ip(request),
            user_agent=request.headers.get('User-Agent') or 'Unknown',
        )
    except DatabaseError as e:
        return internal_error('Error storing location', e)

    logger.info(
        f"[INGEST] Location saved - ID: {record.id}, Machine: {report.machine_name}, "
        f"User: {report.user_name}, Lat: {report.latitude}, Lon: {report.longitude}"
    )

    return success(
        message='Location saved',
        timestamp=record.received_at.isoformat(),
        id=record.id,
        received={
            'latitude': report.latitude,
            'longitude': report.longitude,
            'machine': report.machine_name,
        },
    )
