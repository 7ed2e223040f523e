"""
Location report request schema
Maps the client's JSON body onto typed fields with defaults
"""
from dataclasses import dataclass
from typing import Optional

REQUIRED_FIELDS = ('latitude', 'longitude', 'machine_name')

# Wire name sent by the Location Tracker client -> column name
FIELD_ALIASES = {
    'Latitude': 'latitude',
    'Longitude': 'longitude',
    'Altitude': 'altitude',
    'Timestamp': 'timestamp',
    'MachineName': 'machine_name',
    'UserName': 'user_name',
    'LocationSource': 'location_source',
    'PublicIP': 'public_ip',
    'City': 'city',
    'Country': 'country',
    'Accuracy': 'accuracy',
    'Speed': 'speed',
}

FLOAT_FIELDS = ('latitude', 'longitude', 'altitude', 'accuracy', 'speed')


@dataclass(frozen=True)
class LocationReport:
    latitude: float
    longitude: float
    machine_name: str
    altitude: float = 0.0
    timestamp: Optional[str] = None
    user_name: Optional[str] = None
    location_source: str = 'Unknown'
    public_ip: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    accuracy: Optional[float] = None
    speed: Optional[float] = None


def _normalize(payload):
    # PascalCase wins over the snake_case alias when both are present
    values = {}
    for wire_name, column in FIELD_ALIASES.items():
        if payload.get(wire_name):
            values[column] = payload[wire_name]
        elif payload.get(column):
            values[column] = payload[column]
        else:
            values[column] = None
    return values


def parse_location_report(payload):
    """
    Validate a raw ingestion body.

    Returns ``(report, None)`` on success or ``(None, message)`` when the body
    is unusable. Falsy values (0, "", null) count as missing, so a report at
    exactly 0 latitude or longitude is rejected.
    """
    values = _normalize(payload)

    missing = [name for name in REQUIRED_FIELDS if not values[name]]
    if missing:
        return None, f"Latitude, Longitude and MachineName are required (missing: {', '.join(missing)})"

    for name in FLOAT_FIELDS:
        if values[name] is None:
            continue
        if isinstance(values[name], bool):
            return None, f"{name} must be a number"
        try:
            values[name] = float(values[name])
        except (TypeError, ValueError):
            return None, f"{name} must be a number"

    return LocationReport(
        latitude=values['latitude'],
        longitude=values['longitude'],
        machine_name=str(values['machine_name']),
        altitude=values['altitude'] or 0.0,
        timestamp=str(values['timestamp']) if values['timestamp'] else None,
        user_name=values['user_name'],
        location_source=values['location_source'] or 'Unknown',
        public_ip=values['public_ip'],
        city=values['city'],
        country=values['country'],
        accuracy=values['accuracy'],
        speed=values['speed'],
    ), None
