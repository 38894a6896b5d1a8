"""JSON formatting of the current fix for WebSocket transmission."""

import json

from navfix.epoch import DateTimeFields
from navfix.gnss import GNSSReceiver

__all__ = ["format_fix_message"]


def _iso(fields: DateTimeFields | None) -> str | None:
    if fields is None:
        return None
    return (
        f"{fields.year:04d}-{fields.month:02d}-{fields.day:02d}"
        f"T{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"
    )


def format_fix_message(receiver: GNSSReceiver) -> str:
    """Serialize the receiver's current fix into a JSON string.

    ``utc_time`` is null until an RMC sentence supplied a date, since the
    Unix timestamp cannot be computed before that.
    """
    fix = receiver.snapshot()
    timestamp = receiver.timestamp
    return json.dumps({
        "type": "fix",
        "locked": fix.locked,
        "lat": fix.latitude,
        "lon": fix.longitude,
        "alt": fix.altitude,
        "alt_units": fix.altitude_units or None,
        "ellipsoid_height": fix.ellipsoid_height,
        "num_satellites": fix.satellites,
        "hdop": fix.hdop,
        "speed_knots": fix.speed_knots,
        "speed_kmh": fix.speed_kmh,
        "track_true_degrees": fix.bearing_true,
        "track_magnetic_degrees": fix.bearing_magnetic,
        "timestamp": timestamp,
        "utc_time": _iso(receiver.utc_datetime) if timestamp is not None else None,
        "local_time": _iso(receiver.local_datetime),
        "utc_offset_hours": receiver.utc_offset_hours,
    })
