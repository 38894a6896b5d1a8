"""RMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) carries the essentials of a fix:
time, date, status, position, speed and track. It is the only supported
sentence that carries a date, so the local date is driven by it.

RMC Sentence Format:
    $GPRMC,194533.00,A,5155.32591,N,00234.41370,W,0.159,,160415,,,A*6D
           |         | |          | |           | |     | |      | |
           |         | |          | |           | |     | |      | +-- Variation E/W
           |         | |          | |           | |     | |      +-- Magnetic variation
           |         | |          | |           | |     | +-- Date (DDMMYY)
           |         | |          | |           | |     +-- Track (true, degrees)
           |         | |          | |           | +-- Speed over ground (knots)
           |         | |          | +-----------+-- Longitude + E/W
           |         | +----------+-- Latitude + N/S
           |         +-- Status (A=active, V=void)
           +-- UTC time (HHMMSS.ss)

A void status (``V``) clears the lock and stops decoding: the receiver sends
stale or empty position fields in that case.
"""

from navfix.nmea.fields import (
    apply_hemisphere,
    degrees_minutes_to_decimal,
    first_char,
    parse_float_field,
    unpack_triplet,
)
from navfix.nmea.tokenizer import FieldTokenizer
from navfix.nmea.types import FixSnapshot

__all__ = ["assign_utc_date", "assign_utc_time", "decode_rmc"]


def assign_utc_time(fix: FixSnapshot, value: str) -> None:
    """Store a packed ``HHMMSS`` field, wrapping each part into its range.

    A field that does not start with six digits leaves the time unchanged.
    """
    triplet = unpack_triplet(value)
    if triplet is None:
        return
    hour, minute, second = triplet
    fix.utc_hour = hour % 24
    fix.utc_minute = minute % 60
    fix.utc_second = second % 60


def assign_utc_date(fix: FixSnapshot, value: str) -> None:
    """Store a packed ``DDMMYY`` field, wrapping each part into its range."""
    triplet = unpack_triplet(value)
    if triplet is None:
        return
    day, month, year = triplet
    fix.utc_day = day % 32
    fix.utc_month = month % 13
    fix.utc_year_two_digit = year % 100


def decode_rmc(fields: FieldTokenizer, fix: FixSnapshot) -> None:
    """Decode an RMC sentence into *fix*, field by field.

    Args:
        fields: Tokenizer positioned at the start of the sentence (tag field).
        fix: Snapshot to update in place.

    Raises:
        DecodeAbort: If the sentence ends early. Fields decoded before the
            missing one stay written.
    """
    fields.require("tag")
    assign_utc_time(fix, fields.require("time"))

    status = first_char(fields.require("status"))
    if status == "A":
        fix.locked = True
    elif status == "V":
        fix.locked = False
        return

    latitude = degrees_minutes_to_decimal(fields.require("latitude"))
    fix.latitude = latitude
    hemisphere = first_char(fields.require("latitude hemisphere"))
    fix.latitude = apply_hemisphere(latitude, hemisphere)
    fix.latitude_hemisphere = hemisphere

    longitude = degrees_minutes_to_decimal(fields.require("longitude"))
    fix.longitude = longitude
    hemisphere = first_char(fields.require("longitude hemisphere"))
    fix.longitude = apply_hemisphere(longitude, hemisphere)
    fix.longitude_hemisphere = hemisphere

    fix.speed_knots = parse_float_field(fields.require("speed"))
    fix.bearing_true = parse_float_field(fields.require("track"))
    assign_utc_date(fix, fields.require("date"))

    fix.magnetic_variation = parse_float_field(fields.require("magnetic variation"))
    fix.magnetic_variation_direction = first_char(
        fields.require("magnetic variation direction")
    )
