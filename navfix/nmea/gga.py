"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,194533.00,5155.32591,N,00234.41370,W,1,10,1.24,63.1,M,48.6,M,,*73
           |         |          | |           | | |  |    |    | |    |
           |         |          | |           | | |  |    |    | |    +-- DGPS info (ignored)
           |         |          | |           | | |  |    |    | +-- Geoid height + units
           |         |          | |           | | |  |    +----+-- Altitude above MSL + units
           |         |          | |           | | |  +-- HDOP (horizontal dilution)
           |         |          | |           | | +-- Number of satellites
           |         |          | |           | +-- Fix quality (0-6)
           |         |          | +-----------+-- Longitude + E/W
           |         +----------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Dead reckoning mode

GGA carries no date; the date used for local time stays whatever the last
RMC sentence set.
"""

from navfix.nmea.fields import (
    apply_hemisphere,
    degrees_minutes_to_decimal,
    first_char,
    parse_float_field,
    parse_int_field,
)
from navfix.nmea.rmc import assign_utc_time
from navfix.nmea.tokenizer import FieldTokenizer
from navfix.nmea.types import FixSnapshot

__all__ = ["decode_gga"]


def decode_gga(fields: FieldTokenizer, fix: FixSnapshot) -> None:
    """Decode a GGA sentence into *fix*, field by field.

    Note: an empty fix quality field counts as no fix, since 0 already means
    "no fix" semantically.

    Raises:
        DecodeAbort: If the sentence ends early. Fields decoded before the
            missing one stay written.
    """
    fields.require("tag")
    assign_utc_time(fix, fields.require("time"))

    latitude = degrees_minutes_to_decimal(fields.require("latitude"))
    fix.latitude = latitude
    fix.latitude_hemisphere = first_char(fields.require("latitude hemisphere"))
    fix.latitude = apply_hemisphere(latitude, fix.latitude_hemisphere)

    longitude = degrees_minutes_to_decimal(fields.require("longitude"))
    fix.longitude = longitude
    fix.longitude_hemisphere = first_char(fields.require("longitude hemisphere"))
    fix.longitude = apply_hemisphere(longitude, fix.longitude_hemisphere)

    quality = first_char(fields.require("fix quality"))
    fix.locked = quality not in ("", "0")

    fix.satellites = parse_int_field(fields.require("satellites")) % 256
    fix.hdop = parse_float_field(fields.require("hdop"))

    fix.altitude = parse_float_field(fields.require("altitude"))
    fix.altitude_units = first_char(fields.require("altitude units"))

    fix.ellipsoid_height = parse_float_field(fields.require("ellipsoid height"))
    fix.ellipsoid_height_units = first_char(fields.require("ellipsoid height units"))
