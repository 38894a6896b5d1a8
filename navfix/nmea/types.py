"""NMEA data types for decoded sentences.

This module defines the mutable fix record that the sentence decoders write
into and the receiver accessors read from.

Design Decisions:
    1. One record, updated in place: RMC, VTG and GGA each carry a different
       slice of the fix, so every decoder writes only the attributes its
       sentence carries and leaves the rest untouched.

    2. Zero rather than None: fields start at zero and keep their last value.
       A sentence that stops early (missing trailing fields) leaves a partial
       update behind; consumers should gate on ``locked`` before trusting
       position data.

    3. UTC and local date/time are stored separately: the local fields are
       derived from the UTC ones plus the configured offset and are never
       aliases of them.
"""

from dataclasses import dataclass


@dataclass
class FixSnapshot:
    """Latest navigation fix assembled from RMC, VTG and GGA sentences.

    Attributes:
        locked: True when the receiver reports a valid fix (RMC status ``A``
            or GGA fix quality other than ``0``).

        latitude: Latitude in decimal degrees, negative for South.
        longitude: Longitude in decimal degrees, negative for West.
        latitude_hemisphere: Raw hemisphere letter (``N``/``S``) last seen.
        longitude_hemisphere: Raw hemisphere letter (``E``/``W``) last seen.

        bearing_true: Track over ground relative to true north, degrees.
        bearing_magnetic: Track over ground relative to magnetic north, degrees.
        speed_knots: Ground speed in knots.
        speed_kmh: Ground speed in km/h (VTG only).

        magnetic_variation: Magnetic variation in degrees (RMC).
        magnetic_variation_direction: ``E``/``W`` letter for the variation.

        satellites: Number of satellites used in the fix (GGA).
        hdop: Horizontal dilution of precision (GGA).
        altitude: Height above mean sea level, in ``altitude_units``.
        altitude_units: Unit letter for ``altitude``, usually ``M``.
        ellipsoid_height: Height of the geoid above the WGS-84 ellipsoid.
        ellipsoid_height_units: Unit letter for ``ellipsoid_height``.

        utc_hour, utc_minute, utc_second: UTC time of the fix.
        utc_day, utc_month, utc_year_two_digit: UTC date of the fix; the
            year is stored as two digits and offset by 2000 on read.

        local_hour .. local_year_two_digit: UTC date/time shifted by the
            configured offset. The local year is stored as ``year - 2000``
            and ranges from -1 to 99: a negative offset can move
            2000-01-01 back into 1999.

        updated: Set whenever a known sentence has been decoded; cleared by
            the consumer's check-and-clear read.
    """

    locked: bool = False

    latitude: float = 0.0
    longitude: float = 0.0
    latitude_hemisphere: str = ""
    longitude_hemisphere: str = ""

    bearing_true: float = 0.0
    bearing_magnetic: float = 0.0
    speed_knots: float = 0.0
    speed_kmh: float = 0.0

    magnetic_variation: float = 0.0
    magnetic_variation_direction: str = ""

    satellites: int = 0
    hdop: float = 0.0
    altitude: float = 0.0
    altitude_units: str = ""
    ellipsoid_height: float = 0.0
    ellipsoid_height_units: str = ""

    utc_hour: int = 0
    utc_minute: int = 0
    utc_second: int = 0
    utc_day: int = 0
    utc_month: int = 0
    utc_year_two_digit: int = 0

    local_hour: int = 0
    local_minute: int = 0
    local_second: int = 0
    local_day: int = 0
    local_month: int = 0
    local_year_two_digit: int = 0

    updated: bool = False
