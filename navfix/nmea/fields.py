"""NMEA field decoding utilities.

This module converts the text of individual NMEA fields into numbers.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). Numeric fields are read the way receivers' C firmware reads
them: the longest leading numeric prefix is used, and an empty or
non-numeric field reads as zero.
"""

import re

# Supported NMEA talker IDs for multi-constellation GNSS receivers.
# Each 2-character prefix identifies the satellite system:
#   GP = GPS (USA)
#   GN = Multi-GNSS (combined solution)
#   GL = GLONASS (Russia)
#   GA = Galileo (Europe)
#   GB = BeiDou (China)
#   GQ = QZSS (Japan)
KNOWN_TALKER_IDS = ("GP", "GN", "GL", "GA", "GB", "GQ")

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_TRIPLET = re.compile(r"\d{6}")


def parse_float_field(value: str) -> float:
    """Parse the leading numeric part of a field, returning 0.0 if there is none.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value; 0.0 for an empty or non-numeric field

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")  # empty field
        0.0
        >>> parse_float_field("12.5M")  # trailing junk is ignored
        12.5
    """
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        return 0.0
    return float(match.group())


def parse_int_field(value: str) -> int:
    """Parse the leading integer part of a field, returning 0 if there is none.

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("")
        0
    """
    match = _INT_PREFIX.match(value)
    if match is None:
        return 0
    return int(match.group())


def first_char(value: str) -> str:
    """Return the first character of a field, or "" for an empty field."""
    return value[:1]


def unpack_triplet(value: str) -> tuple[int, int, int] | None:
    """Split a packed six-digit field into three two-digit numbers.

    Used for both ``HHMMSS`` time fields and ``DDMMYY`` date fields. Anything
    after the sixth digit (such as ``.00`` hundredths) is ignored. No range
    checking happens here; callers normalize the values.

    Args:
        value: Field text starting with six ASCII digits

    Returns:
        Tuple of three integers in 0-99, or None if the field does not
        start with six digits (e.g. an empty time field before a fix)

    Example:
        >>> unpack_triplet("194533.00")
        (19, 45, 33)
        >>> unpack_triplet("160415")
        (16, 4, 15)
        >>> unpack_triplet("") is None
        True
    """
    if _TRIPLET.match(value) is None:
        return None
    digits = [ord(character) - ord("0") for character in value[:6]]
    return (
        digits[0] * 10 + digits[1],
        digits[2] * 10 + digits[3],
        digits[4] * 10 + digits[5],
    )


def degrees_minutes_to_decimal(value: str) -> float:
    """Convert NMEA coordinate (DDDMM.MMMM) to unsigned decimal degrees.

    NMEA coordinates use DDDMM.MMMM format where:
    - DDD (or DD for latitude) = degrees
    - MM.MMMM = decimal minutes

    The decimal point position determines the split between degrees and
    minutes: the 2 digits before the decimal point are always minutes. With
    two characters or fewer before the point the whole field is minutes.

    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)

    Args:
        value: Coordinate in DDDMM.MMMM format (e.g., "4807.038")

    Returns:
        Unsigned decimal degrees; 0.0 if the field has no decimal point,
        which is how receivers report a missing coordinate

    Example:
        >>> round(degrees_minutes_to_decimal("4807.038"), 4)  # 48° + 7.038'/60
        48.1173
        >>> round(degrees_minutes_to_decimal("07.038"), 4)  # minutes only
        0.1173
    """
    dot_position = value.find(".")
    if dot_position < 0:
        return 0.0

    if dot_position <= 2:
        return parse_float_field(value) / 60.0

    # Minutes are always 2 digits before the decimal point
    degrees = parse_float_field(value[: dot_position - 2])
    minutes = parse_float_field(value[dot_position - 2 :])
    return degrees + minutes / 60.0


def apply_hemisphere(decimal_degrees: float, hemisphere: str) -> float:
    """Apply the sign convention: South/West negative, North/East positive.

    Example:
        >>> apply_hemisphere(11.5166667, "W")
        -11.5166667
    """
    if hemisphere in ("S", "W"):
        return -decimal_degrees
    return decimal_degrees
