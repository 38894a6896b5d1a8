"""Unix timestamp arithmetic for GNSS date/time fields.

Receivers report UTC as separate day/month/year and hour/minute/second
fields. This module turns those into seconds since 1970-01-01T00:00:00Z and
back, which is how a fixed UTC offset is applied: shift the timestamp, then
break it down again. Both directions walk whole years and whole months with
the Gregorian leap-year rule, so ``from_unix_timestamp`` inverts
``to_unix_timestamp`` exactly.

Example:
    >>> fields = DateTimeFields(2015, 4, 16, 19, 45, 33)
    >>> to_unix_timestamp(fields)
    1429213533
    >>> apply_offset_hours(1429213533, 9)
    DateTimeFields(year=2015, month=4, day=17, hour=4, minute=45, second=33)
"""

from navfix.epoch.types import DateTimeFields

__all__ = [
    "EPOCH_YEAR",
    "apply_offset_hours",
    "day_of_week",
    "days_in_month",
    "from_unix_timestamp",
    "is_leap_year",
    "to_unix_timestamp",
]

EPOCH_YEAR = 1970

_SECONDS_PER_MINUTE = 60
_SECONDS_PER_HOUR = 3600
_SECONDS_PER_DAY = 86400

# Days per month, index 0 unused; February is patched for leap years.
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Per-month offsets for Sakamoto's day-of-week congruence.
_DOW_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years (2000 yes, 2100 no, 2024 yes)."""
    return year % 4 == 0 and year % 100 != 0 or year % 400 == 0


def _days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in *month* (1-12) of *year*."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def _is_computable(fields: DateTimeFields) -> bool:
    return (
        fields.year >= EPOCH_YEAR
        and 1 <= fields.month <= 12
        and 1 <= fields.day <= 31
        and 0 <= fields.hour <= 23
        and 0 <= fields.minute <= 59
        and 0 <= fields.second <= 59
    )


def to_unix_timestamp(fields: DateTimeFields) -> int | None:
    """Convert a UTC date/time to seconds since the Unix epoch.

    Day numbers are not checked against the month length: 31 February
    simply runs into March, as it does on the receivers this mirrors.

    Args:
        fields: UTC date and time.

    Returns:
        Seconds since 1970-01-01T00:00:00Z, or None if any field is out of
        range (month 0 or > 12, day 0 or > 31, hour > 23, minute > 59,
        second > 59) or the year precedes 1970. A snapshot that has not
        seen a date yet has month 0 and is therefore not computable.
    """
    if not _is_computable(fields):
        return None

    days = sum(_days_in_year(year) for year in range(EPOCH_YEAR, fields.year))
    days += sum(days_in_month(fields.year, month) for month in range(1, fields.month))
    days += fields.day - 1

    return (
        days * _SECONDS_PER_DAY
        + fields.hour * _SECONDS_PER_HOUR
        + fields.minute * _SECONDS_PER_MINUTE
        + fields.second
    )


def from_unix_timestamp(timestamp: int) -> DateTimeFields:
    """Break seconds since the Unix epoch down into a date and time of day.

    Raises:
        ValueError: If *timestamp* is negative.
    """
    if timestamp < 0:
        raise ValueError(f"timestamp precedes the Unix epoch: {timestamp}")

    day_number, day_clock = divmod(timestamp, _SECONDS_PER_DAY)
    hour, remainder = divmod(day_clock, _SECONDS_PER_HOUR)
    minute, second = divmod(remainder, _SECONDS_PER_MINUTE)

    year = EPOCH_YEAR
    while day_number >= _days_in_year(year):
        day_number -= _days_in_year(year)
        year += 1

    month = 1
    while day_number >= days_in_month(year, month):
        day_number -= days_in_month(year, month)
        month += 1

    return DateTimeFields(
        year=year,
        month=month,
        day=day_number + 1,
        hour=hour,
        minute=minute,
        second=second,
    )


def apply_offset_hours(timestamp: int, offset_hours: int) -> DateTimeFields:
    """Shift a Unix timestamp by whole hours and break it down.

    Args:
        timestamp: Seconds since the Unix epoch (UTC).
        offset_hours: Offset from UTC, e.g. ``-5`` for EST or ``9`` for JST.

    Returns:
        The local date and time.

    Raises:
        ValueError: If the shifted time precedes the Unix epoch.
    """
    return from_unix_timestamp(timestamp + offset_hours * _SECONDS_PER_HOUR)


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the day of the week, 0 for Sunday through 6 for Saturday.

    Example:
        >>> day_of_week(2015, 4, 16)  # a Thursday
        4

    Raises:
        ValueError: If *month* is not in 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1-12, got {month}")

    # January and February count as months 13 and 14 of the previous year
    if month < 3:
        year -= 1
    return (
        year + year // 4 - year // 100 + year // 400 + _DOW_OFFSETS[month - 1] + day
    ) % 7
