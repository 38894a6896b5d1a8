"""Calendar arithmetic: Unix timestamps, UTC offsets and day of week."""

from navfix.epoch.conversion import (
    apply_offset_hours,
    day_of_week,
    days_in_month,
    from_unix_timestamp,
    is_leap_year,
    to_unix_timestamp,
)
from navfix.epoch.types import DateTimeFields

__all__ = [
    "DateTimeFields",
    "apply_offset_hours",
    "day_of_week",
    "days_in_month",
    "from_unix_timestamp",
    "is_leap_year",
    "to_unix_timestamp",
]
