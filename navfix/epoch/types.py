"""Calendar data types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DateTimeFields:
    """A broken-down Gregorian date and time of day.

    Attributes:
        year: Four-digit year, e.g. 2015.
        month: Month of the year, 1-12.
        day: Day of the month, 1-31.
        hour: Hour of the day, 0-23.
        minute: Minute of the hour, 0-59.
        second: Second of the minute, 0-59.

    Example:
        >>> DateTimeFields(2015, 4, 16, 19, 45, 33)
        DateTimeFields(year=2015, month=4, day=16, hour=19, minute=45, second=33)
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
