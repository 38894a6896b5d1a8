"""Navfix package for decoding NMEA 0183 GNSS sentences into a navigation fix."""

from navfix.config import ReceiverConfig
from navfix.epoch import (
    DateTimeFields,
    apply_offset_hours,
    day_of_week,
    to_unix_timestamp,
)
from navfix.gnss import GNSSReceiver, SerialByteSource
from navfix.nmea import (
    FixSnapshot,
    FrameAssembler,
    SentenceRouter,
    degrees_minutes_to_decimal,
    unpack_triplet,
)

__all__ = [
    "DateTimeFields",
    "FixSnapshot",
    "FrameAssembler",
    "GNSSReceiver",
    "ReceiverConfig",
    "SentenceRouter",
    "SerialByteSource",
    "apply_offset_hours",
    "day_of_week",
    "degrees_minutes_to_decimal",
    "to_unix_timestamp",
    "unpack_triplet",
]
