"""Typed configuration for the GNSS receiver and its serial host."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from navfix.nmea.fields import KNOWN_TALKER_IDS
from navfix.nmea.framing import DEFAULT_BUFFER_CAPACITY

__all__ = ["ReceiverConfig"]

_ENV_PREFIX = "NAVFIX_"

_SERIAL_PORT = "/dev/serial0"
_BAUD_RATE = 9600
_QUIESCENCE_SECONDS = 0.002
_POLL_INTERVAL_SECONDS = 0.01

_MIN_BUFFER_CAPACITY = 8
_MIN_UTC_OFFSET = -12
_MAX_UTC_OFFSET = 14


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(_ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{_ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(_ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{_ENV_PREFIX}{name} must be a number, got {raw!r}") from exc


def _env_str(environ: Mapping[str, str], name: str, default: str) -> str:
    raw = environ.get(_ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_tuple(
    environ: Mapping[str, str], name: str, default: tuple[str, ...]
) -> tuple[str, ...]:
    raw = environ.get(_ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(slots=True)
class ReceiverConfig:
    """Settings for ``GNSSReceiver`` and the serial polling loop.

    Attributes:
        buffer_capacity: Parse buffer size in bytes; longer sentences are
            truncated.
        utc_offset_hours: Whole-hour offset applied to derive local time.
        talker_ids: Talker prefixes whose RMC/VTG/GGA sentences are decoded,
            each one of ``KNOWN_TALKER_IDS``.
        quiescence_seconds: Quiet time on the line after a decoded sentence
            before the update handler fires.
        serial_port: Serial device the host opens.
        baud_rate: Serial line speed.
        poll_interval_seconds: Sleep between polls in the host loop.
    """

    buffer_capacity: int = DEFAULT_BUFFER_CAPACITY
    utc_offset_hours: int = 0
    talker_ids: tuple[str, ...] = ("GP",)
    quiescence_seconds: float = _QUIESCENCE_SECONDS
    serial_port: str = _SERIAL_PORT
    baud_rate: int = _BAUD_RATE
    poll_interval_seconds: float = _POLL_INTERVAL_SECONDS

    def __post_init__(self) -> None:
        if self.buffer_capacity < _MIN_BUFFER_CAPACITY:
            raise ValueError(
                f"buffer_capacity must be at least {_MIN_BUFFER_CAPACITY}, "
                f"got {self.buffer_capacity}"
            )
        if not _MIN_UTC_OFFSET <= self.utc_offset_hours <= _MAX_UTC_OFFSET:
            raise ValueError(
                f"utc_offset_hours must be in {_MIN_UTC_OFFSET}..{_MAX_UTC_OFFSET}, "
                f"got {self.utc_offset_hours}"
            )
        if not self.talker_ids:
            raise ValueError("talker_ids must name at least one talker")
        unknown = [talker for talker in self.talker_ids if talker not in KNOWN_TALKER_IDS]
        if unknown:
            raise ValueError(
                f"talker_ids must be drawn from {', '.join(KNOWN_TALKER_IDS)}, "
                f"got {', '.join(unknown)}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ReceiverConfig":
        """Build a config from ``NAVFIX_*`` environment variables.

        Unset or blank variables keep the defaults. ``NAVFIX_TALKER_IDS``
        is a comma-separated list, e.g. ``GP,GN``.

        Raises:
            ValueError: If a variable cannot be converted or a value is out
                of range.
        """
        if environ is None:
            environ = os.environ
        defaults = cls()
        return cls(
            buffer_capacity=_env_int(environ, "BUFFER_CAPACITY", defaults.buffer_capacity),
            utc_offset_hours=_env_int(environ, "UTC_OFFSET_HOURS", defaults.utc_offset_hours),
            talker_ids=_env_tuple(environ, "TALKER_IDS", defaults.talker_ids),
            quiescence_seconds=_env_float(
                environ, "QUIESCENCE_SECONDS", defaults.quiescence_seconds
            ),
            serial_port=_env_str(environ, "SERIAL_PORT", defaults.serial_port),
            baud_rate=_env_int(environ, "BAUD_RATE", defaults.baud_rate),
            poll_interval_seconds=_env_float(
                environ, "POLL_INTERVAL_SECONDS", defaults.poll_interval_seconds
            ),
        )
