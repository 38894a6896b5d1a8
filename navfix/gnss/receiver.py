"""GNSSReceiver: incremental NMEA decoder for a polled byte stream.

Reading strategy:
    ``process()`` drains whatever bytes the source has buffered right now and
    returns without blocking, so the host must call it repeatedly. Bytes pass
    through the frame assembler; each completed frame goes to the sentence
    router, which updates the shared ``FixSnapshot``. After every RMC, VTG or
    GGA sentence the local date/time is re-derived from the UTC fields and
    the configured offset.

Notification:
    The ``updated`` flag is a single pending notification read with
    ``is_updated()`` (check and clear); updates the host does not read in
    time are merged, not queued. Optionally an update handler is called once
    the line has been quiet for ``quiescence_seconds`` after a decoded
    sentence, i.e. once per burst of sentences from the receiver.
"""

import dataclasses
import logging
import time
from collections.abc import Callable
from typing import Protocol

from navfix.config import ReceiverConfig
from navfix.epoch import (
    DateTimeFields,
    apply_offset_hours,
    day_of_week,
    to_unix_timestamp,
)
from navfix.nmea import FixSnapshot, FrameAssembler, SentenceRouter

__all__ = ["ByteSource", "GNSSReceiver", "UpdateHandler"]

logger = logging.getLogger(__name__)

_CENTURY = 2000

UpdateHandler = Callable[[], None]


class ByteSource(Protocol):
    """Anything that reports buffered bytes and reads them, e.g. ``serial.Serial``."""

    @property
    def in_waiting(self) -> int: ...

    def read(self, size: int = 1) -> bytes: ...


class GNSSReceiver:
    """Decode NMEA RMC, VTG and GGA sentences into a navigation fix.

    Polling use with a serial port::

        with SerialByteSource("/dev/ttyUSB0", 9600) as port:
            gnss = GNSSReceiver(port)
            while True:
                gnss.process()
                if gnss.is_updated() and gnss.is_locked():
                    print(gnss.latitude, gnss.longitude)

    Bytes from any other transport can be pushed in with ``feed()``.

    Args:
        source: Byte source polled by ``process()``; optional when only
            ``feed()`` is used.
        config: Receiver settings (default: ``ReceiverConfig()``).
        clock: Monotonic clock in seconds, used for the quiet-line check.
    """

    def __init__(
        self,
        source: ByteSource | None = None,
        config: ReceiverConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._source = source
        self._config = config if config is not None else ReceiverConfig()
        self._clock = clock
        self._assembler = FrameAssembler(self._config.buffer_capacity)
        self._router = SentenceRouter(self._config.talker_ids)
        self._fix = FixSnapshot()
        self._handler: UpdateHandler | None = None
        self._notify_pending = False
        self._last_rx = clock()

    # --- input ----------------------------------------------------------------

    def process(self) -> int:
        """Drain all currently available bytes from the source.

        Fires the update handler if one is due.

        Returns:
            Number of bytes consumed.

        Raises:
            RuntimeError: If no byte source is attached.
            OSError: Propagated from the source, e.g. when the port closes.
        """
        if self._source is None:
            raise RuntimeError("GNSSReceiver has no byte source to process.")

        consumed = 0
        while True:
            available = self._source.in_waiting
            if not available:
                break
            data = self._source.read(available)
            if not data:
                break
            consumed += len(data)
            self._consume(data)

        self.poll_update_handler()
        return consumed

    def feed(self, data: bytes) -> int:
        """Decode caller-supplied bytes.

        The update handler is not called from here; it fires from the next
        ``process()`` or ``poll_update_handler()`` once the line is quiet.

        Returns:
            Number of sentences that carried a known tag.
        """
        return self._consume(data)

    def _consume(self, data: bytes) -> int:
        self._last_rx = self._clock()
        matched = 0
        for frame in self._assembler.feed(data):
            if not self._router.route(frame, self._fix):
                continue
            matched += 1
            self._refresh_local_time()
            if self._handler is not None:
                self._notify_pending = True
        return matched

    def _refresh_local_time(self) -> None:
        timestamp = self.timestamp
        if timestamp is None:
            return
        local = apply_offset_hours(timestamp, self._config.utc_offset_hours)
        self._fix.local_hour = local.hour
        self._fix.local_minute = local.minute
        self._fix.local_second = local.second
        self._fix.local_day = local.day
        self._fix.local_month = local.month
        # -1 when a negative offset crosses back into 1999
        self._fix.local_year_two_digit = local.year - _CENTURY

    def reset(self) -> None:
        """Zero the fix, drop any partial frame and any pending notification."""
        self._fix = FixSnapshot()
        self._assembler.reset()
        self._notify_pending = False

    # --- notification ---------------------------------------------------------

    def set_update_handler(self, handler: UpdateHandler | None) -> None:
        """Install the update handler, replacing any previous one.

        ``None`` removes the handler. Either way a notification that has not
        fired yet is discarded.
        """
        self._handler = handler
        self._notify_pending = False

    def poll_update_handler(self) -> bool:
        """Call the update handler if a decoded sentence is waiting and the line is quiet.

        Returns:
            True if the handler was called.
        """
        if not self._notify_pending or self._handler is None:
            return False
        if self._clock() - self._last_rx < self._config.quiescence_seconds:
            return False
        self._notify_pending = False
        logger.debug("Line quiet, notifying update handler")
        self._handler()
        return True

    def is_updated(self) -> bool:
        """Return True if a sentence was decoded since the last call, then clear it."""
        updated = self._fix.updated
        self._fix.updated = False
        return updated

    # --- configuration --------------------------------------------------------

    @property
    def config(self) -> ReceiverConfig:
        return self._config

    @property
    def utc_offset_hours(self) -> int:
        """Whole-hour offset from UTC applied to the local date/time accessors."""
        return self._config.utc_offset_hours

    @utc_offset_hours.setter
    def utc_offset_hours(self, offset_hours: int) -> None:
        self._config = dataclasses.replace(self._config, utc_offset_hours=offset_hours)
        self._refresh_local_time()

    # --- fix accessors --------------------------------------------------------

    def snapshot(self) -> FixSnapshot:
        """Return a copy of the current fix."""
        return dataclasses.replace(self._fix)

    def is_locked(self) -> bool:
        """Return True if the receiver reports a valid fix."""
        return self._fix.locked

    @property
    def latitude(self) -> float:
        """Latitude in decimal degrees, negative for South."""
        return self._fix.latitude

    @property
    def longitude(self) -> float:
        """Longitude in decimal degrees, negative for West."""
        return self._fix.longitude

    def bearing(self, magnetic: bool = False) -> float:
        """Track over ground in degrees, to true north unless *magnetic*."""
        if magnetic:
            return self._fix.bearing_magnetic
        return self._fix.bearing_true

    def speed(self, knots: bool = False) -> float:
        """Ground speed in km/h, or in knots if *knots* is True.

        The km/h value comes from VTG only; RMC reports knots.
        """
        if knots:
            return self._fix.speed_knots
        return self._fix.speed_kmh

    @property
    def altitude(self) -> float:
        """Height above mean sea level, in ``altitude_units``."""
        return self._fix.altitude

    @property
    def altitude_units(self) -> str:
        return self._fix.altitude_units

    @property
    def ellipsoid_height(self) -> float:
        """Height of the geoid above the WGS-84 ellipsoid, in ``ellipsoid_height_units``."""
        return self._fix.ellipsoid_height

    @property
    def ellipsoid_height_units(self) -> str:
        return self._fix.ellipsoid_height_units

    @property
    def satellites(self) -> int:
        """Number of satellites used in the fix."""
        return self._fix.satellites

    @property
    def hdop(self) -> float:
        return self._fix.hdop

    @property
    def magnetic_variation(self) -> float:
        return self._fix.magnetic_variation

    @property
    def magnetic_variation_direction(self) -> str:
        return self._fix.magnetic_variation_direction

    # --- date/time accessors --------------------------------------------------

    @property
    def utc_datetime(self) -> DateTimeFields:
        """UTC date and time as last decoded; month and day are 0 before any RMC."""
        fix = self._fix
        return DateTimeFields(
            year=_CENTURY + fix.utc_year_two_digit,
            month=fix.utc_month,
            day=fix.utc_day,
            hour=fix.utc_hour,
            minute=fix.utc_minute,
            second=fix.utc_second,
        )

    @property
    def local_datetime(self) -> DateTimeFields | None:
        """Local date and time, or None until a computable UTC date arrived."""
        fix = self._fix
        if fix.local_month == 0:
            return None
        return DateTimeFields(
            year=_CENTURY + fix.local_year_two_digit,
            month=fix.local_month,
            day=fix.local_day,
            hour=fix.local_hour,
            minute=fix.local_minute,
            second=fix.local_second,
        )

    @property
    def timestamp(self) -> int | None:
        """UTC fix time as Unix seconds, or None if the date/time is not computable."""
        return to_unix_timestamp(self.utc_datetime)

    @property
    def day(self) -> int:
        """Local day of the month (1-31)."""
        return self._fix.local_day

    @property
    def month(self) -> int:
        """Local month (1-12)."""
        return self._fix.local_month

    @property
    def year(self) -> int:
        """Local four-digit year (2000-2099)."""
        return _CENTURY + self._fix.local_year_two_digit

    @property
    def hour(self) -> int:
        """Local hour (0-23)."""
        return self._fix.local_hour

    @property
    def minute(self) -> int:
        return self._fix.local_minute

    @property
    def second(self) -> int:
        return self._fix.local_second

    @property
    def day_of_week(self) -> int | None:
        """Local day of the week, 0 for Sunday, or None before any date."""
        local = self.local_datetime
        if local is None:
            return None
        return day_of_week(local.year, local.month, local.day)
