"""Byte-level NMEA frame assembler.

NMEA 0183 sentences start with ``$`` and end with ``\\r\\n``. On a serial
line the receiver may be attached mid-sentence and bytes may be lost, so the
start character is the only reliable sync point:

    garbage$GPGGA,194533.00,...,*73\\r\\n
           ^                          ^
           (re)start framing          frame complete

A ``$`` always restarts framing, even in the middle of a frame, which makes
the assembler recover on its own after a transmission error. Frames longer
than the buffer are cut short without any error reaching the caller.
"""

import logging
from collections.abc import Iterator

__all__ = ["DEFAULT_BUFFER_CAPACITY", "FrameAssembler"]

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_CAPACITY = 128

_START = ord("$")
_TERMINATORS = (ord("\r"), ord("\n"))


class FrameAssembler:
    """Collect the payload of one sentence at a time from a byte stream.

    The buffer has a fixed capacity; at most ``capacity - 1`` payload bytes
    are kept per frame, the rest is dropped.

    Example:
        >>> assembler = FrameAssembler()
        >>> list(assembler.feed(b"noise$GPVTG,054.7,T*3B\\r\\n"))
        [b'GPVTG,054.7,T*3B']

    Args:
        capacity: Size of the parse buffer in bytes (default: 128).
    """

    def __init__(self, capacity: int = DEFAULT_BUFFER_CAPACITY) -> None:
        self._buffer = bytearray(capacity)
        self._cursor = 0
        self._receiving = False
        self._truncated = False

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def receiving(self) -> bool:
        """True between a ``$`` and the next line terminator."""
        return self._receiving

    def reset(self) -> None:
        """Drop any partial frame and wait for the next ``$``."""
        self._cursor = 0
        self._receiving = False
        self._truncated = False

    def feed_byte(self, byte: int) -> bytes | None:
        """Consume one byte; return the frame payload when it completes.

        Empty frames (``$`` directly followed by a terminator) are returned
        as ``b""``.

        Args:
            byte: The next byte of the stream, 0-255.

        Returns:
            The completed payload, or None while a frame is still open or
            no frame has started.
        """
        if byte == _START:
            self._cursor = 0
            self._receiving = True
            self._truncated = False
            return None

        if not self._receiving:
            return None

        if byte in _TERMINATORS:
            self._receiving = False
            if self._truncated:
                logger.debug(
                    "Frame exceeded %d bytes and was truncated", self.capacity - 1
                )
            return bytes(self._buffer[: self._cursor])

        if self._cursor < self.capacity - 1:
            self._buffer[self._cursor] = byte
            self._cursor += 1
        else:
            self._truncated = True
        return None

    def feed(self, data: bytes) -> Iterator[bytes]:
        """Consume a chunk of bytes, yielding every frame completed in it."""
        for byte in data:
            frame = self.feed_byte(byte)
            if frame is not None:
                yield frame
