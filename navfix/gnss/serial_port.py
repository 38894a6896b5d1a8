"""Serial UART byte source for GNSS receivers.

Opens the port non-blocking (``timeout=0``) so ``GNSSReceiver.process()``
only ever reads what the UART has already buffered. The port name goes
through ``serial.serial_for_url``, so pyserial URLs such as
``socket://host:port`` or ``loop://`` work as well as device paths.
"""

import contextlib
import logging
from types import TracebackType

import serial

__all__ = ["SerialByteSource"]

logger = logging.getLogger(__name__)

_PORT = "/dev/serial0"
_BAUD_RATE = 9600


class SerialByteSource:
    """Context manager owning a non-blocking ``serial.Serial`` port.

    The port is opened in ``__enter__`` and closed in ``__exit__``::

        with SerialByteSource("/dev/ttyUSB0", 38400) as port:
            gnss = GNSSReceiver(port)
            while True:
                gnss.process()

    Args:
        port: Serial device path (default: ``/dev/serial0``).
        baud_rate: Line speed of the receiver (default: 9600).
    """

    def __init__(self, port: str = _PORT, baud_rate: int = _BAUD_RATE) -> None:
        """Store port parameters; the port is opened in ``__enter__``."""
        self._port = port
        self._baud_rate = baud_rate
        self._serial: serial.Serial | None = None

    def __enter__(self) -> "SerialByteSource":
        """Open the serial port."""
        self._serial = serial.serial_for_url(self._port, self._baud_rate, timeout=0)
        logger.info("Opened %s at %d baud", self._port, self._baud_rate)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the serial port."""
        if self._serial is not None:
            self._serial.close()
            self._serial = None
            logger.info("Closed %s", self._port)

    def _require_open(self) -> serial.Serial:
        if self._serial is None:
            raise RuntimeError("SerialByteSource must be used as a context manager.")
        if not self._serial.is_open:
            raise serial.PortNotOpenError()
        return self._serial

    @property
    def in_waiting(self) -> int:
        """Number of bytes buffered by the UART.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            serial.PortNotOpenError: If the port was closed by ``cancel()``.
        """
        return self._require_open().in_waiting

    def read(self, size: int = 1) -> bytes:
        """Read up to *size* buffered bytes without blocking."""
        return self._require_open().read(size)

    def cancel(self) -> None:
        """Close the port so a polling loop stops with ``OSError``.

        The next ``in_waiting`` or ``read`` raises ``serial.PortNotOpenError``,
        a ``serial.SerialException`` and so an ``OSError``.
        """
        if self._serial is not None:
            with contextlib.suppress(OSError):
                self._serial.close()
