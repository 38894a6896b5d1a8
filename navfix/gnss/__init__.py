"""GNSS module for decoding NMEA 0183 data from a serial port."""

from navfix.gnss.receiver import ByteSource, GNSSReceiver, UpdateHandler
from navfix.gnss.serial_port import SerialByteSource

__all__ = ["ByteSource", "GNSSReceiver", "SerialByteSource", "UpdateHandler"]
