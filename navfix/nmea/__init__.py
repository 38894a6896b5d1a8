"""NMEA 0183 framing and decoding for RMC, VTG and GGA sentences."""

from navfix.nmea.fields import (
    apply_hemisphere,
    degrees_minutes_to_decimal,
    parse_float_field,
    parse_int_field,
    unpack_triplet,
)
from navfix.nmea.framing import FrameAssembler
from navfix.nmea.gga import decode_gga
from navfix.nmea.rmc import decode_rmc
from navfix.nmea.router import SentenceRouter
from navfix.nmea.tokenizer import DecodeAbort, FieldTokenizer
from navfix.nmea.types import FixSnapshot
from navfix.nmea.vtg import decode_vtg

__all__ = [
    "DecodeAbort",
    "FieldTokenizer",
    "FixSnapshot",
    "FrameAssembler",
    "SentenceRouter",
    "apply_hemisphere",
    "decode_gga",
    "decode_rmc",
    "decode_vtg",
    "degrees_minutes_to_decimal",
    "parse_float_field",
    "parse_int_field",
    "unpack_triplet",
]
