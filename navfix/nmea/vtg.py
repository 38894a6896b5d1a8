"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.

VTG Sentence Format:
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Every value is followed by a letter naming what it is, so the decoder reads
(value, letter) pairs instead of relying on positions. This also covers
pre-2.3 receivers that omit the mode indicator. A trailing value without a
letter (the mode indicator) ends the sentence.
"""

from navfix.nmea.fields import first_char, parse_float_field
from navfix.nmea.tokenizer import FieldTokenizer
from navfix.nmea.types import FixSnapshot

__all__ = ["decode_vtg"]

_DESTINATIONS = {
    "T": "bearing_true",
    "M": "bearing_magnetic",
    "N": "speed_knots",
    "K": "speed_kmh",
}


def decode_vtg(fields: FieldTokenizer, fix: FixSnapshot) -> None:
    """Decode a VTG sentence into *fix*.

    Unknown unit letters are skipped.

    Raises:
        DecodeAbort: If the sentence is empty.
    """
    fields.require("tag")
    for value in fields:
        unit = fields.next_field()
        if unit is None:
            return
        attribute = _DESTINATIONS.get(first_char(unit))
        if attribute is not None:
            setattr(fix, attribute, parse_float_field(value))
