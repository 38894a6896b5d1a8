"""Sentence router: identify a completed frame and run its decoder.

A frame is the text between ``$`` and the line terminator. The checksum after
``*`` is cut off but not verified, so a corrupted sentence that still parses
structurally is accepted.
"""

import logging
from collections.abc import Callable, Iterable

from navfix.nmea.gga import decode_gga
from navfix.nmea.rmc import decode_rmc
from navfix.nmea.tokenizer import DecodeAbort, FieldTokenizer
from navfix.nmea.types import FixSnapshot
from navfix.nmea.vtg import decode_vtg

__all__ = ["SentenceRouter"]

logger = logging.getLogger(__name__)

Decoder = Callable[[FieldTokenizer, FixSnapshot], None]

_DECODERS: dict[str, Decoder] = {
    "RMC": decode_rmc,
    "VTG": decode_vtg,
    "GGA": decode_gga,
}

_TAG_LENGTH = 5


def _strip_checksum(sentence: str) -> str:
    star = sentence.find("*")
    if star < 0:
        return sentence
    return sentence[:star]


class SentenceRouter:
    """Dispatch frames to the RMC, VTG and GGA decoders by their 5-character tag.

    Tags are matched case-sensitively on the first five characters of the
    frame: a two-letter talker ID followed by the sentence type.

    Args:
        talker_ids: Talker prefixes to accept (default: GPS only, ``"GP"``).
    """

    def __init__(self, talker_ids: Iterable[str] = ("GP",)) -> None:
        self._decoders: dict[str, Decoder] = {
            talker + sentence_type: decoder
            for talker in talker_ids
            for sentence_type, decoder in _DECODERS.items()
        }

    @property
    def tags(self) -> frozenset[str]:
        """The tags this router decodes, e.g. ``{"GPRMC", "GPVTG", "GPGGA"}``."""
        return frozenset(self._decoders)

    def route(self, frame: bytes, fix: FixSnapshot) -> bool:
        """Decode one frame into *fix*.

        Unknown tags leave *fix* untouched. For a known tag the decoder runs
        and ``fix.updated`` is set even if the sentence ended early, so the
        host still hears about the fields that did arrive.

        Args:
            frame: Frame payload without the leading ``$`` or terminator.
            fix: Snapshot to update in place.

        Returns:
            True if the frame carried a known tag.
        """
        sentence = _strip_checksum(frame.decode("ascii", errors="replace"))
        decoder = self._decoders.get(sentence[:_TAG_LENGTH])
        if decoder is None:
            logger.debug("Ignoring sentence with unknown tag %r", sentence[:_TAG_LENGTH])
            return False

        try:
            decoder(FieldTokenizer(sentence), fix)
        except DecodeAbort as exc:
            logger.debug("Partial %s sentence: %s", sentence[:_TAG_LENGTH], exc)

        fix.updated = True
        return True
