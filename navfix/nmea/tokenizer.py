"""Comma-delimited field tokenizer for one NMEA sentence.

Each tokenizer owns its own cursor over a single sentence, so two sentences
can never share iteration state. Fields are returned as slices of the
original string (index ranges) instead of terminating them in place.

Example:
    >>> fields = FieldTokenizer("GPVTG,054.7,T,,M")
    >>> [fields.next_field() for _ in range(6)]
    ['GPVTG', '054.7', 'T', '', 'M', None]
"""

from collections.abc import Iterator

__all__ = ["DecodeAbort", "FieldTokenizer"]


class DecodeAbort(Exception):
    """Raised when a sentence ends before a required field.

    The sentence router catches it; it never reaches the host.
    """


class FieldTokenizer:
    """Split a sentence into comma-delimited fields on demand.

    ``next_field`` distinguishes "no more fields" (``None``) from "field
    present but empty" (``""``). A trailing comma does not produce a final
    empty field, and an empty sentence has no fields at all.

    Args:
        sentence: Sentence payload with the ``$`` and checksum removed.
    """

    def __init__(self, sentence: str) -> None:
        self._sentence = sentence
        self._cursor: int | None = 0

    def next_field(self) -> str | None:
        """Return the next field, or ``None`` once the sentence is exhausted."""
        start = self._cursor
        if start is None or start >= len(self._sentence):
            self._cursor = None
            return None

        comma = self._sentence.find(",", start)
        if comma < 0:
            self._cursor = None
            return self._sentence[start:]

        self._cursor = comma + 1
        return self._sentence[start:comma]

    def require(self, name: str = "field") -> str:
        """Return the next field, raising ``DecodeAbort`` if there is none.

        Args:
            name: Field description used in the abort message.

        Raises:
            DecodeAbort: If the sentence has no more fields.
        """
        field = self.next_field()
        if field is None:
            raise DecodeAbort(f"sentence ended before {name}")
        return field

    def __iter__(self) -> Iterator[str]:
        while True:
            field = self.next_field()
            if field is None:
                return
            yield field
