"""Exceptions raised while framing and decoding NMEA sentences.

Every failure is an ``NmeaError`` so callers streaming many lines can catch
one type, log it, and move on to the next line.
"""


class NmeaError(Exception):
    """Base class for all NMEA framing and decoding errors."""


class FramingError(NmeaError):
    """The raw line is not a ``$<address>,<payload>*<hh>`` sentence."""


class WrongSentenceHeaderError(NmeaError):
    """A sentence was routed to a decoder for a different sentence type.

    Attributes:
        expected: The identifier the decoder handles (e.g. ``"GLL"``).
        found: The identifier that was actually supplied.
    """

    def __init__(self, expected: str, found: str) -> None:
        super().__init__(f"expected {expected!r} sentence, found {found!r}")
        self.expected = expected
        self.found = found


class ParseError(NmeaError):
    """A payload field does not match its grammar.

    Attributes:
        field: Name of the construct that failed (e.g. ``"status"``).
        remaining: The unconsumed payload at the failure position.
    """

    def __init__(self, field: str, remaining: str) -> None:
        super().__init__(f"malformed {field} at {remaining!r}")
        self.field = field
        self.remaining = remaining
