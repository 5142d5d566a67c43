"""NMEA field decoding utilities.

This module provides a cursor over a sentence payload and the decoders for
the fields shared between sentence types (latitude/longitude pairs and UTC
time of day). Unlike a plain ``str.split(",")``, the cursor keeps field order
explicit: each decoder consumes exactly its own characters, so a sentence
decoder reads as its grammar, one step per field.

All decoders raise ``ParseError`` on malformed input and leave the caller
to decide whether to skip the line or abort.
"""

import datetime

from geofix.nmea.errors import ParseError

FIELD_SEPARATOR = ","

_LATITUDE_DEGREE_DIGITS = 2
_LONGITUDE_DEGREE_DIGITS = 3
_LATITUDE_HEMISPHERES = ("N", "S")
_LONGITUDE_HEMISPHERES = ("E", "W")
_NEGATIVE_HEMISPHERES = ("S", "W")

# Time of day is encoded as HHMMSS with an optional fractional part
_TIME_COMPONENT_DIGITS = 2
_MILLISECOND_DIGITS = 3


def _is_digits(value: str) -> bool:
    """Return True for a non-empty run of ASCII digits."""
    return value.isascii() and value.isdigit()


class FieldReader:
    """Left-to-right cursor over a comma-separated payload.

    The reader never backtracks. Methods either consume characters and
    advance, or raise ``ParseError`` carrying the unconsumed input.

    Example:
        >>> reader = FieldReader("205412.00,A,A")
        >>> reader.take_field()
        '205412.00'
        >>> reader.expect_separator()
        >>> reader.remaining
        'A,A'
    """

    def __init__(self, payload: str) -> None:
        self._payload = payload
        self._position = 0

    @property
    def remaining(self) -> str:
        """The payload that has not been consumed yet."""
        return self._payload[self._position :]

    def peek(self) -> str:
        """Return the next character without consuming it, or "" at the end."""
        return self._payload[self._position : self._position + 1]

    def take(self, count: int) -> str:
        """Consume up to ``count`` characters (fewer at the end of input)."""
        text = self._payload[self._position : self._position + count]
        self._position += len(text)
        return text

    def take_digits(self) -> str:
        """Consume a (possibly empty) run of ASCII digits."""
        start = self._position
        while _is_digits(self.peek()):
            self._position += 1
        return self._payload[start : self._position]

    def take_field(self) -> str:
        """Consume everything up to, but not including, the next separator."""
        end = self._payload.find(FIELD_SEPARATOR, self._position)
        if end < 0:
            end = len(self._payload)
        return self.take(end - self._position)

    def skip_field(self) -> None:
        """Discard the rest of the current field without inspecting it."""
        self.take_field()

    def expect_separator(self) -> None:
        """Consume one field separator.

        Raises:
            ParseError: If the next character is not a separator.
        """
        if self.peek() != FIELD_SEPARATOR:
            raise ParseError("separator", self.remaining)
        self._position += 1

    def take_one_of(self, alphabet: str) -> str | None:
        """Consume one character if it belongs to ``alphabet``.

        Returns:
            The consumed character, or None (nothing consumed) when the next
            character is outside the alphabet or the input is exhausted.
        """
        character = self.peek()
        if not character or character not in alphabet:
            return None
        self._position += 1
        return character


def _parse_coordinate_magnitude(value: str, degree_digits: int) -> float | None:
    """Convert an unsigned NMEA coordinate to decimal degrees.

    NMEA coordinates use DDmm.mm (latitude) or DDDmm.mm (longitude) format:
    a fixed number of degree digits followed by decimal minutes.

        decimal_degrees = degrees + (minutes / 60)

    Args:
        value: Coordinate text (e.g., "5107.0013414")
        degree_digits: 2 for latitude, 3 for longitude

    Returns:
        Unsigned decimal degrees, or None if the text is not well-formed

    Example:
        >>> _parse_coordinate_magnitude("5107.0013414", 2)
        51.1166890...  # 51° + 7.0013414'/60
        >>> _parse_coordinate_magnitude("11402.3279144", 3)
        114.0387985...
    """
    degrees = value[:degree_digits]
    whole_minutes, _, fractional_minutes = value[degree_digits:].partition(".")

    if len(degrees) != degree_digits or not _is_digits(degrees):
        return None
    if not _is_digits(whole_minutes):
        return None
    if fractional_minutes and not _is_digits(fractional_minutes):
        return None

    minutes = float(value[degree_digits:])
    return int(degrees) + minutes / 60.0


def _decode_coordinate(
    reader: FieldReader,
    name: str,
    degree_digits: int,
    hemispheres: tuple[str, str],
) -> float:
    """Decode one ``<value>,<hemisphere>`` pair into signed decimal degrees."""
    remaining = reader.remaining
    magnitude = _parse_coordinate_magnitude(reader.take_field(), degree_digits)
    if magnitude is None:
        raise ParseError(name, remaining)

    reader.expect_separator()

    remaining = reader.remaining
    hemisphere = reader.take_field()
    if hemisphere not in hemispheres:
        raise ParseError(f"{name} hemisphere", remaining)

    if hemisphere in _NEGATIVE_HEMISPHERES:
        return -magnitude
    return magnitude


def decode_lat_lon(reader: FieldReader) -> tuple[float, float]:
    """Decode a ``DDmm.mm,H,DDDmm.mm,H`` latitude/longitude pair.

    Sign convention:
    - North/East = positive
    - South/West = negative

    The reader is left just after the longitude hemisphere letter.

    Args:
        reader: Cursor positioned at the latitude field

    Returns:
        Tuple of (latitude, longitude) in signed decimal degrees

    Raises:
        ParseError: If a coordinate is not numeric or a hemisphere letter
            is missing or wrong for its axis.

    Example:
        >>> decode_lat_lon(FieldReader("4807.038,N,01131.000,W"))
        (48.1173, -11.5166667)
    """
    latitude = _decode_coordinate(
        reader, "latitude", _LATITUDE_DEGREE_DIGITS, _LATITUDE_HEMISPHERES
    )
    reader.expect_separator()
    longitude = _decode_coordinate(
        reader, "longitude", _LONGITUDE_DEGREE_DIGITS, _LONGITUDE_HEMISPHERES
    )
    return latitude, longitude


def decode_time_of_day(reader: FieldReader) -> datetime.time:
    """Decode an ``HHMMSS[.fff]`` UTC time of day.

    Only the time token itself is consumed; anything after the fractional
    digits is left for the caller. Sub-second digits beyond milliseconds are
    truncated.

    Args:
        reader: Cursor positioned at the time field

    Returns:
        ``datetime.time`` with millisecond precision and no time zone

    Raises:
        ParseError: If the token is not six digits, or hour, minute or
            second is out of range.

    Example:
        >>> decode_time_of_day(FieldReader("205412.25,A"))
        datetime.time(20, 54, 12, 250000)
    """
    remaining = reader.remaining
    components = [reader.take(_TIME_COMPONENT_DIGITS) for _ in range(3)]
    if not all(
        len(component) == _TIME_COMPONENT_DIGITS and _is_digits(component)
        for component in components
    ):
        raise ParseError("fix time", remaining)

    hour, minute, second = (int(component) for component in components)
    if hour > 23 or minute > 59 or second > 59:
        raise ParseError("fix time", remaining)

    millisecond = 0
    if reader.peek() == ".":
        reader.take(1)
        fraction = reader.take_digits()[:_MILLISECOND_DIGITS]
        if fraction:
            millisecond = int(fraction.ljust(_MILLISECOND_DIGITS, "0"))

    return datetime.time(hour, minute, second, millisecond * 1000)
