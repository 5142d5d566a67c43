"""Sentence framing: split a raw NMEA line into address, payload and checksum.

Sentence layout:
    $GPGLL,5107.0013414,N,11402.3279144,W,205412.00,A,A*73
     |    |                                            |
     |    +-- data (comma-separated payload)            +-- checksum (hex)
     +-- address: talker ID ("GP") + message ID ("GLL")

``parse_nmea_sentence`` only frames; ``validate_checksum`` frames and then
compares the transmitted checksum with the recomputed one.
"""

from geofix.nmea.errors import FramingError
from geofix.nmea.types import NmeaSentence

_START_DELIMITER = "$"
_CHECKSUM_DELIMITER = "*"
_CHECKSUM_DIGITS = 2
_TALKER_ID_LENGTH = 2
_MESSAGE_ID_LENGTH = 3


def _split_frame(sentence: str) -> tuple[str, int]:
    """Return the checksummed content and the transmitted checksum value."""
    if not sentence.startswith(_START_DELIMITER) or _CHECKSUM_DELIMITER not in sentence:
        raise FramingError(f"not a $...*hh sentence: {sentence!r}")

    content, _, trailer = sentence[1:].partition(_CHECKSUM_DELIMITER)
    checksum_text = trailer[:_CHECKSUM_DIGITS]
    if len(checksum_text) != _CHECKSUM_DIGITS:
        raise FramingError(f"truncated checksum: {checksum_text!r}")

    try:
        return content, int(checksum_text, 16)
    except ValueError as e:
        raise FramingError(f"checksum is not hexadecimal: {checksum_text!r}") from e


def parse_nmea_sentence(sentence: str) -> NmeaSentence:
    """Frame a raw NMEA line.

    Args:
        sentence: Raw sentence; surrounding whitespace and the trailing
            ``\\r\\n`` are ignored.

    Returns:
        The framed ``NmeaSentence``. The checksum is not verified.

    Raises:
        FramingError: If delimiters are missing, the checksum is truncated
            or not hexadecimal, or the address is not a 2-letter talker ID
            followed by a 3-letter message ID and a comma.

    Example:
        >>> s = parse_nmea_sentence("$GPGLL,5107.0013414,N,11402.3279144,W,205412.00,A,A*73")
        >>> s.talker_id, s.message_id, s.checksum
        ('GP', 'GLL', 115)
    """
    content, checksum = _split_frame(sentence.strip())

    address, separator, data = content.partition(",")
    if not separator or len(address) != _TALKER_ID_LENGTH + _MESSAGE_ID_LENGTH:
        raise FramingError(f"malformed address field: {address!r}")

    return NmeaSentence(
        talker_id=address[:_TALKER_ID_LENGTH],
        message_id=address[_TALKER_ID_LENGTH:],
        data=data,
        checksum=checksum,
    )


def validate_checksum(sentence: str) -> bool:
    """Check that a raw line is a framed sentence with a matching checksum.

    Returns:
        False for lines that do not frame (see ``parse_nmea_sentence``) or
        whose transmitted checksum differs from the recomputed one.
    """
    try:
        framed = parse_nmea_sentence(sentence)
    except FramingError:
        return False
    return framed.calculate_checksum() == framed.checksum
