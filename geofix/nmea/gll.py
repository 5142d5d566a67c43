"""GLL sentence parser.

GLL (Geographic Position - Latitude/Longitude) reports the current position
together with the UTC time of the fix and a data status flag.

GLL Sentence Format:
    $GPGLL,5107.0013414,N,11402.3279144,W,205412.00,A,A*73
           |            | |             | |         | |
           |            | |             | |         | +-- Mode indicator (A/D/E/M/N, NMEA 2.3+)
           |            | |             | |         +-- Data status (A=valid, V=invalid)
           |            | |             | +-- UTC time of fix (HHMMSS.ss)
           |            | +-------------+-- Longitude + E/W
           +------------+-- Latitude + N/S

Mode Indicators:
    A = Autonomous
    D = Differential
    E = Estimated (dead reckoning)
    M = Manual input
    N = Data not valid (decoded as an absent mode)

The standard requires status 'V' for every mode except A and D. The decoder
does not enforce that; see ``GLLData.is_consistent``.
"""

import logging

from geofix.nmea.errors import NmeaError, ParseError, WrongSentenceHeaderError
from geofix.nmea.fields import (
    FIELD_SEPARATOR,
    FieldReader,
    decode_lat_lon,
    decode_time_of_day,
)
from geofix.nmea.framing import parse_nmea_sentence
from geofix.nmea.types import DataStatus, GLLData, PositionMode

logger = logging.getLogger(__name__)

SENTENCE_TAG = "GLL"

# Status is a closed alphabet; any other letter is a malformed sentence
_STATUS_LETTERS = "AV"
# Modes recognised in the mode field; anything else decodes as no mode
_MODE_LETTERS = "ADEM"


def _check_message_id(message_id: str | bytes) -> None:
    """Raise unless ``message_id`` is exactly the GLL tag."""
    if isinstance(message_id, bytes):
        if message_id != SENTENCE_TAG.encode("ascii"):
            found = message_id.decode("ascii", errors="replace")
            raise WrongSentenceHeaderError(expected=SENTENCE_TAG, found=found)
    elif message_id != SENTENCE_TAG:
        raise WrongSentenceHeaderError(expected=SENTENCE_TAG, found=message_id)


def _payload_text(payload: str | bytes) -> str:
    """Decode an ASCII payload, passing strings through unchanged."""
    if isinstance(payload, str):
        return payload
    try:
        return payload.decode("ascii")
    except UnicodeDecodeError as e:
        raise ParseError("payload", payload.decode("ascii", errors="replace")) from e


def _has_spare_field(remaining: str) -> bool:
    """True for an empty field followed by a complete status field.

    Only ``,A,`` or ``,V,`` counts: an empty field followed by a lone letter is
    a missing status, not a spare field.
    """
    return (
        remaining[:1] == FIELD_SEPARATOR
        and len(remaining) > 2
        and remaining[1] in _STATUS_LETTERS
        and remaining[2] == FIELD_SEPARATOR
    )


def _decode_body(reader: FieldReader) -> GLLData:
    """Decode the GLL payload fields in order.

    Field order:
        latitude,N/S,longitude,E/W -> latitude, longitude
        HHMMSS[.ss]                -> fix_time
        <trailer>                  -> skipped (rest of the time field)
        [empty spare field]        -> skipped
        A/V                        -> status
        A/D/E/M                    -> mode (optional)
    """
    latitude, longitude = decode_lat_lon(reader)
    reader.expect_separator()
    fix_time = decode_time_of_day(reader)
    reader.skip_field()  # decimal trailer ignored
    reader.expect_separator()
    # Some receivers emit an empty spare field before the status
    if _has_spare_field(reader.remaining):
        reader.expect_separator()

    remaining = reader.remaining
    status_letter = reader.take_one_of(_STATUS_LETTERS)
    if status_letter is None:
        raise ParseError("status", remaining)
    # Receivers older than NMEA 2.3 end the sentence after the status
    if reader.peek():
        reader.expect_separator()

    mode_letter = reader.take_one_of(_MODE_LETTERS)

    return GLLData(
        latitude=latitude,
        longitude=longitude,
        fix_time=fix_time,
        status=DataStatus.from_char(status_letter),
        mode=PositionMode.from_char(mode_letter) if mode_letter else None,
    )


def decode_gll(message_id: str | bytes, payload: str | bytes) -> GLLData:
    """Decode the payload of a framed GLL sentence.

    This is a pure function: it reads nothing but its arguments and returns
    a new immutable record.

    Args:
        message_id: Sentence identifier without talker ID (must be "GLL")
        payload: Comma-separated data after the address field, without the
            ``*hh`` checksum

    Returns:
        GLLData with every field populated (``mode`` may be None)

    Raises:
        WrongSentenceHeaderError: If ``message_id`` is not exactly "GLL".
            Checked before the payload is looked at.
        ParseError: If a field is malformed. ``error.field`` names the
            first failing field; no partial record is produced.

    Example:
        >>> gll = decode_gll("GLL", "5107.0013414,N,11402.3279144,W,205412.00,A,A")
        >>> gll.longitude
        -114.0387985...
        >>> gll.mode
        <PositionMode.AUTONOMOUS: 'A'>
    """
    _check_message_id(message_id)
    return _decode_body(FieldReader(_payload_text(payload)))


def parse_gll(sentence: str) -> GLLData | None:
    """Parse a raw GLL sentence into structured data.

    It performs:
    1. Whitespace stripping (handles \\r\\n line endings)
    2. Framing into talker ID, message ID and payload
    3. Checksum validation
    4. Field decoding via ``decode_gll``

    Args:
        sentence: Raw NMEA GLL sentence string

    Returns:
        GLLData object if parsing succeeds, or None if:
        - Checksum is invalid
        - The line is not a framed NMEA sentence
        - Message type is not GLL
        - Any field is malformed

    Note:
        A returned GLLData with status INVALID is a successfully parsed
        sentence that carries no usable fix. This is different from
        returning None, which indicates a malformed sentence.

    Example:
        >>> result = parse_gll("$GNGLL,5107.0014143,N,11402.3278489,W,205122.00,V,E*7D")
        >>> result.status
        <DataStatus.INVALID: 'V'>
    """
    sentence = sentence.strip()

    try:
        framed = parse_nmea_sentence(sentence)
        if framed.calculate_checksum() != framed.checksum:
            logger.debug("Rejected GLL sentence with bad checksum: %r", sentence)
            return None
        return decode_gll(framed.message_id, framed.data)
    except NmeaError as e:
        logger.debug("Rejected GLL sentence %r: %s", sentence, e)
        return None
