"""NMEA 0183 framing and GLL sentence decoding."""

from geofix.nmea.checksum import calculate_checksum
from geofix.nmea.errors import (
    FramingError,
    NmeaError,
    ParseError,
    WrongSentenceHeaderError,
)
from geofix.nmea.framing import parse_nmea_sentence, validate_checksum
from geofix.nmea.gll import decode_gll, parse_gll
from geofix.nmea.types import DataStatus, GLLData, NmeaSentence, PositionMode

__all__ = [
    "DataStatus",
    "FramingError",
    "GLLData",
    "NmeaError",
    "NmeaSentence",
    "ParseError",
    "PositionMode",
    "WrongSentenceHeaderError",
    "calculate_checksum",
    "decode_gll",
    "parse_gll",
    "parse_nmea_sentence",
    "validate_checksum",
]
