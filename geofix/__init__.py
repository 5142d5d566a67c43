"""Geofix package for decoding NMEA geographic position reports."""

from geofix.nmea import (
    DataStatus,
    FramingError,
    GLLData,
    NmeaError,
    NmeaSentence,
    ParseError,
    PositionMode,
    WrongSentenceHeaderError,
    calculate_checksum,
    decode_gll,
    parse_gll,
    parse_nmea_sentence,
    validate_checksum,
)

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
