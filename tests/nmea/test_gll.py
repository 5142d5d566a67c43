"""Tests for GLL sentence decoding."""

import datetime
import logging

import pytest

from geofix import (
    DataStatus,
    ParseError,
    PositionMode,
    WrongSentenceHeaderError,
    decode_gll,
    parse_gll,
)

PAYLOAD = "5107.0013414,N,11402.3279144,W,205412.00,,A,A"
LATITUDE = 51.0 + 7.0013414 / 60.0
LONGITUDE = -(114.0 + 2.3279144 / 60.0)


class TestDecodeGLL:
    """Tests for decode_gll function."""

    def test_valid_autonomous(self):
        result = decode_gll("GLL", PAYLOAD)
        assert result.latitude == pytest.approx(LATITUDE)
        assert result.latitude == pytest.approx(51.1167, abs=1e-4)
        assert result.longitude == pytest.approx(LONGITUDE)
        assert result.longitude == pytest.approx(-114.0388, abs=1e-4)
        assert result.fix_time == datetime.time(20, 54, 12)
        assert result.status is DataStatus.VALID
        assert result.mode is PositionMode.AUTONOMOUS

    def test_invalid_estimated(self):
        result = decode_gll("GLL", "5107.0013414,N,11402.3279144,W,205412.00,,V,E")
        assert result.status is DataStatus.INVALID
        assert result.mode is PositionMode.ESTIMATED

    def test_without_spare_field(self):
        result = decode_gll("GLL", "5107.0014143,N,11402.3278489,W,205122.00,V,E")
        assert result.latitude == pytest.approx(51.0 + 7.0014143 / 60.0)
        assert result.longitude == pytest.approx(-(114.0 + 2.3278489 / 60.0))
        assert result.fix_time == datetime.time(20, 51, 22)
        assert result.status is DataStatus.INVALID
        assert result.mode is PositionMode.ESTIMATED

    def test_bytes_input(self):
        result = decode_gll(b"GLL", PAYLOAD.encode("ascii"))
        assert result == decode_gll("GLL", PAYLOAD)

    def test_mode_empty_after_trailing_comma(self):
        result = decode_gll("GLL", "5107.0013414,N,11402.3279144,W,205412.00,,A,")
        assert result.status is DataStatus.VALID
        assert result.mode is None

    def test_mode_field_missing(self):
        result = decode_gll("GLL", "4916.45,N,12311.12,W,225444,A")
        assert result.fix_time == datetime.time(22, 54, 44)
        assert result.mode is None

    def test_mode_not_valid_letter_is_absent(self):
        result = decode_gll("GLL", "5107.0013414,N,11402.3279144,W,205412.00,V,N")
        assert result.mode is None

    @pytest.mark.parametrize(
        ("letter", "mode"),
        [
            ("A", PositionMode.AUTONOMOUS),
            ("D", PositionMode.DIFFERENTIAL),
            ("E", PositionMode.ESTIMATED),
            ("M", PositionMode.MANUAL_INPUT),
            ("S", None),
            ("", None),
        ],
    )
    def test_mode_letters(self, letter, mode):
        result = decode_gll("GLL", f"5107.00,N,11402.32,W,205412.00,V,{letter}")
        assert result.mode is mode

    def test_status_and_mode_are_not_cross_checked(self):
        result = decode_gll("GLL", "5107.00,N,11402.32,W,205412.00,A,E")
        assert result.status is DataStatus.VALID
        assert result.mode is PositionMode.ESTIMATED
        assert result.is_consistent is False

    def test_southern_eastern_hemisphere(self):
        result = decode_gll("GLL", "3356.123,S,15112.456,E,081836.50,A,D")
        assert result.latitude == pytest.approx(-33.93538333, rel=1e-6)
        assert result.longitude == pytest.approx(151.2076, rel=1e-6)
        assert result.fix_time == datetime.time(8, 18, 36, 500000)
        assert result.mode is PositionMode.DIFFERENTIAL

    def test_trailer_after_time_is_ignored(self):
        result = decode_gll("GLL", "5107.00,N,11402.32,W,205412.25 junk!,A,A")
        assert result.fix_time == datetime.time(20, 54, 12, 250000)
        assert result.status is DataStatus.VALID

    def test_status_outside_alphabet(self):
        with pytest.raises(ParseError) as excinfo:
            decode_gll("GLL", "5107.0013414,N,11402.3279144,W,205412.00,,X,A")
        assert excinfo.value.field == "status"
        assert excinfo.value.remaining == "X,A"

    def test_status_missing(self):
        with pytest.raises(ParseError) as excinfo:
            decode_gll("GLL", "5107.0013414,N,11402.3279144,W,205412.00,")
        assert excinfo.value.field == "status"

    def test_empty_status_before_lone_letter(self):
        with pytest.raises(ParseError) as excinfo:
            decode_gll("GLL", "5107.00,N,11402.32,W,205412.00,,A")
        assert excinfo.value.field == "status"
        assert excinfo.value.remaining == ",A"

    def test_empty_status_before_mode(self):
        with pytest.raises(ParseError) as excinfo:
            decode_gll("GLL", "5107.00,N,11402.32,W,205412.00,,,A")
        assert excinfo.value.field == "status"

    def test_spare_field_before_status_without_mode(self):
        result = decode_gll("GLL", "5107.00,N,11402.32,W,205412.00,,V,")
        assert result.status is DataStatus.INVALID
        assert result.mode is None

    def test_status_followed_by_garbage(self):
        with pytest.raises(ParseError) as excinfo:
            decode_gll("GLL", "5107.00,N,11402.32,W,205412.00,AV,A")
        assert excinfo.value.field == "separator"

    def test_malformed_latitude(self):
        with pytest.raises(ParseError) as excinfo:
            decode_gll("GLL", "51x7.00,N,11402.32,W,205412.00,A,A")
        assert excinfo.value.field == "latitude"

    def test_empty_position(self):
        with pytest.raises(ParseError) as excinfo:
            decode_gll("GLL", ",,,,205412.00,V,N")
        assert excinfo.value.field == "latitude"

    def test_malformed_time(self):
        with pytest.raises(ParseError) as excinfo:
            decode_gll("GLL", "5107.00,N,11402.32,W,2054,A,A")
        assert excinfo.value.field == "fix time"

    def test_time_without_following_fields(self):
        with pytest.raises(ParseError) as excinfo:
            decode_gll("GLL", "5107.00,N,11402.32,W,205412.00")
        assert excinfo.value.field == "separator"

    def test_non_ascii_payload(self):
        with pytest.raises(ParseError) as excinfo:
            decode_gll("GLL", "5107.00,N,11402.32,W,205412.00,A,A".encode() + b"\xff")
        assert excinfo.value.field == "payload"

    @pytest.mark.parametrize("message_id", ["GLX", "gll", "GPGLL", "", b"GGA"])
    def test_wrong_identifier(self, message_id):
        with pytest.raises(WrongSentenceHeaderError) as excinfo:
            decode_gll(message_id, PAYLOAD)
        assert excinfo.value.expected == "GLL"

    def test_non_ascii_identifier(self):
        with pytest.raises(WrongSentenceHeaderError) as excinfo:
            decode_gll(b"\xc7LL", PAYLOAD)
        assert excinfo.value.expected == "GLL"
        assert excinfo.value.found == "\ufffdLL"

    def test_wrong_identifier_checked_before_payload(self):
        with pytest.raises(WrongSentenceHeaderError) as excinfo:
            decode_gll("GLX", "not a payload at all")
        assert excinfo.value.found == "GLX"


class TestParseGLL:
    """Tests for parse_gll function."""

    def test_valid_gpgll(self):
        result = parse_gll("$GPGLL,5107.0013414,N,11402.3279144,W,205412.00,A,A*73")
        assert result is not None
        assert result.latitude == pytest.approx(LATITUDE)
        assert result.longitude == pytest.approx(LONGITUDE)
        assert result.fix_time == datetime.time(20, 54, 12)
        assert result.status is DataStatus.VALID
        assert result.mode is PositionMode.AUTONOMOUS

    def test_void_gngll(self):
        result = parse_gll("$GNGLL,5107.0014143,N,11402.3278489,W,205122.00,V,E*7D")
        assert result is not None
        assert result.fix_time == datetime.time(20, 51, 22)
        assert result.status is DataStatus.INVALID
        assert result.mode is PositionMode.ESTIMATED

    def test_spare_field_sentence(self):
        result = parse_gll("$GPGLL,5107.0013414,N,11402.3279144,W,205412.00,,A,A*5F")
        assert result is not None and result.mode is PositionMode.AUTONOMOUS

    def test_pre_nmea23_sentence(self):
        result = parse_gll("$GPGLL,4916.45,N,12311.12,W,225444,A*31\r\n")
        assert result is not None
        assert result.latitude == pytest.approx(49.274167, rel=1e-6)
        assert result.longitude == pytest.approx(-123.185333, rel=1e-6)
        assert result.mode is None

    def test_invalid_checksum(self):
        assert parse_gll("$GPGLL,5107.0013414,N,11402.3279144,W,205412.00,A,A*FF") is None

    def test_wrong_sentence_type(self):
        assert parse_gll("$GPGGA,5107.0013414,N,11402.3279144,W,205412.00,A,A*75") is None

    def test_malformed_status(self):
        assert parse_gll("$GPGLL,5107.0013414,N,11402.3279144,W,205412.00,X,A*6A") is None

    def test_no_fix(self):
        assert parse_gll("$GPGLL,,,,,205412.00,V,N*4A") is None

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="geofix.nmea.gll"):
            parse_gll("$GPGLL,5107.0013414,N,11402.3279144,W,205412.00,X,A*6A")
        assert "malformed status" in caplog.text
