"""NMEA data types for parsed sentences.

This module defines the record and the two closed enumerations produced by
the GLL decoder.

Design Decisions:
    1. Closed enums keyed by the protocol letter: ``DataStatus("A")`` and
       ``PositionMode("D")`` work directly, and ``member.value`` gives the
       letter back for logging or re-encoding.

    2. Two conversion policies on purpose. ``from_char`` is tolerant on both
       enums (unknown letters degrade to ``INVALID`` / ``DATA_NOT_VALID``),
       while the decoder itself decides which letters it accepts before
       converting. Status fails hard outside ``{A, V}``; mode degrades to
       ``None`` outside ``{A, D, E, M}``.

    3. Frozen dataclasses: a decoded record is a value. It never shares state
       with the input line or with other records.
"""

import datetime
from dataclasses import dataclass
from enum import Enum

from geofix.nmea.checksum import calculate_checksum


class DataStatus(Enum):
    """GLL data status field.

    Quote from the NMEA standard: "The Status field shall be set to
    'V' = Invalid for all values of Indicator mode except for
    A = Autonomous and D = Differential."
    """

    VALID = "A"
    INVALID = "V"

    @classmethod
    def from_char(cls, character: str) -> "DataStatus":
        """Map a status letter, treating anything but ``"A"`` as invalid."""
        if character == cls.VALID.value:
            return cls.VALID
        return cls.INVALID


class PositionMode(Enum):
    """Positioning system mode indicator (present from NMEA 2.3).

    ``DATA_NOT_VALID`` is never produced by ``decode_gll``, which reports an
    'N' mode as ``None``. It exists so ``from_char`` can map every letter a
    receiver may send, for callers that read the mode field themselves.
    """

    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    ESTIMATED = "E"
    MANUAL_INPUT = "M"
    DATA_NOT_VALID = "N"

    @classmethod
    def from_char(cls, character: str) -> "PositionMode":
        """Map a mode letter; unknown letters become ``DATA_NOT_VALID``."""
        try:
            return cls(character)
        except ValueError:
            return cls.DATA_NOT_VALID


# Modes for which the standard allows status 'A'
_MODES_ALLOWING_VALID_STATUS = (PositionMode.AUTONOMOUS, PositionMode.DIFFERENTIAL)


@dataclass(frozen=True)
class NmeaSentence:
    """One framed sentence: ``$<talker_id><message_id>,<data>*<checksum>``.

    Attributes:
        talker_id: Two-letter source prefix (e.g. ``"GP"``, ``"GN"``).
        message_id: Sentence type identifier (e.g. ``"GLL"``).
        data: Comma-separated payload after the address field, without the
            checksum delimiter.
        checksum: Checksum transmitted after ``*``, as an integer (0-255).
    """

    talker_id: str
    message_id: str
    data: str
    checksum: int

    def calculate_checksum(self) -> int:
        """Recompute the XOR checksum over the framed content."""
        return calculate_checksum(f"{self.talker_id}{self.message_id},{self.data}")


@dataclass(frozen=True)
class GLLData:
    """Parsed GLL (Geographic Position - Latitude/Longitude) sentence.

    Attributes:
        latitude: Latitude in decimal degrees, positive=North.
            Converted from NMEA's DDmm.mm format.

        longitude: Longitude in decimal degrees, positive=East.
            Converted from NMEA's DDDmm.mm format.

        fix_time: UTC time of the position fix, millisecond precision,
            no date component.

        status: ``DataStatus.VALID`` for 'A', ``DataStatus.INVALID`` for 'V'.

        mode: Mode indicator, or None when the field is missing (receivers
            older than NMEA 2.3) or carries a letter outside A/D/E/M.

    Note:
        The decoder does not cross-check ``status`` against ``mode``; use
        ``is_consistent`` to apply the standard's rule.

    Example:
        >>> gll = decode_gll("GLL", "5107.0013414,N,11402.3279144,W,205412.00,A,A")
        >>> gll.latitude
        51.1166...
        >>> gll.status
        <DataStatus.VALID: 'A'>
    """

    latitude: float
    longitude: float
    fix_time: datetime.time
    status: DataStatus
    mode: PositionMode | None

    @property
    def is_consistent(self) -> bool:
        """True unless status is 'A' while the mode forbids a valid status."""
        if self.status is DataStatus.INVALID or self.mode is None:
            return True
        return self.mode in _MODES_ALLOWING_VALID_STATUS
