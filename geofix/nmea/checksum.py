"""NMEA checksum calculation.

NMEA 0183 sentences carry an XOR checksum over every character between '$'
and '*' (exclusive), transmitted as two hex digits after the '*':

    $GPGLL,5107.0013414,N,11402.3279144,W,205412.00,A,A*73
     |<------------------ checksummed ------------------>|

Splitting a line into content and transmitted checksum is the framer's job
(``geofix.nmea.framing``); this module only knows the arithmetic.
"""

from functools import reduce
from operator import xor


def calculate_checksum(content: str) -> int:
    """XOR the code points of ``content`` into a single byte value.

    Example:
        >>> hex(calculate_checksum("GPGLL,5107.0013414,N,11402.3279144,W,205412.00,A,A"))
        '0x73'
    """
    return reduce(xor, map(ord, content), 0)
