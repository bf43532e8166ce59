"""
Three-byte inputs that walk every partial-group alignment.

Each input is [left, 0xFF, right]: the middle byte is all ones, and the masks
on either side slide the run of set bits from 8 down to 0 (left-aligned) and
back up to 7 (right-aligned), so 5-bit and 6-bit groupings see every split.
"""
from typing import Iterator

EDGE_MASKS = (
    0b1111_1111,
    0b0111_1111,
    0b0011_1111,
    0b0001_1111,
    0b0000_1111,
    0b0000_0111,
    0b0000_0011,
    0b0000_0001,
    0b0000_0000,
    0b1000_0000,
    0b1100_0000,
    0b1110_0000,
    0b1111_0000,
    0b1111_1000,
    0b1111_1100,
    0b1111_1110,
)

MIDDLE = 0b1111_1111


def edge_cases() -> Iterator[bytes]:
    for left in EDGE_MASKS:
        for right in EDGE_MASKS:
            yield bytes([left, MIDDLE, right])
