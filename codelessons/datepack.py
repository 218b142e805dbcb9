"""Packing a date and time into five bytes of bit fields."""

from __future__ import annotations

from dataclasses import dataclass

# (field, bit width), from the lowest bit of the little-endian 40-bit value upwards.
_LAYOUT = (
    ("year", 14),
    ("month", 4),
    ("day", 5),
    ("hour", 5),
    ("minute", 6),
    ("second", 6),
)
PACKED_SIZE = 5


@dataclass(frozen=True)
class DateTime:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    def __str__(self) -> str:
        return (
            f"{self.year:04}-{self.month:02}-{self.day:02} "
            f"{self.hour:02}:{self.minute:02}:{self.second:02}"
        )


def pack_date_time(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> bytes:
    """Pack the fields into five bytes; bits beyond each field's width are dropped."""
    value = 0
    shift = 0
    for (_, width), field in zip(_LAYOUT, (year, month, day, hour, minute, second)):
        value |= (field & ((1 << width) - 1)) << shift
        shift += width
    return value.to_bytes(PACKED_SIZE, "little")


def unpack_date_time(data: bytes) -> DateTime:
    """Read back the fields written by pack_date_time."""
    data = bytes(data)
    if len(data) != PACKED_SIZE:
        raise ValueError(f"expected {PACKED_SIZE} bytes, got {len(data)}")
    value = int.from_bytes(data, "little")
    fields = {}
    for name, width in _LAYOUT:
        fields[name] = value & ((1 << width) - 1)
        value >>= width
    return DateTime(**fields)