"""A fixed-size grid of bits with a four-way flood fill."""

from __future__ import annotations

from typing import Iterable, Sequence


class BitGrid:
    """A width by height grid of bits packed eight to a byte, low bit first."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must not be negative")
        self._width = width
        self._height = height
        self._bits = bytearray((width * height + 7) // 8)

    @classmethod
    def from_rows(cls, rows: Iterable[int], width: int) -> "BitGrid":
        """Build a grid from row values whose most significant bit is column 0."""
        rows = list(rows)
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x in range(width):
                if (row >> (width - 1 - x)) & 1:
                    grid.set(x, y)
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _locate(self, x: int, y: int) -> tuple[int, int]:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"({x}, {y}) is outside a {self._width}x{self._height} grid")
        offset = x + y * self._width
        return offset >> 3, 1 << (offset & 7)

    def set(self, x: int, y: int) -> None:
        index, mask = self._locate(x, y)
        self._bits[index] |= mask

    def clear(self, x: int, y: int) -> None:
        index, mask = self._locate(x, y)
        self._bits[index] &= ~mask & 0xFF

    def get(self, x: int, y: int) -> int:
        index, mask = self._locate(x, y)
        return 1 if self._bits[index] & mask else 0

    def _put(self, x: int, y: int, value: int) -> None:
        if value:
            self.set(x, y)
        else:
            self.clear(x, y)

    def flood_fill(self, x: int, y: int, value: int) -> None:
        """Fill the four-connected region around (x, y) with value (0 or 1)."""
        value = 1 if value else 0
        if self.get(x, y) == value:
            return
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            if self.get(cx, cy) == value:
                continue
            self._put(cx, cy, value)
            neighbours: Sequence[tuple[int, int]] = (
                (cx - 1, cy),
                (cx + 1, cy),
                (cx, cy - 1),
                (cx, cy + 1),
            )
            for nx, ny in neighbours:
                if 0 <= nx < self._width and 0 <= ny < self._height:
                    if self.get(nx, ny) != value:
                        stack.append((nx, ny))

    def render(self) -> str:
        """The grid as lines of '0' and '1' characters, one line per row."""
        return "".join(
            "".join("1" if self.get(x, y) else "0" for x in range(self._width)) + "\n"
            for y in range(self._height)
        )

    def to_bytes(self) -> bytes:
        """The packed storage, bit (x + y * width) counted from the low bit."""
        return bytes(self._bits)