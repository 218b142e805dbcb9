"""A small perfect hash from three-letter month abbreviations to month indices."""

from __future__ import annotations

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Every character that occurs in a month abbreviation, in the order that gives
# each its digit value.
_ALPHABET = "ADFJMNOSabceglnoprtuvy"
_BASE = len(_ALPHABET)


class MonthHasher:
    """Maps month abbreviations to hashes and hashes back to 0-based month indices."""

    def __init__(self) -> None:
        self._digits = {char: value for value, char in enumerate(_ALPHABET)}
        self._months = {
            self.hash(abbreviation): index
            for index, abbreviation in enumerate(MONTH_ABBREVIATIONS)
        }

    def hash(self, abbreviation: str) -> int:
        """Read the text as a base-22 number, least significant digit first.

        Characters outside the alphabet count as zero and the result is kept
        to sixteen bits.
        """
        value = 0
        multiplier = 1
        for char in abbreviation:
            value += self._digits.get(char, 0) * multiplier
            multiplier *= _BASE
        return value & 0xFFFF

    def __getitem__(self, key: int) -> int:
        """The 0-based month index for a hash; KeyError if no month has it."""
        try:
            return self._months[key]
        except KeyError:
            raise KeyError(f"no month has the hash {key!r}") from None