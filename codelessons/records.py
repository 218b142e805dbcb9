"""Simple records: contact details, compact dates and a character shift."""

from __future__ import annotations

from dataclasses import dataclass

NAME_LIMIT = 19
ADDRESS_LIMIT = 99
PHONE_NUMBER_LIMIT = 13


@dataclass(frozen=True)
class Record:
    """A contact with bounded-length name, address and phone number."""

    name: str
    address: str
    phone_number: str

    def __post_init__(self) -> None:
        for field_name, limit in (
            ("name", NAME_LIMIT),
            ("address", ADDRESS_LIMIT),
            ("phone_number", PHONE_NUMBER_LIMIT),
        ):
            value = getattr(self, field_name)
            if len(value) > limit:
                raise ValueError(
                    f"{field_name} is {len(value)} characters long; "
                    f"at most {limit} are allowed"
                )

    def __str__(self) -> str:
        return (
            f'Name: "{self.name}"\n'
            f'Address: "{self.address}"\n'
            f'Phone number: "{self.phone_number}"'
        )


@dataclass(frozen=True)
class Date:
    """A date stored in a 32-bit year, a 4-bit month and a 5-bit day.

    Values are cut down to their field widths as they are stored.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "year", self.year & 0xFFFFFFFF)
        object.__setattr__(self, "month", self.month & 0x0F)
        object.__setattr__(self, "day", self.day & 0x1F)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def shift_characters(text: str, amount: int) -> str:
    """Move every character of text by amount code points."""
    return "".join(chr(ord(char) + amount) for char in text)