"""Damage-per-second summaries of fights read from a game combat log."""

from __future__ import annotations

import re
import sys
import time
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Sequence

from codelessons.monthhash import MonthHasher

_STAMP = r"\[\w+ (\w+) (\d+) (\d{2}):(\d{2}):(\d{2}) (\d{4})\] "
_FLAGS = re.IGNORECASE | re.ASCII

_DPS_RE = re.compile(
    _STAMP + r"(\w+) (\w+) [^\d]+(\d+) points of(?: non-melee)? damage.", _FLAGS
)
_SLAY_RE = re.compile(_STAMP + r"(\w+) (?:have|has) slain .*!", _FLAGS)
_ZONE_RE = re.compile(_STAMP + r"LOADING, PLEASE WAIT\.\.\.", _FLAGS)


def create_date_time(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> int:
    """Seconds since the epoch for a local date and time (month counted from 1)."""
    return int(time.mktime((year, month, day, hour, minute, second, 0, 0, -1)))


class Pumper:
    """One actor in a fight and the damage it has done by each method."""

    def __init__(self, actor: str, timestamp: int) -> None:
        self.actor = actor
        self.timestamp = timestamp
        self.damage: dict[str, int] = {}

    def add_damage(self, method: str, damage: int) -> None:
        self.damage[method] = self.damage.get(method, 0) + damage

    def __repr__(self) -> str:
        return f"Pumper({self.actor!r}, {self.timestamp!r}, damage={self.damage!r})"


@dataclass
class Fight:
    """A fight from its first damage line to a kill or a zone change."""

    start: int
    end: int
    pumpers: dict[str, Pumper] = field(default_factory=dict)

    @property
    def elapsed_seconds(self) -> float:
        return float(self.end - self.start)


def _timestamp(match: re.Match, hasher: MonthHasher) -> Optional[int]:
    try:
        month = hasher[hasher.hash(match.group(1).capitalize())] + 1
    except KeyError:
        return None
    day, hour, minute, second, year = (int(match.group(i)) for i in range(2, 7))
    return create_date_time(year, month, day, hour, minute, second)


def parse_dps_line(
    line: str, hasher: MonthHasher, pumpers: dict[str, Pumper]
) -> Optional[int]:
    """Record a damage line in pumpers and return its timestamp, or None if it
    is not a damage line."""
    match = _DPS_RE.fullmatch(line)
    if match is None:
        return None
    timestamp = _timestamp(match, hasher)
    if timestamp is None:
        return None
    actor, method, damage = match.group(7), match.group(8), int(match.group(9))
    pumper = pumpers.setdefault(actor, Pumper(actor, timestamp))
    pumper.add_damage(method, damage)
    return timestamp


def parse_combat_end(line: str, hasher: MonthHasher) -> Optional[int]:
    """The timestamp of a kill or zone-change line, or None for any other line."""
    match = _SLAY_RE.fullmatch(line) or _ZONE_RE.fullmatch(line)
    if match is None:
        return None
    return _timestamp(match, hasher)


def _strip_line_end(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line and line[-1] in "\r\n":
        line = line[:-1]
    return line


def parse_log(lines: Iterable[str]) -> Iterator[Fight]:
    """Yield each fight in the log as soon as its end is seen."""
    hasher = MonthHasher()
    pumpers: dict[str, Pumper] = {}
    in_combat = False
    start = 0
    for raw in lines:
        line = _strip_line_end(raw)
        if in_combat:
            end = parse_combat_end(line, hasher)
            if end is not None:
                yield Fight(start, end, pumpers)
                pumpers = {}
                in_combat = False
                continue
        timestamp = parse_dps_line(line, hasher, pumpers)
        if timestamp is not None:
            if not in_combat:
                start = timestamp
            in_combat = True


def format_fight(fight: Fight) -> str:
    """The report printed for a finished fight."""
    elapsed = fight.elapsed_seconds
    lines = [f"Elapsed seconds: {elapsed:.0f}"]
    seconds = elapsed or 1.0
    for actor in sorted(fight.pumpers):
        damage = fight.pumpers[actor].damage
        lines.append(f'Pumper actor: "{actor}" damaged with {len(damage)} methods.')
        for method, amount in damage.items():
            lines.append(
                f"{actor} {method} for {amount} points of damage "
                f"({amount / seconds:.1f} DPS over {seconds:.0f} seconds)."
            )
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(
            "Error: expects one argument (the path to the file to parse).",
            file=sys.stderr,
        )
        return 1
    path = args[0]
    print("This is only a test.")
    try:
        with open(path, "rb") as stream:
            decoded = (raw.decode("utf-8", "replace") for raw in stream)
            for fight in parse_log(decoded):
                print("Combat end detected.")
                sys.stdout.write(format_fight(fight))
    except OSError:
        print(f'Couldn\'t open "{path}"', file=sys.stderr)
        return 1
    return 0