"""Reading 'key=value' lines from text and files."""

from __future__ import annotations

import sys
import warnings
from typing import Optional, Sequence

DEFAULT_PATH = "load_me.txt"


class MalformedLineError(ValueError):
    """Raised when a line holds no '=' between its key and its value."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(
            f"line {line_number}: every key and value pair must be delimited "
            f"by an '=' token: {line!r}"
        )
        self.line_number = line_number
        self.line = line


def _split_pair(line: str) -> Optional[tuple[str, str]]:
    key, separator, value = line.partition("=")
    if not separator:
        return None
    return key, value


def parse_pairs(text: str) -> list[tuple[str, str]]:
    """The (key, value) pairs of every newline-terminated line, in order.

    The key runs up to the first '=' and the value is the rest of the line.
    Text after the last newline is ignored. A line without '=' raises
    MalformedLineError.
    """
    lines = text.split("\n")[:-1]
    pairs = []
    for number, line in enumerate(lines, start=1):
        pair = _split_pair(line)
        if pair is None:
            raise MalformedLineError(number, line)
        pairs.append(pair)
    return pairs


def parse_config(text: str) -> dict[str, str]:
    """A mapping of every well-formed line's key to its value, sorted by key.

    A later line overrides an earlier one with the same key. Lines without
    '=' are skipped with a warning.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    config: dict[str, str] = {}
    for number, line in enumerate(lines, start=1):
        pair = _split_pair(line)
        if pair is None:
            warnings.warn(
                f'Malformed line in configuration file on line {number}: "{line}"',
                stacklevel=2,
            )
            continue
        key, value = pair
        config[key] = value
    return dict(sorted(config.items()))


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as stream:
        return stream.read()


def load_pairs(path: str) -> list[tuple[str, str]]:
    """Read a file and return the pairs parse_pairs finds in it."""
    return parse_pairs(_read_text(path))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_PATH
    try:
        contents = _read_text(path)
    except OSError:
        print(f'Error: Couldn\'t load the file: "{path}"', file=sys.stderr)
        return 1
    print(f"Here's the file's contents:\n{contents}\n")
    try:
        pairs = parse_pairs(contents)
    except MalformedLineError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    for key, value in pairs:
        print(f'"{key}" => "{value}"')
    return 0