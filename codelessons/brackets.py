"""Finding pairs of bracketed words on a line."""

from __future__ import annotations

import re

_BRACKET_PAIR = re.compile(r"\[([^\]]+)\].*\[([^\]]+)\]", re.IGNORECASE)


def find_bracket_groups(text: str) -> list[tuple[str, str, str]]:
    """For each match of a bracketed word followed later on the same line by
    another, the whole match and the contents of the first and last brackets."""
    return [match.group(0, 1, 2) for match in _BRACKET_PAIR.finditer(text)]