"""Removal of '//' line comments from text."""

from __future__ import annotations


def _remove_comments(text: str) -> tuple[list[int], str]:
    offsets: list[int] = []
    position = 0
    while (position := text.find("//", position)) != -1:
        offsets.append(position)
        line_end = text.find("\n", position + 2)
        if line_end == -1:
            text = text[:position]
            break
        while line_end < len(text) and text[line_end] in "\r\n":
            line_end += 1
        text = text[:position] + text[line_end:]
    return offsets, text


def comment_offsets(text: str) -> list[int]:
    """Offsets at which comments are found, each measured in the text as it
    stands after the comments before it have been removed."""
    return _remove_comments(text)[0]


def strip_line_comments(text: str) -> str:
    """Remove every '//' comment together with the line breaks that follow it."""
    return _remove_comments(text)[1]