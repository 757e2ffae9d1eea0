"""Reading puzzle input files."""

from __future__ import annotations

import os


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a UTF-8 text file and return its lines without line endings.

    Lines end at ``\\n``; a ``\\r`` immediately before it is dropped too.
    A final line ending does not produce an extra empty line.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]