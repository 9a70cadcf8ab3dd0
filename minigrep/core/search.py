"""
Search Engine

Pure functions over an in-memory string. Both variants share iter_lines so
switching case sensitivity never changes which lines exist or how they are
numbered, only which of them match.
"""
from typing import Iterator

from .domain import Match


def iter_lines(contents: str) -> Iterator[tuple[int, str]]:
    """Yield (line_number, line) pairs, numbered from 1.

    Lines are split on "\\n" only. A trailing "\\r" is stripped from each line,
    and a final newline does not produce an extra empty line.
    """
    if not contents:
        return

    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()

    for i, line in enumerate(lines, 1):
        if line.endswith("\r"):
            line = line[:-1]
        yield i, line


def search(query: str, contents: str) -> list[Match]:
    """Case-sensitive literal substring search"""
    return [
        Match(line_number=i, line=line)
        for i, line in iter_lines(contents)
        if query in line
    ]


def search_case_insensitive(query: str, contents: str) -> list[Match]:
    """Case-insensitive literal substring search.

    Uses str.lower() on both sides. Full Unicode case folding is not applied,
    so e.g. "ß" does not match "SS".
    """
    query = query.lower()
    return [
        Match(line_number=i, line=line)
        for i, line in iter_lines(contents)
        if query in line.lower()
    ]
