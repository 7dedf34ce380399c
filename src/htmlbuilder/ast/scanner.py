"""Indentation scanner - depth is a count of leading marker characters."""

from __future__ import annotations

from typing import List

from htmlbuilder.ast.spec import PositionedLine

DEFAULT_MARKER = ">"


def count_markers(line: str, marker: str = DEFAULT_MARKER) -> int:
    """Number of leading `marker` characters in `line`."""
    depth = 0
    for ch in line:
        if ch != marker:
            break
        depth += 1
    return depth


def scan(line: str, marker: str = DEFAULT_MARKER, number: int = 0) -> PositionedLine:
    """Turn one raw template line into a PositionedLine.

    Surrounding whitespace is irrelevant: the line is trimmed, the marker run
    is counted and removed, and the remainder is trimmed again.
    """
    stripped = line.strip()
    depth = count_markers(stripped, marker)
    return PositionedLine(text=stripped[depth:].strip(), depth=depth, number=number)


def scan_lines(template: str, marker: str = DEFAULT_MARKER) -> List[PositionedLine]:
    """Scan every non-blank line of a template, keeping source line numbers."""
    lines: List[PositionedLine] = []
    for number, raw in enumerate(template.splitlines(), start=1):
        if not raw.strip():
            continue
        lines.append(scan(raw, marker, number))
    return lines
