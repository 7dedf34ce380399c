"""htmlbuilder.ast - line scanning and parsing into node descriptors."""

from htmlbuilder.ast.parser import LineParser, parse_line
from htmlbuilder.ast.scanner import count_markers, scan, scan_lines
from htmlbuilder.ast.spec import (
    NodeDescriptor,
    NodeTree,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    PositionedLine,
    TemplateGroup,
)

__all__ = [
    "LineParser",
    "parse_line",
    "count_markers",
    "scan",
    "scan_lines",
    "NodeDescriptor",
    "NodeTree",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "PositionedLine",
    "TemplateGroup",
]
