"""Line grammar parser.

One template line describes one node, always in this order:

    tag (.class)* (#id)? ((content))? ([attributes])? (@events)*

Only the tag is mandatory. A line without one yields a ParseFailure; every
other malformed piece (a class, attribute or event name starting with a
digit, an unterminated group, trailing text) is dropped with a warning and
parsing carries on.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from htmlbuilder.ast.spec import (
    Attribute,
    NodeDescriptor,
    ParseFailure,
    ParseResult,
    ParseSuccess,
)

log = logging.getLogger(__name__)

DEFAULT_SEPARATOR = ";"

_TAG = re.compile(r"\w+")
_NAME = re.compile(r"[\w-]*")
_EVENTS = re.compile(r"[^@]*")


class _Cursor:
    """Read position over a single line."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_space(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def match(self, pattern: re.Pattern) -> str:
        m = pattern.match(self.text, self.pos)
        if m is None:
            return ""
        self.pos = m.end()
        return m.group(0)

    def rest(self) -> str:
        return self.text[self.pos :]


def _starts_with_digit(name: str) -> bool:
    return name[:1].isdigit()


class LineParser:
    """Parses single template lines into NodeDescriptors."""

    def __init__(self, separator: str = DEFAULT_SEPARATOR):
        self.separator = separator

    def parse(self, text: str, line: Optional[int] = None) -> ParseResult:
        """Parse one trimmed, marker-stripped line.

        Args:
            text: The line text.
            line: Source line number, used in diagnostics.

        Returns:
            ParseSuccess with the descriptor, or ParseFailure if no tag.
        """
        cursor = _Cursor(text.strip())

        tag = cursor.match(_TAG)
        if not tag:
            return ParseFailure(reason="missing tag", text=text, line=line)

        descriptor = NodeDescriptor(tag=tag, line=line)
        cursor.skip_space()
        descriptor.classes = self._classes(cursor, line)
        cursor.skip_space()
        descriptor.id = self._id(cursor)
        cursor.skip_space()
        descriptor.content = self._group(cursor, "(", ")", line)
        cursor.skip_space()
        descriptor.attributes = self._attributes(cursor, line)
        cursor.skip_space()
        descriptor.events = self._events(cursor, line)
        cursor.skip_space()

        if not cursor.at_end():
            log.warning("line %s: ignoring trailing text %r", line, cursor.rest())

        return ParseSuccess(descriptor)

    def _classes(self, cursor: _Cursor, line: Optional[int]) -> List[str]:
        classes: List[str] = []
        while cursor.peek() == ".":
            cursor.pos += 1
            name = cursor.match(_NAME)
            if not name:
                continue
            if _starts_with_digit(name):
                log.warning("line %s: invalid class name %r", line, name)
                continue
            classes.append(name)
        return classes

    def _id(self, cursor: _Cursor) -> Optional[str]:
        if cursor.peek() != "#":
            return None
        cursor.pos += 1
        return cursor.match(_NAME) or None

    def _group(
        self, cursor: _Cursor, opener: str, closer: str, line: Optional[int]
    ) -> Optional[str]:
        """Text inside the balanced `opener`...`closer` pair at the cursor."""
        if cursor.peek() != opener:
            return None
        cursor.pos += 1
        start = cursor.pos
        depth = 1
        text = cursor.text
        while cursor.pos < len(text):
            ch = text[cursor.pos]
            if ch == opener:
                depth += 1
            elif ch == closer:
                depth -= 1
                if depth == 0:
                    inner = text[start : cursor.pos]
                    cursor.pos += 1
                    return inner
            cursor.pos += 1

        last = text.rfind(closer, start)
        if last == -1:
            log.warning("line %s: unterminated %r, taking rest of line", line, opener)
            return text[start:]

        log.warning("line %s: unterminated %r, closing at last %r", line, opener, closer)
        cursor.pos = last + 1
        return text[start:last]

    def _attributes(self, cursor: _Cursor, line: Optional[int]) -> List[Attribute]:
        raw = self._group(cursor, "[", "]", line)
        if raw is None:
            return []

        attributes: List[Attribute] = []
        for fragment in raw.split(self.separator):
            fragment = fragment.strip()
            if not fragment:
                continue

            value: Optional[str] = None
            if "=" in fragment:
                name, value = fragment.split("=", 1)
                name, value = name.strip(), value.strip()
            else:
                name = fragment

            if not name or _starts_with_digit(name):
                log.warning("line %s: invalid attribute name %r", line, name)
                continue
            attributes.append((name, value))
        return attributes

    def _events(self, cursor: _Cursor, line: Optional[int]) -> List[str]:
        events: List[str] = []
        while cursor.peek() == "@":
            cursor.pos += 1
            for name in cursor.match(_EVENTS).split(";"):
                name = name.strip()
                if not name:
                    continue
                if _starts_with_digit(name) or any(ch.isspace() for ch in name):
                    log.warning("line %s: invalid event name %r", line, name)
                    continue
                events.append(name)
        return events


def parse_line(
    text: str, separator: str = DEFAULT_SEPARATOR, line: Optional[int] = None
) -> ParseResult:
    """Parse one line with a throwaway LineParser."""
    return LineParser(separator).parse(text, line)
