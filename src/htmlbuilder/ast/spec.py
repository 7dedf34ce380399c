"""AST spec - the parsed, pre-materialization shapes of a template."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

Attribute = Tuple[str, Optional[str]]


@dataclass
class NodeDescriptor:
    """One parsed template line.

    `attributes` holds (name, value) pairs; a value of None is a presence
    attribute. `events` holds names only, resolved against an EventRegistry
    when the tree is materialized.
    """

    tag: str
    classes: List[str] = field(default_factory=list)
    id: Optional[str] = None
    content: Optional[str] = None
    attributes: List[Attribute] = field(default_factory=list)
    events: List[str] = field(default_factory=list)
    line: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        if not self.tag:
            raise ValueError("NodeDescriptor requires a non-empty tag")

    def to_source(self, separator: str = ";") -> str:
        """Serialize back to a single template line (without depth markers)."""
        parts = [self.tag]
        parts.extend(f".{c}" for c in self.classes)
        if self.id:
            parts.append(f"#{self.id}")
        if self.content is not None:
            parts.append(f"({self.content})")
        if self.attributes:
            rendered = [
                name if value is None else f"{name}={value}"
                for name, value in self.attributes
            ]
            parts.append(f"[{separator.join(rendered)}]")
        if self.events:
            parts.append("@" + ";".join(self.events))
        return "".join(parts)


@dataclass
class PositionedLine:
    """A trimmed, marker-stripped line with its nesting depth."""

    text: str
    depth: int
    number: int = 0  # 1-based source line number


@dataclass
class TemplateGroup:
    """A depth-0 line plus every following line up to the next depth-0 line."""

    root: PositionedLine
    lines: List[PositionedLine] = field(default_factory=list)


@dataclass
class NodeTree:
    """A descriptor with its ordered child trees."""

    descriptor: NodeDescriptor
    children: List["NodeTree"] = field(default_factory=list)

    @property
    def tag(self) -> str:
        return self.descriptor.tag

    def depth_first(self) -> Iterator["NodeTree"]:
        """Traverse tree depth-first, yielding self then children."""
        yield self
        for child in self.children:
            yield from child.depth_first()


@dataclass
class ParseSuccess:
    descriptor: NodeDescriptor

    @property
    def ok(self) -> bool:
        return True


@dataclass
class ParseFailure:
    """A line that could not produce a descriptor."""

    reason: str
    text: str
    line: Optional[int] = None

    @property
    def ok(self) -> bool:
        return False


ParseResult = Union[ParseSuccess, ParseFailure]
