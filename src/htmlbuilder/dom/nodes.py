"""In-memory DOM - the live nodes DomRenderer produces."""

from __future__ import annotations

import html
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from htmlbuilder.events import EventBinding

VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "source", "track", "wbr",
    }
)


@dataclass
class Text:
    """A text child."""

    data: str

    def to_html(self) -> str:
        return html.escape(self.data, quote=False)


@dataclass
class Element:
    """An element with classes, id, attributes, children and listeners."""

    tag: str
    id: Optional[str] = None
    class_list: List[str] = field(default_factory=list)
    attributes: Dict[str, Optional[str]] = field(default_factory=dict)
    children: List[Union["Element", Text]] = field(default_factory=list)
    listeners: List[EventBinding] = field(default_factory=list)
    parent: Optional["Element"] = field(default=None, repr=False, compare=False)

    def add_class(self, name: str) -> None:
        """Add a class once; repeats are no-ops."""
        if name not in self.class_list:
            self.class_list.append(name)

    def set_attribute(self, name: str, value: Optional[str]) -> None:
        if name == "id":
            self.id = value or None
        elif name == "class":
            self.class_list = []
            for c in (value or "").split():
                self.add_class(c)
        else:
            self.attributes[name] = value

    def append_child(self, child: Union["Element", Text]) -> None:
        if isinstance(child, Element):
            child.parent = self
        self.children.append(child)

    def add_listener(self, binding: EventBinding) -> None:
        self.listeners.append(binding)

    def dispatch(self, trigger_type: str, event: Any = None) -> int:
        """Call every listener bound to `trigger_type`, in binding order.

        Listeners registered with options {"once": True} are removed after
        their first call.

        Returns:
            The number of callbacks invoked.
        """
        called = 0
        for binding in list(self.listeners):
            if binding.trigger_type != trigger_type:
                continue
            if binding.options.get("once"):
                self.listeners.remove(binding)
            binding.callback(event)
            called += 1
        return called

    @property
    def text_content(self) -> str:
        return "".join(
            c.data if isinstance(c, Text) else c.text_content for c in self.children
        )

    def iter(self) -> Iterator["Element"]:
        """Traverse elements depth-first, yielding self first."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter()

    def find_by_id(self, id: str) -> Optional["Element"]:
        for element in self.iter():
            if element.id == id:
                return element
        return None

    def to_html(self) -> str:
        parts = [self.tag]
        if self.id:
            parts.append(f'id="{html.escape(self.id)}"')
        if self.class_list:
            parts.append(f'class="{html.escape(" ".join(self.class_list))}"')
        for name, value in self.attributes.items():
            if value is None:
                parts.append(name)
            else:
                parts.append(f'{name}="{html.escape(value)}"')
        open_tag = f"<{' '.join(parts)}>"

        if self.tag.lower() in VOID_ELEMENTS and not self.children:
            return open_tag
        inner = "".join(child.to_html() for child in self.children)
        return f"{open_tag}{inner}</{self.tag}>"

    def inner_html(self) -> str:
        return "".join(child.to_html() for child in self.children)
