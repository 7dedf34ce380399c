"""Renderer - turns compiled NodeTrees into live nodes.

The compiler only produces NodeTrees. A Renderer is the host capability
that creates nodes, applies classes/ids/attributes, wires event bindings
and mounts the finished roots into a container. `materialize` drives any
Renderer over a list of trees.
"""

from __future__ import annotations

import html
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Sequence

from htmlbuilder.ast.spec import NodeTree
from htmlbuilder.dom.nodes import Element, Text
from htmlbuilder.events import EventBinding, EventRegistry

log = logging.getLogger(__name__)

Decoder = Callable[[str], str]


def decode(text: str) -> str:
    """Resolve character references (`&amp;`, `&#233;`...) in `text`.

    Unknown references are left as they are.
    """
    return html.unescape(text)


class Renderer(ABC):
    """Host capability for building and attaching live nodes."""

    @abstractmethod
    def create_node(self, tag: str) -> Any:
        """Create a detached node and return its handle."""
        pass

    @abstractmethod
    def apply_class(self, handle: Any, name: str) -> None:
        pass

    @abstractmethod
    def set_id(self, handle: Any, id: str) -> None:
        pass

    @abstractmethod
    def set_attribute(self, handle: Any, name: str, value: Optional[str]) -> None:
        """Set an attribute; a value of None means a presence attribute."""
        pass

    @abstractmethod
    def append_text(self, handle: Any, text: str) -> None:
        pass

    @abstractmethod
    def add_child(self, parent: Any, child: Any) -> None:
        pass

    @abstractmethod
    def add_event_binding(self, handle: Any, binding: EventBinding) -> None:
        pass

    @abstractmethod
    def mount(self, roots: Sequence[Any], container: Any) -> None:
        """Append `roots`, in order, to `container`."""
        pass


class DomRenderer(Renderer):
    """Renderer backed by the in-memory Element/Text DOM."""

    def create_node(self, tag: str) -> Element:
        return Element(tag)

    def apply_class(self, handle: Element, name: str) -> None:
        handle.add_class(name)

    def set_id(self, handle: Element, id: str) -> None:
        handle.id = id

    def set_attribute(self, handle: Element, name: str, value: Optional[str]) -> None:
        handle.set_attribute(name, value)

    def append_text(self, handle: Element, text: str) -> None:
        handle.append_child(Text(text))

    def add_child(self, parent: Element, child: Element) -> None:
        parent.append_child(child)

    def add_event_binding(self, handle: Element, binding: EventBinding) -> None:
        handle.add_listener(binding)

    def mount(self, roots: Sequence[Element], container: Element) -> None:
        for root in roots:
            container.append_child(root)


def materialize(
    trees: Sequence[NodeTree],
    renderer: Renderer,
    registry: Optional[EventRegistry] = None,
    decoder: Optional[Decoder] = decode,
) -> List[Any]:
    """Build live nodes for each tree, without mounting them.

    Args:
        trees: Compiled trees, in output order.
        renderer: Capability that creates the nodes.
        registry: Resolves `@event` names; unknown names are skipped.
        decoder: Applied to content before it becomes a text child, or None
            to keep content verbatim.

    Returns:
        One root handle per tree.
    """

    def build(tree: NodeTree) -> Any:
        d = tree.descriptor
        handle = renderer.create_node(d.tag)
        for name in d.classes:
            renderer.apply_class(handle, name)
        if d.id:
            renderer.set_id(handle, d.id)
        for name, value in d.attributes:
            renderer.set_attribute(handle, name, value)
        if d.content:
            renderer.append_text(handle, decoder(d.content) if decoder else d.content)
        for name in d.events:
            binding = registry.lookup(name) if registry is not None else None
            if binding is None:
                log.debug("line %s: no event registered as %r", d.line, name)
                continue
            renderer.add_event_binding(handle, binding)
        for child in tree.children:
            renderer.add_child(handle, build(child))
        return handle

    return [build(tree) for tree in trees]
