"""htmlbuilder.dom - renderers and the in-memory DOM they build."""

from htmlbuilder.dom.nodes import Element, Text
from htmlbuilder.dom.page import render_page
from htmlbuilder.dom.renderer import DomRenderer, Renderer, decode, materialize

__all__ = [
    "Element",
    "Text",
    "DomRenderer",
    "Renderer",
    "decode",
    "materialize",
    "render_page",
]
