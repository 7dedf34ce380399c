"""htmlbuilder - compile a line-oriented markup notation into element trees.

    div.box
    >h1(Title)
    >div.menu
    >>ul
    >>>li(Item 1)

Each line is one node; the leading `>` count is its depth.
"""

from htmlbuilder._version import __version__
from htmlbuilder.ast import LineParser, NodeDescriptor, NodeTree, parse_line
from htmlbuilder.compiler import Compiler, compile_template
from htmlbuilder.config import BuilderConfig
from htmlbuilder.dom import DomRenderer, Element, Renderer, Text, render_page
from htmlbuilder.events import EventBinding, EventRegistry
from htmlbuilder.exceptions import (
    ConfigError,
    HtmlBuilderError,
    MissingFieldError,
    TemplateSyntaxError,
)

__all__ = [
    "__version__",
    # compiler
    "Compiler",
    "compile_template",
    "BuilderConfig",
    # ast
    "LineParser",
    "NodeDescriptor",
    "NodeTree",
    "parse_line",
    # rendering
    "DomRenderer",
    "Element",
    "Renderer",
    "Text",
    "render_page",
    # events
    "EventBinding",
    "EventRegistry",
    # errors
    "ConfigError",
    "HtmlBuilderError",
    "MissingFieldError",
    "TemplateSyntaxError",
]
