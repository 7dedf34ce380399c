"""Compiler - turns template text into NodeTrees and, optionally, live nodes."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from htmlbuilder.ast.parser import LineParser
from htmlbuilder.ast.scanner import scan_lines
from htmlbuilder.ast.spec import NodeDescriptor, NodeTree, ParseFailure, PositionedLine
from htmlbuilder.compiler.assembler import assemble
from htmlbuilder.compiler.segmenter import segment
from htmlbuilder.config import BuilderConfig
from htmlbuilder.dom.nodes import Element
from htmlbuilder.dom.renderer import DomRenderer, Renderer, decode, materialize
from htmlbuilder.events import EventRegistry
from htmlbuilder.exceptions import TemplateSyntaxError

log = logging.getLogger(__name__)


class Compiler:
    """Compiles templates against one config and one event registry.

    The registry is shared by every template compiled here and may be
    filled before or after compilation; event names are only resolved
    when trees are materialized.
    """

    def __init__(
        self,
        config: Optional[BuilderConfig] = None,
        registry: Optional[EventRegistry] = None,
    ):
        self.config = config.model_copy() if config is not None else BuilderConfig()
        self.registry = registry if registry is not None else EventRegistry()

    def set_attribute_separator(self, separator: str) -> None:
        """Change the attribute separator for subsequent compilations."""
        self.config.attribute_separator = separator

    def compile(self, template: str) -> List[NodeTree]:
        """Compile template text into one NodeTree per depth-0 line.

        An empty or blank template gives an empty list.

        Raises:
            TemplateSyntaxError: a line has no tag. The whole template is
                rejected.
        """
        parser = LineParser(self.config.attribute_separator)
        lines = scan_lines(template, self.config.marker)

        # every line is parsed, orphans included, before any tree is built
        descriptors: Dict[int, NodeDescriptor] = {
            line.number: self._parse(parser, line) for line in lines
        }

        trees: List[NodeTree] = []
        for group in segment(lines):
            root = descriptors[group.root.number]
            children = [(descriptors[line.number], line.depth) for line in group.lines]
            trees.append(assemble(root, children))

        log.debug("compiled %d tree(s)", len(trees))
        return trees

    def generate(
        self,
        template: str,
        renderer: Optional[Renderer] = None,
        container: Any = None,
    ) -> List[Any]:
        """Compile, materialize and mount a template.

        Args:
            template: Template text.
            renderer: Host renderer; defaults to a DomRenderer.
            container: Where roots are appended; defaults to a new Element
                named by `config.container`.

        Returns:
            The mounted root handles, in template order.
        """
        renderer = renderer or DomRenderer()
        if container is None:
            container = Element(self.config.container)

        trees = self.compile(template)
        roots = materialize(
            trees,
            renderer,
            registry=self.registry,
            decoder=decode if self.config.decode_entities else None,
        )
        renderer.mount(roots, container)
        return roots

    def _parse(self, parser: LineParser, line: PositionedLine) -> NodeDescriptor:
        result = parser.parse(line.text, line.number)
        if isinstance(result, ParseFailure):
            raise TemplateSyntaxError(result.reason, result.text, result.line)
        return result.descriptor


def compile_template(
    template: str, config: Optional[BuilderConfig] = None
) -> List[NodeTree]:
    """Compile `template` with a fresh Compiler."""
    return Compiler(config).compile(template)
