"""Segmenter - splits scanned lines into one group per depth-0 line."""

from __future__ import annotations

import logging
from typing import List, Sequence

from htmlbuilder.ast.spec import PositionedLine, TemplateGroup

log = logging.getLogger(__name__)


def segment(lines: Sequence[PositionedLine]) -> List[TemplateGroup]:
    """Group lines under the depth-0 line that precedes them.

    Lines that appear before the first depth-0 line belong to no tree and
    are dropped with a warning.
    """
    groups: List[TemplateGroup] = []
    for line in lines:
        if line.depth == 0:
            groups.append(TemplateGroup(root=line))
        elif groups:
            groups[-1].lines.append(line)
        else:
            log.warning(
                "line %s: %r is nested but has no top-level parent, dropping",
                line.number,
                line.text,
            )
    return groups
