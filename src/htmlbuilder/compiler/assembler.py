"""Tree assembler - rebuilds nesting from a flat (descriptor, depth) list.

There are no closing markers, so nesting is recovered by repeated reduction:

1. Take the deepest pending entry (the last one at the maximum depth).
2. Its parent is the last entry before it whose depth is exactly one less,
   or the group root when there is none.
3. Insert it as the parent's first child.
4. Drop it from the pending list and repeat until the list is empty.

Entries are consumed back to front, so front-insertion leaves every sibling
list in source order.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from htmlbuilder.ast.spec import NodeDescriptor, NodeTree


def index_of_deepest(pending: Sequence[Tuple[NodeTree, int]]) -> int:
    """Index of the last entry at the maximum depth."""
    deepest = max(depth for _, depth in pending)
    for i in range(len(pending) - 1, -1, -1):
        if pending[i][1] == deepest:
            return i
    raise AssertionError("unreachable")


def index_of_nearest_parent(
    index: int, pending: Sequence[Tuple[NodeTree, int]]
) -> Optional[int]:
    """Index of the closest entry before `index` exactly one level up."""
    wanted = pending[index][1] - 1
    for i in range(index - 1, -1, -1):
        if pending[i][1] == wanted:
            return i
    return None


def assemble(
    root: NodeDescriptor, children: Sequence[Tuple[NodeDescriptor, int]]
) -> NodeTree:
    """Build the tree for one template group.

    Args:
        root: Descriptor of the group's depth-0 line.
        children: (descriptor, depth) pairs for the following lines, in
            source order, every depth >= 1.

    Returns:
        The root NodeTree with all descendants attached.
    """
    tree = NodeTree(root)
    pending: List[Tuple[NodeTree, int]] = [
        (NodeTree(descriptor), depth) for descriptor, depth in children
    ]

    while pending:
        deepest = index_of_deepest(pending)
        parent = index_of_nearest_parent(deepest, pending)
        target = tree if parent is None else pending[parent][0]
        target.children.insert(0, pending[deepest][0])
        del pending[deepest]

    return tree
