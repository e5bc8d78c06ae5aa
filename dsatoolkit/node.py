"""The binary tree node shared by the tree modules, and a level-order builder."""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, Iterator, Optional

_END = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node.

    Nodes compare by identity. ``height`` caches the height of the subtree
    rooted here; only the self-balancing routines keep it up to date.
    """

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None
    height: int = field(default=0, repr=False)


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from values in level order, with None marking a missing child.

    Returns None for an empty input or a missing root.
    """
    items: Iterator[Optional[int]] = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending: Deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)  # type: ignore[arg-type]
            pending.append(node.left)
        right = next(items, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)  # type: ignore[arg-type]
            pending.append(node.right)
    return root