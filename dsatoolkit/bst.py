"""Queries on binary search trees."""

from typing import List, Optional

from .node import TreeNode

__all__ = [
    "minimum",
    "maximum",
    "total",
    "size",
    "contains",
    "path_to",
    "lowest_common_ancestor",
]


def minimum(root: Optional[TreeNode]) -> int:
    """Return the smallest value, found at the leftmost node."""
    if root is None:
        raise ValueError("empty tree has no minimum")
    node = root
    while node.left is not None:
        node = node.left
    return node.val


def maximum(root: Optional[TreeNode]) -> int:
    """Return the largest value, found at the rightmost node."""
    if root is None:
        raise ValueError("empty tree has no maximum")
    node = root
    while node.right is not None:
        node = node.right
    return node.val


def total(root: Optional[TreeNode]) -> int:
    """Return the sum of all values."""
    return 0 if root is None else total(root.left) + total(root.right) + root.val


def size(root: Optional[TreeNode]) -> int:
    """Return the number of nodes."""
    return 0 if root is None else size(root.left) + size(root.right) + 1


def contains(root: Optional[TreeNode], data: int) -> bool:
    """Return True if ``data`` is found by a search from ``root``."""
    node = root
    while node is not None:
        if node.val == data:
            return True
        node = node.left if node.val > data else node.right
    return False


def path_to(root: Optional[TreeNode], data: int) -> List[TreeNode]:
    """Return the nodes visited by a search for ``data``, starting at the root.

    When ``data`` is present the path ends at its node; otherwise it ends at
    the node where the search fell off the tree.
    """
    path: List[TreeNode] = []
    node = root
    while node is not None:
        path.append(node)
        if node.val == data:
            break
        node = node.left if node.val > data else node.right
    return path


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the node where the searches for ``p`` and ``q`` split.

    Returns None unless both values are found below that node.
    """
    node = root
    while node is not None:
        if node.val < p.val and node.val < q.val:
            node = node.right
        elif node.val > p.val and node.val > q.val:
            node = node.left
        else:
            break
    if node is not None and contains(node, p.val) and contains(node, q.val):
        return node
    return None