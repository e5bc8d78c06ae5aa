"""Level-wise, vertical and diagonal views of a binary tree."""

import heapq
from collections import deque
from itertools import count
from typing import Deque, Dict, Iterator, List, Optional, Tuple

from .node import TreeNode

__all__ = [
    "level_order",
    "left_view",
    "right_view",
    "vertical_traversal",
    "bottom_view",
    "bottom_view_all",
    "top_view",
    "vertical_sum",
    "diagonal_order",
    "diagonal",
    "diagonal_sum",
    "vertical_order_traversal",
]


def _levels(root: Optional[TreeNode]) -> Iterator[List[TreeNode]]:
    """Yield the nodes of each level, left to right."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: Optional[TreeNode]) -> List[List[int]]:
    """Return the values of each level, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def left_view(root: Optional[TreeNode]) -> List[int]:
    """Return the leftmost value of each level."""
    return [level[0].val for level in _levels(root)]


def right_view(root: Optional[TreeNode]) -> List[int]:
    """Return the rightmost value of each level."""
    return [level[-1].val for level in _levels(root)]


def _column_range(root: TreeNode) -> Tuple[int, int]:
    """Return the smallest and largest horizontal offsets from the root."""
    low = high = 0
    stack = [(root, 0)]
    while stack:
        node, col = stack.pop()
        low, high = min(low, col), max(high, col)
        if node.left is not None:
            stack.append((node.left, col - 1))
        if node.right is not None:
            stack.append((node.right, col + 1))
    return low, high


def _by_column(root: Optional[TreeNode]) -> Tuple[int, Iterator[Tuple[int, int, TreeNode]]]:
    """Return the column count and the (column, depth, node) triples in level order."""
    if root is None:
        return 0, iter(())
    low, high = _column_range(root)

    def walk() -> Iterator[Tuple[int, int, TreeNode]]:
        queue: Deque[Tuple[TreeNode, int, int]] = deque([(root, -low, 0)])
        while queue:
            node, col, depth = queue.popleft()
            yield col, depth, node
            if node.left is not None:
                queue.append((node.left, col - 1, depth + 1))
            if node.right is not None:
                queue.append((node.right, col + 1, depth + 1))

    return high - low + 1, walk()


def vertical_traversal(root: Optional[TreeNode]) -> List[List[int]]:
    """Return the values of each column, leftmost column first, in level order."""
    width, cells = _by_column(root)
    columns: List[List[int]] = [[] for _ in range(width)]
    for col, _, node in cells:
        columns[col].append(node.val)
    return columns


def bottom_view(root: Optional[TreeNode]) -> List[int]:
    """Return the last value seen in each column in level order."""
    return [column[-1] for column in vertical_traversal(root)]


def top_view(root: Optional[TreeNode]) -> List[int]:
    """Return the first value seen in each column in level order."""
    return [column[0] for column in vertical_traversal(root)]


def bottom_view_all(root: Optional[TreeNode]) -> List[List[int]]:
    """Return, for each column, every value at that column's deepest level."""
    width, cells = _by_column(root)
    columns: List[List[int]] = [[] for _ in range(width)]
    deepest = [-1] * width
    for col, depth, node in cells:
        if depth > deepest[col]:
            columns[col] = []
            deepest[col] = depth
        columns[col].append(node.val)
    return columns


def vertical_sum(root: Optional[TreeNode]) -> List[int]:
    """Return the sum of the values in each column."""
    return [sum(column) for column in vertical_traversal(root)]


def diagonal_order(root: Optional[TreeNode]) -> List[List[int]]:
    """Return the values on each right-leaning diagonal, starting with the root's."""
    result: List[List[int]] = []
    starts = [root] if root is not None else []
    while starts:
        values: List[int] = []
        next_starts: List[TreeNode] = []
        for start in starts:
            node: Optional[TreeNode] = start
            while node is not None:
                values.append(node.val)
                if node.left is not None:
                    next_starts.append(node.left)
                node = node.right
        result.append(values)
        starts = next_starts
    return result


def diagonal(root: Optional[TreeNode]) -> List[int]:
    """Return the values diagonal by diagonal, as one flat list."""
    return [value for values in diagonal_order(root) for value in values]


def diagonal_sum(root: Optional[TreeNode]) -> List[int]:
    """Return the sum of the values on each diagonal."""
    return [sum(values) for values in diagonal_order(root)]


def vertical_order_traversal(root: Optional[TreeNode]) -> List[List[int]]:
    """Return each column's values ordered by depth, ties broken by value."""
    if root is None:
        return []
    low, high = _column_range(root)
    columns: Dict[int, List[int]] = {col: [] for col in range(high - low + 1)}
    tiebreak = count()
    heap = [(0, root.val, next(tiebreak), -low, root)]
    while heap:
        depth, value, _, col, node = heapq.heappop(heap)
        columns[col].append(value)
        for child, offset in ((node.left, -1), (node.right, 1)):
            if child is not None:
                heapq.heappush(
                    heap, (depth + 1, child.val, next(tiebreak), col + offset, child)
                )
    return [columns[col] for col in range(high - low + 1)]