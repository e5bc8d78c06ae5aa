"""Queries and transformations on general binary trees."""

from typing import Callable, Iterable, Iterator, List, Optional

from .node import TreeNode


def _nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield the nodes in preorder."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def size(root: Optional[TreeNode]) -> int:
    """Return the number of nodes."""
    return 0 if root is None else size(root.left) + size(root.right) + 1


def height(root: Optional[TreeNode]) -> int:
    """Return the height in edges; an empty tree has height -1."""
    return -1 if root is None else max(height(root.left), height(root.right)) + 1


def maximum(root: Optional[TreeNode]) -> int:
    """Return the largest value; raise ValueError for an empty tree."""
    if root is None:
        raise ValueError("empty tree has no maximum")
    return max(node.val for node in _nodes(root))


def minimum(root: Optional[TreeNode]) -> int:
    """Return the smallest value; raise ValueError for an empty tree."""
    if root is None:
        raise ValueError("empty tree has no minimum")
    return min(node.val for node in _nodes(root))


def mirror(root: Optional[TreeNode]) -> None:
    """Swap the children of every node in place."""
    for node in _nodes(root):
        node.left, node.right = node.right, node.left


def preorder(root: Optional[TreeNode]) -> List[int]:
    """Return the values in preorder."""
    return [node.val for node in _nodes(root)]


def postorder(root: Optional[TreeNode]) -> List[int]:
    """Return the values in postorder."""
    result: List[int] = []

    def visit(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        visit(node.left)
        visit(node.right)
        result.append(node.val)

    visit(root)
    return result


def contains(root: Optional[TreeNode], data: int) -> bool:
    """Return True if some node holds ``data``."""
    return any(node.val == data for node in _nodes(root))


def _ancestors(
    root: Optional[TreeNode], matches: Callable[[TreeNode], bool]
) -> List[TreeNode]:
    """Return the first matching node (left before right) and its ancestors."""
    path: List[TreeNode] = []

    def walk(node: Optional[TreeNode]) -> bool:
        if node is None:
            return False
        if matches(node) or walk(node.left) or walk(node.right):
            path.append(node)
            return True
        return False

    walk(root)
    return path


def node_to_root_path(root: Optional[TreeNode], data: int) -> List[TreeNode]:
    """Return the nodes from the one holding ``data`` up to the root.

    The result is empty when no node holds ``data``.
    """
    return _ancestors(root, lambda node: node.val == data)


def root_to_leaf_paths(root: Optional[TreeNode]) -> List[List[int]]:
    """Return the values along every path from the root to a leaf."""
    paths: List[List[int]] = []
    current: List[int] = []

    def walk(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        current.append(node.val)
        if node.left is None and node.right is None:
            paths.append(list(current))
        else:
            walk(node.left)
            walk(node.right)
        current.pop()

    walk(root)
    return paths


def single_child_parents(root: Optional[TreeNode]) -> List[int]:
    """Return, in preorder, the values of nodes with exactly one child."""
    return [
        node.val
        for node in _nodes(root)
        if (node.left is None) != (node.right is None)
    ]


def _collect_down(
    node: Optional[TreeNode],
    depth: int,
    blocked: Optional[TreeNode],
    found: List[int],
) -> None:
    if node is None or depth < 0 or node is blocked:
        return
    if depth == 0:
        found.append(node.val)
        return
    _collect_down(node.left, depth - 1, blocked, found)
    _collect_down(node.right, depth - 1, blocked, found)


def distance_k(root: Optional[TreeNode], target: TreeNode, k: int) -> List[int]:
    """Return the values of nodes exactly ``k`` edges away from ``target``.

    Nodes below the target come first, then those reached through each
    ancestor in turn. The result is empty if ``target`` is not in the tree.
    """
    found: List[int] = []
    blocked: Optional[TreeNode] = None
    for distance, node in enumerate(_ancestors(root, lambda n: n is target)):
        _collect_down(node, k - distance, blocked, found)
        blocked = node
    return found


def burning_tree_with_water(
    root: Optional[TreeNode], fire: int, water: Iterable[int]
) -> List[List[int]]:
    """Return the values burning at each moment when fire starts at ``fire``.

    Fire spreads one edge per moment and never enters a node whose value is
    in ``water``; such an ancestor also stops it from climbing further. The
    result is empty if no node holds ``fire`` or that node is wet.
    """
    wet = set(water)
    layers: List[List[int]] = []

    def spread(node: Optional[TreeNode], time: int, blocked: Optional[TreeNode]) -> None:
        if node is None or node is blocked or node.val in wet:
            return
        while len(layers) <= time:
            layers.append([])
        layers[time].append(node.val)
        spread(node.left, time + 1, blocked)
        spread(node.right, time + 1, blocked)

    blocked: Optional[TreeNode] = None
    for time, node in enumerate(node_to_root_path(root, fire)):
        if node.val in wet:
            break
        spread(node, time, blocked)
        blocked = node
    return layers


def burning_tree(root: Optional[TreeNode], fire: int) -> List[List[int]]:
    """Return the values burning at each moment when fire starts at ``fire``."""
    return burning_tree_with_water(root, fire, ())


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node having both ``p`` and ``q`` in its subtree.

    A node counts as being in its own subtree. Returns None unless both
    nodes are in the tree.
    """
    answer: Optional[TreeNode] = None

    def search(node: Optional[TreeNode]) -> bool:
        nonlocal answer
        if node is None:
            return False
        here = node is p or node is q
        in_left = search(node.left)
        in_right = search(node.right)
        if here + in_left + in_right >= 2:
            answer = node
        return here or in_left or in_right

    search(root)
    return answer


def diameter(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between any two nodes."""

    def measure(node: Optional[TreeNode]) -> tuple:
        if node is None:
            return -1, 0
        left_height, left_diameter = measure(node.left)
        right_height, right_diameter = measure(node.right)
        through = left_height + right_height + 2
        return (
            max(left_height, right_height) + 1,
            max(left_diameter, right_diameter, through),
        )

    return measure(root)[1]