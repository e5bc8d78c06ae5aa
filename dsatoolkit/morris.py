"""Threaded (Morris) traversals of binary search trees and related utilities."""

from typing import Iterator, List, Optional, Sequence, Tuple

from .node import TreeNode

__all__ = [
    "morris_inorder",
    "morris_preorder",
    "is_valid_bst",
    "is_valid_bst_stack",
    "BSTIterator",
    "MorrisBSTIterator",
    "tree_to_doubly_list",
    "construct_from_inorder",
    "sorted_list_to_bst",
    "inorder_successor",
    "inorder_predecessor",
    "find_pre_suc",
]


def _rightmost(node: TreeNode, curr: TreeNode) -> TreeNode:
    """Return the rightmost node below ``node``, stopping at a thread to ``curr``."""
    while node.right is not None and node.right is not curr:
        node = node.right
    return node


def _inorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield nodes in inorder using temporary threads.

    The tree is restored only once the generator has been exhausted.
    """
    curr = root
    while curr is not None:
        left = curr.left
        if left is None:
            yield curr
            curr = curr.right
            continue
        last = _rightmost(left, curr)
        if last.right is None:
            last.right = curr
            curr = left
        else:
            last.right = None
            yield curr
            curr = curr.right


def _preorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield nodes in preorder using temporary threads."""
    curr = root
    while curr is not None:
        left = curr.left
        if left is None:
            yield curr
            curr = curr.right
            continue
        last = _rightmost(left, curr)
        if last.right is None:
            yield curr
            last.right = curr
            curr = left
        else:
            last.right = None
            curr = curr.right


def morris_inorder(root: Optional[TreeNode]) -> List[int]:
    """Return the values in inorder without a stack or recursion."""
    return [node.val for node in _inorder_nodes(root)]


def morris_preorder(root: Optional[TreeNode]) -> List[int]:
    """Return the values in preorder without a stack or recursion."""
    return [node.val for node in _preorder_nodes(root)]


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return True if the inorder values are strictly increasing."""
    valid = True
    previous: Optional[int] = None
    for node in _inorder_nodes(root):
        if previous is not None and previous >= node.val:
            valid = False
        previous = node.val
    return valid


def _push_left_spine(node: Optional[TreeNode], stack: List[TreeNode]) -> None:
    while node is not None:
        stack.append(node)
        node = node.left


def is_valid_bst_stack(root: Optional[TreeNode]) -> bool:
    """Return True if the inorder values are strictly increasing, using a stack."""
    stack: List[TreeNode] = []
    _push_left_spine(root, stack)
    previous: Optional[int] = None
    while stack:
        node = stack.pop()
        if previous is not None and previous >= node.val:
            return False
        previous = node.val
        _push_left_spine(node.right, stack)
    return True


class BSTIterator:
    """Iterate over a search tree in ascending order, keeping the left spine on a stack."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._stack: List[TreeNode] = []
        _push_left_spine(root, self._stack)

    def next(self) -> int:
        """Return the next value; raise StopIteration when none is left."""
        if not self._stack:
            raise StopIteration("no more values")
        node = self._stack.pop()
        _push_left_spine(node.right, self._stack)
        return node.val

    def has_next(self) -> bool:
        """Return True while values remain."""
        return bool(self._stack)

    def __iter__(self) -> "BSTIterator":
        return self

    def __next__(self) -> int:
        return self.next()


class MorrisBSTIterator:
    """Iterate over a search tree in ascending order using temporary threads.

    The tree is fully restored once iteration has finished.
    """

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._curr = root

    def next(self) -> int:
        """Return the next value; raise StopIteration when none is left."""
        curr = self._curr
        while curr is not None:
            left = curr.left
            if left is None:
                self._curr = curr.right
                return curr.val
            last = _rightmost(left, curr)
            if last.right is None:
                last.right = curr
                curr = left
            else:
                last.right = None
                self._curr = curr.right
                return curr.val
        self._curr = None
        raise StopIteration("no more values")

    def has_next(self) -> bool:
        """Return True while values remain."""
        return self._curr is not None

    def __iter__(self) -> "MorrisBSTIterator":
        return self

    def __next__(self) -> int:
        return self.next()


def tree_to_doubly_list(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Relink the tree in place into a sorted circular doubly linked list.

    ``left`` points to the previous node and ``right`` to the next one.
    Returns the smallest node, or None for an empty tree.
    """
    if root is None:
        return None
    dummy = TreeNode(-1)
    prev = dummy
    for node in _inorder_nodes(root):
        prev.right = node
        node.left = prev
        prev = node
    head = dummy.right
    assert head is not None
    dummy.right = None
    head.left = prev
    prev.right = head
    return head


def construct_from_inorder(values: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced tree whose inorder sequence is ``values``."""
    items = list(values)

    def build(lo: int, hi: int) -> Optional[TreeNode]:
        if lo > hi:
            return None
        mid = (lo + hi) // 2
        node = TreeNode(items[mid])
        node.left = build(lo, mid - 1)
        node.right = build(mid + 1, hi)
        return node

    return build(0, len(items) - 1)


def _middle(head: TreeNode) -> TreeNode:
    slow = fast = head
    while fast.right is not None and fast.right.right is not None:
        slow = slow.right  # type: ignore[assignment]
        fast = fast.right.right
    return slow


def sorted_list_to_bst(head: Optional[TreeNode]) -> Optional[TreeNode]:
    """Turn a sorted, non-circular doubly linked list into a balanced tree in place.

    The list is linked through ``left`` (previous) and ``right`` (next).
    """
    if head is None or head.right is None:
        return head
    mid = _middle(head)
    after, before = mid.right, mid.left
    assert after is not None
    mid.left = mid.right = None
    after.left = None
    if before is not None:
        before.right = None
    mid.left = sorted_list_to_bst(head if before is not None else None)
    mid.right = sorted_list_to_bst(after)
    return mid


def inorder_successor(root: Optional[TreeNode], x: TreeNode) -> Optional[TreeNode]:
    """Return the node that follows ``x`` in inorder, or None."""
    successor: Optional[TreeNode] = None
    previous: Optional[TreeNode] = None
    for node in _inorder_nodes(root):
        if previous is x:
            successor = node
        previous = node
    return successor


def inorder_predecessor(root: Optional[TreeNode], x: TreeNode) -> Optional[TreeNode]:
    """Return the node that precedes ``x`` in inorder, or None."""
    predecessor: Optional[TreeNode] = None
    previous: Optional[TreeNode] = None
    for node in _inorder_nodes(root):
        if node is x:
            predecessor = previous
        previous = node
    return predecessor


def _leftmost_of(node: Optional[TreeNode]) -> Optional[TreeNode]:
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def _rightmost_of(node: Optional[TreeNode]) -> Optional[TreeNode]:
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def find_pre_suc(
    root: Optional[TreeNode], key: int
) -> Tuple[Optional[TreeNode], Optional[TreeNode]]:
    """Return the nodes just below and just above ``key`` in a search tree.

    ``key`` itself need not be present; either side may be None.
    """
    pred: Optional[TreeNode] = None
    succ: Optional[TreeNode] = None
    curr = root
    while curr is not None:
        if curr.val == key:
            succ = _leftmost_of(curr.right) or succ
            pred = _rightmost_of(curr.left) or pred
            break
        if curr.val < key:
            pred = curr
            curr = curr.right
        else:
            succ = curr
            curr = curr.left
    return pred, succ