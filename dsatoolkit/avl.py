"""AVL insertion and deletion, and rebalancing of an arbitrary search tree."""

from typing import Optional

from .node import TreeNode


def _height(node: Optional[TreeNode]) -> int:
    return -1 if node is None else node.height


def _update(node: TreeNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: TreeNode) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(a: TreeNode, deep: bool) -> TreeNode:
    b = a.left
    assert b is not None
    a.left = b.right
    b.right = a
    if deep:
        b.right = _fix(a, deep)
        return _fix(b, deep)
    _update(a)
    _update(b)
    return b


def _rotate_left(a: TreeNode, deep: bool) -> TreeNode:
    b = a.right
    assert b is not None
    a.right = b.left
    b.left = a
    if deep:
        b.left = _fix(a, deep)
        return _fix(b, deep)
    _update(a)
    _update(b)
    return b


def _fix(node: TreeNode, deep: bool) -> TreeNode:
    """Refresh the height of ``node`` and rotate if it is out of balance.

    With ``deep`` set, nodes moved by a rotation are rebalanced again, which
    turns subtrees of any shape into AVL trees.
    """
    _update(node)
    balance = _balance(node)
    if balance >= 2:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left, deep)
        return _rotate_right(node, deep)
    if balance <= -2:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right, deep)
        return _rotate_left(node, deep)
    return node


def insert(root: Optional[TreeNode], value: int) -> TreeNode:
    """Insert ``value`` and return the new root; equal values go left."""
    if root is None:
        return TreeNode(value)
    if root.val < value:
        root.right = insert(root.right, value)
    else:
        root.left = insert(root.left, value)
    return _fix(root, deep=False)


def delete(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove one node holding ``key``, if any, and return the new root."""
    if root is None:
        return None
    if root.val < key:
        root.right = delete(root.right, key)
    elif root.val > key:
        root.left = delete(root.left, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.val = successor.val
        root.right = delete(root.right, successor.val)
    return _fix(root, deep=False)


def balance_bst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Rebalance a search tree of any shape into an AVL tree, in place."""
    if root is None:
        return None
    root.left = balance_bst(root.left)
    root.right = balance_bst(root.right)
    return _fix(root, deep=True)