import pytest

from dsatoolkit import binary_tree, bst
from dsatoolkit.morris import (
    BSTIterator,
    MorrisBSTIterator,
    construct_from_inorder,
    find_pre_suc,
    inorder_predecessor,
    inorder_successor,
    is_valid_bst,
    is_valid_bst_stack,
    morris_inorder,
    morris_preorder,
    sorted_list_to_bst,
    tree_to_doubly_list,
)
from dsatoolkit.node import build_tree

VALUES = [2, 4, 6, 8, 10, 12, 14, 16, 18]


def _node(root, value):
    return bst.path_to(root, value)[-1]


def test_morris_inorder_is_sorted_and_restores_tree():
    root = construct_from_inorder(VALUES)
    before = binary_tree.preorder(root)
    assert morris_inorder(root) == VALUES
    assert binary_tree.preorder(root) == before
    assert binary_tree.postorder(root) == binary_tree.postorder(
        construct_from_inorder(VALUES)
    )


def test_morris_preorder_matches_recursive_preorder():
    root = build_tree([1, 2, 3, None, 4, 5, None, 6])
    expected = binary_tree.preorder(root)
    assert morris_preorder(root) == expected
    assert binary_tree.preorder(root) == expected


def test_empty_traversals():
    assert morris_inorder(None) == []
    assert morris_preorder(None) == []


@pytest.mark.parametrize("check", [is_valid_bst, is_valid_bst_stack])
def test_valid_bst(check):
    assert check(construct_from_inorder(VALUES)) is True
    assert check(None) is True


@pytest.mark.parametrize("check", [is_valid_bst, is_valid_bst_stack])
def test_invalid_bst(check):
    assert check(build_tree([2, 3, 1])) is False
    assert check(build_tree([2, 2])) is False


def test_is_valid_bst_restores_tree():
    root = build_tree([5, 1, 4, None, None, 3, 6])
    before = binary_tree.preorder(root)
    assert is_valid_bst(root) is False
    assert binary_tree.preorder(root) == before


@pytest.mark.parametrize("cls", [BSTIterator, MorrisBSTIterator])
def test_iterators_yield_sorted_values(cls):
    root = construct_from_inorder(VALUES)
    before = binary_tree.preorder(root)
    it = cls(root)
    assert it.has_next() is True
    assert list(it) == VALUES
    assert it.has_next() is False
    with pytest.raises(StopIteration):
        it.next()
    assert binary_tree.preorder(root) == before


@pytest.mark.parametrize("cls", [BSTIterator, MorrisBSTIterator])
def test_iterators_next_and_empty(cls):
    it = cls(construct_from_inorder(VALUES))
    assert [it.next() for _ in range(3)] == VALUES[:3]
    empty = cls(None)
    assert empty.has_next() is False
    with pytest.raises(StopIteration):
        next(empty)


def test_tree_to_doubly_list_is_circular_and_sorted():
    head = tree_to_doubly_list(construct_from_inorder(VALUES))
    forward = []
    node = head
    for _ in VALUES:
        forward.append(node.val)
        node = node.right
    assert forward == VALUES
    assert node is head
    assert head.left.val == VALUES[-1]
    backward = []
    node = head.left
    for _ in VALUES:
        backward.append(node.val)
        node = node.left
    assert backward == VALUES[::-1]


def test_tree_to_doubly_list_empty():
    assert tree_to_doubly_list(None) is None


def test_construct_from_inorder_balanced():
    root = construct_from_inorder(list(range(1, 8)))
    assert morris_inorder(root) == list(range(1, 8))
    assert binary_tree.height(root) == 2
    assert construct_from_inorder([]) is None


def test_sorted_list_to_bst_round_trip():
    head = tree_to_doubly_list(construct_from_inorder(VALUES))
    tail = head.left
    tail.right = None
    head.left = None
    root = sorted_list_to_bst(head)
    assert morris_inorder(root) == VALUES
    assert is_valid_bst(root) is True
    assert binary_tree.size(root) == len(VALUES)


def test_sorted_list_to_bst_small():
    assert sorted_list_to_bst(None) is None
    single = build_tree([7])
    assert sorted_list_to_bst(single) is single


def test_inorder_successor_and_predecessor():
    root = construct_from_inorder(VALUES)
    for before, after in zip(VALUES, VALUES[1:]):
        assert inorder_successor(root, _node(root, before)).val == after
        assert inorder_predecessor(root, _node(root, after)).val == before
    assert inorder_successor(root, _node(root, VALUES[-1])) is None
    assert inorder_predecessor(root, _node(root, VALUES[0])) is None
    assert morris_inorder(root) == VALUES


def test_find_pre_suc_present_key():
    root = construct_from_inorder(VALUES)
    for i in range(1, len(VALUES) - 1):
        pred, succ = find_pre_suc(root, VALUES[i])
        assert (pred.val, succ.val) == (VALUES[i - 1], VALUES[i + 1])


def test_find_pre_suc_absent_key_and_edges():
    root = construct_from_inorder(VALUES)
    pred, succ = find_pre_suc(root, VALUES[3] + 1)
    assert (pred.val, succ.val) == (VALUES[3], VALUES[4])
    pred, succ = find_pre_suc(root, VALUES[0])
    assert pred is None and succ.val == VALUES[1]
    pred, succ = find_pre_suc(root, VALUES[-1] + 1)
    assert pred.val == VALUES[-1] and succ is None