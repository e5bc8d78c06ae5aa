from dsatoolkit.node import TreeNode, build_tree


def _count(node):
    if node is None:
        return 0
    return 1 + _count(node.left) + _count(node.right)


def test_empty_input_gives_no_tree():
    assert build_tree([]) is None
    assert build_tree([None, 1, 2]) is None


def test_complete_tree_shape():
    root = build_tree([1, 2, 3])
    assert root.val == 1
    assert root.left.val == 2
    assert root.right.val == 3
    assert root.left.left is None and root.right.right is None


def test_missing_children_are_skipped():
    root = build_tree([1, None, 2, 3])
    assert root.left is None
    assert root.right.val == 2
    assert root.right.left.val == 3
    assert root.right.right is None


def test_node_count_matches_present_values():
    values = [5, 3, 8, None, 4, 7, None, None, None, 6]
    root = build_tree(values)
    assert _count(root) == sum(v is not None for v in values)


def test_nodes_compare_by_identity():
    a = TreeNode(1)
    b = TreeNode(1)
    assert (a == b) is False
    assert a == a


def test_new_node_defaults():
    node = TreeNode(9)
    assert (node.left, node.right, node.height) == (None, None, 0)