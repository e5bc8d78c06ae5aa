# dsatoolkit

Classic algorithms and data structures in plain Python, with no
third-party dependencies: recursion and backtracking enumerations,
monotonic-stack array queries, small stack and queue classes, and a set of
binary tree, binary search tree and AVL routines.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsatoolkit.bits` | `is_odd`, `unique_element` (XOR of all values; 0 for an empty input) |
| `dsatoolkit.paths` | `subsequences`; maze paths `maze_paths`, `maze_paths_multi`, `directional_paths`; flood fill `flood_fill_paths`, `flood_fill_multi_paths`; `longest_path` and `shortest_path`, which return a `GridPath(path, length)` or `None` |
| `dsatoolkit.permutations` | `equal_sum_partitions`, `permutations`, `distinct_permutations`, `sorted_distinct_permutations` |
| `dsatoolkit.queens` | `queen_combinations`, `queen_permutations`, `queen_combinations_2d`, `queen_permutations_2d`, `is_safe_to_place`, and N-queens by plain search (`n_queen_combinations`, `n_queen_permutations`), include/exclude search (`n_queen_combinations_subsequence`), occupied-line sets (`n_queen_combinations_shadow`, `n_queen_permutations_shadow`) and bit masks (`n_queen_bitmask`) |
| `dsatoolkit.coins` | coin-change enumerations: `permutations_infinite`, `combinations_infinite`, `combinations_single`, `permutations_single`, and the include/exclude variants `combinations_infinite_subsequence`, `combinations_single_subsequence`, `permutations_single_subsequence` |
| `dsatoolkit.nextgreater` | `next_greater_right`, `next_greater_left`, `next_smaller_right`, `next_smaller_left`, `next_greater_element`, `next_greater_circular`, `is_valid_brackets`, and the `main` command entry point |
| `dsatoolkit.containers` | `ArrayStack` and `ArrayQueue` (fixed capacity, default 10), `LinkedStack` and `LinkedQueue` (unbounded), with `EmptyError` and `FullError` |
| `dsatoolkit.node` | `TreeNode` and `build_tree` (level order, `None` for a missing child) |
| `dsatoolkit.binary_tree` | `size`, `height`, `maximum`, `minimum`, `mirror`, `preorder`, `postorder`, `contains`, `node_to_root_path`, `root_to_leaf_paths`, `single_child_parents`, `distance_k`, `burning_tree`, `burning_tree_with_water`, `lowest_common_ancestor`, `diameter` |
| `dsatoolkit.bst` | `minimum`, `maximum`, `total`, `size`, `contains`, `path_to`, `lowest_common_ancestor` for search trees |
| `dsatoolkit.avl` | `insert`, `delete` and `balance_bst` |
| `dsatoolkit.morris` | `morris_inorder`, `morris_preorder`, `is_valid_bst`, `is_valid_bst_stack`, `BSTIterator`, `MorrisBSTIterator`, `tree_to_doubly_list`, `construct_from_inorder`, `sorted_list_to_bst`, `inorder_successor`, `inorder_predecessor`, `find_pre_suc` |
| `dsatoolkit.views` | `level_order`, `left_view`, `right_view`, `top_view`, `bottom_view`, `bottom_view_all`, `vertical_traversal`, `vertical_order_traversal`, `vertical_sum`, `diagonal_order`, `diagonal`, `diagonal_sum` |

Enumerating functions (paths, permutations, queens, coins) return the
solutions they find as a list, so the number of solutions is the length of
the result. Invalid arguments such as a negative target, a non-positive
coin or an empty grid raise `ValueError`.

The containers raise `EmptyError` (a subclass of `IndexError`) when reading
from or removing out of an empty container, and the fixed-capacity ones
raise `FullError` (a subclass of `OverflowError`) when pushing at capacity.

## Examples

```python
from dsatoolkit.bits import is_odd, unique_element
from dsatoolkit.queens import n_queen_bitmask
from dsatoolkit.nextgreater import next_greater_right, is_valid_brackets
from dsatoolkit.containers import ArrayStack
from dsatoolkit.node import build_tree
from dsatoolkit.binary_tree import height, diameter
from dsatoolkit.views import left_view

is_odd(4)                         # False
unique_element([1, 2, 1])         # 2

len(n_queen_bitmask(4, 4, 4))     # 2

next_greater_right([2, 5, 3])     # [5, -1, -1]
is_valid_brackets("([]{})")       # True

stack = ArrayStack()
stack.push(7)
stack.top()                       # 7

root = build_tree([1, 2, 3, 4, None, None, 5])
height(root)                      # 2
diameter(root)                    # 4
left_view(root)                   # [1, 2, 4]
```

## Command line

The next-greater-on-the-right routine is available as a command. It reads
a count followed by that many integers from standard input and prints the
next greater element for each, one per line (`-1` where there is none):

```
echo "4 2 5 3 7" | dsatoolkit-nge
```

It exits with status 1 and a message on standard error when the input is
not a list of integers or holds fewer values than the count says. The
other modules are libraries only and have no command of their own.