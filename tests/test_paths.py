import re

import pytest

from dsatoolkit.paths import (
    GridPath,
    directional_paths,
    flood_fill_multi_paths,
    flood_fill_paths,
    longest_path,
    maze_paths,
    maze_paths_multi,
    shortest_path,
    subsequences,
)

HVD = {"V": (1, 0), "D": (1, 1), "H": (0, 1)}
FOUR_WAY = {"D": (1, 0), "R": (0, 1), "U": (-1, 0), "L": (0, -1)}
GRID_DIRS = {"V": (1, 0), "H": (0, 1), "D": (1, 1)}


def _cells(path, directions, start=(0, 0)):
    r, c = start
    cells = [(r, c)]
    for label in path:
        dr, dc = directions[label]
        r, c = r + dr, c + dc
        cells.append((r, c))
    return cells


def _multi_cells(path, directions):
    r, c = 0, 0
    cells = [(r, c)]
    moves = re.findall(r"([A-Z])(\d+)", path)
    assert "".join(label + n for label, n in moves) == path
    for label, n in moves:
        dr, dc = directions[label]
        r, c = r + dr * int(n), c + dc * int(n)
        cells.append((r, c))
    return cells


def _is_subsequence(sub, text):
    it = iter(text)
    return all(ch in it for ch in sub)


def test_subsequences_order_small():
    assert subsequences("ab") == ["", "b", "a", "ab"]


def test_subsequences_count_and_membership():
    text = "abcd"
    result = subsequences(text)
    assert len(result) == 2 ** len(text)
    assert len(set(result)) == len(result)
    assert all(_is_subsequence(s, text) for s in result)


def test_subsequences_empty():
    assert subsequences("") == [""]


def test_maze_paths_small():
    assert maze_paths(0, 0, 1, 1) == ["VH", "D", "HV"]


def test_maze_paths_all_reach_target():
    paths = maze_paths(0, 0, 2, 3)
    assert len(set(paths)) == len(paths)
    assert all(_cells(p, HVD)[-1] == (2, 3) for p in paths)


def test_maze_paths_same_start_and_end():
    assert maze_paths(2, 2, 2, 2) == [""]


def test_directional_matches_maze_paths_for_vdh():
    assert directional_paths(0, 0, 2, 2, HVD) == maze_paths(0, 0, 2, 2)


def test_directional_with_upward_diagonal_reaches_target():
    dirs = {"V": (1, 0), "H": (0, 1), "D": (1, 1), "E": (-1, 1)}
    paths = directional_paths(0, 0, 2, 2, dirs)
    assert len(paths) > len(maze_paths(0, 0, 2, 2))
    for p in paths:
        cells = _cells(p, dirs)
        assert cells[-1] == (2, 2)
        assert all(0 <= r <= 2 and 0 <= c <= 2 for r, c in cells)


def test_maze_paths_multi_contains_unit_steps():
    multi = set(maze_paths_multi(0, 0, 2, 2))
    for p in maze_paths(0, 0, 2, 2):
        assert "".join(ch + "1" for ch in p) in multi


def test_maze_paths_multi_all_reach_target():
    paths = maze_paths_multi(0, 0, 3, 2)
    assert len(set(paths)) == len(paths)
    assert all(_multi_cells(p, HVD)[-1] == (3, 2) for p in paths)


def test_maze_paths_multi_same_start_and_end():
    assert maze_paths_multi(1, 1, 1, 1) == [""]


def test_flood_fill_paths_are_simple_and_reach_corner():
    paths = flood_fill_paths(3, 3, FOUR_WAY)
    assert len(set(paths)) == len(paths)
    for p in paths:
        cells = _cells(p, FOUR_WAY)
        assert cells[-1] == (2, 2)
        assert len(set(cells)) == len(cells)
        assert all(0 <= r < 3 and 0 <= c < 3 for r, c in cells)


def test_flood_fill_paths_with_forward_moves_match_maze():
    assert sorted(flood_fill_paths(3, 3, GRID_DIRS)) == sorted(
        directional_paths(0, 0, 2, 2, GRID_DIRS)
    )


def test_flood_fill_single_cell():
    assert flood_fill_paths(1, 1, FOUR_WAY) == [""]


def test_flood_fill_rejects_empty_grid():
    with pytest.raises(ValueError):
        flood_fill_paths(0, 3, FOUR_WAY)


def test_flood_fill_multi_contains_single_steps():
    multi = set(flood_fill_multi_paths(3, 3, GRID_DIRS))
    for p in flood_fill_paths(3, 3, GRID_DIRS):
        assert "".join(ch + "1" for ch in p) in multi


def test_flood_fill_multi_paths_land_on_distinct_cells():
    paths = flood_fill_multi_paths(3, 3, FOUR_WAY)
    assert len(set(paths)) == len(paths)
    for p in paths:
        cells = _multi_cells(p, FOUR_WAY)
        assert cells[-1] == (2, 2)
        assert len(set(cells)) == len(cells)


def test_flood_fill_multi_rejects_empty_grid():
    with pytest.raises(ValueError):
        flood_fill_multi_paths(2, 0, FOUR_WAY)


def test_shortest_path_three_by_three():
    result = shortest_path(3, 3, FOUR_WAY)
    assert result == GridPath("DDRR", 4)


def test_shortest_path_length_matches_manhattan_distance():
    rows, cols = 3, 4
    result = shortest_path(rows, cols, FOUR_WAY)
    assert result.length == rows + cols - 2
    assert _cells(result.path, FOUR_WAY)[-1] == (rows - 1, cols - 1)


def test_longest_path_visits_every_cell():
    rows, cols = 3, 3
    result = longest_path(rows, cols, FOUR_WAY)
    assert result.length == rows * cols - 1
    cells = _cells(result.path, FOUR_WAY)
    assert set(cells) == {(r, c) for r in range(rows) for c in range(cols)}


def test_longest_not_shorter_than_any_flood_path():
    result = longest_path(2, 3, FOUR_WAY)
    assert result.length == max(len(p) for p in flood_fill_paths(2, 3, FOUR_WAY))
    assert len(result.path) == result.length


def test_extreme_paths_single_cell():
    assert longest_path(1, 1, FOUR_WAY) == GridPath("", 0)
    assert shortest_path(1, 1, FOUR_WAY) == GridPath("", 0)


def test_unreachable_corner_gives_none():
    assert shortest_path(2, 2, {"U": (-1, 0)}) is None
    assert longest_path(2, 2, {"L": (0, -1)}) is None