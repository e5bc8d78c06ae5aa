"""Path enumeration on grids: subsequences, maze paths and flood fills."""

from typing import Dict, List, Mapping, NamedTuple, Optional, Set, Tuple

Directions = Mapping[str, Tuple[int, int]]


class GridPath(NamedTuple):
    """A path of direction labels together with its number of steps."""

    path: str
    length: int


def subsequences(text: str) -> List[str]:
    """Return every subsequence of ``text``.

    Subsequences without the first character come first, followed by the
    same ones with the first character prepended.
    """
    if not text:
        return [""]
    rest = subsequences(text[1:])
    return rest + [text[0] + s for s in rest]


def maze_paths(sr: int, sc: int, er: int, ec: int) -> List[str]:
    """Return all paths from (sr, sc) to (er, ec) using single V, D and H steps."""
    if sr == er and sc == ec:
        return [""]
    paths: List[str] = []
    if sr + 1 <= er:
        paths.extend("V" + p for p in maze_paths(sr + 1, sc, er, ec))
    if sr + 1 <= er and sc + 1 <= ec:
        paths.extend("D" + p for p in maze_paths(sr + 1, sc + 1, er, ec))
    if sc + 1 <= ec:
        paths.extend("H" + p for p in maze_paths(sr, sc + 1, er, ec))
    return paths


def maze_paths_multi(sr: int, sc: int, er: int, ec: int) -> List[str]:
    """Return all paths where each V, D or H move may jump several cells.

    Each move is written as its letter followed by the jump length.
    """
    if sr == er and sc == ec:
        return [""]
    paths: List[str] = []
    for jump in range(1, er - sr + 1):
        paths.extend(f"V{jump}{p}" for p in maze_paths_multi(sr + jump, sc, er, ec))
    for jump in range(1, min(er - sr, ec - sc) + 1):
        paths.extend(
            f"D{jump}{p}" for p in maze_paths_multi(sr + jump, sc + jump, er, ec)
        )
    for jump in range(1, ec - sc + 1):
        paths.extend(f"H{jump}{p}" for p in maze_paths_multi(sr, sc + jump, er, ec))
    return paths


def directional_paths(
    sr: int, sc: int, er: int, ec: int, directions: Directions
) -> List[str]:
    """Return all paths to (er, ec) using the given labelled unit moves.

    Cells must stay within rows 0..er and columns 0..ec. The moves must not
    allow cycles, since no cell is marked as visited.
    """
    moves = list(directions.items())
    found: List[str] = []

    def walk(r: int, c: int, path: str) -> None:
        if r == er and c == ec:
            found.append(path)
            return
        for label, (dr, dc) in moves:
            nr, nc = r + dr, c + dc
            if 0 <= nr <= er and 0 <= nc <= ec:
                walk(nr, nc, path + label)

    walk(sr, sc, "")
    return found


def _check_grid(rows: int, cols: int) -> None:
    if rows < 1 or cols < 1:
        raise ValueError(f"grid must have at least one cell, got {rows}x{cols}")


def flood_fill_paths(rows: int, cols: int, directions: Directions) -> List[str]:
    """Return all simple paths from the top-left to the bottom-right cell."""
    _check_grid(rows, cols)
    moves = list(directions.items())
    target = (rows - 1, cols - 1)
    visited: Set[Tuple[int, int]] = set()
    found: List[str] = []

    def walk(r: int, c: int, path: str) -> None:
        if (r, c) == target:
            found.append(path)
            return
        visited.add((r, c))
        for label, (dr, dc) in moves:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and (nr, nc) not in visited:
                walk(nr, nc, path + label)
        visited.discard((r, c))

    walk(0, 0, "")
    return found


def flood_fill_multi_paths(rows: int, cols: int, directions: Directions) -> List[str]:
    """Return all simple paths where each move may jump several cells.

    Each move is written as its label followed by the jump length. A jump
    may pass over visited cells but cannot land on one.
    """
    _check_grid(rows, cols)
    moves = list(directions.items())
    target = (rows - 1, cols - 1)
    reach = max(rows, cols)
    visited: Set[Tuple[int, int]] = set()
    found: List[str] = []

    def walk(r: int, c: int, path: str) -> None:
        if (r, c) == target:
            found.append(path)
            return
        visited.add((r, c))
        for label, (dr, dc) in moves:
            for radius in range(1, reach + 1):
                nr, nc = r + radius * dr, c + radius * dc
                if not (0 <= nr < rows and 0 <= nc < cols):
                    break
                if (nr, nc) not in visited:
                    walk(nr, nc, f"{path}{label}{radius}")
        visited.discard((r, c))

    walk(0, 0, "")
    return found


def _extreme_path(
    rows: int, cols: int, directions: Directions, longest: bool
) -> Optional[GridPath]:
    _check_grid(rows, cols)
    moves = list(directions.items())
    target = (rows - 1, cols - 1)
    visited: Set[Tuple[int, int]] = set()

    def best(r: int, c: int) -> Optional[GridPath]:
        if (r, c) == target:
            return GridPath("", 0)
        visited.add((r, c))
        result: Optional[GridPath] = None
        for label, (dr, dc) in moves:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols) or (nr, nc) in visited:
                continue
            sub = best(nr, nc)
            if sub is None:
                continue
            length = sub.length + 1
            if (
                result is None
                or (longest and length > result.length)
                or (not longest and length < result.length)
            ):
                result = GridPath(label + sub.path, length)
        visited.discard((r, c))
        return result

    return best(0, 0)


def longest_path(rows: int, cols: int, directions: Directions) -> Optional[GridPath]:
    """Return the longest simple path to the bottom-right cell, or None."""
    return _extreme_path(rows, cols, directions, longest=True)


def shortest_path(rows: int, cols: int, directions: Directions) -> Optional[GridPath]:
    """Return the shortest simple path to the bottom-right cell, or None."""
    return _extreme_path(rows, cols, directions, longest=False)


__all__: List[str] = [
    "GridPath",
    "subsequences",
    "maze_paths",
    "maze_paths_multi",
    "directional_paths",
    "flood_fill_paths",
    "flood_fill_multi_paths",
    "longest_path",
    "shortest_path",
]

_: Dict[str, int] = {}