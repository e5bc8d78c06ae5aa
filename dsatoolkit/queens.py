"""Placing queens in boxes and on boards, with and without attack rules."""

from typing import List, Sequence, Set, Tuple

Cell = Tuple[int, int]
Placement = Tuple[Cell, ...]

# Directions that look back at cells already visited in row-major order.
_BACKWARD = ((0, -1), (-1, -1), (-1, 0), (-1, 1))
_ALL = _BACKWARD + ((0, 1), (1, 1), (1, 0), (1, -1))


def _check_queens(queens: int) -> None:
    if queens < 0:
        raise ValueError(f"number of queens must not be negative, got {queens}")


def _check_boxes(boxes: int, queens: int) -> None:
    if boxes < 0:
        raise ValueError(f"number of boxes must not be negative, got {boxes}")
    _check_queens(queens)


def _check_board(rows: int, cols: int, queens: int) -> None:
    if rows < 1 or cols < 1:
        raise ValueError(f"board must have at least one cell, got {rows}x{cols}")
    _check_queens(queens)


def queen_combinations(boxes: int, queens: int) -> List[Tuple[int, ...]]:
    """Return every way to choose boxes for identical queens.

    Each result lists the chosen boxes in increasing order.
    """
    _check_boxes(boxes, queens)
    found: List[Tuple[int, ...]] = []

    def place(start: int, chosen: Tuple[int, ...]) -> None:
        if len(chosen) == queens:
            found.append(chosen)
            return
        for box in range(start, boxes):
            place(box + 1, chosen + (box,))

    place(0, ())
    return found


def queen_permutations(boxes: int, queens: int) -> List[Tuple[int, ...]]:
    """Return every way to put distinct queens into distinct boxes.

    Position ``i`` of each result holds the box of queen ``i``.
    """
    _check_boxes(boxes, queens)
    found: List[Tuple[int, ...]] = []
    used: Set[int] = set()

    def place(chosen: Tuple[int, ...]) -> None:
        if len(chosen) == queens:
            found.append(chosen)
            return
        for box in range(boxes):
            if box in used:
                continue
            used.add(box)
            place(chosen + (box,))
            used.discard(box)

    place(())
    return found


def queen_combinations_2d(rows: int, cols: int, queens: int) -> List[Placement]:
    """Return every set of cells for identical queens, ignoring attacks."""
    _check_board(rows, cols, queens)
    total = rows * cols
    found: List[Placement] = []

    def place(start: int, chosen: Placement) -> None:
        if len(chosen) == queens:
            found.append(chosen)
            return
        for index in range(start, total):
            place(index + 1, chosen + (divmod(index, cols),))

    place(0, ())
    return found


def queen_permutations_2d(rows: int, cols: int, queens: int) -> List[Placement]:
    """Return every ordered placement of distinct queens, ignoring attacks."""
    _check_board(rows, cols, queens)
    total = rows * cols
    found: List[Placement] = []
    occupied: Set[Cell] = set()

    def place(chosen: Placement) -> None:
        if len(chosen) == queens:
            found.append(chosen)
            return
        for index in range(total):
            cell = divmod(index, cols)
            if cell in occupied:
                continue
            occupied.add(cell)
            place(chosen + (cell,))
            occupied.discard(cell)

    place(())
    return found


def _is_clear(
    board: Sequence[Sequence[bool]],
    row: int,
    col: int,
    directions: Sequence[Tuple[int, int]],
) -> bool:
    rows, cols = len(board), len(board[0])
    reach = max(rows, cols)
    for dr, dc in directions:
        for radius in range(1, reach):
            r, c = row + radius * dr, col + radius * dc
            if not (0 <= r < rows and 0 <= c < cols):
                break
            if board[r][c]:
                return False
    return True


def is_safe_to_place(board: Sequence[Sequence[bool]], row: int, col: int) -> bool:
    """Return True if no queen attacks (row, col) from the left or above.

    Only the four directions that point back in row-major order are checked,
    which suffices when queens are placed cell by cell in that order.
    """
    if not board or not board[0]:
        raise ValueError("board must have at least one cell")
    return _is_clear(board, row, col, _BACKWARD)


def _empty_board(rows: int, cols: int) -> List[List[bool]]:
    return [[False] * cols for _ in range(rows)]


def n_queen_combinations(rows: int, cols: int, queens: int) -> List[Placement]:
    """Return every set of cells where no two identical queens attack."""
    _check_board(rows, cols, queens)
    board = _empty_board(rows, cols)
    total = rows * cols
    found: List[Placement] = []

    def place(start: int, chosen: Placement) -> None:
        if len(chosen) == queens:
            found.append(chosen)
            return
        for index in range(start, total):
            r, c = divmod(index, cols)
            if is_safe_to_place(board, r, c):
                board[r][c] = True
                place(index + 1, chosen + ((r, c),))
                board[r][c] = False

    place(0, ())
    return found


def n_queen_permutations(rows: int, cols: int, queens: int) -> List[Placement]:
    """Return every ordered placement of distinct, mutually safe queens."""
    _check_board(rows, cols, queens)
    board = _empty_board(rows, cols)
    total = rows * cols
    found: List[Placement] = []

    def place(chosen: Placement) -> None:
        if len(chosen) == queens:
            found.append(chosen)
            return
        for index in range(total):
            r, c = divmod(index, cols)
            if not board[r][c] and _is_clear(board, r, c, _ALL):
                board[r][c] = True
                place(chosen + ((r, c),))
                board[r][c] = False

    place(())
    return found


def n_queen_combinations_subsequence(
    rows: int, cols: int, queens: int
) -> List[Placement]:
    """Return safe placements by deciding, cell by cell, to use it or not."""
    _check_board(rows, cols, queens)
    board = _empty_board(rows, cols)
    total = rows * cols
    found: List[Placement] = []

    def decide(index: int, chosen: Placement) -> None:
        if len(chosen) == queens:
            found.append(chosen)
            return
        if index == total:
            return
        r, c = divmod(index, cols)
        if is_safe_to_place(board, r, c):
            board[r][c] = True
            decide(index + 1, chosen + ((r, c),))
            board[r][c] = False
        decide(index + 1, chosen)

    decide(0, ())
    return found


class _Shadow:
    """Occupied rows, columns and diagonals of a board."""

    def __init__(self, cols: int) -> None:
        self._cols = cols
        self._rows: Set[int] = set()
        self._columns: Set[int] = set()
        self._diagonals: Set[int] = set()
        self._anti: Set[int] = set()

    def free(self, r: int, c: int) -> bool:
        return (
            r not in self._rows
            and c not in self._columns
            and r + c not in self._diagonals
            and r - c + self._cols - 1 not in self._anti
        )

    def occupy(self, r: int, c: int) -> None:
        self._rows.add(r)
        self._columns.add(c)
        self._diagonals.add(r + c)
        self._anti.add(r - c + self._cols - 1)

    def release(self, r: int, c: int) -> None:
        self._rows.discard(r)
        self._columns.discard(c)
        self._diagonals.discard(r + c)
        self._anti.discard(r - c + self._cols - 1)


def _shadow_search(rows: int, cols: int, queens: int, ordered: bool) -> List[Placement]:
    _check_board(rows, cols, queens)
    shadow = _Shadow(cols)
    total = rows * cols
    found: List[Placement] = []

    def place(start: int, chosen: Placement) -> None:
        if len(chosen) == queens:
            found.append(chosen)
            return
        for index in range(start, total):
            r, c = divmod(index, cols)
            if shadow.free(r, c):
                shadow.occupy(r, c)
                place(0 if ordered else index + 1, chosen + ((r, c),))
                shadow.release(r, c)

    place(0, ())
    return found


def n_queen_combinations_shadow(rows: int, cols: int, queens: int) -> List[Placement]:
    """Return safe placements, tracking occupied lines in sets."""
    return _shadow_search(rows, cols, queens, ordered=False)


def n_queen_permutations_shadow(rows: int, cols: int, queens: int) -> List[Placement]:
    """Return ordered safe placements, tracking occupied lines in sets."""
    return _shadow_search(rows, cols, queens, ordered=True)


def n_queen_bitmask(rows: int, cols: int, queens: int) -> List[Placement]:
    """Return safe placements with one queen per row, starting at row 0.

    Occupied columns and diagonals are kept as bit masks.
    """
    _check_board(rows, cols, queens)
    found: List[Placement] = []

    def place(r: int, columns: int, diagonals: int, anti: int, chosen: Placement) -> None:
        if len(chosen) == queens:
            found.append(chosen)
            return
        if r == rows:
            return
        for c in range(cols):
            col_bit = 1 << c
            diag_bit = 1 << (r + c)
            anti_bit = 1 << (r - c + cols - 1)
            if columns & col_bit or diagonals & diag_bit or anti & anti_bit:
                continue
            place(
                r + 1,
                columns | col_bit,
                diagonals | diag_bit,
                anti | anti_bit,
                chosen + ((r, c),),
            )

    place(0, 0, 0, 0, ())
    return found