"""Monotonic-stack queries (next greater or smaller) and bracket matching."""

import argparse
import sys
from typing import Callable, Dict, Iterable, List, Optional, Sequence

NOT_FOUND = -1

_OPENING = frozenset("({[")
_MATCHING = {")": "(", "}": "{", "]": "["}


def _scan(
    values: Sequence[int],
    indices: Iterable[int],
    beats: Callable[[int, int], bool],
) -> List[int]:
    """Assign to each index the first later-scanned value that beats it."""
    result = [NOT_FOUND] * len(values)
    pending: List[int] = []
    for i in indices:
        current = values[i]
        while pending and beats(current, values[pending[-1]]):
            result[pending.pop()] = current
        pending.append(i)
    return result


def _greater(a: int, b: int) -> bool:
    return a > b


def _smaller(a: int, b: int) -> bool:
    return a < b


def next_greater_right(values: Sequence[int]) -> List[int]:
    """For each value, the first strictly greater value to its right, or -1."""
    return _scan(values, range(len(values)), _greater)


def next_greater_left(values: Sequence[int]) -> List[int]:
    """For each value, the nearest strictly greater value to its left, or -1."""
    return _scan(values, reversed(range(len(values))), _greater)


def next_smaller_right(values: Sequence[int]) -> List[int]:
    """For each value, the first strictly smaller value to its right, or -1."""
    return _scan(values, range(len(values)), _smaller)


def next_smaller_left(values: Sequence[int]) -> List[int]:
    """For each value, the nearest strictly smaller value to its left, or -1."""
    return _scan(values, reversed(range(len(values))), _smaller)


def next_greater_element(queries: Iterable[int], values: Sequence[int]) -> List[int]:
    """Look up, for each query, the next greater value right of it in ``values``.

    When a value occurs more than once, its first occurrence is used.
    Raises ValueError if a query does not occur in ``values``.
    """
    answers: Dict[int, int] = {}
    for value, greater in zip(values, next_greater_right(values)):
        answers.setdefault(value, greater)
    result = []
    for query in queries:
        if query not in answers:
            raise ValueError(f"{query} does not occur in the values")
        result.append(answers[query])
    return result


def next_greater_circular(values: Sequence[int]) -> List[int]:
    """Like :func:`next_greater_right`, wrapping around past the end once."""
    n = len(values)
    result = [NOT_FOUND] * n
    pending: List[int] = []
    for step in range(2 * n):
        current = values[step % n]
        while pending and values[pending[-1]] < current:
            result[pending.pop()] = current
        if step < n:
            pending.append(step)
    return result


def is_valid_brackets(text: str) -> bool:
    """Return True if the brackets in ``text`` are balanced and properly nested.

    Every character that is not an opening bracket closes the innermost
    open one; a mismatched closing bracket makes the text invalid.
    """
    if len(text) % 2:
        return False
    stack: List[str] = []
    for ch in text:
        if ch in _OPENING:
            stack.append(ch)
            continue
        if not stack:
            return False
        expected = _MATCHING.get(ch)
        if expected is not None and stack[-1] != expected:
            return False
        stack.pop()
    return not stack


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a count and that many integers from stdin; print the next greater of each."""
    parser = argparse.ArgumentParser(
        prog="nextgreater",
        description=(
            "Read N followed by N integers from standard input and print, one per "
            "line, the next greater element to the right of each (-1 if none)."
        ),
    )
    parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        print(f"nextgreater: invalid integer: {exc}", file=sys.stderr)
        return 1
    if not numbers:
        print("nextgreater: missing element count", file=sys.stderr)
        return 1
    count, rest = numbers[0], numbers[1:]
    if count < 0 or len(rest) < count:
        print(f"nextgreater: expected {count} values, got {len(rest)}", file=sys.stderr)
        return 1
    for value in next_greater_right(rest[:count]):
        print(value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())