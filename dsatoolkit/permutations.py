"""Recursive enumeration of equal-sum partitions and string permutations."""

from typing import Iterable, List, Tuple

Partition = Tuple[Tuple[int, ...], Tuple[int, ...]]


def equal_sum_partitions(values: Iterable[int]) -> List[Partition]:
    """Return every split of ``values`` into two groups with equal sums.

    The first value is always placed in the left group, so mirrored splits
    are not reported twice.
    """
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    found: List[Partition] = []

    def split(idx: int, left: Tuple[int, ...], right: Tuple[int, ...],
              left_sum: int, right_sum: int) -> None:
        if idx == len(items):
            if left_sum == right_sum:
                found.append((left, right))
            return
        value = items[idx]
        split(idx + 1, left + (value,), right, left_sum + value, right_sum)
        split(idx + 1, left, right + (value,), left_sum, right_sum + value)

    first = items[0]
    split(1, (first,), (), first, 0)
    return found


def permutations(text: str) -> List[str]:
    """Return every arrangement of the characters, duplicates included."""
    found: List[str] = []

    def build(rest: str, built: str) -> None:
        if not rest:
            found.append(built)
            return
        for i, ch in enumerate(rest):
            build(rest[:i] + rest[i + 1:], built + ch)

    build(text, "")
    return found


def distinct_permutations(text: str) -> List[str]:
    """Return each distinct arrangement of the characters once.

    Characters are picked once per level and prepended to the result.
    """
    found: List[str] = []

    def build(rest: str, built: str) -> None:
        if not rest:
            found.append(built)
            return
        seen = set()
        for i, ch in enumerate(rest):
            if ch in seen:
                continue
            seen.add(ch)
            build(rest[:i] + rest[i + 1:], ch + built)

    build(text, "")
    return found


def sorted_distinct_permutations(text: str) -> List[str]:
    """Return distinct arrangements by skipping repeats of the previous character.

    The result is free of duplicates only when ``text`` is sorted.
    """
    found: List[str] = []

    def build(rest: str, built: str) -> None:
        if not rest:
            found.append(built)
            return
        previous = None
        for i, ch in enumerate(rest):
            if ch != previous:
                build(rest[:i] + rest[i + 1:], ch + built)
            previous = ch

    build(text, "")
    return found