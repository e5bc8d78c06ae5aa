"""Ways to make a target amount out of coins, by loops and by include/exclude."""

from typing import List, Sequence, Set, Tuple

Way = Tuple[int, ...]


def _validate(coins: Sequence[int], target: int) -> List[int]:
    values = list(coins)
    if any(value <= 0 for value in values):
        raise ValueError("coins must be positive")
    if target < 0:
        raise ValueError(f"target must not be negative, got {target}")
    return values


def permutations_infinite(coins: Sequence[int], target: int) -> List[Way]:
    """Return ordered sequences of coins, each usable any number of times."""
    values = _validate(coins, target)
    found: List[Way] = []

    def pay(remaining: int, used: Way) -> None:
        if remaining == 0:
            found.append(used)
            return
        for coin in values:
            if remaining - coin >= 0:
                pay(remaining - coin, used + (coin,))

    pay(target, ())
    return found


def combinations_infinite(coins: Sequence[int], target: int) -> List[Way]:
    """Return unordered selections of coins, each usable any number of times."""
    values = _validate(coins, target)
    found: List[Way] = []

    def pay(remaining: int, start: int, used: Way) -> None:
        if remaining == 0:
            found.append(used)
            return
        for i in range(start, len(values)):
            coin = values[i]
            if remaining - coin >= 0:
                pay(remaining - coin, i, used + (coin,))

    pay(target, 0, ())
    return found


def combinations_single(coins: Sequence[int], target: int) -> List[Way]:
    """Return unordered selections where each coin is used at most once."""
    values = _validate(coins, target)
    found: List[Way] = []

    def pay(remaining: int, start: int, used: Way) -> None:
        if remaining == 0:
            found.append(used)
            return
        for i in range(start, len(values)):
            coin = values[i]
            if remaining - coin >= 0:
                pay(remaining - coin, i + 1, used + (coin,))

    pay(target, 0, ())
    return found


def permutations_single(coins: Sequence[int], target: int) -> List[Way]:
    """Return ordered sequences where each coin is used at most once."""
    values = _validate(coins, target)
    found: List[Way] = []
    taken: Set[int] = set()

    def pay(remaining: int, used: Way) -> None:
        if remaining == 0:
            found.append(used)
            return
        for i, coin in enumerate(values):
            if i not in taken and remaining - coin >= 0:
                taken.add(i)
                pay(remaining - coin, used + (coin,))
                taken.discard(i)

    pay(target, ())
    return found


def combinations_infinite_subsequence(coins: Sequence[int], target: int) -> List[Way]:
    """Like :func:`combinations_infinite`, deciding coin by coin to use it again or move on."""
    values = _validate(coins, target)
    found: List[Way] = []

    def decide(remaining: int, idx: int, used: Way) -> None:
        if remaining == 0:
            found.append(used)
            return
        if idx == len(values):
            return
        coin = values[idx]
        if remaining - coin >= 0:
            decide(remaining - coin, idx, used + (coin,))
        decide(remaining, idx + 1, used)

    decide(target, 0, ())
    return found


def combinations_single_subsequence(coins: Sequence[int], target: int) -> List[Way]:
    """Like :func:`combinations_single`, deciding coin by coin to take it or skip it."""
    values = _validate(coins, target)
    found: List[Way] = []

    def decide(remaining: int, idx: int, used: Way) -> None:
        if remaining == 0:
            found.append(used)
            return
        if idx == len(values):
            return
        coin = values[idx]
        if remaining - coin >= 0:
            decide(remaining - coin, idx + 1, used + (coin,))
        decide(remaining, idx + 1, used)

    decide(target, 0, ())
    return found


def permutations_single_subsequence(coins: Sequence[int], target: int) -> List[Way]:
    """Like :func:`permutations_single`, scanning the coins and restarting after each pick."""
    values = _validate(coins, target)
    found: List[Way] = []
    taken: Set[int] = set()

    def decide(remaining: int, idx: int, used: Way) -> None:
        if remaining == 0:
            found.append(used)
            return
        if idx == len(values):
            return
        coin = values[idx]
        if idx not in taken and remaining - coin >= 0:
            taken.add(idx)
            decide(remaining - coin, 0, used + (coin,))
            taken.discard(idx)
        decide(remaining, idx + 1, used)

    decide(target, 0, ())
    return found