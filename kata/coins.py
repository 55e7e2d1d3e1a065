"""Minimum-coin change making."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def _solve(amount: int, denominations: Sequence[int]) -> list[int] | None:
    """Return the coins of one minimal combination, or None if impossible."""
    if amount < 0:
        raise ValueError(f"amount must not be negative: {amount}")
    if any(coin <= 0 for coin in denominations):
        raise ValueError("denominations must be positive")

    best: list[int | None] = [0] + [None] * amount
    last_coin = [0] * (amount + 1)
    for value in range(1, amount + 1):
        for coin in denominations:
            if coin > value:
                continue
            previous = best[value - coin]
            if previous is None:
                continue
            current = best[value]
            if current is None or previous + 1 < current:
                best[value] = previous + 1
                last_coin[value] = coin

    if best[amount] is None:
        return None

    coins = []
    remaining = amount
    while remaining > 0:
        coin = last_coin[remaining]
        coins.append(coin)
        remaining -= coin
    return coins


def min_coins(amount: int, denominations: Sequence[int]) -> int:
    """Return the fewest coins that make ``amount``, or -1 if it cannot be made."""
    coins = _solve(amount, denominations)
    return -1 if coins is None else len(coins)


def coin_combination(amount: int, denominations: Sequence[int]) -> dict[int, int]:
    """Return a minimal combination as ``{denomination: count}``.

    The result is empty when the amount is zero or cannot be made.
    """
    coins = _solve(amount, denominations)
    if coins is None:
        return {}
    return dict(sorted(Counter(coins).items()))