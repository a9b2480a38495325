from collections.abc import Callable, Iterable
from typing import TypeVar

from portfolio_scoring.models.portfolio import Holding

T = TypeVar("T")


def group_and_sum(
    items: Iterable[T],
    key_fn: Callable[[T], str],
    value_fn: Callable[[T], float],
) -> dict[str, float]:
    """Fold items into a mapping of key -> summed value, in first-seen order."""
    totals: dict[str, float] = {}
    for item in items:
        key = key_fn(item)
        totals[key] = totals.get(key, 0.0) + value_fn(item)
    return totals


def allocation_by_sector(holdings: Iterable[Holding]) -> dict[str, float]:
    return group_and_sum(holdings, lambda h: h.sector, lambda h: h.percentage)


def allocation_by_asset_class(holdings: Iterable[Holding]) -> dict[str, float]:
    return group_and_sum(holdings, lambda h: h.asset_class, lambda h: h.percentage)


def allocation_by_region(holdings: Iterable[Holding]) -> dict[str, float]:
    return group_and_sum(holdings, lambda h: h.region, lambda h: h.percentage)


def sum_matching(allocations: dict[str, float], keywords: Iterable[str]) -> float:
    """Sum allocations whose key contains any keyword, case-insensitively."""
    words = [w.lower() for w in keywords]
    return sum(
        pct
        for key, pct in allocations.items()
        if any(w in key.lower() for w in words)
    )


def sum_named(allocations: dict[str, float], names: Iterable[str]) -> float:
    return sum(allocations.get(name, 0.0) for name in names)
