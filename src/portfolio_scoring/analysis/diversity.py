import math

import numpy as np

CONCENTRATION_THRESHOLD = 50.0
CONCENTRATION_PENALTY_SCALE = 20.0
SMALL_ALLOCATION_THRESHOLD = 10.0
SMALL_ALLOCATION_BONUS = 5.0


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def diversity_score(allocations: list[float]) -> float:
    """Entropy-based diversity of percentage allocations, 0-100.

    Normalized Shannon entropy over the non-zero allocations, less a
    quadratic penalty once a single allocation passes 50%, plus a small
    bonus for many positions under 10%. Fewer than two non-zero
    allocations score 0.
    """
    arr = np.asarray([a for a in allocations if a > 0], dtype=float)
    n = arr.size
    if n <= 1:
        return 0.0

    total = arr.sum()
    if total <= 0:
        return 0.0

    p = arr / total
    entropy = float(-np.sum(p * np.log2(p)))
    max_entropy = float(np.log2(n))
    base = entropy / max_entropy * 100 if max_entropy > 0 else 0.0

    largest = float(arr.max())
    penalty = 0.0
    if largest > CONCENTRATION_THRESHOLD:
        excess = (largest - CONCENTRATION_THRESHOLD) / CONCENTRATION_THRESHOLD
        penalty = CONCENTRATION_PENALTY_SCALE * excess**2

    small_count = int(np.count_nonzero(arr < SMALL_ALLOCATION_THRESHOLD))
    bonus = SMALL_ALLOCATION_BONUS * min(small_count * 0.1, 1.0)

    return clamp(base - penalty + bonus)


def round_score(value: float) -> int:
    """Round half up, so 62.5 scores 63 rather than banker's 62."""
    return math.floor(value + 0.5)


def round_half_up(value: float, digits: int = 0) -> float:
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale
