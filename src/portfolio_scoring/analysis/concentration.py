import logging

from portfolio_scoring.analysis.diversity import clamp
from portfolio_scoring.models.portfolio import Holding

logger = logging.getLogger(__name__)

# (threshold, adjustment) pairs, checked in order; first match wins
TOP1_TIERS = ((70, -50), (50, -35), (30, -20), (20, -10), (15, -5))
TOP3_TIERS = ((90, -30), (80, -25), (70, -20), (60, -15), (50, -10))
TOP5_TIERS = ((95, -20), (85, -15), (75, -10))
SMALL_RATIO_TIERS = ((0.5, 10), (0.3, 5))
SMALL_HOLDING_PCT = 2.0
RANKING_DIVERGENCE_BONUS = 5


def _tier(value: float, tiers: tuple[tuple[float, int], ...]) -> int:
    for threshold, adjustment in tiers:
        if value > threshold:
            return adjustment
    return 0


def _count_adjustment(count: int) -> int:
    if count < 5:
        return -25
    if count < 10:
        return -15
    if count < 15:
        return -5
    if count > 50:
        return 10
    if count > 30:
        return 5
    return 0


def _largest(holdings: list[Holding], key) -> Holding:
    # max() keeps the first of equal items, so ties resolve by list order
    return max(holdings, key=key)


def concentration_score(holdings: list[Holding]) -> float:
    """Score 0-100 where 100 means no single-name concentration risk."""
    if not holdings:
        return 0.0

    # sorted() is stable, so equal percentages keep list order
    ranked = sorted(holdings, key=lambda h: h.percentage, reverse=True)
    top1 = ranked[0].percentage
    top3 = sum(h.percentage for h in ranked[:3])
    top5 = sum(h.percentage for h in ranked[:5])

    score = 100
    score += _tier(top1, TOP1_TIERS)
    score += _tier(top3, TOP3_TIERS)
    score += _tier(top5, TOP5_TIERS)
    score += _count_adjustment(len(holdings))

    by_value = _largest(holdings, lambda h: h.value)
    by_pct = _largest(holdings, lambda h: h.percentage)
    if by_value.symbol != by_pct.symbol:
        score += RANKING_DIVERGENCE_BONUS

    small_ratio = sum(1 for h in holdings if h.percentage < SMALL_HOLDING_PCT) / len(
        holdings
    )
    score += _tier(small_ratio, SMALL_RATIO_TIERS)

    logger.debug(
        "Concentration: top1=%.1f top3=%.1f top5=%.1f n=%d -> %d",
        top1,
        top3,
        top5,
        len(holdings),
        score,
    )
    return clamp(score)
