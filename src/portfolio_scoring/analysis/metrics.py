import numpy as np

from portfolio_scoring.analysis.diversity import clamp, round_half_up, round_score
from portfolio_scoring.analysis.grouping import (
    allocation_by_asset_class,
    allocation_by_region,
    allocation_by_sector,
)
from portfolio_scoring.models.portfolio import Holding, PortfolioBreakdown
from portfolio_scoring.models.scores import AdvancedMetrics


def herfindahl_index(allocations: list[float]) -> float:
    """HHI on a 0-10000 scale from percentage allocations."""
    if not allocations:
        return 0.0
    p = np.asarray(allocations, dtype=float) / 100
    return float(np.sum(p**2) * 10_000)


def effective_holdings(allocations: list[float]) -> float:
    hhi = herfindahl_index(allocations)
    return 10_000 / hhi if hhi > 0 else 0.0


def compute_advanced_metrics(holdings: list[Holding]) -> AdvancedMetrics:
    if not holdings:
        return AdvancedMetrics()

    allocations = [h.percentage for h in holdings]
    hhi = herfindahl_index(allocations)
    effective = effective_holdings(allocations)

    correlation_risk = max(allocation_by_sector(holdings).values())

    total_value = sum(h.value for h in holdings)
    by_value = (
        max(h.value for h in holdings) / total_value * 100 if total_value > 0 else 0.0
    )

    ratio = effective / len(holdings)

    return AdvancedMetrics(
        herfindahl_index=round_score(clamp(hhi, 0, 10_000)),
        effective_number_of_holdings=round_half_up(effective, 1),
        correlation_risk=round_score(clamp(correlation_risk)),
        concentration_by_value=round_score(clamp(by_value)),
        diversification_ratio=round_half_up(clamp(ratio, 0, 1), 2),
    )


def portfolio_breakdown(holdings: list[Holding]) -> PortfolioBreakdown:
    return PortfolioBreakdown(
        total_value=sum(h.value for h in holdings),
        holdings_count=len(holdings),
        sector=allocation_by_sector(holdings),
        asset_class=allocation_by_asset_class(holdings),
        region=allocation_by_region(holdings),
    )
