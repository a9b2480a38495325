"""Sector, asset-class and geographic diversification scores."""

from portfolio_scoring.analysis.diversity import clamp, diversity_score
from portfolio_scoring.analysis.grouping import (
    allocation_by_asset_class,
    allocation_by_region,
    allocation_by_sector,
    sum_matching,
    sum_named,
)
from portfolio_scoring.config import (
    ALTERNATIVE_KEYWORDS,
    BOND_KEYWORDS,
    CYCLICAL_SECTORS,
    DEFENSIVE_SECTORS,
    DEVELOPED_MARKETS,
    EMERGING_MARKETS,
    EQUITY_KEYWORDS,
    INTERNATIONAL_KEYWORDS,
    TECHNOLOGY_SECTOR,
)
from portfolio_scoring.models.portfolio import Holding


def sector_score(holdings: list[Holding]) -> float:
    allocations = allocation_by_sector(holdings)
    score = diversity_score(list(allocations.values()))

    cyclical = sum_named(allocations, CYCLICAL_SECTORS)
    if cyclical > 60:
        score -= 15
    elif cyclical > 40:
        score -= 10

    if any(allocations.get(s, 0.0) > 5 for s in DEFENSIVE_SECTORS):
        score += 5

    tech = allocations.get(TECHNOLOGY_SECTOR, 0.0)
    if tech < 5:
        score -= 10
    elif tech > 30:
        score -= 5

    return clamp(score)


def asset_class_score(holdings: list[Holding]) -> float:
    allocations = allocation_by_asset_class(holdings)
    score = diversity_score(list(allocations.values()))

    bonds = sum_matching(allocations, BOND_KEYWORDS)
    if 10 < bonds < 40:
        score += 10
    elif bonds > 5:
        score += 5

    international = sum_matching(allocations, INTERNATIONAL_KEYWORDS)
    if international > 10:
        score += 10
    elif international > 5:
        score += 5

    equity = sum_matching(allocations, EQUITY_KEYWORDS)
    if equity > 90:
        score -= 15
    elif equity > 80:
        score -= 10

    alternatives = sum_matching(allocations, ALTERNATIVE_KEYWORDS)
    if 5 < alternatives < 20:
        score += 5

    return clamp(score)


def geographic_score(holdings: list[Holding]) -> float:
    allocations = allocation_by_region(holdings)
    score = diversity_score(list(allocations.values()))

    largest = max(allocations.values(), default=0.0)
    if largest > 85:
        score -= 20
    elif largest > 70:
        score -= 15
    elif largest > 60:
        score -= 10

    developed = sum_named(allocations, DEVELOPED_MARKETS)
    if 20 < developed < 60:
        score += 5

    emerging = sum_named(allocations, EMERGING_MARKETS)
    if 10 < emerging < 40:
        score += 5
    elif emerging > 50:
        score -= 10

    return clamp(score)
