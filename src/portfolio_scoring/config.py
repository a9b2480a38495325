from enum import StrEnum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field


class TargetModelName(StrEnum):
    AGGRESSIVE = "aggressive"
    BALANCED = "balanced"
    CONSERVATIVE = "conservative"


LARGE_CAP_EQUITY = "Large Cap Equity"
MID_CAP_EQUITY = "Mid Cap Equity"
INTERNATIONAL_EQUITY_ETF = "International Equity ETF"
GOVERNMENT_BONDS = "Government Bonds"
CORPORATE_BONDS = "Corporate Bonds"
COMMODITY_ETF = "Commodity ETF"

FIXED_INCOME_CLASSES: frozenset[str] = frozenset({GOVERNMENT_BONDS, CORPORATE_BONDS})

TARGET_MODELS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        TargetModelName.AGGRESSIVE: MappingProxyType(
            {
                LARGE_CAP_EQUITY: 40,
                MID_CAP_EQUITY: 30,
                INTERNATIONAL_EQUITY_ETF: 20,
                GOVERNMENT_BONDS: 5,
                CORPORATE_BONDS: 5,
            }
        ),
        TargetModelName.BALANCED: MappingProxyType(
            {
                LARGE_CAP_EQUITY: 50,
                MID_CAP_EQUITY: 20,
                INTERNATIONAL_EQUITY_ETF: 15,
                GOVERNMENT_BONDS: 10,
                CORPORATE_BONDS: 5,
            }
        ),
        TargetModelName.CONSERVATIVE: MappingProxyType(
            {
                LARGE_CAP_EQUITY: 40,
                MID_CAP_EQUITY: 10,
                INTERNATIONAL_EQUITY_ETF: 10,
                GOVERNMENT_BONDS: 25,
                CORPORATE_BONDS: 15,
            }
        ),
    }
)

# Sector groups used by the sector scorer
CYCLICAL_SECTORS: tuple[str, ...] = (
    "Banking",
    "Real Estate",
    "Automobile",
    "Construction",
    "Metals",
)
DEFENSIVE_SECTORS: tuple[str, ...] = (
    "Healthcare",
    "Consumer Staples",
    "Utilities",
    "Pharmaceuticals",
)
TECHNOLOGY_SECTOR = "Technology"
COMMODITIES_SECTOR = "Commodities"

# Sectors every portfolio is expected to touch; a missing one is a gap
MAJOR_SECTORS: tuple[str, ...] = (
    "Banking & Financial Services",
    "Information Technology",
    "Pharmaceuticals",
    "Consumer Goods",
)

DEVELOPED_MARKETS: tuple[str, ...] = ("US", "Europe", "Japan", "Australia", "Canada")
EMERGING_MARKETS: tuple[str, ...] = (
    "India",
    "China",
    "Brazil",
    "Asia Pacific",
    "Latin America",
)
HOME_MARKET = "India"

# Substrings matched case-insensitively against asset class names
BOND_KEYWORDS: tuple[str, ...] = ("bond",)
INTERNATIONAL_KEYWORDS: tuple[str, ...] = ("international", "global")
EQUITY_KEYWORDS: tuple[str, ...] = ("equity", "stock")
ALTERNATIVE_KEYWORDS: tuple[str, ...] = ("commodity", "reit", "gold")

DIMENSION_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "sector": 0.25,
        "asset_class": 0.30,
        "geographic": 0.20,
        "concentration": 0.25,
    }
)

REBALANCE_TOLERANCE = 5.0
RISK_CONTRIBUTOR_LIMIT = 3
LIQUIDITY_WARNING_THRESHOLD = 80.0
LIQUIDITY_PENALTIES: Mapping[str, float] = MappingProxyType({"low": 0.5, "medium": 0.2})


class AllocationRationale(BaseModel):
    model_config = ConfigDict(frozen=True)

    reason: str
    benefits: tuple[str, ...]


ALLOCATION_RATIONALE: Mapping[str, AllocationRationale] = MappingProxyType(
    {
        LARGE_CAP_EQUITY: AllocationRationale(
            reason=(
                "Large cap stocks provide stability and steady growth "
                "with lower volatility"
            ),
            benefits=(
                "Lower risk than small caps",
                "Steady dividend income",
                "Market leadership",
                "Economic moats",
            ),
        ),
        MID_CAP_EQUITY: AllocationRationale(
            reason="Mid cap stocks offer balanced growth potential with moderate risk",
            benefits=(
                "Higher growth potential",
                "Less volatile than small caps",
                "Good diversification",
                "Emerging market leaders",
            ),
        ),
        INTERNATIONAL_EQUITY_ETF: AllocationRationale(
            reason="International exposure reduces geographic concentration risk",
            benefits=(
                "Geographic diversification",
                "Currency hedging",
                "Access to global markets",
                "Reduced country-specific risk",
            ),
        ),
        GOVERNMENT_BONDS: AllocationRationale(
            reason="Government bonds provide capital preservation and steady income",
            benefits=(
                "Capital preservation",
                "Steady income",
                "Low credit risk",
                "Portfolio stability",
            ),
        ),
        CORPORATE_BONDS: AllocationRationale(
            reason=(
                "Corporate bonds offer higher yields than government bonds "
                "with acceptable risk"
            ),
            benefits=(
                "Higher yields",
                "Credit diversification",
                "Fixed income",
                "Portfolio balance",
            ),
        ),
        COMMODITY_ETF: AllocationRationale(
            reason=(
                "Commodities provide inflation protection and portfolio "
                "diversification"
            ),
            benefits=(
                "Inflation hedge",
                "Portfolio diversification",
                "Tangible assets",
                "Economic cycle protection",
            ),
        ),
    }
)


def allocation_rationale(asset_class: str) -> AllocationRationale | None:
    return ALLOCATION_RATIONALE.get(asset_class)


def _default_target_models() -> dict[str, dict[str, float]]:
    return {str(name): dict(weights) for name, weights in TARGET_MODELS.items()}


class ScoringConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_holdings: int = Field(default=10_000, gt=0)
    default_target_model: str = TargetModelName.BALANCED
    target_models: dict[str, dict[str, float]] = Field(
        default_factory=_default_target_models
    )
