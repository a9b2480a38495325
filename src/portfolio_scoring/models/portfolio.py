from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class AssetType(StrEnum):
    STOCK = "Stock"
    ETF = "ETF"
    MUTUAL_FUND = "Mutual Fund"
    BOND = "Bond"
    COMMODITY = "Commodity"
    OTHER = "Other"

    @staticmethod
    def derive(asset_class: str, symbol: str = "") -> "AssetType":
        if "ETF" in asset_class:
            return AssetType.ETF
        if "Mutual Fund" in asset_class or "FUND" in symbol:
            return AssetType.MUTUAL_FUND
        if "Bond" in asset_class:
            return AssetType.BOND
        if "Commodity" in asset_class:
            return AssetType.COMMODITY
        if "Equity" in asset_class:
            return AssetType.STOCK
        return AssetType.OTHER


class Position(BaseModel):
    """A raw position as entered by the user, before weighting."""

    symbol: str
    value: float = Field(ge=0.0)
    name: str | None = None
    sector: str | None = None
    region: str | None = None
    asset_class: str | None = None


class Holding(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    name: str = ""
    sector: str = "Unknown"
    region: str = "Unknown"
    asset_class: str = "Unknown"
    asset_type: AssetType = AssetType.OTHER
    value: float = Field(default=0.0, ge=0.0)
    percentage: float = Field(default=0.0, ge=0.0, le=100.0)


class PortfolioBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_value: float = 0.0
    holdings_count: int = 0
    sector: dict[str, float] = {}
    asset_class: dict[str, float] = {}
    region: dict[str, float] = {}
