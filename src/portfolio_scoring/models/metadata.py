from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class IncomeType(StrEnum):
    INCOME = "income"
    GROWTH = "growth"


class LiquidityTier(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class AssetInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    name: str
    sector: str
    region: str
    asset_class: str
    income_type: IncomeType
    liquidity: LiquidityTier
