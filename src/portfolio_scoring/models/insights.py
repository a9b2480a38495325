from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Impact(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RiskContributor(BaseModel):
    model_config = ConfigDict(frozen=True)

    holding: str
    reason: str
    impact: Impact


class IncomeGrowthSplit(BaseModel):
    model_config = ConfigDict(frozen=True)

    income: float = 0.0
    growth: float = 0.0


class LiquidityRisk(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = Field(default=100.0, ge=0.0, le=100.0)
    warning: str = ""


class RebalancingAlert(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    current: float
    target: float
    deviation: float


class PortfolioInsights(BaseModel):
    model_config = ConfigDict(frozen=True)

    top_risk_contributors: list[RiskContributor] = []
    diversification_gaps: list[str] = []
    income_vs_growth: IncomeGrowthSplit = IncomeGrowthSplit()
    liquidity_risk: LiquidityRisk = LiquidityRisk()
    rebalancing_alerts: list[RebalancingAlert] = []
