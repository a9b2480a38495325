from pydantic import BaseModel, ConfigDict, Field


class DiversificationScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall: int = Field(default=0, ge=0, le=100)
    sector: int = Field(default=0, ge=0, le=100)
    asset_class: int = Field(default=0, ge=0, le=100)
    geographic: int = Field(default=0, ge=0, le=100)
    concentration: int = Field(default=0, ge=0, le=100)


class AdvancedMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    herfindahl_index: int = Field(default=0, ge=0, le=10_000)
    effective_number_of_holdings: float = Field(default=0.0, ge=0.0)
    correlation_risk: int = Field(default=0, ge=0, le=100)
    concentration_by_value: int = Field(default=0, ge=0, le=100)
    diversification_ratio: float = Field(default=0.0, ge=0.0, le=1.0)
