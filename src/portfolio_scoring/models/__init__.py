from portfolio_scoring.models.insights import PortfolioInsights
from portfolio_scoring.models.metadata import AssetInfo
from portfolio_scoring.models.portfolio import AssetType, Holding, Position
from portfolio_scoring.models.scores import AdvancedMetrics, DiversificationScores

__all__ = [
    "AdvancedMetrics",
    "AssetInfo",
    "AssetType",
    "DiversificationScores",
    "Holding",
    "PortfolioInsights",
    "Position",
]
