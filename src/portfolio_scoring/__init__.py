from portfolio_scoring.engine import (
    PortfolioEngine,
    compute_advanced_metrics,
    compute_scores,
    generate_insights,
    generate_recommendations,
)

__all__ = [
    "PortfolioEngine",
    "compute_advanced_metrics",
    "compute_scores",
    "generate_insights",
    "generate_recommendations",
]
