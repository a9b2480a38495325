import logging
from collections.abc import Mapping

from portfolio_scoring.analysis.diversity import clamp
from portfolio_scoring.analysis.grouping import (
    allocation_by_asset_class,
    allocation_by_sector,
)
from portfolio_scoring.config import (
    COMMODITIES_SECTOR,
    FIXED_INCOME_CLASSES,
    HOME_MARKET,
    INTERNATIONAL_EQUITY_ETF,
    LIQUIDITY_PENALTIES,
    LIQUIDITY_WARNING_THRESHOLD,
    MAJOR_SECTORS,
    REBALANCE_TOLERANCE,
    RISK_CONTRIBUTOR_LIMIT,
)
from portfolio_scoring.data.asset_catalog import AssetMetadataProvider
from portfolio_scoring.models.insights import (
    Impact,
    IncomeGrowthSplit,
    LiquidityRisk,
    PortfolioInsights,
    RebalancingAlert,
    RiskContributor,
)
from portfolio_scoring.models.metadata import IncomeType
from portfolio_scoring.models.portfolio import Holding

logger = logging.getLogger(__name__)

LIQUIDITY_WARNING = "Portfolio contains significant illiquid holdings"
WELL_DIVERSIFIED = (
    "Your portfolio shows good diversification! Consider periodic "
    "rebalancing to maintain target allocations."
)


class InsightEngine:
    def __init__(self, provider: AssetMetadataProvider) -> None:
        self.provider = provider

    def generate_insights(
        self,
        holdings: list[Holding],
        target_weights: Mapping[str, float],
    ) -> PortfolioInsights:
        if not holdings:
            return PortfolioInsights()

        return PortfolioInsights(
            top_risk_contributors=self.risk_contributors(holdings),
            diversification_gaps=self.diversification_gaps(holdings),
            income_vs_growth=self.income_vs_growth(holdings),
            liquidity_risk=self.liquidity_risk(holdings),
            rebalancing_alerts=self.rebalancing_alerts(holdings, target_weights),
        )

    def risk_contributors(self, holdings: list[Holding]) -> list[RiskContributor]:
        contributors = [
            RiskContributor(
                holding=f"{h.symbol} ({h.name})",
                reason=f"High concentration at {h.percentage:.1f}% of portfolio",
                impact=Impact.HIGH if h.percentage > 40 else Impact.MEDIUM,
            )
            for h in holdings
            if h.percentage > 25
        ][:RISK_CONTRIBUTOR_LIMIT]

        for sector, pct in allocation_by_sector(holdings).items():
            if pct > 40:
                contributors.append(
                    RiskContributor(
                        holding=f"{sector} (Sector)",
                        reason=f"High concentration at {pct:.1f}% of portfolio",
                        impact=Impact.HIGH if pct > 60 else Impact.MEDIUM,
                    )
                )
        return contributors

    def diversification_gaps(self, holdings: list[Holding]) -> list[str]:
        sectors = {h.sector for h in holdings}
        asset_classes = {h.asset_class for h in holdings}
        regions = {h.region for h in holdings}

        gaps = [
            f"No exposure to {sector} sector"
            for sector in MAJOR_SECTORS
            if sector not in sectors
        ]
        if not asset_classes & FIXED_INCOME_CLASSES:
            gaps.append("No fixed income securities for stability")
        if INTERNATIONAL_EQUITY_ETF not in asset_classes:
            gaps.append("No international exposure for global diversification")
        if regions == {HOME_MARKET}:
            gaps.append("Fully concentrated in Indian markets")
        return gaps

    def income_vs_growth(self, holdings: list[Holding]) -> IncomeGrowthSplit:
        income = 0.0
        growth = 0.0
        for h in holdings:
            info = self.provider.resolve(h.symbol)
            if info is None:
                continue
            if info.income_type == IncomeType.INCOME:
                income += h.percentage
            else:
                growth += h.percentage
        return IncomeGrowthSplit(income=income, growth=growth)

    def liquidity_risk(self, holdings: list[Holding]) -> LiquidityRisk:
        score = 100.0
        for h in holdings:
            info = self.provider.resolve(h.symbol)
            if info is None:
                continue
            score -= h.percentage * LIQUIDITY_PENALTIES.get(info.liquidity, 0.0)

        score = clamp(score)
        warning = LIQUIDITY_WARNING if score < LIQUIDITY_WARNING_THRESHOLD else ""
        return LiquidityRisk(score=score, warning=warning)

    def rebalancing_alerts(
        self,
        holdings: list[Holding],
        target_weights: Mapping[str, float],
    ) -> list[RebalancingAlert]:
        current = allocation_by_asset_class(holdings)
        alerts: list[RebalancingAlert] = []
        for asset_class, target in target_weights.items():
            actual = current.get(asset_class, 0.0)
            deviation = actual - target
            if abs(deviation) > REBALANCE_TOLERANCE:
                alerts.append(
                    RebalancingAlert(
                        category=asset_class,
                        current=actual,
                        target=target,
                        deviation=deviation,
                    )
                )
        return alerts

    def generate_recommendations(self, holdings: list[Holding]) -> list[str]:
        if not holdings:
            return []

        recs: list[str] = []

        if len(holdings) < 8:
            recs.append(
                "Consider adding more holdings to achieve better diversification "
                "(aim for 8-15 holdings)"
            )

        top_sector = max(allocation_by_sector(holdings).values())
        if top_sector > 40:
            recs.append(
                f"Reduce concentration in your largest sector ({top_sector:.1f}%) "
                "to below 30%"
            )

        if max(h.percentage for h in holdings) > 20:
            recs.append(
                "Consider reducing your largest holding to below 20% of total "
                "portfolio"
            )

        asset_classes = {h.asset_class for h in holdings}
        if not asset_classes & FIXED_INCOME_CLASSES:
            recs.append(
                "Add fixed income securities (bonds) for portfolio stability "
                "and regular income"
            )
        if INTERNATIONAL_EQUITY_ETF not in asset_classes:
            recs.append(
                "Consider adding international exposure through global ETFs "
                "for better diversification"
            )

        if not any(h.sector == COMMODITIES_SECTOR for h in holdings):
            recs.append(
                "Consider adding commodity exposure (Gold ETF) as an inflation hedge"
            )

        if self.income_vs_growth(holdings).income < 20:
            recs.append(
                "Consider adding more dividend-paying stocks or bonds for "
                "regular income generation"
            )

        if not recs:
            recs.append(WELL_DIVERSIFIED)
        return recs
