from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from portfolio_scoring.config import allocation_rationale
from portfolio_scoring.models.insights import PortfolioInsights
from portfolio_scoring.models.portfolio import Holding
from portfolio_scoring.models.scores import AdvancedMetrics, DiversificationScores
from portfolio_scoring.output.formatters import (
    fmt_deviation,
    fmt_number,
    fmt_pct,
    fmt_value,
    impact_color,
    score_bar,
    score_color,
    score_label,
)


class PortfolioRenderer:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(
        self,
        holdings: list[Holding],
        scores: DiversificationScores,
        metrics: AdvancedMetrics,
        insights: PortfolioInsights,
        recommendations: list[str],
        model_name: str,
    ) -> None:
        self._render_header(holdings, scores)
        self._render_holdings(holdings)
        self._render_scores(scores)
        self._render_metrics(metrics)
        self._render_insights(insights)
        self._render_rebalancing(insights, model_name)
        self._render_recommendations(recommendations)

    def _render_header(
        self, holdings: list[Holding], scores: DiversificationScores
    ) -> None:
        total = sum(h.value for h in holdings)
        color = score_color(scores.overall)
        self.console.print()
        self.console.print(
            Panel(
                f"[{color}]{scores.overall}/100 ({score_label(scores.overall)})"
                f"[/{color}]  |  {len(holdings)} holdings  |  "
                f"Total value {fmt_value(total)}",
                title="Portfolio Diversification",
                style="cyan",
            )
        )

    def _render_holdings(self, holdings: list[Holding]) -> None:
        table = Table(title="Holdings", show_header=True)
        table.add_column("Symbol", style="cyan")
        table.add_column("Name")
        table.add_column("Sector")
        table.add_column("Region")
        table.add_column("Asset Class")
        table.add_column("Type")
        table.add_column("Value", justify="right")
        table.add_column("Weight", justify="right")

        for h in sorted(holdings, key=lambda h: h.percentage, reverse=True):
            table.add_row(
                h.symbol,
                h.name,
                h.sector,
                h.region,
                h.asset_class,
                h.asset_type.value,
                fmt_value(h.value),
                fmt_pct(h.percentage),
            )
        self.console.print(table)

    def _render_scores(self, scores: DiversificationScores) -> None:
        table = Table(title="Diversification Scores", show_header=True)
        table.add_column("Dimension", style="cyan")
        table.add_column("Score", justify="right")
        table.add_column("", justify="left")

        rows = [
            ("Sector", scores.sector),
            ("Asset Class", scores.asset_class),
            ("Geographic", scores.geographic),
            ("Concentration", scores.concentration),
            ("Overall", scores.overall),
        ]
        for name, score in rows:
            color = score_color(score)
            table.add_row(
                name,
                f"[{color}]{score}[/{color}]",
                f"[{color}]{score_bar(score)}[/{color}]",
            )
        self.console.print(table)

    def _render_metrics(self, metrics: AdvancedMetrics) -> None:
        table = Table(title="Risk Metrics", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")

        table.add_row("Herfindahl Index", str(metrics.herfindahl_index))
        table.add_row(
            "Effective Holdings", fmt_number(metrics.effective_number_of_holdings, 1)
        )
        table.add_row("Largest Sector", fmt_pct(metrics.correlation_risk, 0))
        table.add_row("Largest Position", fmt_pct(metrics.concentration_by_value, 0))
        table.add_row(
            "Diversification Ratio", fmt_number(metrics.diversification_ratio)
        )
        self.console.print(table)

    def _render_insights(self, insights: PortfolioInsights) -> None:
        if insights.top_risk_contributors:
            table = Table(title="Top Risk Contributors", show_header=True)
            table.add_column("Holding", style="cyan")
            table.add_column("Reason")
            table.add_column("Impact")
            for rc in insights.top_risk_contributors:
                color = impact_color(rc.impact)
                table.add_row(
                    rc.holding, rc.reason, f"[{color}]{rc.impact.value}[/{color}]"
                )
            self.console.print(table)

        split = insights.income_vs_growth
        lines = [
            f"Income: {fmt_pct(split.income)}  |  Growth: {fmt_pct(split.growth)}",
            f"Liquidity score: {fmt_number(insights.liquidity_risk.score, 0)}/100",
        ]
        if insights.liquidity_risk.warning:
            lines.append(f"[orange3]{insights.liquidity_risk.warning}[/orange3]")
        for gap in insights.diversification_gaps:
            lines.append(f"[yellow]- {gap}[/yellow]")
        self.console.print(Panel("\n".join(lines), title="Insights"))

    def _render_rebalancing(self, insights: PortfolioInsights, model_name: str) -> None:
        if not insights.rebalancing_alerts:
            self.console.print(
                f"[green]Allocation is within tolerance of the {model_name} model."
                "[/green]"
            )
            return

        table = Table(title=f"Rebalancing vs {model_name} model", show_header=True)
        table.add_column("Asset Class", style="cyan")
        table.add_column("Current", justify="right")
        table.add_column("Target", justify="right")
        table.add_column("Deviation", justify="right")
        table.add_column("Why it matters")

        for alert in insights.rebalancing_alerts:
            color = "red" if alert.deviation > 0 else "yellow"
            rationale = allocation_rationale(alert.category)
            table.add_row(
                alert.category,
                fmt_pct(alert.current),
                fmt_pct(alert.target, 0),
                f"[{color}]{fmt_deviation(alert.deviation)}[/{color}]",
                rationale.reason if rationale else "",
            )
        self.console.print(table)

    def _render_recommendations(self, recommendations: list[str]) -> None:
        if not recommendations:
            return
        body = "\n".join(f"{i}. {r}" for i, r in enumerate(recommendations, 1))
        self.console.print(Panel(body, title="Recommendations", style="green"))
