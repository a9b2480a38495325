import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from portfolio_scoring.config import TargetModelName
from portfolio_scoring.data.asset_catalog import get_default_catalog
from portfolio_scoring.data.holdings_loader import build_holdings, load_positions
from portfolio_scoring.engine import PortfolioEngine
from portfolio_scoring.output.renderer import PortfolioRenderer

logger = logging.getLogger(__name__)
console = Console()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="portfolio-score",
        description="Portfolio diversification scoring and insights",
    )
    sub = p.add_subparsers(dest="command")

    # --- analyze (default) ---
    analyze = sub.add_parser("analyze", help="Score a portfolio file")
    analyze.add_argument(
        "path",
        type=Path,
        help="JSON or CSV file of positions (symbol, value, ...)",
    )
    analyze.add_argument(
        "--model",
        choices=[m.value for m in TargetModelName],
        default=TargetModelName.BALANCED.value,
        help="Target allocation model for rebalancing alerts",
    )
    analyze.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    # --- search ---
    search = sub.add_parser("search", help="Search the asset catalog")
    search.add_argument("query", help="Symbol or name fragment")
    search.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return p


def _run_analyze(args: argparse.Namespace) -> None:
    path: Path = args.path
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        sys.exit(1)

    engine = PortfolioEngine()
    positions = load_positions(path)
    holdings = build_holdings(positions, engine.provider)
    if not holdings:
        console.print("[yellow]No positions found.[/yellow]")
        return

    scores = engine.compute_scores(holdings)
    metrics = engine.compute_advanced_metrics(holdings)
    insights = engine.generate_insights(holdings, args.model)
    recommendations = engine.generate_recommendations(holdings)

    PortfolioRenderer(console).render(
        holdings, scores, metrics, insights, recommendations, args.model
    )


def _run_search(args: argparse.Namespace) -> None:
    matches = get_default_catalog().search(args.query)
    if not matches:
        console.print(f"[yellow]No assets match '{args.query}'[/yellow]")
        return

    table = Table(title=f"Assets matching '{args.query}'", show_header=True)
    table.add_column("Symbol", style="cyan")
    table.add_column("Name")
    table.add_column("Sector")
    table.add_column("Region")
    table.add_column("Asset Class")
    table.add_column("Type")
    table.add_column("Liquidity")
    for a in matches:
        table.add_row(
            a.symbol,
            a.name,
            a.sector,
            a.region,
            a.asset_class,
            a.income_type.value,
            a.liquidity.value,
        )
    console.print(table)


def main() -> None:
    parser = build_parser()

    # `portfolio-score holdings.csv` scores the file: scoring a portfolio is the
    # tool's main job, so a bare path is shorthand for the analyze subcommand
    if len(sys.argv) > 1 and sys.argv[1] not in ("analyze", "search", "-h", "--help"):
        sys.argv.insert(1, "analyze")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        if args.command == "analyze":
            _run_analyze(args)
        elif args.command == "search":
            _run_search(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
