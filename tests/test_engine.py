import pytest

from portfolio_scoring.config import ScoringConfig, TargetModelName
from portfolio_scoring.data.asset_catalog import StaticAssetCatalog
from portfolio_scoring.data.holdings_loader import build_holdings
from portfolio_scoring.engine import (
    PortfolioEngine,
    compute_advanced_metrics,
    compute_scores,
    generate_insights,
    generate_recommendations,
)
from portfolio_scoring.errors import (
    PortfolioScoringError,
    PortfolioTooLargeError,
    UnknownTargetModelError,
)
from portfolio_scoring.models.insights import PortfolioInsights
from portfolio_scoring.models.portfolio import Position
from portfolio_scoring.models.scores import AdvancedMetrics, DiversificationScores


def make_positions(*rows):
    return [
        Position(symbol=s, value=v, sector=sec, region=reg, asset_class=ac)
        for s, v, sec, reg, ac in rows
    ]


def sample_portfolio():
    catalog = StaticAssetCatalog()
    values = {
        "RELIANCE": 120_000,
        "TCS": 90_000,
        "HDFCBANK": 80_000,
        "INFY": 60_000,
        "SUNPHARMA": 40_000,
        "ITC": 35_000,
        "NASDAQ100": 50_000,
        "GOLDETF": 25_000,
        "GILT10YR": 45_000,
        "CORPBOND": 30_000,
        "REIT": 25_000,
    }
    positions = [Position(symbol=s, value=v) for s, v in values.items()]
    return build_holdings(positions, catalog)


class TestEmptyPortfolio:
    def test_scores_are_zero(self):
        assert compute_scores([]) == DiversificationScores()

    def test_metrics_are_zero(self):
        assert compute_advanced_metrics([]) == AdvancedMetrics()

    def test_insights_are_empty(self):
        insights = generate_insights([], "balanced")
        assert insights == PortfolioInsights()
        assert insights.top_risk_contributors == []
        assert insights.rebalancing_alerts == []

    def test_no_recommendations(self):
        assert generate_recommendations([]) == []


class TestComputeScores:
    def test_single_holding(self):
        holdings = build_holdings(
            make_positions(("X", 1000, "Technology", "India", "Large Cap Equity"))
        )
        scores = compute_scores(holdings)
        assert scores.sector == 0
        assert scores.asset_class == 0
        assert scores.geographic == 0
        assert scores.concentration == 0
        assert scores.overall == 0

    def test_even_split_across_everything(self):
        holdings = build_holdings(
            make_positions(
                ("A", 500, "Technology", "India", "Large Cap Equity"),
                ("B", 500, "Government Securities", "US", "Government Bonds"),
            )
        )
        scores = compute_scores(holdings)
        assert scores.sector == 95
        assert scores.asset_class == 100
        assert scores.geographic == 100
        assert scores.concentration == 5
        assert scores.overall == 60

    def test_adding_diversifying_holding_increases_overall(self):
        single = build_holdings(
            make_positions(("X", 900, "Technology", "India", "Large Cap Equity"))
        )
        extended = build_holdings(
            make_positions(
                ("X", 900, "Technology", "India", "Large Cap Equity"),
                ("Y", 100, "Government Securities", "US", "Government Bonds"),
            )
        )
        before = compute_scores(single)
        after = compute_scores(extended)
        assert after.overall > before.overall
        assert after.overall == 7

    def test_scores_within_range(self):
        scores = compute_scores(sample_portfolio())
        for value in scores.model_dump().values():
            assert 0 <= value <= 100
        assert scores.overall > 0

    def test_idempotent_and_non_mutating(self):
        holdings = sample_portfolio()
        snapshot = [h.model_copy() for h in holdings]
        assert compute_scores(holdings) == compute_scores(holdings)
        assert compute_advanced_metrics(holdings) == compute_advanced_metrics(holdings)
        assert generate_insights(holdings, "conservative") == generate_insights(
            holdings, "conservative"
        )
        assert generate_recommendations(holdings) == generate_recommendations(holdings)
        assert holdings == snapshot


class TestAdvancedMetricsEntryPoint:
    def test_ranges(self):
        m = compute_advanced_metrics(sample_portfolio())
        assert 0 <= m.correlation_risk <= 100
        assert 0 <= m.concentration_by_value <= 100
        assert 0 < m.diversification_ratio <= 1
        assert m.effective_number_of_holdings > 1


class TestTargetModels:
    def test_accepts_enum_and_string(self):
        holdings = sample_portfolio()
        assert generate_insights(holdings, TargetModelName.AGGRESSIVE) == (
            generate_insights(holdings, "aggressive")
        )

    def test_case_insensitive_name(self):
        engine = PortfolioEngine()
        assert engine.target_weights("Balanced") == engine.target_weights("balanced")

    def test_default_model_from_config(self):
        engine = PortfolioEngine(
            ScoringConfig(default_target_model=TargetModelName.CONSERVATIVE)
        )
        holdings = sample_portfolio()
        assert engine.generate_insights(holdings) == engine.generate_insights(
            holdings, "conservative"
        )

    def test_unknown_model(self):
        with pytest.raises(UnknownTargetModelError) as exc:
            generate_insights(sample_portfolio(), "yolo")
        assert isinstance(exc.value, KeyError)
        assert isinstance(exc.value, PortfolioScoringError)
        assert "yolo" in str(exc.value)

    def test_custom_model(self):
        config = ScoringConfig(target_models={"all_bonds": {"Government Bonds": 100}})
        engine = PortfolioEngine(config)
        holdings = sample_portfolio()
        alerts = engine.generate_insights(holdings, "all_bonds").rebalancing_alerts
        assert [a.category for a in alerts] == ["Government Bonds"]

    def test_weights_are_read_only(self):
        engine = PortfolioEngine()
        holdings = sample_portfolio()
        before = engine.generate_insights(holdings, "balanced")
        with pytest.raises(TypeError):
            engine.target_weights("balanced")["Large Cap Equity"] = 0
        assert engine.generate_insights(holdings, "balanced") == before
        assert engine.target_weights("balanced")["Large Cap Equity"] == 50

    def test_empty_model_name_is_unknown(self):
        with pytest.raises(UnknownTargetModelError):
            generate_insights(sample_portfolio(), "")


class TestPackageRoot:
    def test_entry_points_exported(self):
        import portfolio_scoring

        assert portfolio_scoring.compute_scores is compute_scores
        assert portfolio_scoring.compute_advanced_metrics is compute_advanced_metrics
        assert portfolio_scoring.generate_insights is generate_insights
        assert portfolio_scoring.generate_recommendations is generate_recommendations
        assert portfolio_scoring.PortfolioEngine is PortfolioEngine

    def test_scores_from_root(self):
        from portfolio_scoring import compute_scores as root_compute_scores

        holdings = sample_portfolio()
        assert root_compute_scores(holdings) == compute_scores(holdings)


class TestInputBound:
    def test_rejects_oversized_portfolio(self):
        engine = PortfolioEngine(ScoringConfig(max_holdings=3))
        holdings = sample_portfolio()
        with pytest.raises(PortfolioTooLargeError):
            engine.compute_scores(holdings)
        with pytest.raises(ValueError):
            engine.generate_recommendations(holdings)

    def test_accepts_at_limit(self):
        holdings = sample_portfolio()
        engine = PortfolioEngine(ScoringConfig(max_holdings=len(holdings)))
        assert engine.compute_scores(holdings).overall >= 0


class TestMetadataProvider:
    def test_unresolvable_symbols_do_not_fail(self):
        holdings = build_holdings(
            make_positions(
                ("UNKNOWN1", 500, "Energy", "India", "Large Cap Equity"),
                ("UNKNOWN2", 500, "Technology", "US", "Mid Cap Equity"),
            )
        )
        insights = generate_insights(holdings, "balanced")
        assert insights.income_vs_growth.income == 0
        assert insights.income_vs_growth.growth == 0
        assert insights.liquidity_risk.score == 100

    def test_empty_catalog_is_used_as_given(self):
        engine = PortfolioEngine(provider=StaticAssetCatalog(assets=[]))
        insights = engine.generate_insights(sample_portfolio(), "balanced")
        assert insights.income_vs_growth.income == 0
