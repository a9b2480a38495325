import pytest

from portfolio_scoring.analysis.metrics import (
    compute_advanced_metrics,
    effective_holdings,
    herfindahl_index,
    portfolio_breakdown,
)
from portfolio_scoring.models.portfolio import Holding
from portfolio_scoring.models.scores import AdvancedMetrics


def make_holding(symbol, pct, sector="Energy", value=None, region="India"):
    return Holding(
        symbol=symbol,
        name=symbol,
        sector=sector,
        region=region,
        asset_class="Large Cap Equity",
        value=pct * 10 if value is None else value,
        percentage=pct,
    )


class TestHerfindahl:
    def test_equal_weights(self):
        for n in (1, 2, 4, 5, 10):
            allocations = [100 / n] * n
            assert herfindahl_index(allocations) == pytest.approx(10_000 / n)
            assert effective_holdings(allocations) == pytest.approx(n)

    def test_empty(self):
        assert herfindahl_index([]) == 0.0
        assert effective_holdings([]) == 0.0

    def test_zeros_are_kept(self):
        assert herfindahl_index([50, 50, 0]) == pytest.approx(5000)


class TestAdvancedMetrics:
    def test_empty(self):
        assert compute_advanced_metrics([]) == AdvancedMetrics()

    def test_equal_weight_distinct_sectors(self):
        holdings = [make_holding(f"H{i}", 25, sector=f"S{i}") for i in range(4)]
        m = compute_advanced_metrics(holdings)
        assert m.herfindahl_index == 2500
        assert m.effective_number_of_holdings == 4.0
        assert m.correlation_risk == 25
        assert m.concentration_by_value == 25
        assert m.diversification_ratio == 1.0

    def test_five_equal_holdings(self):
        holdings = [make_holding(f"H{i}", 20) for i in range(5)]
        m = compute_advanced_metrics(holdings)
        assert m.herfindahl_index == 2000
        assert m.effective_number_of_holdings == 5.0
        assert m.correlation_risk == 100

    def test_single_holding(self):
        m = compute_advanced_metrics([make_holding("A", 100)])
        assert m.herfindahl_index == 10_000
        assert m.effective_number_of_holdings == 1.0
        assert m.correlation_risk == 100
        assert m.concentration_by_value == 100
        assert m.diversification_ratio == 1.0

    def test_sector_aggregation(self):
        holdings = [
            make_holding("A", 30, sector="Technology"),
            make_holding("B", 30, sector="Technology"),
            make_holding("C", 40, sector="Energy"),
        ]
        assert compute_advanced_metrics(holdings).correlation_risk == 60

    def test_concentration_by_value(self):
        holdings = [make_holding("A", 75, value=300), make_holding("B", 25, value=100)]
        m = compute_advanced_metrics(holdings)
        assert m.concentration_by_value == 75
        assert m.herfindahl_index == 6250
        assert m.effective_number_of_holdings == 1.6
        assert m.diversification_ratio == 0.8

    def test_zero_total_value(self):
        holdings = [make_holding("A", 0, value=0), make_holding("B", 0, value=0)]
        m = compute_advanced_metrics(holdings)
        assert m.herfindahl_index == 0
        assert m.effective_number_of_holdings == 0.0
        assert m.correlation_risk == 0
        assert m.concentration_by_value == 0
        assert m.diversification_ratio == 0.0

    def test_ratio_rounds_half_up(self):
        holdings = [make_holding("A", 100)]
        holdings += [make_holding(f"Z{i}", 0, value=0) for i in range(7)]
        m = compute_advanced_metrics(holdings)
        assert m.effective_number_of_holdings == 1.0
        assert m.diversification_ratio == 0.13


class TestPortfolioBreakdown:
    def test_breakdown(self):
        holdings = [
            make_holding("A", 60, sector="Technology", region="US"),
            make_holding("B", 40, sector="Energy"),
        ]
        b = portfolio_breakdown(holdings)
        assert b.total_value == 1000
        assert b.holdings_count == 2
        assert b.sector == {"Technology": 60, "Energy": 40}
        assert b.asset_class == {"Large Cap Equity": 100}
        assert b.region == {"US": 60, "India": 40}

    def test_empty(self):
        b = portfolio_breakdown([])
        assert b.total_value == 0
        assert b.sector == {}
