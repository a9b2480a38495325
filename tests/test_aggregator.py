from portfolio_scoring.analysis.aggregator import ScoreAggregator
from portfolio_scoring.config import DIMENSION_WEIGHTS


class TestScoreAggregator:
    def test_weights_sum_to_one(self):
        assert abs(sum(DIMENSION_WEIGHTS.values()) - 1.0) < 1e-9

    def test_all_perfect(self):
        agg = ScoreAggregator()
        assert agg.aggregate(100, 100, 100, 100) == 100

    def test_all_zero(self):
        agg = ScoreAggregator()
        assert agg.aggregate(0, 0, 0, 0) == 0

    def test_strong_and_balanced(self):
        agg = ScoreAggregator()
        # 70 base, +5 all above 60, +5 balanced
        assert agg.aggregate(70, 70, 70, 70) == 80

    def test_balanced_only(self):
        agg = ScoreAggregator()
        assert agg.aggregate(50, 50, 50, 50) == 55

    def test_weak_and_unbalanced(self):
        agg = ScoreAggregator()
        # 58 base, -10 for a score under 30, -5 for a range over 40
        assert agg.aggregate(100, 20, 60, 60) == 43

    def test_neither_balanced_nor_unbalanced(self):
        agg = ScoreAggregator()
        # 56 base, range of 30: no spread adjustment
        assert agg.aggregate(40, 70, 50, 60) == 56

    def test_rounds_half_up(self):
        agg = ScoreAggregator()
        # 51.5 base + 5 balanced = 56.5
        assert agg.aggregate(50, 50, 50, 56) == 57

    def test_custom_weights(self):
        agg = ScoreAggregator(
            {"sector": 1.0, "asset_class": 0.0, "geographic": 0.0, "concentration": 0.0}
        )
        # 40 base, range 30
        assert agg.aggregate(40, 70, 50, 60) == 40
