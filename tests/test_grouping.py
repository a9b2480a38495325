from portfolio_scoring.analysis.grouping import group_and_sum, sum_matching, sum_named


class TestGroupAndSum:
    def test_sums_in_first_seen_order(self):
        items = [("b", 1.0), ("a", 2.0), ("b", 3.0)]
        result = group_and_sum(items, lambda i: i[0], lambda i: i[1])
        assert result == {"b": 4.0, "a": 2.0}
        assert list(result) == ["b", "a"]

    def test_empty(self):
        assert group_and_sum([], str, float) == {}


class TestMatching:
    def test_sum_matching_case_insensitive(self):
        allocations = {"Government Bonds": 10, "CORPORATE BONDS": 5, "Large Cap": 85}
        assert sum_matching(allocations, ["bond"]) == 15

    def test_sum_matching_counts_each_key_once(self):
        allocations = {"Global Equity": 20, "International Equity ETF": 10}
        assert sum_matching(allocations, ["international", "global", "equity"]) == 30

    def test_sum_named_missing_keys(self):
        assert sum_named({"US": 30}, ["US", "Japan"]) == 30
