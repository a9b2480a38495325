from portfolio_scoring.analysis.diversity import clamp, round_score
from portfolio_scoring.config import DIMENSION_WEIGHTS


class ScoreAggregator:
    def __init__(self, weights: dict[str, float] | None = None) -> None:
        self.weights = dict(weights if weights is not None else DIMENSION_WEIGHTS)

    def aggregate(
        self,
        sector: float,
        asset_class: float,
        geographic: float,
        concentration: float,
    ) -> int:
        dimensions = {
            "sector": sector,
            "asset_class": asset_class,
            "geographic": geographic,
            "concentration": concentration,
        }
        base = sum(
            score * self.weights.get(key, 0.0) for key, score in dimensions.items()
        )
        adjusted = base + self._interaction_adjustment(list(dimensions.values()))
        return round_score(clamp(adjusted))

    def _interaction_adjustment(self, scores: list[float]) -> float:
        adjustment = 0.0

        if all(s > 60 for s in scores):
            adjustment += 5
        if any(s < 30 for s in scores):
            adjustment -= 10

        spread = max(scores) - min(scores)
        if spread < 20:
            adjustment += 5
        elif spread > 40:
            adjustment -= 5

        return adjustment
