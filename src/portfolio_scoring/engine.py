"""Entry points of the portfolio scoring engine.

Every operation is a pure function of the holdings it is given: holdings
are never mutated and no state is kept between calls.
"""

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from portfolio_scoring.analysis.aggregator import ScoreAggregator
from portfolio_scoring.analysis.concentration import concentration_score
from portfolio_scoring.analysis.dimensions import (
    asset_class_score,
    geographic_score,
    sector_score,
)
from portfolio_scoring.analysis.diversity import round_score
from portfolio_scoring.analysis.insights import InsightEngine
from portfolio_scoring.analysis.metrics import (
    compute_advanced_metrics as _compute_advanced_metrics,
)
from portfolio_scoring.config import ScoringConfig, TargetModelName
from portfolio_scoring.data.asset_catalog import (
    AssetMetadataProvider,
    get_default_catalog,
)
from portfolio_scoring.errors import PortfolioTooLargeError, UnknownTargetModelError
from portfolio_scoring.models.insights import PortfolioInsights
from portfolio_scoring.models.portfolio import Holding
from portfolio_scoring.models.scores import AdvancedMetrics, DiversificationScores

logger = logging.getLogger(__name__)


class PortfolioEngine:
    def __init__(
        self,
        config: ScoringConfig | None = None,
        provider: AssetMetadataProvider | None = None,
    ) -> None:
        self.config = config if config is not None else ScoringConfig()
        self.provider = provider if provider is not None else get_default_catalog()
        self.aggregator = ScoreAggregator()
        self.insight_engine = InsightEngine(self.provider)

    def compute_scores(self, holdings: Sequence[Holding]) -> DiversificationScores:
        items = self._check(holdings)
        if not items:
            return DiversificationScores()

        sector = sector_score(items)
        asset_class = asset_class_score(items)
        geographic = geographic_score(items)
        concentration = concentration_score(items)
        overall = self.aggregator.aggregate(
            sector, asset_class, geographic, concentration
        )

        scores = DiversificationScores(
            overall=overall,
            sector=round_score(sector),
            asset_class=round_score(asset_class),
            geographic=round_score(geographic),
            concentration=round_score(concentration),
        )
        logger.debug("Scores for %d holdings: %s", len(items), scores)
        return scores

    def compute_advanced_metrics(self, holdings: Sequence[Holding]) -> AdvancedMetrics:
        return _compute_advanced_metrics(self._check(holdings))

    def generate_insights(
        self,
        holdings: Sequence[Holding],
        target_model: str | None = None,
    ) -> PortfolioInsights:
        if target_model is None:
            target_model = self.config.default_target_model
        weights = self.target_weights(target_model)
        return self.insight_engine.generate_insights(self._check(holdings), weights)

    def generate_recommendations(self, holdings: Sequence[Holding]) -> list[str]:
        return self.insight_engine.generate_recommendations(self._check(holdings))

    def target_weights(self, name: str) -> Mapping[str, float]:
        key = str(name).strip().lower()
        try:
            weights = self.config.target_models[key]
        except KeyError:
            raise UnknownTargetModelError(
                str(name), list(self.config.target_models)
            ) from None
        return MappingProxyType(weights)

    def _check(self, holdings: Sequence[Holding]) -> list[Holding]:
        if len(holdings) > self.config.max_holdings:
            logger.warning(
                "Rejecting portfolio of %d holdings (limit %d)",
                len(holdings),
                self.config.max_holdings,
            )
            raise PortfolioTooLargeError(len(holdings), self.config.max_holdings)
        return list(holdings)


_default_engine: PortfolioEngine | None = None


def _engine() -> PortfolioEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = PortfolioEngine()
    return _default_engine


def compute_scores(holdings: Sequence[Holding]) -> DiversificationScores:
    return _engine().compute_scores(holdings)


def compute_advanced_metrics(holdings: Sequence[Holding]) -> AdvancedMetrics:
    return _engine().compute_advanced_metrics(holdings)


def generate_insights(
    holdings: Sequence[Holding],
    target_model: str = TargetModelName.BALANCED,
) -> PortfolioInsights:
    return _engine().generate_insights(holdings, target_model)


def generate_recommendations(holdings: Sequence[Holding]) -> list[str]:
    return _engine().generate_recommendations(holdings)
