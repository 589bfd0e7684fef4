"""
Use-case: derive trend metrics, a recommendation and a sentiment estimate for a symbol.

Flow: history (via GetHistoricalStockPricesUseCase) → insight engine → sentiment
estimator.  The estimator is guarded here so that any ISentimentEstimator
implementation, current or future, degrades to a neutral estimate instead of
failing the request.
"""

import logging

from equityedge.application.services.insight_engine import derive_insights
from equityedge.application.services.market_data_gateway import normalize_symbol
from equityedge.application.use_cases.get_historical_prices import GetHistoricalStockPricesUseCase
from equityedge.domain.entities.insights import NEUTRAL_SENTIMENT, InsightsResult, SentimentEstimate
from equityedge.domain.ports.sentiment_port import ISentimentEstimator

logger = logging.getLogger(__name__)


class GetStockInsightsUseCase:
    def __init__(
        self,
        history: GetHistoricalStockPricesUseCase,
        estimator: ISentimentEstimator,
    ) -> None:
        self._history = history
        self._estimator = estimator

    async def execute(self, symbol: str) -> InsightsResult:
        """
        Raises:
            ValidationError: if *symbol* is blank.
            StockDataNotFoundError: if no historical data was retrievable.
            UpstreamProviderError: if the history provider failed.
        """
        symbol = normalize_symbol(symbol)
        bars = await self._history.execute(symbol)
        trends, recommendation = derive_insights(bars)
        return InsightsResult(
            symbol=symbol,
            trends=trends,
            recommendation=recommendation,
            sentiment=self._estimate_sentiment(symbol),
        )

    def _estimate_sentiment(self, symbol: str) -> SentimentEstimate:
        try:
            return self._estimator.estimate(symbol)
        except Exception as exc:
            logger.warning("Sentiment estimate failed for %s: %s", symbol, exc)
            return NEUTRAL_SENTIMENT
