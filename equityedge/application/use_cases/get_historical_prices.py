"""
Use-case: retrieve one year of daily OHLCV bars for a given symbol.
Depends only on the gateway service and domain entities: no infrastructure imports.
"""

import logging

from equityedge.application.services.market_data_gateway import MarketDataGateway, normalize_symbol
from equityedge.domain.entities.stock_price import PriceBar
from equityedge.domain.errors import StockDataNotFoundError, UpstreamProviderError

logger = logging.getLogger(__name__)


class GetHistoricalStockPricesUseCase:
    def __init__(self, gateway: MarketDataGateway) -> None:
        self._gateway = gateway

    async def execute(self, symbol: str) -> list[PriceBar]:
        """Fetch the last 365 days of daily bars for *symbol*.

        Raises:
            ValidationError: if *symbol* is blank.
            StockDataNotFoundError: if the provider returns no bars.
            UpstreamProviderError: if the provider call itself fails.
        """
        symbol = normalize_symbol(symbol)
        try:
            bars = await self._gateway.fetch_history(symbol)
        except Exception as exc:
            logger.warning("History provider failed for %s: %s", symbol, exc)
            raise UpstreamProviderError(f"Could not fetch historical data for {symbol}") from exc

        if not bars:
            raise StockDataNotFoundError(f"No historical data available for symbol: {symbol!r}")
        return bars
