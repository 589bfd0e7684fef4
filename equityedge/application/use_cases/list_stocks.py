"""
Use-case: summarize the fixed set of tracked symbols for the stock list.
Symbols whose quote or profile cannot be fetched are left out of the list.
"""

import asyncio
import logging
from typing import Sequence

from equityedge.application.services.market_data_gateway import MarketDataGateway
from equityedge.domain.entities.stock_price import StockSummary

logger = logging.getLogger(__name__)

DEFAULT_SYMBOLS = ("AAPL", "MSFT", "GOOGL", "AMZN", "META", "TSLA", "NFLX", "NVDA")


class ListTrackedStocksUseCase:
    def __init__(
        self,
        gateway: MarketDataGateway,
        symbols: Sequence[str] = DEFAULT_SYMBOLS,
    ) -> None:
        self._gateway = gateway
        self._symbols = tuple(symbols)

    async def execute(self) -> list[StockSummary]:
        results = await asyncio.gather(
            *(self._gateway.fetch_summary(symbol) for symbol in self._symbols),
            return_exceptions=True,
        )
        summaries: list[StockSummary] = []
        for symbol, result in zip(self._symbols, results):
            if isinstance(result, Exception):
                logger.warning("Skipping %s in stock list: %s", symbol, result)
                continue
            summaries.append(result)
        return summaries
