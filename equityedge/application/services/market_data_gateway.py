"""
Application service: fan out to the market data and news providers and
normalize their answers into a StockDetail.

Each sub-fetch (quote, profile, history, news) runs concurrently.  A failing
sub-fetch is logged and its slice of the record falls back to the defaults
defined on the domain entities.  The whole call fails only for a blank
symbol, or when quote, profile and history all come back empty (unknown symbol).
Providers are injected; no yfinance or httpx imports appear here.
"""

import asyncio
import logging
from datetime import date, timedelta
from typing import Any, Callable, Optional

from equityedge.domain.entities.stock_price import (
    UNKNOWN,
    CompanyProfile,
    PriceBar,
    Quote,
    StockDetail,
    StockSummary,
)
from equityedge.domain.errors import StockDataNotFoundError, ValidationError
from equityedge.domain.ports.news_port import INewsProvider
from equityedge.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger(__name__)

HISTORY_DAYS = 365
NEWS_LIMIT = 5


def normalize_symbol(symbol: Optional[str]) -> str:
    """Upper-case and strip *symbol*.

    Raises:
        ValidationError: if *symbol* is blank.
    """
    if not symbol or not symbol.strip():
        raise ValidationError("symbol must be a non-empty string")
    return symbol.upper().strip()


class MarketDataGateway:
    def __init__(
        self,
        stock_provider: IStockDataProvider,
        news_provider: INewsProvider,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._stock_provider = stock_provider
        self._news_provider = news_provider
        self._today = today

    def history_range(self) -> tuple[date, date]:
        end = self._today()
        return end - timedelta(days=HISTORY_DAYS), end

    async def fetch_stock_detail(self, symbol: str) -> StockDetail:
        """Fetch quote, profile, one year of daily bars and recent news.

        Raises:
            ValidationError: if *symbol* is blank.
            StockDataNotFoundError: if no provider returned quote, profile or history.
        """
        symbol = normalize_symbol(symbol)
        start, end = self.history_range()

        quote, profile, history, news = await asyncio.gather(
            asyncio.to_thread(self._stock_provider.get_quote, symbol),
            asyncio.to_thread(self._stock_provider.get_profile, symbol),
            asyncio.to_thread(self._stock_provider.get_historical_prices, symbol, start, end),
            self._news_provider.get_news(symbol, limit=NEWS_LIMIT),
            return_exceptions=True,
        )

        if all(_is_missing(result) for result in (quote, profile, history)):
            logger.info("No market data found for %s", symbol)
            raise StockDataNotFoundError(f"Stock not found: {symbol}")

        return StockDetail(
            symbol=symbol,
            current_quote=self._or_default(quote, Quote(), "quote", symbol),
            profile=self._or_default(profile, CompanyProfile(symbol=symbol), "profile", symbol),
            historical_prices=list(self._or_default(history, [], "history", symbol)),
            news=list(self._or_default(news, [], "news", symbol))[:NEWS_LIMIT],
        )

    async def fetch_history(self, symbol: str) -> list[PriceBar]:
        """Fetch one year of daily bars; provider exceptions propagate."""
        symbol = normalize_symbol(symbol)
        start, end = self.history_range()
        return await asyncio.to_thread(
            self._stock_provider.get_historical_prices, symbol, start, end
        )

    async def fetch_summary(self, symbol: str) -> StockSummary:
        """Fetch quote and profile for the stock list; provider exceptions propagate."""
        symbol = normalize_symbol(symbol)
        quote, profile = await asyncio.gather(
            asyncio.to_thread(self._stock_provider.get_quote, symbol),
            asyncio.to_thread(self._stock_provider.get_profile, symbol),
        )
        return StockSummary(
            symbol=symbol,
            name=symbol if profile.name == UNKNOWN else profile.name,
            last_close=quote.price,
            industry=profile.industry,
            sector=profile.sector,
        )

    @staticmethod
    def _or_default(result: Any, default: Any, slice_name: str, symbol: str) -> Any:
        if isinstance(result, Exception):
            logger.warning("Failed to fetch %s for %s: %s", slice_name, symbol, result)
            return default
        if result is None:
            return default
        return result


def _is_missing(result: Any) -> bool:
    return result is None or isinstance(result, Exception) or result == []
