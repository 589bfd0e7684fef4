"""
Infrastructure adapter: Financial Modeling Prep REST API → INewsProvider, ISymbolSearchProvider.
All FMP endpoint paths, query parameters and response field names are confined here.

A fresh httpx.AsyncClient is opened per call; the optional *transport* lets
tests substitute httpx.MockTransport.
"""

import logging
from typing import Any, Optional

import httpx

from equityedge.domain.entities.stock_price import NewsItem
from equityedge.domain.errors import UpstreamProviderError
from equityedge.domain.ports.news_port import INewsProvider, ISymbolSearchProvider

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://financialmodelingprep.com/api"


class FMPClient(INewsProvider, ISymbolSearchProvider):
    """Fetches stock news and ticker search results from Financial Modeling Prep."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def get_news(self, symbol: str, limit: int = 5) -> list[NewsItem]:
        data = await self._get("/v3/stock_news", {"tickers": symbol, "limit": limit})
        if not isinstance(data, list):
            return []
        return [
            NewsItem(
                title=article.get("title") or "",
                publisher=article.get("site") or "",
                link=article.get("url") or "",
                published_at=article.get("publishedDate") or "",
            )
            for article in data[:limit]
            if isinstance(article, dict)
        ]

    async def search(self, query: str, limit: int = 10) -> list[dict]:
        try:
            data = await self._get("/v3/search-ticker", {"query": query, "limit": limit})
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("FMP search failed for %r: %s", query, exc)
            raise UpstreamProviderError("An unexpected error occurred") from exc
        if data is None:
            return []
        if not isinstance(data, list):
            raise UpstreamProviderError("Unexpected search response from provider")
        return data[:limit]

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            response = await client.get(path, params={**params, "apikey": self._api_key})
            response.raise_for_status()
            return response.json()
