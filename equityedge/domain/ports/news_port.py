"""
Ports (interfaces) for news and symbol search providers.
Infrastructure adapters (e.g. FMPClient) must implement these interfaces.
"""

from abc import ABC, abstractmethod

from equityedge.domain.entities.stock_price import NewsItem


class INewsProvider(ABC):
    @abstractmethod
    async def get_news(self, symbol: str, limit: int = 5) -> list[NewsItem]: ...


class ISymbolSearchProvider(ABC):
    @abstractmethod
    async def search(self, query: str, limit: int = 10) -> list[dict]:
        """Return the provider's raw search results for *query*.

        Raises:
            UpstreamProviderError: if the provider gives no usable response.
        """
        ...
