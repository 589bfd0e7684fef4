"""
Use-case: search tickers by company name or symbol fragment.
"""

from equityedge.domain.errors import ValidationError
from equityedge.domain.ports.news_port import ISymbolSearchProvider

SEARCH_LIMIT = 10


class SearchStocksUseCase:
    def __init__(self, provider: ISymbolSearchProvider) -> None:
        self._provider = provider

    async def execute(self, query: str) -> list[dict]:
        """Return at most ten provider results for *query*.

        Raises:
            ValidationError: if *query* is blank.
            UpstreamProviderError: if the provider gives no usable response.
        """
        if not query or not query.strip():
            raise ValidationError("Please provide a valid stock name or symbol")
        results = await self._provider.search(query.strip(), limit=SEARCH_LIMIT)
        return results[:SEARCH_LIMIT]
