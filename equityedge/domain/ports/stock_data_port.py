"""
Port (interface) for market data providers.
Infrastructure adapters (e.g. YFinanceStockDataProvider) must implement this interface.
Methods are synchronous; the gateway runs them in worker threads.
"""

from abc import ABC, abstractmethod
from datetime import date

from equityedge.domain.entities.stock_price import CompanyProfile, PriceBar, Quote


class IStockDataProvider(ABC):
    @abstractmethod
    def get_quote(self, symbol: str) -> Quote: ...

    @abstractmethod
    def get_profile(self, symbol: str) -> CompanyProfile: ...

    @abstractmethod
    def get_historical_prices(
        self,
        symbol: str,
        start_date: date,
        end_date: date,
    ) -> list[PriceBar]:
        """Return daily bars for *symbol* in [start_date, end_date], oldest first."""
        ...
