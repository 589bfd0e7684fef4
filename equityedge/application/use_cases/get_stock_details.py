"""
Use-case: assemble the full stock-detail record (quote, profile, history, news).
Partial provider failures are absorbed by the gateway; see MarketDataGateway.
"""

from equityedge.application.services.market_data_gateway import MarketDataGateway
from equityedge.domain.entities.stock_price import StockDetail


class GetStockDetailsUseCase:
    def __init__(self, gateway: MarketDataGateway) -> None:
        self._gateway = gateway

    async def execute(self, symbol: str) -> StockDetail:
        """
        Raises:
            ValidationError: if *symbol* is blank.
        """
        return await self._gateway.fetch_stock_detail(symbol)
