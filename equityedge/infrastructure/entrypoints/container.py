"""
Composition Root: wire infrastructure adapters into the application use-cases.

Every adapter can be overridden, which is how tests substitute fakes for
yfinance, FMP, the random sentiment source, and the token validator.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from equityedge.application.services.market_data_gateway import MarketDataGateway
from equityedge.application.use_cases.get_historical_prices import GetHistoricalStockPricesUseCase
from equityedge.application.use_cases.get_stock_details import GetStockDetailsUseCase
from equityedge.application.use_cases.get_stock_insights import GetStockInsightsUseCase
from equityedge.application.use_cases.list_stocks import ListTrackedStocksUseCase
from equityedge.application.use_cases.manage_notes import ManageNotesUseCase
from equityedge.application.use_cases.manage_watchlist import ManageWatchlistUseCase
from equityedge.application.use_cases.search_stocks import SearchStocksUseCase
from equityedge.domain.ports.news_port import INewsProvider, ISymbolSearchProvider
from equityedge.domain.ports.sentiment_port import ISentimentEstimator
from equityedge.domain.ports.stock_data_port import IStockDataProvider
from equityedge.domain.ports.token_validator_port import ITokenValidator
from equityedge.infrastructure.auth.jwt_validator import JWTTokenValidator
from equityedge.infrastructure.config import Settings
from equityedge.infrastructure.news.fmp_client import FMPClient
from equityedge.infrastructure.persistence.sqlite_storage import (
    SQLiteNoteRepository,
    SQLiteStorage,
    SQLiteWatchlistRepository,
)
from equityedge.infrastructure.sentiment.random_estimator import RandomSentimentEstimator
from equityedge.infrastructure.stock_data.yfinance_adapter import YFinanceStockDataProvider

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    list_stocks: ListTrackedStocksUseCase
    search_stocks: SearchStocksUseCase
    stock_details: GetStockDetailsUseCase
    history: GetHistoricalStockPricesUseCase
    insights: GetStockInsightsUseCase
    notes: ManageNotesUseCase
    watchlist: ManageWatchlistUseCase
    storage: SQLiteStorage
    token_validator: Optional[ITokenValidator] = None


def build_container(
    settings: Settings,
    stock_provider: Optional[IStockDataProvider] = None,
    news_provider: Optional[INewsProvider] = None,
    search_provider: Optional[ISymbolSearchProvider] = None,
    estimator: Optional[ISentimentEstimator] = None,
    storage: Optional[SQLiteStorage] = None,
    token_validator: Optional[ITokenValidator] = None,
) -> AppContainer:
    fmp = FMPClient(
        api_key=settings.fmp_api_key,
        base_url=settings.fmp_base_url,
        timeout=settings.http_timeout_seconds,
    )
    gateway = MarketDataGateway(
        stock_provider=stock_provider or YFinanceStockDataProvider(),
        news_provider=news_provider or fmp,
    )
    storage = storage or SQLiteStorage(settings.database_path)

    if token_validator is None and settings.jwt_secret:
        token_validator = JWTTokenValidator(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    if token_validator is None:
        logger.warning("JWT_SECRET is not set; notes and watchlist routes will reject every request")

    history = GetHistoricalStockPricesUseCase(gateway)
    return AppContainer(
        list_stocks=ListTrackedStocksUseCase(gateway, settings.tracked_symbols),
        search_stocks=SearchStocksUseCase(search_provider or fmp),
        stock_details=GetStockDetailsUseCase(gateway),
        history=history,
        insights=GetStockInsightsUseCase(history, estimator or RandomSentimentEstimator()),
        notes=ManageNotesUseCase(SQLiteNoteRepository(storage)),
        watchlist=ManageWatchlistUseCase(SQLiteWatchlistRepository(storage)),
        storage=storage,
        token_validator=token_validator,
    )
