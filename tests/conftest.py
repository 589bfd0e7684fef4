"""Shared fixtures and port fakes for the test-suite."""

from datetime import date, datetime, timedelta, timezone
from itertools import count

import pytest

from equityedge.domain.entities.insights import SentimentEstimate
from equityedge.domain.entities.stock_price import CompanyProfile, NewsItem, PriceBar, Quote
from equityedge.domain.ports.news_port import INewsProvider, ISymbolSearchProvider
from equityedge.domain.ports.sentiment_port import ISentimentEstimator
from equityedge.domain.ports.stock_data_port import IStockDataProvider
from equityedge.infrastructure.persistence.sqlite_storage import SQLiteStorage

TODAY = date(2024, 6, 28)


def make_bars(closes, volume=1_000_000, start=date(2024, 1, 2)):
    """Build consecutive daily bars with the given closing prices."""
    return [
        PriceBar(
            date=start + timedelta(days=i),
            open=close,
            high=close,
            low=close,
            close=close,
            volume=volume,
        )
        for i, close in enumerate(closes)
    ]


class FakeStockProvider(IStockDataProvider):
    def __init__(self, bars=None, fail=()):
        self.bars = bars if bars is not None else make_bars([100.0] * 40)
        self.fail = set(fail)
        self.history_calls = []

    def get_quote(self, symbol):
        if "quote" in self.fail:
            raise RuntimeError("quote provider down")
        return Quote(price=187.5, change=1.25, change_percent=0.67)

    def get_profile(self, symbol):
        if "profile" in self.fail:
            raise RuntimeError("profile provider down")
        return CompanyProfile(
            symbol=symbol,
            name=f"{symbol} Inc.",
            industry="Consumer Electronics",
            sector="Technology",
            country="United States",
            website="https://example.com",
        )

    def get_historical_prices(self, symbol, start_date, end_date):
        self.history_calls.append((symbol, start_date, end_date))
        if "history" in self.fail:
            raise RuntimeError("history provider down")
        return list(self.bars)


class FakeNewsProvider(INewsProvider, ISymbolSearchProvider):
    def __init__(self, fail=False, results=None):
        self.fail = fail
        self.results = results if results is not None else [{"symbol": "AAPL", "name": "Apple Inc."}]
        self.queries = []

    async def get_news(self, symbol, limit=5):
        if self.fail:
            raise RuntimeError("news provider down")
        return [NewsItem(title=f"{symbol} story {i}", publisher="wire") for i in range(8)]

    async def search(self, query, limit=10):
        self.queries.append(query)
        return list(self.results)


class FixedSentiment(ISentimentEstimator):
    def estimate(self, symbol):
        return SentimentEstimate(overall_prediction="Bullish", confidence=77)


class BrokenSentiment(ISentimentEstimator):
    def estimate(self, symbol):
        raise RuntimeError("model unavailable")


@pytest.fixture
def ticking_clock():
    """Clock that advances one second per call, so ordering by time is deterministic."""
    ticks = count()
    base = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
    return lambda: base + timedelta(seconds=next(ticks))


@pytest.fixture
def storage(tmp_path, ticking_clock):
    store = SQLiteStorage(tmp_path / "test.db", clock=ticking_clock)
    try:
        yield store
    finally:
        store.close()
