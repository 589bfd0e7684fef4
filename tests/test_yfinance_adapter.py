"""Tests for YFinanceStockDataProvider with yfinance.Ticker patched out."""

from datetime import date
from types import SimpleNamespace

import pandas as pd
import pytest

from equityedge.infrastructure.stock_data import yfinance_adapter
from equityedge.infrastructure.stock_data.yfinance_adapter import YFinanceStockDataProvider


class FakeTicker:
    info = {}
    fast_info = SimpleNamespace(last_price=None, previous_close=None)
    frame = pd.DataFrame()
    calls = []

    def __init__(self, symbol):
        self.symbol = symbol

    def history(self, **kwargs):
        FakeTicker.calls.append(kwargs)
        return FakeTicker.frame


@pytest.fixture
def ticker(monkeypatch):
    FakeTicker.info = {}
    FakeTicker.fast_info = SimpleNamespace(last_price=None, previous_close=None)
    FakeTicker.frame = pd.DataFrame()
    FakeTicker.calls = []
    monkeypatch.setattr(yfinance_adapter.yf, "Ticker", FakeTicker)
    return FakeTicker


def test_quote_from_info(ticker):
    ticker.info = {
        "regularMarketPrice": 190.5,
        "regularMarketChange": -1.5,
        "regularMarketChangePercent": -0.78,
    }

    quote = YFinanceStockDataProvider().get_quote("AAPL")

    assert quote.price == 190.5
    assert quote.change == -1.5
    assert quote.change_percent == -0.78


def test_quote_change_derived_from_previous_close(ticker):
    ticker.fast_info = SimpleNamespace(last_price=110.0, previous_close=100.0)

    quote = YFinanceStockDataProvider().get_quote("AAPL")

    assert quote.price == 110.0
    assert quote.change == 10.0
    assert quote.change_percent == 10.0


def test_quote_without_price_raises(ticker):
    with pytest.raises(ValueError):
        YFinanceStockDataProvider().get_quote("NOPE")


def test_profile_defaults_missing_fields(ticker):
    ticker.info = {"longName": "Apple Inc.", "sector": "Technology"}

    profile = YFinanceStockDataProvider().get_profile("AAPL")

    assert profile.name == "Apple Inc."
    assert profile.sector == "Technology"
    assert profile.industry == "Unknown"
    assert profile.country == "Unknown"
    assert profile.website == "#"


def test_history_is_converted_and_sorted(ticker):
    index = pd.to_datetime(["2024-06-27", "2024-06-26", "2024-06-25"])
    ticker.frame = pd.DataFrame(
        {
            "Open": [3.0, 2.0, 1.0],
            "High": [3.5, 2.5, 1.5],
            "Low": [2.5, 1.5, 0.5],
            "Close": [3.25, float("nan"), 1.25],
            "Volume": [300, 200, float("nan")],
        },
        index=index,
    )

    bars = YFinanceStockDataProvider().get_historical_prices(
        "AAPL", date(2023, 6, 29), date(2024, 6, 28)
    )

    assert [b.date for b in bars] == [date(2024, 6, 25), date(2024, 6, 27)]
    assert bars[0].volume is None
    assert bars[1].close == 3.25
    assert bars[1].volume == 300
    assert ticker.calls == [{"start": "2023-06-29", "end": "2024-06-29", "interval": "1d"}]


def test_empty_history_returns_empty_list(ticker):
    assert YFinanceStockDataProvider().get_historical_prices(
        "AAPL", date(2024, 1, 1), date(2024, 1, 2)
    ) == []


def test_history_skips_rows_with_any_missing_price(ticker):
    index = pd.to_datetime(["2024-06-24", "2024-06-25", "2024-06-26", "2024-06-27"])
    ticker.frame = pd.DataFrame(
        {
            "Open": [float("nan"), 2.0, 3.0, 4.0],
            "High": [1.5, float("nan"), 3.5, 4.5],
            "Low": [0.5, 1.5, float("nan"), 3.5],
            "Close": [1.25, 2.25, 3.25, 4.25],
            "Volume": [100, 200, 300, 400],
        },
        index=index,
    )

    bars = YFinanceStockDataProvider().get_historical_prices(
        "AAPL", date(2024, 6, 1), date(2024, 6, 28)
    )

    assert [b.date for b in bars] == [date(2024, 6, 27)]
    assert bars[0].open == 4.0
