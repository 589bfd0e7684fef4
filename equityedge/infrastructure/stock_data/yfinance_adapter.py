"""
Infrastructure adapter: yfinance → IStockDataProvider.
All yfinance-specific details (ticker.info, fast_info, history()) are confined here;
the rest of the codebase depends only on IStockDataProvider.
"""

from datetime import date, timedelta
from typing import Any, Optional

import pandas as pd
import yfinance as yf

from equityedge.domain.entities.stock_price import UNKNOWN, CompanyProfile, PriceBar, Quote
from equityedge.domain.ports.stock_data_port import IStockDataProvider

PRICE_COLUMNS = ["Open", "High", "Low", "Close"]


class YFinanceStockDataProvider(IStockDataProvider):
    """Fetches stock market data from Yahoo Finance via the yfinance library."""

    def get_quote(self, symbol: str) -> Quote:
        ticker = yf.Ticker(symbol)
        info = ticker.info or {}
        fast_info = ticker.fast_info

        price = info.get("regularMarketPrice") or getattr(fast_info, "last_price", None)
        if price is None:
            raise ValueError(f"No price data available for symbol: {symbol!r}")

        change = info.get("regularMarketChange")
        change_percent = info.get("regularMarketChangePercent")
        previous_close = info.get("previousClose") or getattr(fast_info, "previous_close", None)
        if change is None and previous_close:
            change = float(price) - float(previous_close)
            change_percent = change / float(previous_close) * 100

        return Quote(
            price=round(float(price), 4),
            change=round(float(change or 0.0), 4),
            change_percent=round(float(change_percent or 0.0), 4),
        )

    def get_profile(self, symbol: str) -> CompanyProfile:
        info = yf.Ticker(symbol).info
        if not info:
            raise ValueError(f"No profile data available for symbol: {symbol!r}")

        return CompanyProfile(
            symbol=symbol,
            name=info.get("shortName") or info.get("longName") or UNKNOWN,
            industry=info.get("industry") or UNKNOWN,
            sector=info.get("sector") or UNKNOWN,
            country=info.get("country") or UNKNOWN,
            website=info.get("website") or "#",
        )

    def get_historical_prices(
        self,
        symbol: str,
        start_date: date,
        end_date: date,
    ) -> list[PriceBar]:
        # yfinance treats `end` as exclusive
        history = yf.Ticker(symbol).history(
            start=start_date.isoformat(),
            end=(end_date + timedelta(days=1)).isoformat(),
            interval="1d",
        )
        if history.empty:
            return []

        bars = [
            PriceBar(
                date=timestamp.date(),
                open=round(float(row["Open"]), 4),
                high=round(float(row["High"]), 4),
                low=round(float(row["Low"]), 4),
                close=round(float(row["Close"]), 4),
                volume=_volume(row.get("Volume")),
            )
            for timestamp, row in history.iterrows()
            if not row[PRICE_COLUMNS].isna().any()
        ]
        return sorted(bars, key=lambda bar: bar.date)


def _volume(value: Any) -> Optional[int]:
    if value is None or pd.isna(value):
        return None
    return max(int(value), 0)
