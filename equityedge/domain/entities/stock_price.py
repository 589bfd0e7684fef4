"""
Domain entities for market data.
Zero external dependencies: pure Python dataclasses only.

Defaults on Quote, CompanyProfile and NewsItem are the placeholder values used
whenever a provider fails to supply a field.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class PriceBar:
    date: date
    open: float
    high: float
    low: float
    close: float
    volume: Optional[int] = None


@dataclass(frozen=True)
class Quote:
    price: float = 0.0
    change: float = 0.0
    change_percent: float = 0.0


@dataclass(frozen=True)
class CompanyProfile:
    symbol: str
    name: str = UNKNOWN
    industry: str = UNKNOWN
    sector: str = UNKNOWN
    country: str = UNKNOWN
    website: str = "#"


@dataclass(frozen=True)
class NewsItem:
    title: str = ""
    publisher: str = ""
    link: str = ""
    published_at: str = ""


@dataclass(frozen=True)
class StockDetail:
    symbol: str
    current_quote: Quote
    profile: CompanyProfile
    historical_prices: list[PriceBar] = field(default_factory=list)
    news: list[NewsItem] = field(default_factory=list)


@dataclass(frozen=True)
class StockSummary:
    symbol: str
    name: str
    last_close: float
    industry: str
    sector: str
