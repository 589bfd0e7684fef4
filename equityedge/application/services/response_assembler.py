"""
Application service: turn domain entities into the JSON-ready dicts returned
by the HTTP layer.

Every field is always present (defaults come from the entities), except
``recommendation`` on insights, which is only emitted when one was computed.
"""

from equityedge.domain.entities.insights import InsightsResult
from equityedge.domain.entities.stock_price import (
    CompanyProfile,
    NewsItem,
    PriceBar,
    Quote,
    StockDetail,
    StockSummary,
)
from equityedge.domain.entities.user_data import Note, WatchlistEntry


def price_bar_to_dict(bar: PriceBar) -> dict:
    return {
        "date": bar.date.isoformat(),
        "open": bar.open,
        "high": bar.high,
        "low": bar.low,
        "close": bar.close,
        "volume": bar.volume if bar.volume is not None else 0,
    }


def quote_to_dict(quote: Quote) -> dict:
    return {
        "price": quote.price,
        "change": quote.change,
        "change_percent": quote.change_percent,
    }


def profile_to_dict(profile: CompanyProfile) -> dict:
    return {
        "name": profile.name,
        "symbol": profile.symbol,
        "industry": profile.industry,
        "sector": profile.sector,
        "country": profile.country,
        "website": profile.website,
    }


def news_item_to_dict(item: NewsItem) -> dict:
    return {
        "title": item.title,
        "publisher": item.publisher,
        "link": item.link,
        "published_at": item.published_at,
    }


def stock_detail_to_dict(detail: StockDetail) -> dict:
    return {
        "symbol": detail.symbol,
        "current_quote": quote_to_dict(detail.current_quote),
        "profile": profile_to_dict(detail.profile),
        "historical_prices": [price_bar_to_dict(bar) for bar in detail.historical_prices],
        "news": [news_item_to_dict(item) for item in detail.news],
    }


def stock_summary_to_dict(summary: StockSummary) -> dict:
    return {
        "symbol": summary.symbol,
        "name": summary.name,
        "lastClose": summary.last_close,
        "industry": summary.industry,
        "sector": summary.sector,
    }


def history_to_dict(symbol: str, bars: list[PriceBar]) -> dict:
    return {"symbol": symbol, "history": [price_bar_to_dict(bar) for bar in bars]}


def insights_to_dict(result: InsightsResult) -> dict:
    payload = {
        "symbol": result.symbol,
        "trends": [{"type": t.type, "value": t.value} for t in result.trends],
        "sentiment": {
            "overall_prediction": result.sentiment.overall_prediction,
            "confidence": result.sentiment.confidence,
        },
    }
    if result.recommendation is not None:
        payload["recommendation"] = {
            "action": result.recommendation.action,
            "reason": result.recommendation.reason,
        }
    return payload


def note_to_dict(note: Note) -> dict:
    return {
        "userId": note.user_id,
        "symbol": note.symbol,
        "note": note.note,
        "createdAt": note.created_at.isoformat(),
        "updatedAt": note.updated_at.isoformat(),
    }


def watchlist_entry_to_dict(entry: WatchlistEntry) -> dict:
    return {"symbol": entry.symbol, "added_at": entry.added_at.isoformat()}
