"""
Domain entities for per-user data: notes and watchlist entries.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Note:
    user_id: str
    symbol: str
    note: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class WatchlistEntry:
    user_id: str
    symbol: str
    added_at: datetime
