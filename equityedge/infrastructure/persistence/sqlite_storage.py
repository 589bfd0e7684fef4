"""
Infrastructure adapter: SQLite → INoteRepository, IWatchlistRepository.

SQLiteStorage owns the connection and schema; the two repositories share it.
Uniqueness of (user_id, symbol) is enforced by UNIQUE constraints and surfaced
as domain duplicate errors.  The connection is shared across FastAPI's worker
threads, so every statement runs under a lock.
"""

import logging
import sqlite3
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional, Union

from equityedge.domain.entities.user_data import Note, WatchlistEntry
from equityedge.domain.errors import DuplicateNoteError, DuplicateWatchlistEntryError
from equityedge.domain.ports.user_data_port import INoteRepository, IWatchlistRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SQLiteStorage:
    def __init__(self, path: Union[str, Path], clock: Clock = _utcnow) -> None:
        self.path = str(path)
        if self.path != ":memory:":
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(self.path, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self.lock = threading.Lock()
        self.clock = clock
        self._ensure_tables()

    def _ensure_tables(self) -> None:
        with self.lock, self.conn:
            self.conn.execute(
                """
                CREATE TABLE IF NOT EXISTS notes (
                    user_id TEXT NOT NULL,
                    symbol TEXT NOT NULL,
                    note TEXT NOT NULL DEFAULT '',
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL,
                    UNIQUE (user_id, symbol)
                )
                """
            )
            self.conn.execute(
                """
                CREATE TABLE IF NOT EXISTS watchlist (
                    user_id TEXT NOT NULL,
                    symbol TEXT NOT NULL,
                    added_at TEXT NOT NULL,
                    UNIQUE (user_id, symbol)
                )
                """
            )

    def now(self) -> str:
        return self.clock().isoformat()

    def close(self) -> None:
        with self.lock:
            self.conn.close()


class SQLiteNoteRepository(INoteRepository):
    def __init__(self, storage: SQLiteStorage) -> None:
        self._storage = storage

    def create(self, user_id: str, symbol: str, text: str) -> Note:
        ts = self._storage.now()
        try:
            with self._storage.lock, self._storage.conn as conn:
                conn.execute(
                    """
                    INSERT INTO notes(user_id, symbol, note, created_at, updated_at)
                    VALUES(?, ?, ?, ?, ?)
                    """,
                    (user_id, symbol, text, ts, ts),
                )
        except sqlite3.IntegrityError as exc:
            raise DuplicateNoteError("You already have a note for this stock") from exc
        logger.info("Created note for user=%s symbol=%s", user_id, symbol)
        return Note(user_id, symbol, text, datetime.fromisoformat(ts), datetime.fromisoformat(ts))

    def get(self, user_id: str, symbol: str) -> Optional[Note]:
        with self._storage.lock:
            row = self._storage.conn.execute(
                "SELECT * FROM notes WHERE user_id = ? AND symbol = ?",
                (user_id, symbol),
            ).fetchone()
        return _to_note(row) if row else None

    def update(self, user_id: str, symbol: str, text: str) -> Optional[Note]:
        with self._storage.lock, self._storage.conn as conn:
            cursor = conn.execute(
                "UPDATE notes SET note = ?, updated_at = ? WHERE user_id = ? AND symbol = ?",
                (text, self._storage.now(), user_id, symbol),
            )
        if cursor.rowcount == 0:
            return None
        return self.get(user_id, symbol)

    def delete(self, user_id: str, symbol: str) -> Optional[Note]:
        note = self.get(user_id, symbol)
        if note is None:
            return None
        with self._storage.lock, self._storage.conn as conn:
            conn.execute(
                "DELETE FROM notes WHERE user_id = ? AND symbol = ?",
                (user_id, symbol),
            )
        return note

    def list_for_user(self, user_id: str) -> list[Note]:
        with self._storage.lock:
            rows = self._storage.conn.execute(
                "SELECT * FROM notes WHERE user_id = ? ORDER BY updated_at DESC, rowid DESC",
                (user_id,),
            ).fetchall()
        return [_to_note(row) for row in rows]


class SQLiteWatchlistRepository(IWatchlistRepository):
    def __init__(self, storage: SQLiteStorage) -> None:
        self._storage = storage

    def add(self, user_id: str, symbol: str) -> WatchlistEntry:
        ts = self._storage.now()
        try:
            with self._storage.lock, self._storage.conn as conn:
                conn.execute(
                    "INSERT INTO watchlist(user_id, symbol, added_at) VALUES(?, ?, ?)",
                    (user_id, symbol, ts),
                )
        except sqlite3.IntegrityError as exc:
            raise DuplicateWatchlistEntryError(f"{symbol} is already in your watchlist") from exc
        return WatchlistEntry(user_id, symbol, datetime.fromisoformat(ts))

    def remove(self, user_id: str, symbol: str) -> bool:
        with self._storage.lock, self._storage.conn as conn:
            cursor = conn.execute(
                "DELETE FROM watchlist WHERE user_id = ? AND symbol = ?",
                (user_id, symbol),
            )
        return cursor.rowcount > 0

    def list_for_user(self, user_id: str) -> list[WatchlistEntry]:
        with self._storage.lock:
            rows = self._storage.conn.execute(
                "SELECT * FROM watchlist WHERE user_id = ? ORDER BY added_at, rowid",
                (user_id,),
            ).fetchall()
        return [
            WatchlistEntry(row["user_id"], row["symbol"], datetime.fromisoformat(row["added_at"]))
            for row in rows
        ]


def _to_note(row: sqlite3.Row) -> Note:
    return Note(
        user_id=row["user_id"],
        symbol=row["symbol"],
        note=row["note"],
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
    )
