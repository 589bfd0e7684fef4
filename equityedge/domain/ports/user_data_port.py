"""
Ports (interfaces) for per-user persistence.
Infrastructure adapters (e.g. SQLiteNoteRepository) must implement these interfaces.
Both stores key records by (user_id, symbol) and enforce its uniqueness.
"""

from abc import ABC, abstractmethod
from typing import Optional

from equityedge.domain.entities.user_data import Note, WatchlistEntry


class INoteRepository(ABC):
    @abstractmethod
    def create(self, user_id: str, symbol: str, text: str) -> Note:
        """Insert a new note.

        Raises:
            DuplicateNoteError: if the user already has a note for *symbol*.
        """
        ...

    @abstractmethod
    def get(self, user_id: str, symbol: str) -> Optional[Note]: ...

    @abstractmethod
    def update(self, user_id: str, symbol: str, text: str) -> Optional[Note]:
        """Replace the note text; return None when no note exists."""
        ...

    @abstractmethod
    def delete(self, user_id: str, symbol: str) -> Optional[Note]:
        """Remove and return the note, or None when no note exists."""
        ...

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Note]:
        """Return the user's notes, most recently updated first."""
        ...


class IWatchlistRepository(ABC):
    @abstractmethod
    def add(self, user_id: str, symbol: str) -> WatchlistEntry:
        """
        Raises:
            DuplicateWatchlistEntryError: if *symbol* is already watched.
        """
        ...

    @abstractmethod
    def remove(self, user_id: str, symbol: str) -> bool:
        """Return True if an entry was removed."""
        ...

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[WatchlistEntry]: ...
