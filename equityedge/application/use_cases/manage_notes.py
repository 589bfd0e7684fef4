"""
Use-case: per-user note CRUD, one note per (user, symbol).
The user id arrives already resolved by the identity boundary.
"""

from equityedge.application.services.market_data_gateway import normalize_symbol
from equityedge.domain.entities.user_data import Note
from equityedge.domain.errors import NoteNotFoundError, ValidationError
from equityedge.domain.ports.user_data_port import INoteRepository


def _require_text(text: str) -> str:
    if not text or not text.strip():
        raise ValidationError("Stock symbol and note content are required")
    return text.strip()


class ManageNotesUseCase:
    def __init__(self, repository: INoteRepository) -> None:
        self._repository = repository

    def add(self, user_id: str, symbol: str, text: str) -> Note:
        """
        Raises:
            ValidationError: if *symbol* or *text* is blank.
            DuplicateNoteError: if a note already exists for (user, symbol).
        """
        symbol = normalize_symbol(symbol)
        return self._repository.create(user_id, symbol, _require_text(text))

    def update(self, user_id: str, symbol: str, text: str) -> Note:
        symbol = normalize_symbol(symbol)
        note = self._repository.update(user_id, symbol, _require_text(text))
        if note is None:
            raise NoteNotFoundError("Note not found for this stock symbol")
        return note

    def get(self, user_id: str, symbol: str) -> Note:
        note = self._repository.get(user_id, normalize_symbol(symbol))
        if note is None:
            raise NoteNotFoundError("Note not found for this stock symbol")
        return note

    def delete(self, user_id: str, symbol: str) -> Note:
        note = self._repository.delete(user_id, normalize_symbol(symbol))
        if note is None:
            raise NoteNotFoundError("Note not found for this stock symbol")
        return note

    def list_all(self, user_id: str) -> list[Note]:
        return self._repository.list_for_user(user_id)
