"""
Use-case: maintain a user's watchlist, a set of symbols.
"""

from equityedge.application.services.market_data_gateway import normalize_symbol
from equityedge.domain.entities.user_data import WatchlistEntry
from equityedge.domain.errors import WatchlistEntryNotFoundError
from equityedge.domain.ports.user_data_port import IWatchlistRepository


class ManageWatchlistUseCase:
    def __init__(self, repository: IWatchlistRepository) -> None:
        self._repository = repository

    def add(self, user_id: str, symbol: str) -> WatchlistEntry:
        """
        Raises:
            ValidationError: if *symbol* is blank.
            DuplicateWatchlistEntryError: if *symbol* is already on the list.
        """
        return self._repository.add(user_id, normalize_symbol(symbol))

    def remove(self, user_id: str, symbol: str) -> None:
        symbol = normalize_symbol(symbol)
        if not self._repository.remove(user_id, symbol):
            raise WatchlistEntryNotFoundError(f"{symbol} is not in your watchlist")

    def list_all(self, user_id: str) -> list[WatchlistEntry]:
        return self._repository.list_for_user(user_id)
