"""
Client-side application state with unidirectional data flow.

State is an immutable AppState snapshot.  The only way to change it is to
dispatch an action; the pure reducer returns the next snapshot and every
subscribed listener is called with it.  StockStoreActions runs the network
calls (through StockApiClient, which returns Results) and turns their outcome
into Requested / Loaded / Failed actions.
"""

import asyncio
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional

from equityedge.client.api_client import StockApiClient

logger = logging.getLogger(__name__)

STOCKS = "stocks"
DETAILS = "details"
INSIGHTS = "insights"
HISTORY = "history"
SEARCH = "search"
WATCHLIST = "watchlist"

# Where each resource's loaded value lives on AppState.
_RESOURCE_FIELDS = {
    STOCKS: "stocks",
    DETAILS: "stock_details",
    INSIGHTS: "stock_insights",
    HISTORY: "stock_history",
    SEARCH: "search_results",
    WATCHLIST: "watchlist",
}


@dataclass(frozen=True)
class AppState:
    stocks: tuple = ()
    industries: tuple = ()
    selected_stock: Optional[dict] = None
    stock_details: Optional[dict] = None
    stock_insights: Optional[dict] = None
    stock_history: tuple = ()
    search_query: str = ""
    search_results: tuple = ()
    watchlist: tuple = ()
    loading: frozenset = field(default_factory=frozenset)
    error: Optional[str] = None

    def is_loading(self, resource: str) -> bool:
        return resource in self.loading

    def is_in_watchlist(self, symbol: str) -> bool:
        return any(item.get("symbol") == symbol for item in self.watchlist)


@dataclass(frozen=True)
class Requested:
    resource: str


@dataclass(frozen=True)
class Loaded:
    resource: str
    value: Any


@dataclass(frozen=True)
class Failed:
    resource: str
    error: str


@dataclass(frozen=True)
class SelectStock:
    stock: Optional[dict]


@dataclass(frozen=True)
class SetSearchQuery:
    query: str


@dataclass(frozen=True)
class ClearError:
    pass


@dataclass(frozen=True)
class ClearSearchResults:
    pass


def reduce(state: AppState, action: Any) -> AppState:
    if isinstance(action, Requested):
        return replace(state, loading=state.loading | {action.resource}, error=None)

    if isinstance(action, Loaded):
        value = action.value
        if isinstance(value, list):
            value = tuple(value)
        changes = {_RESOURCE_FIELDS[action.resource]: value}
        if action.resource == STOCKS:
            changes["industries"] = tuple(
                sorted({s.get("industry") for s in value if s.get("industry")})
            )
        return replace(state, loading=state.loading - {action.resource}, **changes)

    if isinstance(action, Failed):
        changes = {}
        if action.resource == WATCHLIST:
            changes["watchlist"] = ()
        return replace(
            state,
            loading=state.loading - {action.resource},
            error=action.error,
            **changes,
        )

    if isinstance(action, SelectStock):
        return replace(
            state,
            selected_stock=action.stock,
            stock_details=None,
            stock_insights=None,
            stock_history=(),
        )

    if isinstance(action, SetSearchQuery):
        return replace(state, search_query=action.query)

    if isinstance(action, ClearError):
        return replace(state, error=None)

    if isinstance(action, ClearSearchResults):
        return replace(state, search_results=())

    raise ValueError(f"Unknown action: {action!r}")


Listener = Callable[[AppState], None]


class StockStore:
    def __init__(self, initial: Optional[AppState] = None) -> None:
        self._state = initial or AppState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; the returned callable unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Any) -> AppState:
        self._state = reduce(self._state, action)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state


class StockStoreActions:
    """Async operations that talk to the API and dispatch their outcome."""

    def __init__(self, store: StockStore, client: StockApiClient) -> None:
        self._store = store
        self._client = client

    async def _load(self, resource: str, call) -> Any:
        self._store.dispatch(Requested(resource))
        result = await call
        if result.ok:
            self._store.dispatch(Loaded(resource, result.value))
            return result.value
        logger.warning("Loading %s failed: %s", resource, result.error)
        self._store.dispatch(Failed(resource, result.error))
        return None

    async def load_stocks(self) -> Any:
        return await self._load(STOCKS, self._client.list_stocks())

    async def select_stock(self, stock: Optional[dict]) -> None:
        self._store.dispatch(SelectStock(stock))
        if stock and stock.get("symbol"):
            await self.refresh_current_stock()

    async def refresh_current_stock(self) -> None:
        selected = self._store.state.selected_stock
        if not selected or not selected.get("symbol"):
            return
        symbol = selected["symbol"]
        await asyncio.gather(
            self._load(DETAILS, self._client.get_stock(symbol)),
            self._load(INSIGHTS, self._client.get_insights(symbol)),
            self._load(HISTORY, self._client.get_history(symbol)),
        )

    async def search(self, query: str) -> Any:
        self._store.dispatch(SetSearchQuery(query))
        return await self._load(SEARCH, self._client.search(query))

    async def load_watchlist(self) -> Any:
        return await self._load(WATCHLIST, self._client.get_watchlist())

    async def add_to_watchlist(self, symbol: str) -> bool:
        result = await self._client.add_to_watchlist(symbol)
        if not result.ok:
            self._store.dispatch(Failed(WATCHLIST + ":add", result.error))
            return False
        await self.load_watchlist()
        return True

    async def remove_from_watchlist(self, symbol: str) -> bool:
        result = await self._client.remove_from_watchlist(symbol)
        if not result.ok:
            self._store.dispatch(Failed(WATCHLIST + ":remove", result.error))
            return False
        await self.load_watchlist()
        return True
