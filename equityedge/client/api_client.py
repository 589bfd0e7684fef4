"""
Async HTTP client for the EquityEdge API.

Every call returns a Result instead of raising, so callers (the store actions)
decide how a failure is reflected in application state.
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

import httpx

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class StockApiClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        token: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._transport = transport

    def with_token(self, token: Optional[str]) -> "StockApiClient":
        return StockApiClient(self._base_url, token, self._timeout, self._transport)

    async def list_stocks(self) -> Result[list]:
        return await self._request("GET", "/stocks")

    async def get_stock(self, symbol: str) -> Result[dict]:
        return await self._request("GET", f"/stocks/{symbol}")

    async def get_insights(self, symbol: str) -> Result[dict]:
        return await self._request("GET", f"/stocks/{symbol}/insights")

    async def get_history(self, symbol: str) -> Result[list]:
        result = await self._request("GET", f"/stocks/{symbol}/history")
        if result.ok and isinstance(result.value, dict):
            return Result(value=result.value.get("history", []))
        return result

    async def search(self, query: str) -> Result[list]:
        return await self._request("GET", "/stocks/search", params={"name": query})

    async def get_watchlist(self) -> Result[list]:
        if not self._token:
            return Result(error="No token found")
        result = await self._request("GET", "/watchlist")
        if result.ok and isinstance(result.value, dict):
            return Result(value=result.value.get("watchlist", []))
        return result

    async def add_to_watchlist(self, symbol: str) -> Result[dict]:
        if not self._token:
            return Result(error="You must be logged in")
        return await self._request("POST", "/watchlist", json={"symbol": symbol})

    async def remove_from_watchlist(self, symbol: str) -> Result[dict]:
        if not self._token:
            return Result(error="You must be logged in")
        return await self._request("DELETE", f"/watchlist/{symbol}")

    async def _request(self, method: str, path: str, **kwargs: Any) -> Result:
        headers = {"Authorization": f"Bearer {self._token}"} if self._token else {}
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            return Result(error=str(exc) or exc.__class__.__name__)

        if response.is_error:
            return Result(error=_error_message(response))
        try:
            return Result(value=response.json())
        except ValueError:
            logger.warning("%s %s returned a non-JSON body", method, path)
            return Result(error=f"Unexpected response from server (status {response.status_code})")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"Request failed with status {response.status_code}"
    if isinstance(body, dict):
        return str(body.get("message") or body.get("detail") or body.get("error") or body)
    return f"Request failed with status {response.status_code}"
