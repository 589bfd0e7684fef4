"""
FastAPI entry point.

create_app() loads configuration, wires the container, and registers routes
and exception handlers.  Domain errors are translated to HTTP status codes only
here.  Notes and watchlist routes authenticate with a Bearer JWT resolved to a
user id by the ITokenValidator on the container.

Run locally:
    uvicorn equityedge.infrastructure.entrypoints.fastapi_app:create_app --factory --reload --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from equityedge.application.services import response_assembler as assemble
from equityedge.domain.errors import (
    DuplicateEntryError,
    NotFoundError,
    UpstreamProviderError,
    ValidationError,
)
from equityedge.infrastructure.config import Settings
from equityedge.infrastructure.entrypoints.container import AppContainer, build_container

logger = logging.getLogger(__name__)

router = APIRouter()


class NoteRequest(BaseModel):
    note: str = ""


class WatchlistRequest(BaseModel):
    symbol: str = ""


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


async def get_current_user_id(
    request: Request,
    container: AppContainer = Depends(get_container),
) -> str:
    """FastAPI dependency: resolve the Bearer JWT to the caller's user id."""
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing or invalid Authorization header.")
    if container.token_validator is None:
        raise HTTPException(status_code=401, detail="Authentication is not configured.")
    token = auth_header.split(" ", 1)[1]
    try:
        claims = container.token_validator.validate(token)
    except ValueError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    return str(claims["sub"])


# ---------------------------------------------------------------------------
# Stocks
# ---------------------------------------------------------------------------


@router.get("/stocks")
async def list_stocks(container: AppContainer = Depends(get_container)):
    summaries = await container.list_stocks.execute()
    return [assemble.stock_summary_to_dict(summary) for summary in summaries]


# Declared before /stocks/{symbol} so "search" is not captured as a symbol.
@router.get("/stocks/search")
async def search_stocks(
    name: str = Query(default=""),
    container: AppContainer = Depends(get_container),
):
    return await container.search_stocks.execute(name)


@router.get("/stocks/{symbol}")
async def get_stock(symbol: str, container: AppContainer = Depends(get_container)):
    detail = await container.stock_details.execute(symbol)
    return assemble.stock_detail_to_dict(detail)


@router.get("/stocks/{symbol}/history")
async def get_stock_history(symbol: str, container: AppContainer = Depends(get_container)):
    bars = await container.history.execute(symbol)
    return assemble.history_to_dict(symbol.upper().strip(), bars)


@router.get("/stocks/{symbol}/insights")
async def get_stock_insights(symbol: str, container: AppContainer = Depends(get_container)):
    result = await container.insights.execute(symbol)
    return assemble.insights_to_dict(result)


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------


@router.get("/notes")
def list_notes(
    user_id: str = Depends(get_current_user_id),
    container: AppContainer = Depends(get_container),
):
    notes = container.notes.list_all(user_id)
    return {
        "message": "Notes retrieved successfully",
        "notes": [assemble.note_to_dict(note) for note in notes],
    }


@router.post("/stocks/{symbol}/notes", status_code=201)
def add_note(
    symbol: str,
    body: NoteRequest,
    user_id: str = Depends(get_current_user_id),
    container: AppContainer = Depends(get_container),
):
    note = container.notes.add(user_id, symbol, body.note)
    return {"message": "Note created successfully", "note": assemble.note_to_dict(note)}


@router.get("/stocks/{symbol}/notes")
def get_note(
    symbol: str,
    user_id: str = Depends(get_current_user_id),
    container: AppContainer = Depends(get_container),
):
    note = container.notes.get(user_id, symbol)
    return {"message": "Note retrieved successfully", "note": assemble.note_to_dict(note)}


@router.put("/stocks/{symbol}/notes")
def update_note(
    symbol: str,
    body: NoteRequest,
    user_id: str = Depends(get_current_user_id),
    container: AppContainer = Depends(get_container),
):
    note = container.notes.update(user_id, symbol, body.note)
    return {"message": "Note updated successfully", "note": assemble.note_to_dict(note)}


@router.delete("/stocks/{symbol}/notes")
def delete_note(
    symbol: str,
    user_id: str = Depends(get_current_user_id),
    container: AppContainer = Depends(get_container),
):
    note = container.notes.delete(user_id, symbol)
    return {"message": "Note deleted successfully", "note": assemble.note_to_dict(note)}


# ---------------------------------------------------------------------------
# Watchlist
# ---------------------------------------------------------------------------


@router.get("/watchlist")
def get_watchlist(
    user_id: str = Depends(get_current_user_id),
    container: AppContainer = Depends(get_container),
):
    entries = container.watchlist.list_all(user_id)
    return {"watchlist": [assemble.watchlist_entry_to_dict(entry) for entry in entries]}


@router.post("/watchlist", status_code=201)
def add_to_watchlist(
    body: WatchlistRequest,
    user_id: str = Depends(get_current_user_id),
    container: AppContainer = Depends(get_container),
):
    entry = container.watchlist.add(user_id, body.symbol)
    return {
        "message": f"{entry.symbol} added to watchlist",
        "entry": assemble.watchlist_entry_to_dict(entry),
    }


@router.delete("/watchlist/{symbol}")
def remove_from_watchlist(
    symbol: str,
    user_id: str = Depends(get_current_user_id),
    container: AppContainer = Depends(get_container),
):
    container.watchlist.remove(user_id, symbol)
    return {"message": f"{symbol.upper().strip()} removed from watchlist"}


@router.get("/health")
async def health():
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": str(exc)})


async def _duplicate_error(request: Request, exc: DuplicateEntryError) -> JSONResponse:
    return JSONResponse(status_code=409, content={"message": str(exc)})


async def _not_found_error(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": str(exc)})


async def _upstream_error(request: Request, exc: UpstreamProviderError) -> JSONResponse:
    return JSONResponse(status_code=502, content={"message": str(exc)})


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Something went wrong"})


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[AppContainer] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings:  Runtime settings; read from the environment (and .env) when omitted.
        container: Pre-wired use-cases; built from *settings* when omitted.
    """
    if settings is None:
        load_dotenv()
        settings = Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.container.storage.close()

    app = FastAPI(title="EquityEdge Stock Watchlist API", lifespan=lifespan)
    app.state.container = container or build_container(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(DuplicateEntryError, _duplicate_error)
    app.add_exception_handler(NotFoundError, _not_found_error)
    app.add_exception_handler(UpstreamProviderError, _upstream_error)
    app.add_exception_handler(Exception, _unexpected_error)

    app.include_router(router)

    return app
