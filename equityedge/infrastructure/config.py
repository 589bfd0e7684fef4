"""
Runtime configuration read from environment variables.

The composition root calls load_dotenv() before Settings.from_env(), so values
may come from a local .env file during development.
"""

import os
from dataclasses import dataclass
from typing import Optional

from equityedge.application.use_cases.list_stocks import DEFAULT_SYMBOLS
from equityedge.infrastructure.news.fmp_client import DEFAULT_BASE_URL


def _split(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    database_path: str = "equityedge.db"
    fmp_api_key: str = ""
    fmp_base_url: str = DEFAULT_BASE_URL
    http_timeout_seconds: float = 10.0
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_audience: Optional[str] = None
    jwt_issuer: Optional[str] = None
    tracked_symbols: tuple[str, ...] = DEFAULT_SYMBOLS
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("http://localhost:3000",)

    @classmethod
    def from_env(cls) -> "Settings":
        env = os.environ
        return cls(
            database_path=env.get("DATABASE_PATH", cls.database_path),
            fmp_api_key=env.get("FMP_API_KEY", ""),
            fmp_base_url=env.get("FMP_BASE_URL", DEFAULT_BASE_URL),
            http_timeout_seconds=float(env.get("HTTP_TIMEOUT_SECONDS", "10")),
            jwt_secret=env.get("JWT_SECRET", ""),
            jwt_algorithm=env.get("JWT_ALGORITHM", "HS256"),
            jwt_audience=env.get("JWT_AUDIENCE") or None,
            jwt_issuer=env.get("JWT_ISSUER") or None,
            tracked_symbols=_split(env.get("TRACKED_SYMBOLS", "")) or DEFAULT_SYMBOLS,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            cors_origins=_split(env.get("CORS_ORIGINS", "")) or cls.cors_origins,
        )
