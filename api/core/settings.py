"""
Process configuration read from environment variables.

Everything here is consumed at startup: database location and credentials,
pool size, HTTP port and log level. Blank or unparsable values fall back to
the defaults below.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

DEFAULT_DB_PORT = 5432
DEFAULT_POOL_MAX_SIZE = 10
DEFAULT_HTTP_PORT = 8080


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq-only params like sslmode=require in the DSN.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


@dataclass(frozen=True)
class Settings:
    db_host: str
    db_port: int
    db_user: str
    db_password: str
    db_name: str
    pool_max_size: int
    http_port: int
    log_level: str
    database_url: str | None = None

    def dsn(self) -> str:
        """
        Connection string for asyncpg.

        DATABASE_URL wins when it is set; otherwise the URL is composed from
        the individual DB_* parts.
        """
        if self.database_url:
            return _sanitize_database_url(self.database_url)

        auth = quote(self.db_user, safe="")
        if self.db_password:
            auth = f"{auth}:{quote(self.db_password, safe='')}"
        return f"postgresql://{auth}@{self.db_host}:{self.db_port}/{self.db_name}"


def load_settings() -> Settings:
    return Settings(
        db_host=_env_str("DB_HOST", "localhost"),
        db_port=_env_int("DB_PORT", DEFAULT_DB_PORT),
        db_user=_env_str("DB_USER", "postgres"),
        db_password=os.environ.get("DB_PASSWORD", ""),
        db_name=_env_str("DB_NAME", "records"),
        pool_max_size=max(1, _env_int("DB_POOL_MAX_SIZE", DEFAULT_POOL_MAX_SIZE)),
        http_port=_env_int("PORT", DEFAULT_HTTP_PORT),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
        database_url=os.environ.get("DATABASE_URL", "").strip() or None,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
