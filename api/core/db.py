"""
Async database access helpers (raw SQL) using asyncpg.

The connection pool is opened once by the FastAPI lifespan (see
`api/main.py`), kept on `app.state.pool` and closed on shutdown. Handlers get
it through the `get_pool` dependency and pass it down to repositories.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg
from fastapi import Request

from .settings import Settings

logger = logging.getLogger(__name__)


async def open_pool(settings: Settings) -> asyncpg.Pool:
    pool = await asyncpg.create_pool(
        dsn=settings.dsn(),
        min_size=1,
        max_size=settings.pool_max_size,
    )
    logger.info(
        "db_pool_opened host=%s db=%s max_size=%s",
        settings.db_host,
        settings.db_name,
        settings.pool_max_size,
    )
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()
    logger.info("db_pool_closed")


def get_pool(request: Request) -> asyncpg.Pool:
    """
    FastAPI dependency returning the process-wide pool.
    """
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. It is opened by the app lifespan on startup.")
    return pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(pool: asyncpg.Pool, sql: str, *args: Any) -> str:
    """
    Run a statement (INSERT/UPDATE/DELETE) and return the command status tag,
    e.g. "INSERT 0 1" or "UPDATE 0".
    """
    return await pool.execute(sql, *args)


def affected_rows(status: str | None) -> int:
    """
    Row count from a command status tag. The count is always the last token.
    """
    parts = (status or "").split()
    if not parts:
        return 0
    try:
        return int(parts[-1])
    except ValueError:
        return 0
