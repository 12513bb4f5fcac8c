"""
Employee persistence (raw SQL).

Every write returns a small status envelope, {"Status": ...} plus "Error" when
the driver failed. Driver errors never propagate out of this module.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import asyncpg

from core import db

from .schemas import EmployeeIn

logger = logging.getLogger(__name__)

# Connectivity loss shows up as OSError / InterfaceError rather than PostgresError.
DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)

INSERTED = "Data Inserted Successfully"
NOT_INSERTED = "Data Not Inserted"
NOT_RETRIEVED = "Data Not Retrieved"
UPDATED = "Data Updated Successfully"
NOT_UPDATED = "Data Not Updated"
DELETED = "Data Deleted Successfully"
NOT_DELETED = "Data Not Deleted"


def _envelope(status: str, exc: BaseException | None = None) -> dict[str, str]:
    body = {"Status": status}
    if exc is not None:
        body["Error"] = str(exc)
    return body


async def insert(pool: asyncpg.Pool, employee: EmployeeIn) -> dict[str, str]:
    # No existence check: a duplicate key comes back as a UniqueViolationError.
    try:
        await db.execute(
            pool,
            """
            INSERT INTO EMPLOYEES (EmployeeID, Name, Age, SSN)
            VALUES ($1, $2, $3, $4)
            """,
            employee.employee_id,
            employee.name,
            employee.age,
            employee.ssn,
        )
    except DRIVER_ERRORS as exc:
        logger.warning("employee_insert_failed employee_id=%s error=%s", employee.employee_id, exc)
        return _envelope(NOT_INSERTED, exc)
    return _envelope(INSERTED)


async def retrieve_by_id(pool: asyncpg.Pool, employee_id: int) -> list[dict[str, Any]] | dict[str, str]:
    """
    Rows for one employee id (empty list when nothing matches).

    Unquoted identifiers fold to lower case in Postgres, so the columns are
    aliased back to the names clients expect.
    """
    try:
        return await db.fetch_all(
            pool,
            """
            SELECT
              EmployeeID AS "EmployeeID",
              Name AS "Name",
              Age AS "Age",
              SSN AS "SSN"
            FROM EMPLOYEES
            WHERE EmployeeID = $1
            """,
            employee_id,
        )
    except DRIVER_ERRORS as exc:
        logger.warning("employee_retrieve_failed employee_id=%s error=%s", employee_id, exc)
        return _envelope(NOT_RETRIEVED, exc)


async def update(pool: asyncpg.Pool, employee: EmployeeIn) -> dict[str, str]:
    """
    Overwrite name/age/ssn for an existing employee.

    Postgres counts matched rows, so re-saving identical values still reports
    an update. Only a missing id yields "Data Not Updated".
    """
    try:
        status = await db.execute(
            pool,
            """
            UPDATE EMPLOYEES
            SET Name = $1,
                Age = $2,
                SSN = $3
            WHERE EmployeeID = $4
            """,
            employee.name,
            employee.age,
            employee.ssn,
            employee.employee_id,
        )
    except DRIVER_ERRORS as exc:
        logger.warning("employee_update_failed employee_id=%s error=%s", employee.employee_id, exc)
        return _envelope(NOT_UPDATED, exc)

    if db.affected_rows(status) > 0:
        return _envelope(UPDATED)
    return _envelope(NOT_UPDATED)


async def delete(pool: asyncpg.Pool, employee_id: int) -> dict[str, str]:
    # Reports success whether or not a row matched.
    try:
        await db.execute(
            pool,
            "DELETE FROM EMPLOYEES WHERE EmployeeID = $1",
            employee_id,
        )
    except DRIVER_ERRORS as exc:
        logger.warning("employee_delete_failed employee_id=%s error=%s", employee_id, exc)
        return _envelope(NOT_DELETED, exc)
    return _envelope(DELETED)
