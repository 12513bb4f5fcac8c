"""
pytest configuration and fixtures.

The suite runs without Postgres: `FakePool` stands in for `asyncpg.Pool`
and understands the four statements the employee repository issues.
"""

from __future__ import annotations

from typing import Any

import asyncpg
import pytest
from fastapi.testclient import TestClient

from core import db
from main import app


NAME_WIDTH = 50


def _check_name_width(name: str) -> None:
    # Mirrors the Name VARCHAR(50) column.
    if len(name) > NAME_WIDTH:
        raise asyncpg.StringDataRightTruncationError(
            f"value too long for type character varying({NAME_WIDTH})"
        )


class FakePool:
    """In-memory EMPLOYEES table behind the asyncpg pool methods we use."""

    def __init__(self) -> None:
        self.rows: dict[int, dict[str, Any]] = {}
        self.statements: list[str] = []
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.fail_with: BaseException | None = None
        self.closed = False

    def _check(self, sql: str, args: tuple[Any, ...]) -> str:
        verb = sql.split()[0].upper()
        self.statements.append(verb)
        self.calls.append((" ".join(sql.split()), args))
        if self.fail_with is not None:
            raise self.fail_with
        return verb

    async def fetch(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self._check(sql, args)
        (employee_id,) = args
        row = self.rows.get(employee_id)
        return [dict(row)] if row is not None else []

    async def execute(self, sql: str, *args: Any) -> str:
        verb = self._check(sql, args)
        if verb == "INSERT":
            employee_id, name, age, ssn = args
            _check_name_width(name)
            if employee_id in self.rows:
                raise asyncpg.UniqueViolationError(
                    'duplicate key value violates unique constraint "employees_pkey"'
                )
            self.rows[employee_id] = {"EmployeeID": employee_id, "Name": name, "Age": age, "SSN": ssn}
            return "INSERT 0 1"
        if verb == "UPDATE":
            name, age, ssn, employee_id = args
            _check_name_width(name)
            if employee_id not in self.rows:
                return "UPDATE 0"
            self.rows[employee_id].update({"Name": name, "Age": age, "SSN": ssn})
            return "UPDATE 1"
        if verb == "DELETE":
            (employee_id,) = args
            return f"DELETE {1 if self.rows.pop(employee_id, None) else 0}"
        raise AssertionError(f"unexpected statement: {sql}")

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def pool() -> FakePool:
    return FakePool()


@pytest.fixture
def client(pool: FakePool):
    app.dependency_overrides[db.get_pool] = lambda: pool
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def alice() -> dict[str, Any]:
    return {"name": "Alice", "age": 20, "ssn": 123456789, "employeeId": 1}
