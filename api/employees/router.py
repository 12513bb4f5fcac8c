"""
Employee record API endpoints.

Body and path validation failures are answered with 400 by the handler in
`core/errors.py`. Everything that reaches the repository comes back as 200,
including database failures, which are reported inside the JSON envelope.
"""

from __future__ import annotations

from typing import Any

import asyncpg
from fastapi import APIRouter, Depends

from core import db

from . import repository, schemas

router = APIRouter(prefix="/records")


@router.post("/employee")
async def create_employee(
    employee: schemas.EmployeeIn,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    return await repository.insert(pool, employee)


@router.get("/employee/{employee_id}")
async def get_employee(
    employee_id: int,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> Any:
    return await repository.retrieve_by_id(pool, employee_id)


@router.put("/employee")
async def update_employee(
    employee: schemas.EmployeeIn,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    return await repository.update(pool, employee)


@router.delete("/employee/{employee_id}")
async def delete_employee(
    employee_id: int,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    return await repository.delete(pool, employee_id)
