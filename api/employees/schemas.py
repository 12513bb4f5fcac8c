"""
Pydantic schemas for employee record endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Plain-text 400 bodies for requests that never reach the repository.
INVALID_EMPLOYEE_DATA = (
    'Please provide valid employee data: '
    '{"name": string, "age": int, "ssn": int, "employeeId": int}'
)
INVALID_EMPLOYEE_ID = "invalid employee ID"


class EmployeeIn(BaseModel):
    """
    Request body for create and update.

    Integers must arrive as JSON numbers (no string coercion) and every field
    must be nonzero / non-empty before anything is written. Column limits are
    left to the database.
    """

    model_config = ConfigDict(populate_by_name=True)

    employee_id: int = Field(..., alias="employeeId", strict=True)
    name: str = Field(..., min_length=1, strict=True)
    age: int = Field(..., strict=True)
    ssn: int = Field(..., strict=True)

    @field_validator("employee_id", "age", "ssn")
    @classmethod
    def _nonzero(cls, value: int) -> int:
        if value == 0:
            raise ValueError("must be nonzero")
        return value
