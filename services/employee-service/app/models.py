"""Pydantic models for request/response validation."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from app.exceptions import MalformedBodyException


class Employee(BaseModel):
    """
    Employee record.

    Field defaults mirror a default-constructed record, so a body that
    omits ``id`` parses with ``id == 0`` and is rejected by the
    positivity check rather than by validation. Numbers are not coerced
    from strings or booleans; a JSON integer is accepted as a salary.
    """

    model_config = ConfigDict(strict=True)

    id: int = Field(default=0, description="Positive, unique employee id")
    name: str = Field(default="")
    position: str = Field(default="")
    salary: float = Field(default=0.0)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    service: str
    version: str
    employees: int


_optional_employee = TypeAdapter(Optional[Employee])


def parse_employee_body(body: str) -> Optional[Employee]:
    """
    Parse a JSON request body into an Employee.

    Args:
        body: Raw request body text

    Returns:
        The parsed employee, or None when the body is JSON ``null``

    Raises:
        MalformedBodyException: If the body is not valid JSON or does not
            describe an employee
    """
    try:
        return _optional_employee.validate_json(body)
    except ValidationError as e:
        raise MalformedBodyException(str(e)) from e
