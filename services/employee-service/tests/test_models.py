"""Tests for employee models and body parsing."""

import pytest

from app.exceptions import MalformedBodyException
from app.models import Employee, parse_employee_body


class TestParseEmployeeBody:
    """Test JSON body parsing."""

    def test_full_document(self):
        employee = parse_employee_body(
            '{"id": 4, "name": "Alex", "position": "Clerk", "salary": 40000}'
        )
        assert employee == Employee(id=4, name="Alex", position="Clerk", salary=40000.0)

    def test_missing_fields_default(self):
        assert parse_employee_body("{}") == Employee(
            id=0, name="", position="", salary=0.0
        )

    def test_null_is_absent(self):
        assert parse_employee_body("null") is None

    def test_unknown_fields_ignored(self):
        employee = parse_employee_body('{"id": 1, "department": "R&D"}')
        assert employee.id == 1

    def test_fractional_salary(self):
        assert parse_employee_body('{"id": 1, "salary": 1234.5}').salary == 1234.5

    @pytest.mark.parametrize(
        "body", ["", "   ", "{", "[]", '"text"', '{"id": "x"}', '{"salary": "lots"}']
    )
    def test_malformed(self, body):
        with pytest.raises(MalformedBodyException):
            parse_employee_body(body)

    @pytest.mark.parametrize(
        "body", ['{"id": "4"}', '{"id": true}', '{"id": 1, "salary": "12"}', '{"id": 1, "salary": true}']
    )
    def test_numbers_not_coerced(self, body):
        with pytest.raises(MalformedBodyException):
            parse_employee_body(body)

    def test_integer_salary_accepted(self):
        employee = parse_employee_body('{"id": 1, "salary": 40000}')
        assert employee.salary == 40000.0
        assert isinstance(employee.salary, float)


class TestEmployee:
    """Test the employee model."""

    def test_mutable(self):
        employee = Employee(id=1, name="A")
        employee.name = "B"
        assert employee.name == "B"

    def test_serializes_all_fields(self):
        assert Employee(id=1, name="A", position="P", salary=1).model_dump() == {
            "id": 1,
            "name": "A",
            "position": "P",
            "salary": 1.0,
        }
