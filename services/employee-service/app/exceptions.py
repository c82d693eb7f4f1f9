"""
Custom exception classes for employee service.

Each exception maps to exactly one HTTP status code; the mapping lives
in the exception handlers registered by ``app.main.create_app``.
"""

from typing import Any, Dict, Optional


class EmployeeServiceException(Exception):
    """
    Base exception for all employee service errors.

    All custom exceptions should inherit from this class
    for consistent error handling.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize employee service exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ParameterBindingException(EmployeeServiceException):
    """
    Raised when a request value cannot be bound to a handler parameter.

    Covers a required route segment, query parameter or header that is
    missing, or a value its parser rejects.
    """

    status_code = 400

    def __init__(
        self,
        field_name: str,
        source: str,
        source_key: str,
        reason: str,
    ) -> None:
        """
        Initialize parameter binding exception.

        Args:
            field_name: Parameter the value was destined for
            source: Where the value was read from (route, query, header)
            source_key: Segment, query or header name that was read
            reason: Explanation of why binding failed
        """
        self.field_name = field_name
        self.source = source
        self.source_key = source_key
        self.reason = reason
        message = f"Failed to bind '{field_name}' from {source} '{source_key}': {reason}"
        super().__init__(
            message,
            {"field": field_name, "source": source, "source_key": source_key},
        )


class MalformedBodyException(EmployeeServiceException):
    """Raised when a request body is not a valid employee document."""

    status_code = 400

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed employee body: {reason}", {"reason": reason})


class EmployeeNotFoundException(EmployeeServiceException):
    """Raised when no stored employee has the requested id."""

    status_code = 404

    def __init__(self, employee_id: int) -> None:
        self.employee_id = employee_id
        super().__init__("Employee not found.", {"employee_id": employee_id})


class DuplicateEmployeeException(EmployeeServiceException):
    """Raised when adding an employee whose id is already stored."""

    status_code = 409

    def __init__(self, employee_id: int) -> None:
        self.employee_id = employee_id
        super().__init__(
            f"Employee with id {employee_id} already exists.",
            {"employee_id": employee_id},
        )


class UnauthorizedException(EmployeeServiceException):
    """Raised when the Authorization header does not match the delete token."""

    status_code = 401

    def __init__(self) -> None:
        super().__init__("You are not authorized to delete.")
