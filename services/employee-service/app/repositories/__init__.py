"""
Repository layer - Data access abstractions.

This layer provides interfaces for employee storage and retrieval,
hiding implementation details from the request handlers.
"""

from .employee_repository import IEmployeeRepository
from .memory_repository import SEED_EMPLOYEES, InMemoryEmployeeRepository

__all__ = [
    "IEmployeeRepository",
    "InMemoryEmployeeRepository",
    "SEED_EMPLOYEES",
]
