"""
Employee repository interface (Abstract Base Class).

Defines the contract for employee storage and retrieval
independent of the underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Employee


class IEmployeeRepository(ABC):
    """
    Abstract repository interface for employee records.

    Absence is signalled with ``None`` or ``False``; no method raises
    for a missing record.
    """

    @abstractmethod
    def get_all(self) -> List[Employee]:
        """
        Get every stored employee.

        Returns:
            Snapshot of the collection in insertion order
        """
        pass

    @abstractmethod
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """
        Find the first employee with the given id.

        Args:
            employee_id: Employee id to look up

        Returns:
            Employee if found, None otherwise
        """
        pass

    @abstractmethod
    def add(self, employee: Optional[Employee]) -> None:
        """
        Append an employee to the collection.

        Args:
            employee: Employee to store; None is ignored
        """
        pass

    @abstractmethod
    def update(self, employee: Optional[Employee]) -> bool:
        """
        Overwrite name, position and salary of the stored employee with
        the same id.

        Args:
            employee: Employee carrying the new values

        Returns:
            True if a stored employee was updated, False otherwise
        """
        pass

    @abstractmethod
    def overwrite_identity(
        self, employee_id: int, name: str, position: str
    ) -> Optional[Employee]:
        """
        Overwrite name and position of the first employee with the given
        id, leaving salary untouched, in one atomic step.

        Args:
            employee_id: Employee id to look up
            name: New name
            position: New position

        Returns:
            The updated employee if found, None otherwise
        """
        pass

    @abstractmethod
    def delete(self, employee_id: int) -> bool:
        """
        Remove the first employee with the given id.

        Args:
            employee_id: Employee id to remove

        Returns:
            True if an employee was removed, False otherwise
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored employees."""
        pass
