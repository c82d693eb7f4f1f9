"""
In-memory employee repository.

Holds the process-wide collection of employee records. The collection
lives only as long as the process; nothing is persisted.
"""

import threading
from typing import List, Optional

from ..exceptions import DuplicateEmployeeException
from ..logging_config import get_logger
from ..models import Employee
from .employee_repository import IEmployeeRepository

logger = get_logger(__name__)

SEED_EMPLOYEES = (
    Employee(id=1, name="John Doe", position="Engineer", salary=60000),
    Employee(id=2, name="Jane Smith", position="Manager", salary=75000),
    Employee(id=3, name="Sam Brown", position="Technician", salary=50000),
)


class InMemoryEmployeeRepository(IEmployeeRepository):
    """
    List-backed employee repository guarded by a single lock.

    The lock is held only while scanning or mutating the list. Every
    read hands out copies, so stored records change only through
    ``add``, ``update`` and ``delete``.

    Attributes:
        enforce_unique_ids: Reject ``add`` for an id that is already stored
    """

    def __init__(
        self,
        seed: Optional[List[Employee]] = None,
        enforce_unique_ids: bool = False,
    ):
        """
        Initialize repository.

        Args:
            seed: Initial records (default: the three seed employees)
            enforce_unique_ids: Raise on duplicate ids instead of appending
        """
        source = SEED_EMPLOYEES if seed is None else seed
        self._employees: List[Employee] = [e.model_copy() for e in source]
        self._lock = threading.Lock()
        self.enforce_unique_ids = enforce_unique_ids

    def _find(self, employee_id: int) -> Optional[Employee]:
        # Caller must hold self._lock
        for employee in self._employees:
            if employee.id == employee_id:
                return employee
        return None

    def get_all(self) -> List[Employee]:
        with self._lock:
            return [e.model_copy() for e in self._employees]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with self._lock:
            employee = self._find(employee_id)
            return employee.model_copy() if employee else None

    def add(self, employee: Optional[Employee]) -> None:
        if employee is None:
            return

        with self._lock:
            if self.enforce_unique_ids and self._find(employee.id) is not None:
                raise DuplicateEmployeeException(employee.id)
            self._employees.append(employee.model_copy())

        logger.info("Employee added", employee_id=employee.id)

    def update(self, employee: Optional[Employee]) -> bool:
        if employee is None:
            return False

        with self._lock:
            stored = self._find(employee.id)
            if stored is None:
                return False
            stored.name = employee.name
            stored.position = employee.position
            stored.salary = employee.salary

        logger.info("Employee updated", employee_id=employee.id)
        return True

    def overwrite_identity(
        self, employee_id: int, name: str, position: str
    ) -> Optional[Employee]:
        with self._lock:
            stored = self._find(employee_id)
            if stored is None:
                return None
            stored.name = name
            stored.position = position
            result = stored.model_copy()

        logger.info("Employee name and position overwritten", employee_id=employee_id)
        return result

    def delete(self, employee_id: int) -> bool:
        with self._lock:
            for index, stored in enumerate(self._employees):
                if stored.id == employee_id:
                    del self._employees[index]
                    break
            else:
                return False

        logger.info("Employee deleted", employee_id=employee_id)
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._employees)
