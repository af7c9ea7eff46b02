"""
Console Demo API - Employee Registry
=====================================

What:  Process-lifetime, append-only, ordered collection of employee records.
Who:   Called by the /employee and /employees route handlers and by /health.
When:  Created once at import; lives until the process exits.

Concurrency:
    Every mutation and every read goes through a single threading.Lock.
    Reads return a copy (snapshot) taken under the lock, so callers can
    iterate or serialize it while other requests keep appending.

    append_and_snapshot() holds the lock across both steps: the snapshot
    a caller gets back always ends with the record that caller appended.
"""

import logging
import threading
from typing import List

from console_demo.schemas.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeRegistry:
    """
    Lock-guarded owner of the employee collection.

    Invariants:
        - Records are only ever appended; nothing is updated or removed
          (reset() exists for test isolation and is not exposed over HTTP).
        - Insertion order is preserved.
        - No uniqueness or field validation is applied.
    """

    def __init__(self) -> None:
        self._employees: List[Employee] = []
        self._lock = threading.Lock()

    def append(self, employee: Employee) -> int:
        """Append a record and return the new collection size."""
        with self._lock:
            self._employees.append(employee)
            size = len(self._employees)
        logger.debug("Employee appended; registry size=%d", size)
        return size

    def append_and_snapshot(self, employee: Employee) -> List[Employee]:
        """Append a record and return a copy of the full collection, atomically."""
        with self._lock:
            self._employees.append(employee)
            snapshot = list(self._employees)
        logger.debug("Employee appended; registry size=%d", len(snapshot))
        return snapshot

    def snapshot(self) -> List[Employee]:
        with self._lock:
            return list(self._employees)

    def __len__(self) -> int:
        with self._lock:
            return len(self._employees)

    def reset(self) -> None:
        """Drop every record. Used by the test suite between tests."""
        with self._lock:
            self._employees.clear()


# ── Singleton Instance ────────────────────────────────────────────────────
# One registry per process, shared by every request
employee_registry = EmployeeRegistry()
