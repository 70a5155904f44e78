"""
Process‑scoped record store for customers.

``CustomerStore`` defines the operations the service layer needs from
a backend.  ``InMemoryCustomerStore`` keeps records in a dict guarded
by a single re‑entrant lock: every method performs its existence check
and its mutation inside one critical section, so readers only ever
observe complete records and no update can be lost between a check
and a write.

Records are immutable.  Every insert and every replace stamps the new
``CustomerRecord`` with the next value of one store‑wide version
counter, so a version is never seen twice, even when an id is deleted
and created again.  Callers make a write conditional on the version
they observed earlier.
"""

import dataclasses
import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import ConcurrencyError, NotFoundError


logger = logging.getLogger(__name__)

# Sample customers used when ``seed_customers`` is enabled.
SAMPLE_CUSTOMERS: Tuple[Tuple[str, str], ...] = (
    ("Foo", "Bar"),
    ("John", "Doe"),
)


@dataclasses.dataclass(frozen=True)
class CustomerRecord:
    """A stored customer.  ``version`` is unique across the whole store."""

    id: int
    first_name: str
    last_name: str
    version: int = 1


class CustomerStore(ABC):
    """Abstract base class for customer storage backends."""

    @abstractmethod
    def list(self) -> List[CustomerRecord]:
        """Return a snapshot of all records in iteration order."""
        ...

    @abstractmethod
    def get(self, customer_id: int) -> Optional[CustomerRecord]:
        """Return the record for ``customer_id`` or ``None``."""
        ...

    @abstractmethod
    def insert(self, first_name: str, last_name: str, customer_id: Optional[int] = None) -> CustomerRecord:
        """
        Store a new record.

        Args:
            first_name: First name of the customer.
            last_name: Last name of the customer.
            customer_id: Explicit key for the record.  When ``None`` the
                next value of the store's sequence is used.

        Returns:
            The stored record.

        Raises:
            ConcurrencyError: If ``customer_id`` is already in use.
        """
        ...

    @abstractmethod
    def replace(
        self,
        customer_id: int,
        first_name: str,
        last_name: str,
        expected_version: Optional[int] = None,
    ) -> CustomerRecord:
        """
        Replace the name fields of an existing record.

        Args:
            customer_id: Key of the record to replace.
            first_name: New first name.
            last_name: New last name.
            expected_version: When given, the write only happens if the
                stored record still has this version.

        Returns:
            The new record.

        Raises:
            NotFoundError: If no record exists for ``customer_id``.
            ConcurrencyError: If the stored version differs from
                ``expected_version``.
        """
        ...

    @abstractmethod
    def delete(self, customer_id: int) -> CustomerRecord:
        """
        Remove a record and return it.

        Raises:
            NotFoundError: If no record exists for ``customer_id``.
        """
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...


class InMemoryCustomerStore(CustomerStore):
    """Dict‑backed store with a monotonic id sequence."""

    def __init__(self, records: Iterable[CustomerRecord] = ()) -> None:
        self._lock = threading.RLock()
        self._records: Dict[int, CustomerRecord] = {}
        self._last_id = 0
        self._last_version = 0
        for record in records:
            self._records[record.id] = record
            self._last_id = max(self._last_id, record.id)
            self._last_version = max(self._last_version, record.version)

    def list(self) -> List[CustomerRecord]:
        with self._lock:
            return list(self._records.values())

    def get(self, customer_id: int) -> Optional[CustomerRecord]:
        with self._lock:
            return self._records.get(customer_id)

    def insert(self, first_name: str, last_name: str, customer_id: Optional[int] = None) -> CustomerRecord:
        with self._lock:
            if customer_id is None:
                customer_id = self._last_id + 1
            elif customer_id in self._records:
                raise ConcurrencyError(f"Customer {customer_id} already exists")
            record = CustomerRecord(
                id=customer_id,
                first_name=first_name,
                last_name=last_name,
                version=self._next_version(),
            )
            self._records[customer_id] = record
            # Keep generated ids ahead of any explicitly supplied one.
            self._last_id = max(self._last_id, customer_id)
            return record

    def replace(
        self,
        customer_id: int,
        first_name: str,
        last_name: str,
        expected_version: Optional[int] = None,
    ) -> CustomerRecord:
        with self._lock:
            current = self._records.get(customer_id)
            if current is None:
                raise NotFoundError.for_id(customer_id)
            if expected_version is not None and current.version != expected_version:
                raise ConcurrencyError(
                    f"Customer {customer_id} was modified concurrently "
                    f"(expected version {expected_version}, found {current.version})"
                )
            record = dataclasses.replace(
                current,
                first_name=first_name,
                last_name=last_name,
                version=self._next_version(),
            )
            self._records[customer_id] = record
            return record

    def delete(self, customer_id: int) -> CustomerRecord:
        with self._lock:
            record = self._records.pop(customer_id, None)
            if record is None:
                raise NotFoundError.for_id(customer_id)
            return record

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _next_version(self) -> int:
        # Caller holds the lock.
        self._last_version += 1
        return self._last_version


def create_store(seed: bool = False) -> InMemoryCustomerStore:
    """Create the process store, optionally populated with sample customers."""
    store = InMemoryCustomerStore()
    if seed:
        for first_name, last_name in SAMPLE_CUSTOMERS:
            store.insert(first_name, last_name)
        logger.info("Seeded customer store with %d sample customers", len(store))
    return store
