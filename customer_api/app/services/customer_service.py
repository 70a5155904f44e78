"""
Service layer for customers.

``CustomerService`` implements the five operations exposed by the
customer endpoints (list, get, create, update, delete) on top of a
``CustomerStore`` passed in explicitly.  Every failure leaves this
module as one of the classified errors from ``core.errors``: taxonomy
errors raised by the store propagate unchanged, anything else is
logged and re‑raised as ``InternalError``.

Input is validated before the store is touched, so a rejected request
never mutates state.  Updates are conditional on the record version
observed during the existence check; a record that vanished or changed
before the write is reported rather than silently overwritten.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Mapping, Optional, Type, TypeVar, Union

import pydantic

from ..core.config import Settings, settings as default_settings
from ..core.errors import (
    CustomerServiceError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from ..core.store import CustomerRecord, CustomerStore
from ..schemas.customer import CustomerCreate, CustomerRead, CustomerUpdate


logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", CustomerCreate, CustomerUpdate)


class CustomerService:
    """Business rules for the customer resource."""

    def __init__(self, store: CustomerStore, settings: Optional[Settings] = None) -> None:
        self.store = store
        self.settings = settings or default_settings

    def list_customers(self, name_filter: Optional[str] = None) -> List[CustomerRead]:
        """Return all customers in store order.

        ``name_filter`` keeps only customers whose first or last name
        contains the given text, ignoring case.  An empty filter is the
        same as no filter.
        """
        with self._classify("list"):
            records = self.store.list()
        if name_filter:
            needle = name_filter.casefold()
            records = [
                r for r in records
                if needle in r.first_name.casefold() or needle in r.last_name.casefold()
            ]
        return [self._to_read(r) for r in records]

    def get_customer(self, customer_id: int) -> CustomerRead:
        with self._classify("get"):
            record = self.store.get(customer_id)
        if record is None:
            raise NotFoundError.for_id(customer_id)
        return self._to_read(record)

    def create_customer(self, data: Union[CustomerCreate, Mapping[str, Any]]) -> CustomerRead:
        """Insert a new customer and return the stored record.

        The id comes from the store's sequence unless client ids are
        enabled and the payload carries a non‑zero id.
        """
        payload = self._parse(CustomerCreate, data)
        requested_id = payload.id or None
        if requested_id is not None and not self.settings.allow_client_ids:
            raise ValidationError("Customer id is assigned by the server and must be omitted")
        with self._classify("create"):
            record = self.store.insert(payload.first_name, payload.last_name, customer_id=requested_id)
        logger.info("Created customer %s", record.id)
        return self._to_read(record)

    def update_customer(self, customer_id: int, data: Union[CustomerUpdate, Mapping[str, Any]]) -> None:
        """Replace both name fields of an existing customer.

        Raises ``ValidationError`` when the body id differs from
        ``customer_id``, ``NotFoundError`` when the customer does not
        exist or disappears before the write, and ``ConcurrencyError``
        when another writer changed it in the meantime.
        """
        payload = self._parse(CustomerUpdate, data)
        if payload.id != customer_id:
            raise ValidationError(
                f"Customer id in body ({payload.id}) does not match id in path ({customer_id})"
            )
        with self._classify("update"):
            current = self.store.get(customer_id)
            if current is None:
                raise NotFoundError.for_id(customer_id)
            self.store.replace(
                customer_id,
                payload.first_name,
                payload.last_name,
                expected_version=current.version,
            )
        logger.info("Updated customer %s", customer_id)

    def delete_customer(self, customer_id: int) -> CustomerRead:
        with self._classify("delete"):
            record = self.store.delete(customer_id)
        logger.info("Deleted customer %s", customer_id)
        return self._to_read(record)

    def count(self) -> int:
        with self._classify("count"):
            return len(self.store)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @contextmanager
    def _classify(self, operation: str) -> Iterator[None]:
        """Let taxonomy errors through and wrap everything else in ``InternalError``."""
        try:
            yield
        except CustomerServiceError as exc:
            logger.warning("Customer %s failed: %s", operation, exc.detail)
            raise
        except Exception as exc:
            logger.exception("Unexpected store failure during customer %s", operation)
            raise InternalError(f"Unexpected storage failure during {operation}") from exc

    @staticmethod
    def _parse(schema: Type[PayloadT], data: Union[PayloadT, Mapping[str, Any]]) -> PayloadT:
        if isinstance(data, schema):
            return data
        try:
            return schema.model_validate(data)
        except pydantic.ValidationError as exc:
            raise ValidationError(f"Invalid customer payload: {exc.error_count()} error(s)") from exc

    @staticmethod
    def _to_read(record: CustomerRecord) -> CustomerRead:
        return CustomerRead(id=record.id, first_name=record.first_name, last_name=record.last_name)
