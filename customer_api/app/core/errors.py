"""
Error taxonomy for the customer service.

Every failure the service reports is one of the classes below.  Each
carries the HTTP status it maps to, so the API layer can translate an
error without knowing which operation raised it.

* ``ValidationError`` – malformed or inconsistent input (400).
* ``NotFoundError`` – the target record does not exist (404).
* ``ConcurrencyError`` – the record changed or an id was taken between
  a check and the corresponding write (409).  Callers may retry.
* ``InternalError`` – anything unexpected from the storage layer (500).
"""

from typing import Optional


class CustomerServiceError(Exception):
    """Base class for all classified service failures."""

    status_code: int = 500
    default_detail: str = "Customer service error"

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(CustomerServiceError):
    status_code = 400
    default_detail = "Invalid customer payload"


class NotFoundError(CustomerServiceError):
    status_code = 404
    default_detail = "Customer not found"

    @classmethod
    def for_id(cls, customer_id: int) -> "NotFoundError":
        return cls(f"Customer {customer_id} not found")


class ConcurrencyError(CustomerServiceError):
    status_code = 409
    default_detail = "Customer was modified concurrently"


class InternalError(CustomerServiceError):
    status_code = 500
    default_detail = "Unexpected storage failure"
