"""
Pydantic models for customer data.

On the wire customers are camelCase JSON objects::

    {"id": 1, "firstName": "Ada", "lastName": "Lovelace"}

In Python the same fields are ``first_name`` and ``last_name``.  Both
spellings are accepted on input; responses always use the aliases.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CustomerBase(BaseModel):
    first_name: str = Field(..., alias="firstName", examples=["Ada"])
    last_name: str = Field(..., alias="lastName", examples=["Lovelace"])

    model_config = {
        "populate_by_name": True,
    }


class CustomerCreate(CustomerBase):
    """Schema for creating a customer.

    ``id`` is normally omitted; it is only honoured when the server is
    configured to accept client supplied ids.  ``0`` is treated the same
    as an absent id.
    """

    id: Optional[int] = Field(None, examples=[None])


class CustomerUpdate(CustomerBase):
    """Schema for replacing a customer.

    ``id`` must repeat the id from the request path.
    """

    id: Optional[int] = Field(None, examples=[1])


class CustomerRead(CustomerBase):
    """Schema for reading a customer from the API."""

    id: int
