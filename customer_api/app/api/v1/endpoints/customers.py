"""
Customer endpoints for API v1.

These routes expose the customer collection as a REST resource:

* ``GET /customers`` – list customers, optionally filtered by name.
* ``GET /customers/{id}`` – retrieve one customer (404 if absent).
* ``POST /customers`` – create a customer (201 with ``Location``).
* ``PUT /customers/{id}`` – replace a customer (204; 400 on id
  mismatch, 404 if absent, 409 on concurrent modification).
* ``DELETE /customers/{id}`` – delete and return a customer.

Handlers only translate between HTTP and ``CustomerService``.  Service
errors are left to propagate; the handler registered in ``create_app``
turns each one into a response with the status code it carries.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from customer_api.app.dependencies import get_customer_service
from customer_api.app.schemas.customer import CustomerCreate, CustomerRead, CustomerUpdate
from customer_api.app.services.customer_service import CustomerService

router = APIRouter()


@router.get("", response_model=List[CustomerRead])
async def list_customers(
    name: Optional[str] = Query(None, description="Case-insensitive substring of first or last name"),
    service: CustomerService = Depends(get_customer_service),
) -> List[CustomerRead]:
    """Return all customers in storage order."""
    return service.list_customers(name_filter=name)


@router.get("/{customer_id}", response_model=CustomerRead)
async def get_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerRead:
    """Retrieve a single customer by its ID.  Returns 404 if absent."""
    return service.get_customer(customer_id)


@router.post("", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer: CustomerCreate,
    request: Request,
    response: Response,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerRead:
    """Create a new customer.

    The response carries a ``Location`` header pointing at the new
    resource.
    """
    created = service.create_customer(customer)
    response.headers["Location"] = str(request.url_for("get_customer", customer_id=created.id))
    return created


@router.put("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def update_customer(
    customer_id: int,
    customer: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    """Replace an existing customer.

    The body must repeat the path id.  Both name fields are replaced;
    there is no partial update.
    """
    service.update_customer(customer_id, customer)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{customer_id}", response_model=CustomerRead)
async def delete_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerRead:
    """Delete a customer and return the removed record."""
    return service.delete_customer(customer_id)
