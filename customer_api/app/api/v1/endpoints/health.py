"""
Health endpoint for API v1.

Returns a static status together with the number of stored
customers, which is enough for a liveness probe to tell that the
store is reachable.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from customer_api.app.dependencies import get_customer_service
from customer_api.app.services.customer_service import CustomerService

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health(service: CustomerService = Depends(get_customer_service)) -> Dict[str, Any]:
    """Report liveness together with the number of stored customers."""
    return {"status": "ok", "customers": service.count()}
