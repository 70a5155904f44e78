"""
Route dependencies.

The customer service, and the store it owns, live on ``app.state`` and
are created once per application in ``create_app``.  Routes obtain the
service through ``get_customer_service`` so tests can swap it with
``app.dependency_overrides``.
"""

from fastapi import Request

from .services.customer_service import CustomerService


def get_customer_service(request: Request) -> CustomerService:
    return request.app.state.customer_service
