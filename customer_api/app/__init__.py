"""
Application package initializer.

The project is split into ``core`` (configuration, logging, errors and
the record store), ``schemas`` (request and response payloads),
``services`` (business rules over the store) and ``api`` (versioned
HTTP routers).  Routers only translate between HTTP and the service
layer; they never touch the store directly.
"""

from .main import app, create_app  # noqa: F401
