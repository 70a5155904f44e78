"""
Service layer abstraction.

Services encapsulate the business rules for a resource.  They receive
their store explicitly, so the in‑memory store used here can be
replaced by another backend without touching API handlers.
"""
