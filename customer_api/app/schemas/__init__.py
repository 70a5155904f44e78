"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the stored records so that the wire
representation (camelCase JSON) can evolve independently of storage.
"""
