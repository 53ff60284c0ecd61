"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary; the core receives parsed, typed values
    - Domain types from core/ used for enum fields
"""
