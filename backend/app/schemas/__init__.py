"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Request fields are optional so handlers can emit endpoint-specific messages
    - Response models mirror the wire shape (aliases for camelCase / underscored keys)
"""
