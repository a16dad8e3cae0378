"""Core Layer — pure request logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Functions are pure; the only clock read is isolated in transaction_id.now_ms

Design Decisions:
    - Functional core separated from imperative shell (services own delays and provider calls)
"""
