"""Services Layer — one orchestration module per endpoint family.

Invariants:
    - Services raise ValidationError for bad input; they never build HTTP responses
    - Simulated latency and provider calls live here, not in routes

Design Decisions:
    - Plain async functions over service classes: handlers are stateless
"""
