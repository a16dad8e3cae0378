"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Provider calls wrapped with timeout and error mapping to UpstreamError
"""
