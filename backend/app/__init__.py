"""AI Tutor API Package — chat proxy plus mock UPI and payment endpoints.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
