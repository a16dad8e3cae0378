"""Transaction Ids — mock identifiers derived from the wall clock.

Invariants:
    - Format is TXN- followed by exactly six digits
    - Ids are NOT unique: two calls within the same millisecond window collide
"""

import time

TX_PREFIX = "TXN-"
TX_DIGITS = 6


def now_ms() -> int:
    return int(time.time() * 1000)


def make_transaction_id(timestamp_ms: int | None = None) -> str:
    """Prefix + last six digits of the epoch-millisecond timestamp."""
    if timestamp_ms is None:
        timestamp_ms = now_ms()
    digits = str(timestamp_ms)[-TX_DIGITS:].rjust(TX_DIGITS, "0")
    return f"{TX_PREFIX}{digits}"
