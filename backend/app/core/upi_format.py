"""UPI Format — parsing and display-name derivation for UPI identifiers.

Invariants:
    - A valid UPI id splits on "@" into exactly two non-empty parts
    - display_name upper-cases only the first character; the rest is unchanged
"""

from typing import NamedTuple

from app.core.errors import ValidationError

UPI_REQUIRED_MESSAGE = "UPI ID is required"
UPI_INVALID_MESSAGE = "Invalid UPI ID format"


class UpiId(NamedTuple):
    local: str
    domain: str


def parse_upi(upi: str | None) -> UpiId:
    """Parse `local@domain` or raise ValidationError."""
    if not upi:
        raise ValidationError(UPI_REQUIRED_MESSAGE, field="upi")
    parts = upi.split("@")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValidationError(UPI_INVALID_MESSAGE, field="upi")
    return UpiId(parts[0], parts[1])


def display_name(local: str) -> str:
    return local[:1].upper() + local[1:]
