"""Payment Service — mock UPI verification and mock payment processing.

Invariants:
    - Validation happens before the simulated delay (bad input answers immediately)
    - Both mocks always succeed once input is valid; nothing is verified or settled
    - method, amount and details are echoed verbatim

Design Decisions:
    - Delays passed in by the caller (from Settings) so tests can run with zero latency
"""

import asyncio
import logging
from typing import Any

from app.core.errors import ValidationError
from app.core.transaction_id import make_transaction_id
from app.core.upi_format import display_name, parse_upi
from app.schemas.payment import PaymentResponse, UpiVerifyResponse

logger = logging.getLogger(__name__)

PAYMENT_FIELDS_REQUIRED = "method and amount required"


def _is_blank(value: Any) -> bool:
    """null, false, 0, NaN and "" are missing; empty [] and {} are present."""
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    return False


async def verify_upi(
    upi: str | None, gateway: str | None, delay_ms: int = 600,
) -> UpiVerifyResponse:
    """Validate the UPI format, simulate a lookup, report success."""
    parsed = parse_upi(upi)
    await asyncio.sleep(delay_ms / 1000)
    logger.info("UPI verified (mock)", extra={"gateway": gateway})
    return UpiVerifyResponse(
        verified=True,
        name=display_name(parsed.local),
        gateway=gateway or None,
    )


async def process_payment(
    method: str | None,
    amount: Any,
    details: Any = None,
    delay_ms: int = 800,
) -> PaymentResponse:
    """Simulate payment processing and fabricate a transaction id."""
    if _is_blank(method) or _is_blank(amount):
        raise ValidationError(PAYMENT_FIELDS_REQUIRED, field="method,amount")
    await asyncio.sleep(delay_ms / 1000)
    tx_id = make_transaction_id()
    logger.info(
        "Payment processed (mock)",
        extra={"payment_method": method, "tx_id": tx_id},
    )
    return PaymentResponse(
        success=True, tx_id=tx_id,
        method=method, amount=amount, details=details,
    )
