"""Payment Routes — mock UPI verification and mock payment processing.

Invariants:
    - POST /verify-upi always serializes gateway (null when omitted)
    - POST /process-payment omits details when not supplied
    - Simulated latency read from Settings on every request
"""

from fastapi import APIRouter, Depends

from app.config import Settings, get_settings
from app.schemas.payment import (
    PaymentRequest, PaymentResponse, UpiVerifyRequest, UpiVerifyResponse,
)
from app.services.payment_service import process_payment, verify_upi

router = APIRouter(tags=["payments"])


@router.post("/verify-upi", response_model=UpiVerifyResponse)
async def verify_upi_route(
    body: UpiVerifyRequest | None = None,
    settings: Settings = Depends(get_settings),
):
    """Mock UPI verification."""
    body = body or UpiVerifyRequest()
    return await verify_upi(
        body.upi, body.gateway, delay_ms=settings.upi_verify_delay_ms,
    )


@router.post(
    "/process-payment",
    response_model=PaymentResponse,
    response_model_exclude_none=True,
)
async def process_payment_route(
    body: PaymentRequest | None = None,
    settings: Settings = Depends(get_settings),
):
    """Mock payment processing with a fabricated transaction id."""
    body = body or PaymentRequest()
    return await process_payment(
        body.method, body.amount, body.details,
        delay_ms=settings.payment_processing_delay_ms,
    )
