"""Payment Schemas — mock UPI verification and payment processing contracts.

Invariants:
    - PaymentRequest.amount and details are untyped: echoed verbatim, truthiness only
    - UpiVerifyResponse.gateway is always serialized (null when not supplied)
    - PaymentResponse.tx_id serialized as `txId`
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UpiVerifyRequest(BaseModel):
    upi: str | None = None
    gateway: str | None = None


class UpiVerifyResponse(BaseModel):
    verified: bool
    name: str
    gateway: str | None


class PaymentRequest(BaseModel):
    """Payment input — deliberately permissive mock boundary."""
    method: str | None = None
    amount: Any = None
    details: Any = None


class PaymentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    tx_id: str = Field(alias="txId")
    method: str
    amount: Any
    details: Any = None
