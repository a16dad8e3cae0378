"""Payment service tests — direct calls without HTTP.

Invariants:
    - Invalid input raises ValidationError before any simulated delay
    - Delay honoured via asyncio.sleep with milliseconds converted to seconds
"""

import asyncio

import pytest

from app.core.errors import ValidationError
from app.services.payment_service import process_payment, verify_upi


@pytest.fixture
def sleeps(monkeypatch):
    recorded = []
    real_sleep = asyncio.sleep

    async def fake_sleep(seconds):
        recorded.append(seconds)
        await real_sleep(0)

    monkeypatch.setattr("app.services.payment_service.asyncio.sleep", fake_sleep)
    return recorded


async def test_verify_upi_sleeps_configured_delay(sleeps):
    result = await verify_upi("john@paytm", None, delay_ms=600)
    assert result.name == "John"
    assert sleeps == [0.6]


async def test_process_payment_sleeps_configured_delay(sleeps):
    result = await process_payment("card", 500, delay_ms=800)
    assert result.success is True
    assert sleeps == [0.8]


async def test_invalid_upi_does_not_sleep(sleeps):
    with pytest.raises(ValidationError):
        await verify_upi("nope", None, delay_ms=600)
    assert sleeps == []


async def test_invalid_payment_does_not_sleep(sleeps):
    with pytest.raises(ValidationError) as exc_info:
        await process_payment(None, 500, delay_ms=800)
    assert exc_info.value.message == "method and amount required"
    assert sleeps == []


async def test_payment_response_serializes_tx_id_as_camel_case(sleeps):
    result = await process_payment("upi", 10, {"ref": "x"}, delay_ms=0)
    dumped = result.model_dump(by_alias=True)
    assert dumped["txId"].startswith("TXN-")
    assert dumped["details"] == {"ref": "x"}
