"""Verify UPI Route — mock verification contract.

Invariants:
    - upi missing → 400 "UPI ID is required"
    - upi not exactly local@domain with both parts non-empty → 400 "Invalid UPI ID format"
    - Valid upi → verified true, capitalized local part, gateway echoed or null
"""

import pytest

VERIFY_URL = "/api/verify-upi"


async def test_verify_john_at_paytm(client):
    res = await client.post(VERIFY_URL, json={"upi": "john@paytm"})
    assert res.status_code == 200
    assert res.json() == {"verified": True, "name": "John", "gateway": None}


async def test_gateway_echoed(client):
    res = await client.post(
        VERIFY_URL, json={"upi": "asha.k@okhdfc", "gateway": "razorpay"},
    )
    assert res.json() == {
        "verified": True, "name": "Asha.k", "gateway": "razorpay",
    }


async def test_empty_gateway_becomes_null(client):
    res = await client.post(VERIFY_URL, json={"upi": "john@paytm", "gateway": ""})
    assert res.json()["gateway"] is None


async def test_only_first_character_upper_cased(client):
    res = await client.post(VERIFY_URL, json={"upi": "mIXed99@ybl"})
    assert res.json()["name"] == "MIXed99"


@pytest.mark.parametrize("body", [{}, {"upi": ""}, {"upi": None}])
async def test_missing_upi_returns_400(client, body):
    res = await client.post(VERIFY_URL, json=body)
    assert res.status_code == 400
    assert res.json() == {"error": True, "message": "UPI ID is required"}


@pytest.mark.parametrize("upi", [
    "john",
    "@paytm",
    "john@",
    "@",
    "a@b@c",
    "john@@paytm",
])
async def test_invalid_upi_format_returns_400(client, upi):
    res = await client.post(VERIFY_URL, json={"upi": upi})
    assert res.status_code == 400
    assert res.json() == {"error": True, "message": "Invalid UPI ID format"}
