"""Transaction id tests — prefix and six-digit suffix from the timestamp."""

import re

from app.core.transaction_id import make_transaction_id


def test_uses_last_six_digits_of_timestamp():
    assert make_transaction_id(1_718_000_123_456) == "TXN-123456"


def test_short_timestamp_is_zero_padded():
    assert make_transaction_id(42) == "TXN-000042"


def test_defaults_to_current_time():
    assert re.fullmatch(r"TXN-\d{6}", make_transaction_id())


def test_ids_repeat_every_million_milliseconds():
    assert make_transaction_id(1_000_000) == make_transaction_id(9_001_000_000)
