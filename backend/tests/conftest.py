"""Root conftest — shared test configuration."""

import os

# Tests never reach the real provider and never wait on simulated latency
os.environ["OPENAI_API_KEY"] = ""
os.environ["UPI_VERIFY_DELAY_MS"] = "0"
os.environ["PAYMENT_PROCESSING_DELAY_MS"] = "0"
os.environ.setdefault("STRICT_UPSTREAM_ERRORS", "false")
