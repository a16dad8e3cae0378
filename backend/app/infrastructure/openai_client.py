"""OpenAI Chat Client — wraps AsyncOpenAI with timeout and error mapping.

Invariants:
    - Exactly one provider request per call: SDK retries disabled (max_retries=0)
    - All failures mapped to UpstreamError (core/errors.py) with the most helpful message
    - Returns the raw SDK response; reply extraction happens in the service layer

Design Decisions:
    - Wrapper over raw client: isolates SDK error types from the chat service
    - Timeout errors checked before connection errors (APITimeoutError subclasses APIConnectionError)
"""

import logging

import openai
from openai import (
    APIError,
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    RateLimitError,
)

from app.core.errors import UpstreamError, ErrorContext
from app.core.extract_reply import extract_error_message

logger = logging.getLogger(__name__)


class ChatProviderClient:
    """Single-shot chat completions against the OpenAI API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        timeout_seconds: int = 30,
    ):
        self.client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
        )
        self.model = model

    async def complete(
        self, message: str, context: ErrorContext | None = None,
    ):
        """Send one user message; raise UpstreamError on any failure."""
        ctx = context or ErrorContext(model=self.model)
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": message}],
            )
        except APITimeoutError as e:
            raise UpstreamError(
                extract_error_message(e), "timeout", context=ctx,
            ) from e
        except APIConnectionError as e:
            raise UpstreamError(
                extract_error_message(e), "connection_error", context=ctx,
            ) from e
        except RateLimitError as e:
            raise UpstreamError(
                extract_error_message(e), "rate_limit", context=ctx,
            ) from e
        except APIStatusError as e:
            api_error_type = (
                "server_error" if e.status_code >= 500 else "client_error"
            )
            raise UpstreamError(
                extract_error_message(e), api_error_type, context=ctx,
            ) from e
        except APIError as e:
            raise UpstreamError(
                extract_error_message(e), "unknown", context=ctx,
            ) from e
        except Exception as e:
            logger.error(f"Unexpected OpenAI error: {e}", exc_info=True)
            raise UpstreamError(
                extract_error_message(e), "unknown", context=ctx,
            ) from e

        self._log_success(response)
        return response

    def _log_success(self, response) -> None:
        """Log successful API call with token usage when reported."""
        usage = getattr(response, "usage", None)
        logger.info(
            "OpenAI API success",
            extra={
                "model": self.model,
                "input_tokens": getattr(usage, "prompt_tokens", None),
                "output_tokens": getattr(usage, "completion_tokens", None),
            },
        )
