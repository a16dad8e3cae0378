"""Chat Service — AI chat with offline fallback and graceful upstream degradation.

Invariants:
    - Empty or missing message → ValidationError (400), checked before anything else
    - client is None (no credential) → deterministic fallback reply echoing the message
    - UpstreamError → logged once: here with a 200 apology reply and _debug.error,
      or, when strict is set, by the global handler after it propagates (502)
    - Reply text always comes from the extractor chain; never empty

Design Decisions:
    - The provider client is injected (None = not configured) instead of reading
      the environment here, so the fallback path is testable without monkeypatching
"""

import logging

from app.core.errors import UpstreamError, ValidationError
from app.core.extract_reply import extract_reply_text
from app.infrastructure.openai_client import ChatProviderClient
from app.schemas.chat import ChatResponse, DebugInfo

logger = logging.getLogger(__name__)

MESSAGE_REQUIRED = "Message is required"


def fallback_reply(message: str) -> str:
    return f'Demo reply (OpenAI key not configured). You asked: "{message}"'


def unavailable_reply(message: str) -> str:
    return (
        "Sorry — the AI service is temporarily unavailable. "
        f'Demo reply: you asked "{message}".'
    )


async def answer_chat(
    message: str | None,
    client: ChatProviderClient | None,
    strict: bool = False,
) -> ChatResponse:
    """Answer one chat message via the provider, or a fallback reply."""
    if not message:
        raise ValidationError(MESSAGE_REQUIRED, field="message")

    if client is None:
        logger.warning(
            "OpenAI API key is not set (OPENAI_API_KEY), returning fallback reply",
        )
        return ChatResponse(reply=fallback_reply(message))

    try:
        response = await client.complete(message)
    except UpstreamError as e:
        if strict:
            # global TutorError handler logs it
            raise
        logger.error(
            f"AI chat provider call failed: {e.message}",
            extra={
                "error_code": e.code,
                "api_error_type": e.api_error_type,
                "model": e.context.model,
            },
        )
        logger.warning("AI chat fallback reply returned")
        return ChatResponse(
            reply=unavailable_reply(message),
            debug=DebugInfo(error=e.message),
        )

    return ChatResponse(reply=extract_reply_text(response))
