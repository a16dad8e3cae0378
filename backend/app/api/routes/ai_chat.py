"""AI Chat Route — POST /ai/chat.

Invariants:
    - Missing body treated as {} (validation message comes from the service)
    - Provider failures answer 200 with _debug unless strict mode is enabled
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_chat_client
from app.config import Settings, get_settings
from app.infrastructure.openai_client import ChatProviderClient
from app.schemas.chat import ChatRequest, ChatResponse
from app.services.chat_service import answer_chat

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post(
    "/chat", response_model=ChatResponse, response_model_exclude_none=True,
)
async def chat(
    body: ChatRequest | None = None,
    client: ChatProviderClient | None = Depends(get_chat_client),
    settings: Settings = Depends(get_settings),
):
    """Forward a message to the AI provider, or answer with a fallback reply."""
    body = body or ChatRequest()
    return await answer_chat(
        body.message, client, strict=settings.strict_upstream_errors,
    )
