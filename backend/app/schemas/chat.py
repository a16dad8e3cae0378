"""Chat Schemas — AI chat request/response contracts.

Invariants:
    - ChatRequest.message is optional at the schema level; emptiness is a service-level
      ValidationError so the client sees "Message is required"
    - ChatResponse._debug only present when the provider call failed
"""

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    message: str | None = None


class DebugInfo(BaseModel):
    error: str


class ChatResponse(BaseModel):
    """Reply text plus optional provider diagnostics (wire key `_debug`)."""
    model_config = ConfigDict(populate_by_name=True)

    reply: str
    debug: DebugInfo | None = Field(None, alias="_debug")
