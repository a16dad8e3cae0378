"""Mock OpenAI Client — stands in for ChatProviderClient in route and service tests.

Invariants:
    - MockChatClient sequences pre-configured outcomes (one per complete() call)
    - An outcome that is an exception instance is raised instead of returned
    - Builder helpers produce the response shapes the extractor chain understands
"""

from types import SimpleNamespace


class MockChatClient:
    """Replaces ChatProviderClient. Records every message it is sent."""

    def __init__(self, outcomes, model="gpt-3.5-turbo"):
        self._outcomes = list(outcomes)
        self._idx = 0
        self.model = model
        self.calls = []

    async def complete(self, message, context=None):
        self.calls.append(message)
        if self._idx >= len(self._outcomes):
            raise RuntimeError(
                f"MockChatClient: no outcome at index {self._idx} "
                f"(configured {len(self._outcomes)})",
            )
        outcome = self._outcomes[self._idx]
        self._idx += 1
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


# -- Builder helpers -----------------------------------------------------------


def message_response(content):
    """SDK-style object: choices[0].message.content."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(prompt_tokens=5, completion_tokens=7),
    )


def text_completion_response(text):
    """Legacy completion shape: choices[0].text."""
    return {"choices": [{"text": text}]}


def data_envelope_response(content):
    """Nested envelope: data.choices[0].message.content."""
    return {"data": {"choices": [{"message": {"content": content}}]}}
