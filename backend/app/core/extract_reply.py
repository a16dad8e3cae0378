"""Reply Extraction — ordered extractor chains over provider responses and errors.

Invariants:
    - Extractors are pure and never raise; a missing step yields None
    - Chains stop at the first non-empty string, otherwise return the sentinel
    - Path steps work on SDK objects (attributes) and plain dicts (keys) alike

Design Decisions:
    - Declarative paths over nested getattr/try blocks: the priority order is
      readable as data and each shape is testable on its own
"""

from collections.abc import Callable, Sequence
from typing import Any

NO_REPLY_SENTINEL = "(no reply from AI)"
UNKNOWN_ERROR_MESSAGE = "Internal server error"

Extractor = Callable[[Any], str | None]


def _step(obj: Any, key: str | int) -> Any:
    """Single path step: list index, mapping key, or attribute."""
    if obj is None:
        return None
    if isinstance(key, int):
        if isinstance(obj, (list, tuple)) and -len(obj) <= key < len(obj):
            return obj[key]
        return None
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def path_extractor(*path: str | int) -> Extractor:
    """Build an extractor that walks `path` and returns a non-empty string."""

    def extract(obj: Any) -> str | None:
        for key in path:
            obj = _step(obj, key)
            if obj is None:
                return None
        if isinstance(obj, str) and obj:
            return obj
        return None

    return extract


def first_of(
    extractors: Sequence[Extractor], obj: Any, default: str,
) -> str:
    """Run extractors in priority order; first hit wins, else default."""
    for extractor in extractors:
        value = extractor(obj)
        if value:
            return value
    return default


REPLY_EXTRACTORS: tuple[Extractor, ...] = (
    path_extractor("choices", 0, "message", "content"),
    path_extractor("choices", 0, "text"),
    path_extractor("data", "choices", 0, "message", "content"),
    path_extractor("data", "choices", 0, "text"),
)


def _str_extractor(obj: Any) -> str | None:
    text = str(obj)
    return text or None


ERROR_MESSAGE_EXTRACTORS: tuple[Extractor, ...] = (
    path_extractor("body", "error", "message"),
    path_extractor("body", "message"),
    path_extractor("response", "data", "error", "message"),
    path_extractor("message"),
    _str_extractor,
)


def extract_reply_text(response: Any) -> str:
    """Reply text from any known chat-completion response shape."""
    return first_of(REPLY_EXTRACTORS, response, NO_REPLY_SENTINEL)


def extract_error_message(error: Any) -> str:
    """Most helpful human-readable message carried by a provider error."""
    return first_of(ERROR_MESSAGE_EXTRACTORS, error, UNKNOWN_ERROR_MESSAGE)
