"""Response types for deepl-client.

All types are plain dataclasses; parsing helpers raise ``DecodeError`` when
a body does not have the documented shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List

from ._exceptions import DecodeError


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------


@dataclass
class Translation:
    """One translated segment."""

    detected_source_language: str
    text: str


@dataclass
class TranslateResult:
    """Result of a translate call, segments in the order DeepL returned them."""

    translations: List[Translation] = field(default_factory=list)

    def __iter__(self) -> Iterator[Translation]:
        return iter(self.translations)

    def __len__(self) -> int:
        return len(self.translations)

    @property
    def text(self) -> str:
        return "".join(t.text for t in self.translations)


# ---------------------------------------------------------------------------
# Usage
# ---------------------------------------------------------------------------


@dataclass
class AccountStatus:
    """Character usage for the current billing period."""

    character_count: int
    character_limit: int

    @property
    def character_remaining(self) -> int:
        return max(self.character_limit - self.character_count, 0)


# ---------------------------------------------------------------------------
# Parsing helpers (used by _client.py)
# ---------------------------------------------------------------------------


def _require(data: Any, key: str, kind: type) -> Any:
    if not isinstance(data, dict):
        raise DecodeError(f"Failed to parse JSON: expected an object, got {type(data).__name__}")
    value = data.get(key)
    # bool is an int subclass but never a valid count
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise DecodeError(f"Failed to parse JSON: field {key!r} missing or not {kind.__name__}")
    return value


def _parse_translate_result(data: Dict[str, Any]) -> TranslateResult:
    items = _require(data, "translations", list)
    return TranslateResult(
        translations=[
            Translation(
                detected_source_language=_require(t, "detected_source_language", str),
                text=_require(t, "text", str),
            )
            for t in items
        ]
    )


def _parse_account_status(data: Dict[str, Any]) -> AccountStatus:
    return AccountStatus(
        character_count=_require(data, "character_count", int),
        character_limit=_require(data, "character_limit", int),
    )


def _parse_error_message(data: Any) -> str:
    """Extract ``message`` from an error body; a missing or null message is empty."""
    if data is None:
        return ""
    if not isinstance(data, dict):
        raise DecodeError("expected an object")
    message = data.get("message")
    if message is None:
        return ""
    if not isinstance(message, str):
        raise DecodeError("'message' is not a string")
    return message
