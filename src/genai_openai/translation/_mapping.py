"""Vocabulary mapping shared by the request and response translators.

Every function here is pure. Role and finish-reason mappings are total over
their declared domains: roles outside the four known cases raise
``TranslationError`` instead of being dropped, and unrecognized finish
reasons collapse to ``FinishReason.UNKNOWN``.
"""

from __future__ import annotations

import json
from typing import Any

from genai_openai.errors import TranslationError, VendorContractError
from genai_openai.types import FinishReason, MediaPart, Part, Role, TextPart

# =============================================================================
# Roles
# =============================================================================

_TO_VENDOR_ROLE: dict[Role, str] = {
    Role.USER: "user",
    Role.SYSTEM: "system",
    Role.MODEL: "assistant",
    Role.TOOL: "tool",
}

_FROM_VENDOR_ROLE: dict[str, Role] = {v: k for k, v in _TO_VENDOR_ROLE.items()}


def to_vendor_role(role: Role | str) -> str:
    """Map a generic role onto its Chat Completions name."""
    try:
        return _TO_VENDOR_ROLE[Role(role)]
    except (ValueError, KeyError):
        raise TranslationError(f"unknown role: {role!r}") from None


def from_vendor_role(role: str) -> Role:
    """Map a Chat Completions role name back onto a generic role."""
    try:
        return _FROM_VENDOR_ROLE[role]
    except (KeyError, TypeError):
        raise TranslationError(f"unknown OpenAI role: {role!r}") from None


# =============================================================================
# Finish reasons
# =============================================================================

_FINISH_REASONS: dict[str, FinishReason] = {
    "stop": FinishReason.STOP,
    "tool_calls": FinishReason.STOP,
    "length": FinishReason.LENGTH,
    "content_filter": FinishReason.BLOCKED,
    "function_call": FinishReason.OTHER,
}


def to_finish_reason(reason: Any) -> FinishReason:
    """Map a vendor finish reason; ``None`` and unseen values are UNKNOWN."""
    if not isinstance(reason, str):
        return FinishReason.UNKNOWN
    return _FINISH_REASONS.get(reason, FinishReason.UNKNOWN)


# =============================================================================
# Content parts
# =============================================================================

IMAGE_DETAIL_AUTO = "auto"


def to_vendor_content_part(part: Part) -> dict[str, Any]:
    """Convert a text or media part into a user-message content part."""
    if isinstance(part, TextPart):
        return {"type": "text", "text": part.text}
    if isinstance(part, MediaPart):
        return {
            "type": "image_url",
            "image_url": {"url": part.url, "detail": IMAGE_DETAIL_AUTO},
        }
    raise TranslationError(
        f"unknown part type in a request: {type(part).__name__}",
        hint="User messages accept only TextPart and MediaPart content.",
    )


def from_vendor_content_part(content: dict[str, Any]) -> Part:
    """Inverse of :func:`to_vendor_content_part`."""
    kind = content.get("type")
    if kind == "text":
        return TextPart(content.get("text") or "")
    if kind == "image_url":
        image = content.get("image_url") or {}
        return MediaPart(image.get("url", ""))
    raise TranslationError(f"unknown OpenAI content part type: {kind!r}")


# =============================================================================
# JSON helpers
# =============================================================================


def mapping_to_json(data: dict[str, Any] | None) -> str:
    """Encode a string-keyed mapping as compact JSON."""
    try:
        return json.dumps(data or {}, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise TranslationError(f"failed to encode mapping as JSON: {e}") from e


def json_to_mapping(text: str) -> dict[str, Any]:
    """Decode a JSON object string produced by the vendor."""
    try:
        value = json.loads(text)
    except (TypeError, ValueError) as e:
        raise VendorContractError(
            f"failed to parse JSON string {text!r}: {e}"
        ) from e
    if not isinstance(value, dict):
        raise VendorContractError(
            f"expected a JSON object, got {type(value).__name__}: {text!r}"
        )
    return value


def to_json_value(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a mapping into plain JSON types (a detached copy)."""
    return json.loads(mapping_to_json(data))
