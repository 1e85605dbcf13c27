"""Chat Completions response → generic response."""

from __future__ import annotations

from typing import Any

from genai_openai.translation._mapping import json_to_mapping, to_finish_reason
from genai_openai.types import (
    Candidate,
    DataPart,
    GenerateResponse,
    Message,
    Part,
    Role,
    TextPart,
    ToolRequestPart,
    Usage,
)


def translate_response(response: Any, json_mode: bool) -> GenerateResponse:
    """Translate a ``ChatCompletion`` into a :class:`GenerateResponse`.

    Vendor objects are read by attribute, so both ``openai`` SDK models and
    plain attribute objects work. The originating request is not known here;
    callers attach it with ``dataclasses.replace``.

    Raises:
        VendorContractError: A tool call carried arguments that are not a
            JSON object.
    """
    choices = getattr(response, "choices", None) or []
    candidates = tuple(translate_candidate(c, json_mode) for c in choices)
    return GenerateResponse(
        candidates=candidates,
        usage=_translate_usage(getattr(response, "usage", None)),
        custom=response,
    )


def translate_candidate(choice: Any, json_mode: bool) -> Candidate:
    """Translate one vendor choice, preserving its index."""
    message = getattr(choice, "message", None)
    return Candidate(
        index=int(getattr(choice, "index", 0) or 0),
        finish_reason=to_finish_reason(getattr(choice, "finish_reason", None)),
        message=Message(role=Role.MODEL, content=_translate_content(message, json_mode)),
    )


def _translate_content(message: Any, json_mode: bool) -> tuple[Part, ...]:
    # Tool calls win; any accompanying text is dropped.
    tool_calls = getattr(message, "tool_calls", None) or []
    if tool_calls:
        parts: list[Part] = []
        for call in tool_calls:
            function = getattr(call, "function", None)
            parts.append(
                ToolRequestPart(
                    name=getattr(function, "name", ""),
                    input=json_to_mapping(getattr(function, "arguments", None)),
                )
            )
        return tuple(parts)

    content = getattr(message, "content", None) or ""
    if json_mode:
        return (DataPart(content),)
    return (TextPart(content),)


def _translate_usage(usage: Any) -> Usage:
    if usage is None:
        return Usage()
    return Usage(
        input_tokens=int(getattr(usage, "prompt_tokens", 0) or 0),
        output_tokens=int(getattr(usage, "completion_tokens", 0) or 0),
        total_tokens=int(getattr(usage, "total_tokens", 0) or 0),
    )
