"""Generic request → Chat Completions request."""

from __future__ import annotations

import logging
from typing import Any

from genai_openai.errors import TranslationError
from genai_openai.known_models import known_capabilities
from genai_openai.translation._mapping import (
    mapping_to_json,
    to_json_value,
    to_vendor_content_part,
    to_vendor_role,
)
from genai_openai.types import (
    GenerateRequest,
    GenerationConfig,
    Message,
    ModelCapabilities,
    OutputFormat,
    OutputSpec,
    TextPart,
    ToolDefinition,
    ToolRequestPart,
    ToolResponsePart,
)

logger = logging.getLogger(__name__)

STRUCTURED_OUTPUT_NAME = "output"


def convert_request(
    model: str,
    request: GenerateRequest,
    capabilities: ModelCapabilities | None = None,
) -> dict[str, Any]:
    """Build ``chat.completions.create`` keyword arguments for *request*.

    Args:
        model: Vendor model name.
        request: The provider-agnostic request.
        capabilities: Capabilities of *model*. Defaults to the known-model
            table; unknown models are treated as having none.

    Returns:
        A dict ready to splat into ``client.chat.completions.create``.

    Raises:
        TranslationError: The request contains something the vendor contract
            cannot express.
    """
    if capabilities is None:
        capabilities = known_capabilities(model) or ModelCapabilities()

    create_kwargs: dict[str, Any] = {
        "model": model,
        "messages": convert_messages(request.messages),
    }

    tools = convert_tools(request.tools)
    if tools:
        create_kwargs["tools"] = tools
    if request.candidates:
        create_kwargs["n"] = request.candidates

    if request.config is not None:
        create_kwargs.update(_convert_config(request.config))

    if request.output is not None:
        response_format = _convert_output(model, request.output, capabilities)
        if response_format is not None:
            create_kwargs["response_format"] = response_format

    return create_kwargs


def convert_messages(messages: tuple[Message, ...]) -> list[dict[str, Any]]:
    """Translate generic messages into Chat Completions messages, in order."""
    out: list[dict[str, Any]] = []
    for message in messages:
        role = to_vendor_role(message.role)

        if role == "user":
            out.append(
                {
                    "role": role,
                    "content": [to_vendor_content_part(p) for p in message.content],
                }
            )
        elif role == "system":
            out.append({"role": role, "content": _first_text(message, role)})
        elif role == "assistant":
            tool_calls = [
                {
                    "id": part.name,
                    "type": "function",
                    "function": {
                        "name": part.name,
                        "arguments": mapping_to_json(part.input),
                    },
                }
                for part in message.content
                if isinstance(part, ToolRequestPart)
            ]
            if tool_calls:
                out.append({"role": role, "tool_calls": tool_calls})
            else:
                out.append({"role": role, "content": _first_text(message, role)})
        elif role == "tool":
            for part in message.content:
                if not isinstance(part, ToolResponsePart):
                    raise TranslationError(
                        f"unknown part type in a tool message: {type(part).__name__}",
                        hint="Tool messages carry only ToolResponsePart content.",
                    )
                out.append(
                    {
                        "role": role,
                        "tool_call_id": part.name,
                        "name": part.name,
                        "content": mapping_to_json(part.output),
                    }
                )
        else:  # pragma: no cover - to_vendor_role is total over Role
            raise TranslationError(f"unknown OpenAI role: {role!r}")
    return out


def convert_tools(tools: tuple[ToolDefinition, ...]) -> list[dict[str, Any]]:
    """Translate tool definitions into function tools."""
    return [
        {
            "type": "function",
            "function": {
                "name": t.name,
                "description": t.description,
                "parameters": to_json_value(t.input_schema),
            },
        }
        for t in tools
    ]


def _first_text(message: Message, role: str) -> str:
    """Text of the first part of a single-text message (system/assistant)."""
    if not message.content:
        raise TranslationError(f"{role} message has no content")
    first = message.content[0]
    if not isinstance(first, TextPart):
        raise TranslationError(
            f"unknown part type in a {role} message: "
            f"{type(first).__name__}",
            hint="System and model messages must start with a TextPart.",
        )
    return first.text


def _convert_config(config: GenerationConfig) -> dict[str, Any]:
    """Forward only settings that are set and non-zero.

    A zero temperature is indistinguishable from "unset" in the generic
    model, so it is never sent and the vendor default applies.
    """
    out: dict[str, Any] = {}
    if config.max_output_tokens:
        out["max_tokens"] = config.max_output_tokens
    if config.stop_sequences:
        out["stop"] = list(config.stop_sequences)
    if config.temperature:
        out["temperature"] = config.temperature
    if config.top_p:
        out["top_p"] = config.top_p
    return out


def _convert_output(
    model: str,
    output: OutputSpec,
    capabilities: ModelCapabilities,
) -> dict[str, Any] | None:
    """Map the requested output format onto ``response_format``."""
    if output.format is None or output.format == "":
        return None

    try:
        fmt = OutputFormat(output.format)
    except ValueError:
        fmt = None
    if fmt not in (OutputFormat.JSON, OutputFormat.TEXT):
        raise TranslationError(
            f"unsupported output format: {output.format!r}",
            hint="Chat Completions supports 'json' and 'text' output formats.",
        )

    if not capabilities.output_formats:
        logger.debug(
            "Dropping output format %r: model %s does not support response formats",
            fmt.value,
            model,
        )
        return None

    if fmt is OutputFormat.TEXT:
        return {"type": "text"}

    response_format: dict[str, Any] = {"type": "json_object"}
    schema = output.schema_dict()
    if schema:
        response_format["json_schema"] = {
            "name": STRUCTURED_OUTPUT_NAME,
            "schema": to_json_value(schema),
            "strict": True,
        }
    return response_format
