"""Capability table for the models registered at init time."""

from __future__ import annotations

from types import MappingProxyType

from genai_openai.types import ModelCapabilities

PROVIDER = "openai"
LABEL_PREFIX = "OpenAI"

BASIC_TEXT = ModelCapabilities(
    multiturn=True,
    tools=True,
    system_role=True,
    media=False,
)

MULTIMODAL = ModelCapabilities(
    multiturn=True,
    tools=True,
    system_role=True,
    media=True,
    output_formats=True,
)

KNOWN_MODELS: MappingProxyType[str, ModelCapabilities] = MappingProxyType(
    {
        "gpt-4o": MULTIMODAL,
        "gpt-4o-mini": MULTIMODAL,
        "gpt-4-turbo": MULTIMODAL,
        "gpt-4": BASIC_TEXT,
    }
)


def known_capabilities(name: str) -> ModelCapabilities | None:
    """Return the capabilities of a known model, or None."""
    return KNOWN_MODELS.get(name)
