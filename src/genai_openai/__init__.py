"""genai-openai: provider-agnostic generation on top of OpenAI Chat Completions.

Public API:
    - init(): Create the shared client and register the known models
    - define_model(): Register an additional model
    - model() / is_defined_model(): Look up registered models
    - generate(): Run a GenerateRequest against a model
"""

from __future__ import annotations

import logging

from genai_openai.config import Config
from genai_openai.errors import (
    ConfigurationError,
    GenAIError,
    TranslationError,
    VendorContractError,
)
from genai_openai.host import InMemoryHost, Model, ModelHost, ModelMetadata
from genai_openai.registry import (
    ModelRegistry,
    define_model,
    generate,
    init,
    is_defined_model,
    model,
)
from genai_openai.types import (
    Candidate,
    DataPart,
    FinishReason,
    GenerateRequest,
    GenerateResponse,
    GenerateResponseChunk,
    GenerationConfig,
    MediaPart,
    Message,
    ModelCapabilities,
    OutputFormat,
    OutputSpec,
    Part,
    Role,
    TextPart,
    ToolDefinition,
    ToolRequestPart,
    ToolResponsePart,
    Usage,
    model_text,
    system_text,
    user_text,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("genai-openai")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("genai_openai").addHandler(logging.NullHandler())

__all__ = [
    "Candidate",
    "Config",
    "ConfigurationError",
    "DataPart",
    "FinishReason",
    "GenAIError",
    "GenerateRequest",
    "GenerateResponse",
    "GenerateResponseChunk",
    "GenerationConfig",
    "InMemoryHost",
    "MediaPart",
    "Message",
    "Model",
    "ModelCapabilities",
    "ModelHost",
    "ModelMetadata",
    "ModelRegistry",
    "OutputFormat",
    "OutputSpec",
    "Part",
    "Role",
    "TextPart",
    "ToolDefinition",
    "ToolRequestPart",
    "ToolResponsePart",
    "TranslationError",
    "Usage",
    "VendorContractError",
    "define_model",
    "generate",
    "init",
    "is_defined_model",
    "model",
    "model_text",
    "system_text",
    "user_text",
]
