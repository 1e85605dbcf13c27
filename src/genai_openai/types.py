"""Provider-agnostic request/response model.

These types describe a generation call without any vendor vocabulary. The
translation layer maps them onto the OpenAI Chat Completions contract and
back.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel

from genai_openai.errors import TranslationError


class Role(str, Enum):
    """Author of a message."""

    USER = "user"
    SYSTEM = "system"
    MODEL = "model"
    TOOL = "tool"


class FinishReason(str, Enum):
    """Why a candidate stopped generating."""

    STOP = "stop"
    LENGTH = "length"
    BLOCKED = "blocked"
    OTHER = "other"
    UNKNOWN = "unknown"


class OutputFormat(str, Enum):
    """Requested shape of the model output."""

    JSON = "json"
    TEXT = "text"
    MEDIA = "media"


# =============================================================================
# Parts
# =============================================================================


@dataclass(frozen=True)
class TextPart:
    """Plain text content."""

    text: str
    kind: Literal["text"] = field(default="text", init=False)


@dataclass(frozen=True)
class MediaPart:
    """Reference to media by URL (http(s) or data: URI)."""

    url: str
    kind: Literal["media"] = field(default="media", init=False)


@dataclass(frozen=True)
class DataPart:
    """Opaque structured data."""

    data: Any
    kind: Literal["data"] = field(default="data", init=False)


@dataclass(frozen=True)
class ToolRequestPart:
    """A request from the model to invoke a tool."""

    name: str
    input: dict[str, Any] = field(default_factory=dict)
    kind: Literal["tool_request"] = field(default="tool_request", init=False)


@dataclass(frozen=True)
class ToolResponsePart:
    """The result of a tool invocation, sent back to the model."""

    name: str
    output: dict[str, Any] = field(default_factory=dict)
    kind: Literal["tool_response"] = field(default="tool_response", init=False)


Part = TextPart | MediaPart | DataPart | ToolRequestPart | ToolResponsePart


# =============================================================================
# Messages and requests
# =============================================================================


@dataclass(frozen=True)
class Message:
    """A conversational turn: a role plus ordered content parts."""

    role: Role
    content: tuple[Part, ...] = ()

    def __post_init__(self) -> None:
        # Known role strings become Role; unknown ones are left for the
        # translator to reject.
        if not isinstance(self.role, Role):
            with suppress(ValueError):
                object.__setattr__(self, "role", Role(self.role))
        # Accept lists at construction; store an immutable tuple.
        if not isinstance(self.content, tuple):
            object.__setattr__(self, "content", tuple(self.content))

    def text(self) -> str:
        """Concatenate the text of every text part."""
        return "".join(p.text for p in self.content if isinstance(p, TextPart))


def user_text(text: str) -> Message:
    """Build a single-part user message."""
    return Message(role=Role.USER, content=(TextPart(text),))


def system_text(text: str) -> Message:
    """Build a single-part system message."""
    return Message(role=Role.SYSTEM, content=(TextPart(text),))


def model_text(text: str) -> Message:
    """Build a single-part model message (e.g. for conversation history)."""
    return Message(role=Role.MODEL, content=(TextPart(text),))


@dataclass(frozen=True)
class ToolDefinition:
    """A tool the model may request, described by a JSON schema."""

    name: str
    description: str = ""
    input_schema: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GenerationConfig:
    """Common sampling settings. ``None`` means "use the vendor default"."""

    temperature: float | None = None
    max_output_tokens: int | None = None
    stop_sequences: tuple[str, ...] | None = None
    top_p: float | None = None


SchemaInput = type[BaseModel] | dict[str, Any]


@dataclass(frozen=True)
class OutputSpec:
    """Requested output format and optional JSON schema."""

    format: OutputFormat | str | None = None
    #: Pydantic ``BaseModel`` subclass or JSON Schema dict.
    schema: SchemaInput | None = None

    def __post_init__(self) -> None:
        if self.schema is not None and not (
            isinstance(self.schema, dict)
            or (isinstance(self.schema, type) and issubclass(self.schema, BaseModel))
        ):
            raise TranslationError(
                "output schema must be a Pydantic model class or JSON schema dict",
                hint="Pass a BaseModel subclass or a dict following JSON Schema.",
            )

    def schema_dict(self) -> dict[str, Any] | None:
        """Return the schema as a JSON Schema dict."""
        schema = self.schema
        if isinstance(schema, type) and issubclass(schema, BaseModel):
            return schema.model_json_schema()
        return schema


@dataclass(frozen=True)
class GenerateRequest:
    """Everything needed for one generation call."""

    messages: tuple[Message, ...]
    tools: tuple[ToolDefinition, ...] = ()
    candidates: int = 1
    config: GenerationConfig | None = None
    output: OutputSpec | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.messages, tuple):
            object.__setattr__(self, "messages", tuple(self.messages))
        if not isinstance(self.tools, tuple):
            object.__setattr__(self, "tools", tuple(self.tools))

    @property
    def json_mode(self) -> bool:
        """Whether the caller asked for JSON output."""
        return self.output is not None and self.output.format == OutputFormat.JSON


# =============================================================================
# Responses
# =============================================================================


@dataclass(frozen=True)
class Usage:
    """Token accounting reported by the vendor."""

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True)
class Candidate:
    """One generated alternative."""

    index: int
    finish_reason: FinishReason
    message: Message

    def text(self) -> str:
        return self.message.text()


@dataclass(frozen=True)
class GenerateResponse:
    """Result of a generation call."""

    candidates: tuple[Candidate, ...] = ()
    usage: Usage = field(default_factory=Usage)
    request: GenerateRequest | None = None
    #: Raw vendor response, kept for debugging and vendor-specific fields.
    custom: Any = None

    def text(self) -> str:
        """Text of the first candidate, or ``""`` when there are none."""
        if not self.candidates:
            return ""
        return self.candidates[0].text()


@dataclass(frozen=True)
class GenerateResponseChunk:
    """Partial content a streaming callback would receive."""

    content: tuple[Part, ...] = ()
    index: int = 0


@dataclass(frozen=True)
class ModelCapabilities:
    """Static declaration of what a model supports."""

    multiturn: bool = False
    tools: bool = False
    system_role: bool = False
    media: bool = False
    #: Honors the vendor ``response_format`` field (JSON/text output modes).
    output_formats: bool = False
