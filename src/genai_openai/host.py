"""Host registration mechanism: where model handles live and are found.

The registry only needs ``register_model`` and ``lookup_model``; any host
framework exposing those can be plugged in. ``InMemoryHost`` is the
in-process default.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
import threading
from typing import Protocol, runtime_checkable

from genai_openai.types import (
    GenerateRequest,
    GenerateResponse,
    GenerateResponseChunk,
    ModelCapabilities,
)

ChunkCallback = Callable[[GenerateResponseChunk], Awaitable[None]]
GenerateFn = Callable[..., Awaitable[GenerateResponse]]


@dataclass(frozen=True)
class ModelMetadata:
    """Display label and capabilities of a registered model."""

    label: str
    supports: ModelCapabilities


@dataclass(frozen=True)
class Model:
    """Handle for a registered model."""

    provider: str
    name: str
    metadata: ModelMetadata
    fn: GenerateFn = field(repr=False, compare=False)

    async def generate(
        self,
        request: GenerateRequest,
        on_chunk: ChunkCallback | None = None,
        *,
        timeout: float | None = None,
    ) -> GenerateResponse:
        """Run one generation call against this model.

        ``on_chunk`` is accepted for interface compatibility but is never
        invoked: responses are delivered whole.
        """
        return await self.fn(request, on_chunk, timeout=timeout)


@runtime_checkable
class ModelHost(Protocol):
    """Minimal host interface used by the registry."""

    def register_model(
        self,
        provider: str,
        name: str,
        metadata: ModelMetadata,
        fn: GenerateFn,
    ) -> Model:
        """Register a model and return its handle."""
        ...

    def lookup_model(self, provider: str, name: str) -> Model | None:
        """Return the handle for *provider*/*name*, or None."""
        ...


@dataclass
class InMemoryHost:
    """Process-local model table keyed by ``(provider, name)``.

    Re-registering a name replaces the previous handle.
    """

    _models: dict[tuple[str, str], Model] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def register_model(
        self,
        provider: str,
        name: str,
        metadata: ModelMetadata,
        fn: GenerateFn,
    ) -> Model:
        model = Model(provider=provider, name=name, metadata=metadata, fn=fn)
        with self._lock:
            self._models[(provider, name)] = model
        return model

    def lookup_model(self, provider: str, name: str) -> Model | None:
        return self._models.get((provider, name))
