"""Model registry: binds translated generation calls to one vendor client.

A :class:`ModelRegistry` owns the single ``AsyncOpenAI`` client and
registers one generation closure per model with a host. Module-level
functions (``init``, ``define_model``, ``model``, ...) operate on one
process-wide registry created by :func:`init`.
"""

from __future__ import annotations

from dataclasses import replace
import logging
import threading
from typing import Any

from openai import AsyncOpenAI

from genai_openai.config import Config
from genai_openai.errors import ConfigurationError
from genai_openai.host import ChunkCallback, InMemoryHost, Model, ModelHost, ModelMetadata
from genai_openai.known_models import KNOWN_MODELS, LABEL_PREFIX, PROVIDER
from genai_openai.translation import convert_request, translate_response
from genai_openai.types import GenerateRequest, GenerateResponse, ModelCapabilities

logger = logging.getLogger(__name__)


def create_client(config: Config) -> AsyncOpenAI:
    """Build the vendor client. Retries are disabled; callers own retry policy."""
    return AsyncOpenAI(
        api_key=config.api_key,
        base_url=config.base_url,
        organization=config.organization,
        timeout=config.http_timeout(),
        max_retries=0,
    )


async def generate_with_client(
    client: Any,
    model: str,
    request: GenerateRequest,
    on_chunk: ChunkCallback | None = None,
    *,
    capabilities: ModelCapabilities | None = None,
    timeout: float | None = None,
) -> GenerateResponse:
    """Translate *request*, call Chat Completions once, translate the result.

    Vendor exceptions propagate unchanged. ``on_chunk`` is never called:
    streaming is not implemented and the full response is returned at once.
    """
    create_kwargs = convert_request(model, request, capabilities)
    if on_chunk is not None:
        logger.debug("Streaming not supported for %s; on_chunk will not be called", model)

    extra: dict[str, Any] = {}
    if timeout is not None:
        extra["timeout"] = timeout
    response = await client.chat.completions.create(**create_kwargs, **extra)

    result = translate_response(response, request.json_mode)
    return replace(result, request=request)


class ModelRegistry:
    """Registry of OpenAI models sharing one client.

    The client is fixed at construction and exposed read-only. A lock guards
    registration only; lookups and generation calls never take it.
    """

    def __init__(
        self,
        config: Config,
        *,
        host: ModelHost | None = None,
        client: Any = None,
    ) -> None:
        self._config = config
        self._host: ModelHost = host if host is not None else InMemoryHost()
        self._client = client if client is not None else create_client(config)
        self._lock = threading.Lock()

        with self._lock:
            for name, caps in KNOWN_MODELS.items():
                self._define(name, caps)
        logger.info("Registered %d known OpenAI models", len(KNOWN_MODELS))

    @property
    def client(self) -> Any:
        """The shared vendor client."""
        return self._client

    @property
    def config(self) -> Config:
        return self._config

    def define_model(
        self, name: str, capabilities: ModelCapabilities | None = None
    ) -> Model:
        """Register an additional model.

        Args:
            name: Vendor model name.
            capabilities: What the model supports. When omitted, the name
                must be in the known-model table.

        Defining a name twice replaces the earlier handle; the client stays
        the same.

        Raises:
            ConfigurationError: Unknown model and no capabilities given.
        """
        with self._lock:
            caps = capabilities
            if caps is None:
                caps = KNOWN_MODELS.get(name)
                if caps is None:
                    raise ConfigurationError(
                        f"{PROVIDER}.define_model: called with unknown model "
                        f"{name!r} and no capabilities",
                        hint="Pass ModelCapabilities(...) for models outside the known table.",
                    )
            return self._define(name, caps)

    def _define(self, name: str, caps: ModelCapabilities) -> Model:
        # Caller holds self._lock.
        client = self._client

        async def generate(
            request: GenerateRequest,
            on_chunk: ChunkCallback | None = None,
            *,
            timeout: float | None = None,
        ) -> GenerateResponse:
            return await generate_with_client(
                client,
                name,
                request,
                on_chunk,
                capabilities=caps,
                timeout=timeout,
            )

        metadata = ModelMetadata(label=f"{LABEL_PREFIX} - {name}", supports=caps)
        model = self._host.register_model(PROVIDER, name, metadata, generate)
        logger.debug("Defined model %s (%s)", name, caps)
        return model

    def is_defined_model(self, name: str) -> bool:
        """Whether *name* is registered by this registry."""
        return self._host.lookup_model(PROVIDER, name) is not None

    def model(self, name: str) -> Model | None:
        """Return the handle for *name*, or None if it was never defined."""
        return self._host.lookup_model(PROVIDER, name)


# =============================================================================
# Process-wide registry
# =============================================================================

_state_lock = threading.Lock()
_default_registry: ModelRegistry | None = None


def init(
    config: Config | None = None,
    *,
    host: ModelHost | None = None,
    client: Any = None,
) -> ModelRegistry:
    """Create the process-wide registry and register all known models.

    After calling ``init``, use :func:`define_model` for additional models.

    Raises:
        ConfigurationError: No API key is available, or ``init`` was already
            called in this process.
    """
    global _default_registry
    with _state_lock:
        if _default_registry is not None:
            raise ConfigurationError(
                f"{PROVIDER}.init already called",
                hint="Initialize once per process; use define_model() for more models.",
            )
        registry = ModelRegistry(
            config if config is not None else Config(), host=host, client=client
        )
        _default_registry = registry
    return registry


def _require_registry() -> ModelRegistry:
    registry = _default_registry
    if registry is None:
        raise ConfigurationError(
            f"{PROVIDER}.init not called",
            hint="Call genai_openai.init() before defining or using models.",
        )
    return registry


def define_model(name: str, capabilities: ModelCapabilities | None = None) -> Model:
    """Register an additional model with the process-wide registry."""
    return _require_registry().define_model(name, capabilities)


def is_defined_model(name: str) -> bool:
    """Whether *name* is defined in the process-wide registry."""
    registry = _default_registry
    return registry is not None and registry.is_defined_model(name)


def model(name: str) -> Model | None:
    """Return the handle for *name*, or None (also before ``init``)."""
    registry = _default_registry
    if registry is None:
        return None
    return registry.model(name)


async def generate(
    model_ref: str | Model,
    request: GenerateRequest,
    on_chunk: ChunkCallback | None = None,
    *,
    timeout: float | None = None,
) -> GenerateResponse:
    """Generate with a model handle or the name of a defined model.

    Raises:
        ConfigurationError: The name is not defined (or ``init`` was not
            called).
    """
    handle = model_ref if isinstance(model_ref, Model) else None
    if handle is None:
        handle = _require_registry().model(model_ref)
        if handle is None:
            raise ConfigurationError(
                f"{PROVIDER}: model {model_ref!r} is not defined",
                hint="Call define_model() with its capabilities first.",
            )
    return await handle.generate(request, on_chunk, timeout=timeout)
