"""Exception hierarchy for genai-openai."""

from __future__ import annotations


class GenAIError(Exception):
    """Base exception for all genai-openai errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(GenAIError):
    """Configuration, initialization, or model registration failed."""


class TranslationError(GenAIError):
    """A generic request could not be expressed in the vendor wire format.

    Raised for caller-side input problems: unknown part variants, roles
    without a vendor equivalent, unsupported output formats, and payloads
    that cannot be JSON-encoded.
    """


class VendorContractError(GenAIError):
    """The vendor response violated its wire contract.

    Not caused by the caller and not retryable; seeing one means the vendor
    (or a proxy in front of it) returned something the Chat Completions
    contract does not allow, such as tool-call arguments that are not JSON.
    """
