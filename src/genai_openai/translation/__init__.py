"""Translation between the generic model and the Chat Completions contract."""

from .request import convert_request
from .response import translate_response

__all__ = [
    "convert_request",
    "translate_response",
]
