"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: fake Chat Completions clients and
builders for vendor-shaped responses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Any


@dataclass
class FakeCompletions:
    """Captures kwargs passed to chat.completions.create()."""

    response: Any = None
    error: BaseException | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response if self.response is not None else completion()

    @property
    def last_kwargs(self) -> dict[str, Any] | None:
        return self.calls[-1] if self.calls else None


class FakeChatClient:
    """Stands in for ``AsyncOpenAI``; only ``chat.completions`` is wired."""

    def __init__(self, response: Any = None, error: BaseException | None = None):
        self.completions = FakeCompletions(response=response, error=error)
        self.chat = SimpleNamespace(completions=self.completions)


def tool_call(name: str, arguments: str, call_id: str = "call_1") -> Any:
    return SimpleNamespace(
        id=call_id,
        type="function",
        function=SimpleNamespace(name=name, arguments=arguments),
    )


def choice(
    content: str | None = "ok",
    *,
    index: int = 0,
    finish_reason: str | None = "stop",
    tool_calls: list[Any] | None = None,
) -> Any:
    return SimpleNamespace(
        index=index,
        finish_reason=finish_reason,
        message=SimpleNamespace(
            role="assistant", content=content, tool_calls=tool_calls
        ),
    )


def completion(
    *choices: Any,
    prompt_tokens: int = 3,
    completion_tokens: int = 5,
    total_tokens: int = 8,
    usage: bool = True,
) -> Any:
    return SimpleNamespace(
        id="chatcmpl-test",
        choices=list(choices) or [choice()],
        usage=(
            SimpleNamespace(
                prompt_tokens=prompt_tokens,
                completion_tokens=completion_tokens,
                total_tokens=total_tokens,
            )
            if usage
            else None
        ),
    )
