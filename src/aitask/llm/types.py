from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Literal, Optional

if TYPE_CHECKING:
    from .errors import FatalInvocationFailure

Role = Literal["system", "user", "assistant"]

ROLES = ("system", "user", "assistant")


@dataclass(frozen=True)
class LLMMessage:
    role: Role
    content: str

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"Unknown message role: {self.role!r}")

    @classmethod
    def system(cls, content: str) -> "LLMMessage":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "LLMMessage":
        return cls(role="user", content=content)

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class CompletionRequest:
    """Body of one chat-completion call. Built fresh for every attempt."""

    model: str
    messages: tuple[LLMMessage, ...]
    temperature: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))
        if not self.messages:
            raise ValueError("CompletionRequest needs at least one message")
        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError(f"temperature must be in [0, 2], got {self.temperature}")

    def to_payload(self) -> dict:
        return {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
            "temperature": self.temperature,
        }


class InvocationState(str, Enum):
    SUCCESS = "success"
    FATAL_FAILURE = "fatal_failure"


@dataclass(frozen=True)
class Invocation:
    """Terminal record of one task execution.

    Exactly one of `text` (SUCCESS) or `failure` (FATAL_FAILURE) is set.
    """

    task_input: str
    template: str
    message: LLMMessage
    attempts: int
    state: InvocationState
    text: Optional[str] = None
    failure: Optional["FatalInvocationFailure"] = None

    @property
    def ok(self) -> bool:
        return self.state is InvocationState.SUCCESS

    def unwrap(self) -> str:
        """Return the answer text, or raise the recorded `FatalInvocationFailure`."""
        if self.ok:
            assert self.text is not None
            return self.text
        assert self.failure is not None
        raise self.failure
