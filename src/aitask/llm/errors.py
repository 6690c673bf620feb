from __future__ import annotations

from typing import Sequence


class LLMError(RuntimeError):
    pass


class TransportError(LLMError):
    """Building, sending or reading one chat-completion request failed."""


class LLMValidationError(LLMError):
    """Raised when the model output cannot be decoded into the requested shape."""


DecodeError = LLMValidationError


class FatalInvocationFailure(LLMError):
    """Both the primary attempt and the single retry failed."""

    def __init__(self, message: str, *, attempts: int, errors: Sequence[Exception]):
        super().__init__(message)
        self.attempts = attempts
        self.errors = list(errors)

    @property
    def last_error(self) -> Exception | None:
        return self.errors[-1] if self.errors else None
