from __future__ import annotations

from typing import Protocol, Sequence

from .types import LLMMessage


class ChatTransport(Protocol):
    """One chat-completion round trip: messages in, answer text out."""

    async def complete(self, messages: Sequence[LLMMessage]) -> str:
        """Return `choices[0].message.content` or raise `TransportError`."""
        raise NotImplementedError
