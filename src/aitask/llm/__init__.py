"""LLM task pipeline (OpenAI chat completions).

Design goals:
- Keep the provider SDK isolated behind a small `ChatTransport` interface.
- Steer the model with prompt templates wrapped in a "function printer" instruction.
- Retry a failed call exactly once, then fail the task.
- Decode output strictly into the requested shape for deterministic downstream use.
"""

from ._json import decode_as, decode_with_schema, parse_json, validate_json
from .base import ChatTransport
from .errors import (
    DecodeError,
    FatalInvocationFailure,
    LLMError,
    LLMValidationError,
    TransportError,
)
from .factory import build_llm, build_task_runner
from .openai_client import OpenAIChatClient
from .prompting import AIFunction, PromptTemplate, ai_function, extend_prompt
from .status import LogStatusReporter, Phase, StatusReporter
from .tasks import TaskRunner
from .types import CompletionRequest, Invocation, InvocationState, LLMMessage

__all__ = [
    "AIFunction",
    "ChatTransport",
    "CompletionRequest",
    "DecodeError",
    "FatalInvocationFailure",
    "Invocation",
    "InvocationState",
    "LLMError",
    "LLMMessage",
    "LLMValidationError",
    "LogStatusReporter",
    "OpenAIChatClient",
    "Phase",
    "PromptTemplate",
    "StatusReporter",
    "TaskRunner",
    "TransportError",
    "ai_function",
    "build_llm",
    "build_task_runner",
    "decode_as",
    "decode_with_schema",
    "extend_prompt",
    "parse_json",
    "validate_json",
]
