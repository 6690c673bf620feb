"""Prompt templates and the prompt augmenter.

A prompt template is a pure `str -> str` transform describing the output we want
from the model. Templates are plain Python functions decorated with
`@ai_function`: the function's signature and docstring are the "function
description" the model is asked to evaluate, so the body is never run.

`extend_prompt` wraps a template's text into a system message that tells the
model to print only what the described function would return.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Callable, Protocol

from .types import LLMMessage

INSTRUCTION = (
    "FUNCTION {function}\n"
    "  INSTRUCTION: You are a function printer. You ONLY print the results of functions.\n"
    "  Nothing else. No commentary. Here is the input to the function: {task_input}.\n"
    "  Print out what the function will return."
)


class PromptTemplate(Protocol):
    name: str

    def generate(self, task_input: str) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class AIFunction:
    """A named prompt template whose text is a function description."""

    name: str
    description: str

    def generate(self, task_input: str) -> str:
        # The description does not depend on the input; the input is
        # echoed separately by `extend_prompt`.
        return self.description

    def __call__(self, task_input: str) -> str:
        return self.generate(task_input)


def describe_function(fn: Callable[..., object]) -> str:
    """Render `def name(args) -> ret:` followed by the docstring."""

    signature = inspect.signature(fn, eval_str=True)
    doc = inspect.getdoc(fn) or ""
    lines = [f"def {fn.__name__}{signature}:"]
    lines.extend(f"    {line}" if line else "" for line in doc.splitlines())
    return "\n".join(lines)


def ai_function(fn: Callable[..., object]) -> AIFunction:
    """Decorator turning a documented stub function into an `AIFunction`."""

    return AIFunction(name=fn.__name__, description=describe_function(fn))


def extend_prompt(template: PromptTemplate, task_input: str) -> LLMMessage:
    """Wrap `template` applied to `task_input` into a constrained system message."""

    return LLMMessage.system(
        INSTRUCTION.format(function=template.generate(task_input), task_input=task_input)
    )
