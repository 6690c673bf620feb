from __future__ import annotations

from typing import Any, Optional, TypeVar

from aitask import logger as logger_mod

from ._json import decode_as, decode_with_schema
from .base import ChatTransport
from .errors import FatalInvocationFailure, TransportError
from .prompting import PromptTemplate, extend_prompt
from .status import LogStatusReporter, Phase, StatusReporter
from .types import Invocation, InvocationState

log = logger_mod.get_logger()

T = TypeVar("T")

# One primary attempt plus one retry with the identical prompt.
MAX_ATTEMPTS = 2


class TaskRunner:
    """Runs agent tasks against a chat transport with a single retry.

    The runner keeps no per-task state, so one instance can serve many
    concurrent tasks.
    """

    def __init__(
        self,
        transport: ChatTransport,
        *,
        reporter: Optional[StatusReporter] = None,
    ):
        self._transport = transport
        self._reporter = reporter or LogStatusReporter()

    async def invoke(
        self,
        task_input: str,
        template: PromptTemplate,
        *,
        agent: str,
        operation: str,
    ) -> Invocation:
        """Run one task and return its terminal `Invocation`.

        A second consecutive `TransportError` ends in `FATAL_FAILURE`; any
        other exception propagates unchanged.
        """

        message = extend_prompt(template, task_input)
        errors: list[Exception] = []

        for attempt in range(1, MAX_ATTEMPTS + 1):
            self._reporter.report(agent, operation, Phase.AI_CALL)
            try:
                text = await self._transport.complete([message])
            except TransportError as e:
                errors.append(e)
                log.warning(
                    f"⚠️ LLM call failed for {agent}: {operation} "
                    f"(attempt {attempt}/{MAX_ATTEMPTS}): {e}"
                )
                continue

            return Invocation(
                task_input=task_input,
                template=template.name,
                message=message,
                attempts=attempt,
                state=InvocationState.SUCCESS,
                text=text,
            )

        log.error(f"❌ LLM call failed {MAX_ATTEMPTS} times for {agent}: {operation}")
        failure = FatalInvocationFailure(
            f"Failed {MAX_ATTEMPTS} times to call the LLM for {agent}: {operation}",
            attempts=MAX_ATTEMPTS,
            errors=errors,
        )
        failure.__cause__ = errors[-1]
        return Invocation(
            task_input=task_input,
            template=template.name,
            message=message,
            attempts=MAX_ATTEMPTS,
            state=InvocationState.FATAL_FAILURE,
            failure=failure,
        )

    async def request(
        self,
        task_input: str,
        template: PromptTemplate,
        *,
        agent: str,
        operation: str,
    ) -> str:
        """Return the answer text or raise `FatalInvocationFailure`."""

        invocation = await self.invoke(
            task_input, template, agent=agent, operation=operation
        )
        return invocation.unwrap()

    async def request_decoded(
        self,
        task_input: str,
        template: PromptTemplate,
        shape: type[T] | Any,
        *,
        agent: str,
        operation: str,
    ) -> T:
        """Like `request`, then decode the answer strictly into `shape`.

        Decode failures raise `DecodeError` and are not retried.
        """

        text = await self.request(
            task_input, template, agent=agent, operation=operation
        )
        return decode_as(text, shape)

    async def request_validated(
        self,
        task_input: str,
        template: PromptTemplate,
        schema: dict[str, Any],
        *,
        agent: str,
        operation: str,
    ) -> Any:
        text = await self.request(
            task_input, template, agent=agent, operation=operation
        )
        return decode_with_schema(text, schema)
