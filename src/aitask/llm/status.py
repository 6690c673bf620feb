from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from aitask import logger as logger_mod

log = logger_mod.get_logger()


class Phase(str, Enum):
    AI_CALL = "ai_call"
    UNIT_TEST = "unit_test"
    ISSUE = "issue"


_LEVELS = {
    Phase.AI_CALL: logging.INFO,
    Phase.UNIT_TEST: logging.INFO,
    Phase.ISSUE: logging.WARNING,
}


class StatusReporter(Protocol):
    def report(self, agent: str, operation: str, phase: Phase) -> None:
        raise NotImplementedError


class LogStatusReporter(StatusReporter):
    """Writes agent status lines to the package logger."""

    def __init__(self, logger: logging.Logger | None = None):
        self._log = logger or log

    def report(self, agent: str, operation: str, phase: Phase) -> None:
        self._log.log(_LEVELS[phase], "Agent: %s: %s", agent, operation)
