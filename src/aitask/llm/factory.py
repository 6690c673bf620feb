from __future__ import annotations

from typing import Optional

import httpx

from aitask.config import Settings, load_settings

from .openai_client import OpenAIChatClient
from .status import StatusReporter
from .tasks import TaskRunner


def build_llm(
    settings: Optional[Settings] = None,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> OpenAIChatClient:
    """Build the chat transport.

    Settings are loaded from the environment when not given; a missing
    credential raises `ConfigError` here, before any request is made.
    """

    return OpenAIChatClient(settings or load_settings(), http_client=http_client)


def build_task_runner(
    settings: Optional[Settings] = None,
    *,
    reporter: Optional[StatusReporter] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> TaskRunner:
    return TaskRunner(build_llm(settings, http_client=http_client), reporter=reporter)
