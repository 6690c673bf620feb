"""httpx helpers for checking URLs produced by agent tasks."""

from __future__ import annotations

from typing import Optional

import httpx

from aitask import logger as logger_mod
from aitask.config import DEFAULT_TIMEOUT_S, Settings

log = logger_mod.get_logger()

USER_AGENT = "aitask/0.1"


def build_async_client(
    settings: Optional[Settings] = None,
    *,
    extra_headers: Optional[dict[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the package's timeout and headers."""

    timeout = settings.timeout_s if settings else DEFAULT_TIMEOUT_S
    headers = {"User-Agent": USER_AGENT}
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def check_status_code(client: httpx.AsyncClient, url: str) -> int:
    """GET `url` and return the response status code.

    Transport errors (`httpx.HTTPError`) propagate to the caller.
    """

    response = await client.get(url)
    log.debug(f"GET {url} -> {response.status_code}")
    return response.status_code
