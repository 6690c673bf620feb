import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "INFO").upper() or "INFO"

# OpenAI chat completions
DEFAULT_MODEL = "gpt-3.5-turbo"  # "gpt-4"
DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_TIMEOUT_S = 60.0

API_KEY_ENV = "OPEN_AI_KEY"
ORG_ID_ENV = "OPEN_AI_ORG"
MODEL_ENV = "OPEN_AI_MODEL"
BASE_URL_ENV = "OPEN_AI_BASE_URL"
TIMEOUT_ENV = "LLM_TIMEOUT_SEC"


class ConfigError(RuntimeError):
    """Required credential or endpoint configuration is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Credentials and endpoint settings, read once at process start."""

    api_key: str
    organization_id: str
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks.
        return (
            f"Settings(api_key='***', organization_id={self.organization_id!r}, "
            f"model={self.model!r}, base_url={self.base_url!r}, "
            f"timeout_s={self.timeout_s!r})"
        )


def _required(env: Mapping[str, str], name: str) -> str:
    value = (env.get(name) or "").strip()
    if not value:
        raise ConfigError(f"Missing env var {name}")
    return value


def _timeout(env: Mapping[str, str]) -> float:
    raw = (env.get(TIMEOUT_ENV) or "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_S
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"{TIMEOUT_ENV} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build `Settings` from the environment (or an explicit mapping).

    Required:
    - OPEN_AI_KEY
    - OPEN_AI_ORG

    Optional:
    - OPEN_AI_MODEL (default gpt-3.5-turbo)
    - OPEN_AI_BASE_URL (default https://api.openai.com/v1)
    - LLM_TIMEOUT_SEC (default 60)
    """

    env = os.environ if env is None else env
    return Settings(
        api_key=_required(env, API_KEY_ENV),
        organization_id=_required(env, ORG_ID_ENV),
        model=(env.get(MODEL_ENV) or DEFAULT_MODEL).strip(),
        base_url=(env.get(BASE_URL_ENV) or DEFAULT_BASE_URL).strip().rstrip("/"),
        timeout_s=_timeout(env),
    )
