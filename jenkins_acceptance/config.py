from __future__ import annotations

"""Runtime settings, read from the environment (and a local ``.env`` file)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
load_dotenv()

DEFAULT_JENKINS_URL = "http://localhost:8080/"
DEFAULT_TIMEOUT_MS = 5000

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Settings:
    jenkins_url: str = DEFAULT_JENKINS_URL
    headless: bool = True
    timeout_ms: int = DEFAULT_TIMEOUT_MS  # implicit wait for element lookups
    animate_actions: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        url = os.getenv("JENKINS_URL") or DEFAULT_JENKINS_URL
        if not url.endswith("/"):
            url += "/"
        return cls(
            jenkins_url=url,
            headless=_env_flag("ACCEPTANCE_HEADLESS", True),
            timeout_ms=_env_int("ACCEPTANCE_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
            animate_actions=_env_flag("ACCEPTANCE_ANIMATE", False),
        )
