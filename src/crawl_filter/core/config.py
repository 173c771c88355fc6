"""Configuration loading for filter sessions and page acquisition."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dotenv import load_dotenv


class ResetPolicy(str, Enum):
    """How ``ElementFilter.reset`` interacts with in-flight updates."""

    UNSYNCHRONIZED = "unsynchronized"
    LOCKED = "locked"


@dataclass(slots=True)
class FilterConfig:
    """Holds runtime options for a scanning session."""

    reset_policy: ResetPolicy = ResetPolicy.UNSYNCHRONIZED
    session_cookie: Optional[str] = None
    headless: bool = False
    fetch_timeout: float = 10.0
    max_threads: int = 8

    @property
    def cookies(self) -> list[dict]:
        """The configured session cookie as a cookie dictionary list."""

        if not self.session_cookie:
            return []
        name, _, value = self.session_cookie.partition("=")
        if not name.strip() or not value.strip():
            return []
        return [{"name": name.strip(), "value": value.strip()}]


def load_configuration(
    *,
    reset_policy: Optional[str] = None,
    fetch_timeout: Optional[float] = None,
    max_threads: Optional[int] = None,
    headless: Optional[bool] = None,
) -> FilterConfig:
    """Builds a ``FilterConfig`` from keyword overrides and environment variables."""

    load_dotenv()  # Loads .env values if present

    policy_value = reset_policy or os.getenv("FILTER_RESET_POLICY", ResetPolicy.UNSYNCHRONIZED.value)
    timeout_value = fetch_timeout if fetch_timeout is not None else float(os.getenv("FETCH_TIMEOUT", "10"))
    threads_value = max_threads if max_threads is not None else int(os.getenv("MAX_THREADS", "8"))
    headless_value = (
        headless
        if headless is not None
        else os.getenv("HEADLESS", "false").lower() in {"1", "true", "yes"}
    )

    return FilterConfig(
        reset_policy=ResetPolicy(policy_value.strip().lower()),
        session_cookie=os.getenv("SESSION_COOKIE") or None,
        headless=headless_value,
        fetch_timeout=timeout_value,
        max_threads=max(1, threads_value),
    )
