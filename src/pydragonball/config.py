"""Client configuration for pydragonball."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pydragonball._constants import BASE_URL, ITEMS_PER_PAGE, REQUEST_TIMEOUT, USER_AGENT
from pydragonball.exceptions import DragonBallConfigError


def _env_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise DragonBallConfigError(f"{name} must be an integer, got {value!r}") from exc


def _env_float(name: str, value: str) -> float:
    try:
        return float(value.strip())
    except ValueError as exc:
        raise DragonBallConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class DragonBallConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        API base URL, without a trailing slash.
    page_size : int
        Items per page for every catalog listing.  Also the divisor used
        to derive ``total_pages``.
    request_timeout : float
        Total timeout in seconds for a single HTTP request.
    user_agent : str
        ``User-Agent`` header sent with every request.
    cache_max_entries : int or None
        Upper bound on cached ``(domain, page, search term)`` results.
        ``None`` keeps every result for the lifetime of the browser.
    """

    base_url: str = BASE_URL
    page_size: int = ITEMS_PER_PAGE
    request_timeout: float = REQUEST_TIMEOUT
    user_agent: str = USER_AGENT
    cache_max_entries: int | None = None

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise DragonBallConfigError(f"page_size must be >= 1, got {self.page_size}")
        if self.request_timeout <= 0:
            raise DragonBallConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        if self.cache_max_entries is not None and self.cache_max_entries < 1:
            raise DragonBallConfigError(f"cache_max_entries must be >= 1, got {self.cache_max_entries}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> DragonBallConfig:
        """Create configuration from environment variables.

        Reads ``DRAGONBALL_BASE_URL``, ``DRAGONBALL_PAGE_SIZE``,
        ``DRAGONBALL_REQUEST_TIMEOUT``, ``DRAGONBALL_USER_AGENT`` and
        ``DRAGONBALL_CACHE_MAX_ENTRIES``. Explicit keyword arguments
        override environment values.

        Raises
        ------
        DragonBallConfigError
            If a numeric variable cannot be parsed or is out of range.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("DRAGONBALL_BASE_URL")
        if base_url:
            config_kwargs["base_url"] = base_url

        user_agent = env.get("DRAGONBALL_USER_AGENT")
        if user_agent:
            config_kwargs["user_agent"] = user_agent

        page_size = env.get("DRAGONBALL_PAGE_SIZE")
        if page_size is not None and "page_size" not in overrides:
            config_kwargs["page_size"] = _env_int("DRAGONBALL_PAGE_SIZE", page_size)

        timeout = env.get("DRAGONBALL_REQUEST_TIMEOUT")
        if timeout is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_float("DRAGONBALL_REQUEST_TIMEOUT", timeout)

        max_entries = env.get("DRAGONBALL_CACHE_MAX_ENTRIES")
        if max_entries and "cache_max_entries" not in overrides:
            config_kwargs["cache_max_entries"] = _env_int("DRAGONBALL_CACHE_MAX_ENTRIES", max_entries)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
