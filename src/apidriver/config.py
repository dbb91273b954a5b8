# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for apidriver."""

import os
from dataclasses import dataclass
from urllib.parse import urlparse

from .errors import ConfigurationError
from .version import __version__

DEFAULT_USER_AGENT = f"apidriver/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """Transport defaults."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            timeout=_float_env("APIDRIVER_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("APIDRIVER_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("APIDRIVER_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("APIDRIVER_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


@dataclass(frozen=True)
class ClientConfig:
    """
    Runtime configuration handed to an APIClient.

    `app_host` is the base URL relative request paths are joined against.
    """

    app_host: str

    def __post_init__(self) -> None:
        host = str(self.app_host or "").strip()
        if not host:
            raise ConfigurationError("app_host must be set before issuing requests")
        parsed = urlparse(host)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ConfigurationError(f"app_host must be an absolute http(s) URL, got {self.app_host!r}")

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a config from APIDRIVER_APP_HOST."""
        return cls(app_host=os.getenv("APIDRIVER_APP_HOST", ""))


__all__ = [
    "DEFAULT_USER_AGENT",
    "ClientConfig",
    "HttpSettings",
    "load_http_settings",
]
