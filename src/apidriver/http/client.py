# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport abstraction and factory."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from ..config import HttpSettings, load_http_settings
from ..errors import ErrorCategory
from .models import HttpResponse


class TransportError(Exception):
    """
    Raised by a Transport when the exchange fails.

    Covers both network-level failures and responses outside the 2XX-3XX range.
    """

    def __init__(
        self,
        message: str,
        *,
        http_body: str | None = None,
        status_code: int | None = None,
        category: ErrorCategory | None = None,
    ):
        self.message = message
        self.http_body = http_body
        self.status_code = status_code
        self.category = category
        super().__init__(message)


class Transport(Protocol):
    """Minimal protocol for performing one HTTP exchange."""

    def send(
        self,
        method: str,
        url: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_transport(settings: HttpSettings | None = None) -> Transport:
    """Factory for the default httpx-backed transport."""
    from .httpx_client import HttpxTransport

    return HttpxTransport(settings or load_http_settings())


__all__ = ["Transport", "TransportError", "create_default_transport"]
