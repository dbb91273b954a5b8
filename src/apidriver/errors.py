# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    HTTP_STATUS = "HTTP_STATUS"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, httpx.HTTPStatusError):
        return ErrorCategory.HTTP_STATUS

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


class ApiDriverError(Exception):
    """Base exception for all apidriver errors."""


class UnexpectedResponseError(ApiDriverError, RuntimeError):
    """
    Raised when the server answers outside the 2XX-3XX range or the transport fails.

    This is the only error the request pipeline raises itself. It always wraps a
    transport failure, which is kept as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        http_body: str | None = None,
        status_code: int | None = None,
        category: ErrorCategory | None = None,
        method: str | None = None,
        url: str | None = None,
    ):
        self.http_body = http_body
        self.status_code = status_code
        self.category = category
        self.method = method
        self.url = url
        super().__init__(message)

    @classmethod
    def from_transport_error(
        cls,
        exc: BaseException,
        *,
        method: str | None = None,
        url: str | None = None,
    ) -> UnexpectedResponseError:
        """Build the unified error from a transport failure."""
        original = getattr(exc, "message", None) or str(exc)
        http_body = getattr(exc, "http_body", None)
        status_code = getattr(exc, "status_code", None)
        category = getattr(exc, "category", None)
        if isinstance(exc, httpx.HTTPStatusError):
            http_body = exc.response.text
            status_code = exc.response.status_code
        if category is None and isinstance(exc, httpx.HTTPError):
            category = categorize_exception(exc)
        message = f"Unexpected response from server: {original}\n\n{http_body or ''}"
        return cls(
            message,
            http_body=http_body,
            status_code=status_code,
            category=category,
            method=method,
            url=url,
        )


class ConfigurationError(ApiDriverError):
    """Raised when required configuration values are missing or invalid."""


class UnknownKeyError(ApiDriverError, KeyError):
    """Raised by test-suite helpers when a lookup key was never registered."""


class AssertionFailed(ApiDriverError, AssertionError):
    """Raised by test-suite helpers when an application-state assertion fails."""


__all__ = [
    "ApiDriverError",
    "AssertionFailed",
    "ConfigurationError",
    "ErrorCategory",
    "UnexpectedResponseError",
    "UnknownKeyError",
    "categorize_exception",
]
