# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
apidriver package entrypoint.

This package provides a configurable client for driving a web service API from
a test suite. Serialization and default headers are declared once per client
type, HTTP behavior is abstracted behind an injectable transport, and every
transport failure surfaces as a single UnexpectedResponseError.
"""

from .api_client import APIClient
from .config import ClientConfig, HttpSettings, load_http_settings
from .definition import ClientDefinition
from .errors import (
    ApiDriverError,
    AssertionFailed,
    ConfigurationError,
    ErrorCategory,
    UnexpectedResponseError,
    UnknownKeyError,
)
from .http import (
    HttpResponse,
    HttpxTransport,
    StubTransport,
    Transport,
    TransportError,
    create_default_transport,
)
from .log import setup_logging
from .version import __version__

__all__ = [
    "APIClient",
    "ApiDriverError",
    "AssertionFailed",
    "ClientConfig",
    "ClientDefinition",
    "ConfigurationError",
    "ErrorCategory",
    "HttpResponse",
    "HttpSettings",
    "HttpxTransport",
    "StubTransport",
    "Transport",
    "TransportError",
    "UnexpectedResponseError",
    "UnknownKeyError",
    "create_default_transport",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
