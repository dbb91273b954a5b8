# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport exports."""

from .adapters import RecordedCall, StubTransport
from .client import Transport, TransportError, create_default_transport
from .httpx_client import HttpxTransport
from .models import Headers, HttpResponse, RequestSpec
from .url import add_querystring_to_path, to_query, url_for

__all__ = [
    "Headers",
    "HttpResponse",
    "HttpxTransport",
    "RecordedCall",
    "RequestSpec",
    "StubTransport",
    "Transport",
    "TransportError",
    "add_querystring_to_path",
    "create_default_transport",
    "to_query",
    "url_for",
]
