# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across apidriver."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

Headers = dict[str, str]


@dataclass(frozen=True)
class RequestSpec:
    """A single call to APIClient.request, before encoding."""

    method: str
    path: str
    data: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass
class HttpResponse:
    """Normalized HTTP response returned by Transport implementations."""

    body: str = ""
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    url: str | None = None

    @property
    def ok(self) -> bool:
        """True when the status is in the 2XX-3XX acceptance range."""
        return self.status_code is not None and 200 <= self.status_code < 400

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> HttpResponse:
        """Helper to normalize dictionary-like responses (e.g., recorded fixtures)."""
        raw_headers: Any = data.get("headers") or {}
        headers: Headers = {}
        if isinstance(raw_headers, Mapping):
            for key, value in raw_headers.items():
                if key is None:
                    continue
                headers[str(key)] = "" if value is None else str(value)

        raw_body = data.get("body")
        if isinstance(raw_body, (bytes, bytearray, memoryview)):
            body = bytes(raw_body).decode("utf-8", errors="replace")
        else:
            body = "" if raw_body is None else str(raw_body)

        return cls(
            body=body,
            status_code=data.get("status_code"),
            headers=headers,
            url=data.get("url"),
        )


__all__ = ["Headers", "HttpResponse", "RequestSpec"]
