# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory Transport implementations for test suites."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .client import Transport, TransportError
from .models import HttpResponse

_NO_BODY = object()


@dataclass
class RecordedCall:
    """One call observed by StubTransport."""

    method: str
    url: str
    headers: dict[str, str] | None
    body: Any = _NO_BODY

    @property
    def has_body(self) -> bool:
        return self.body is not _NO_BODY


@dataclass
class StubTransport(Transport):
    """
    Deterministic, programmable Transport for tests.

    Responses are keyed by ``(METHOD, url)``. A registered TransportError is
    raised instead of returned; unknown keys raise a 404 TransportError.
    """

    responses: dict[tuple[str, str], HttpResponse | TransportError] = field(default_factory=dict)
    calls: list[RecordedCall] = field(default_factory=list)

    def add(self, method: str, url: str, response: HttpResponse | TransportError | Mapping[str, Any]) -> None:
        if isinstance(response, Mapping):
            response = HttpResponse.from_mapping(response)
        self.responses[(method.upper(), url)] = response

    def send(self, method: str, url: str, *args: Any, **kwargs: Any) -> HttpResponse:
        body = args[0] if args else kwargs.get("body", _NO_BODY)
        headers = args[1] if len(args) > 1 else kwargs.get("headers")
        self.calls.append(
            RecordedCall(
                method=method.upper(),
                url=url,
                headers=dict(headers) if isinstance(headers, Mapping) else None,
                body=body,
            )
        )

        response = self.responses.get((method.upper(), url))
        if response is None:
            raise TransportError("404 Not Found", http_body="No stubbed response configured", status_code=404)
        if isinstance(response, TransportError):
            raise response
        return response

    def close(self) -> None:
        return None


__all__ = ["RecordedCall", "StubTransport"]
