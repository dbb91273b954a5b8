# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed Transport implementation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import ErrorCategory, categorize_exception
from .client import Transport, TransportError
from .models import HttpResponse

logger = logging.getLogger(__name__)


def _is_file_like(value: Any) -> bool:
    if hasattr(value, "read"):
        return True
    # httpx file tuples: (filename, fileobj[, content_type[, headers]])
    return isinstance(value, tuple) and len(value) >= 2 and hasattr(value[1], "read")


def _body_kwargs(body: Any) -> dict[str, Any]:
    """
    Translate an unencoded body into httpx request arguments.

    Strings and bytes are sent verbatim, mappings become form parameters, and
    mappings holding file objects become multipart/form-data.
    """
    if body is None:
        return {}
    if isinstance(body, (str, bytes, bytearray)):
        return {"content": body}
    if isinstance(body, Mapping):
        files = {key: value for key, value in body.items() if _is_file_like(value)}
        if not files:
            return {"data": dict(body)}
        fields = {key: value for key, value in body.items() if key not in files}
        kwargs: dict[str, Any] = {"files": files}
        if fields:
            kwargs["data"] = fields
        return kwargs
    return {"content": body}


class HttpxTransport(Transport):
    """Synchronous httpx client wrapper."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def send(
        self,
        method: str,
        url: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        request_headers = dict(headers or {})
        request_headers.setdefault("User-Agent", self.settings.user_agent)

        try:
            resp = self._client.request(
                method.upper(),
                url,
                headers=request_headers,
                follow_redirects=self.settings.allow_redirects,
                **_body_kwargs(body),
            )
        except httpx.HTTPError as exc:
            raise TransportError(str(exc), category=categorize_exception(exc)) from exc

        text = resp.text
        if not 200 <= resp.status_code < 400:
            logger.debug("%s %s answered %s", method.upper(), url, resp.status_code)
            raise TransportError(
                f"{resp.status_code} {resp.reason_phrase}".strip(),
                http_body=text,
                status_code=resp.status_code,
                category=ErrorCategory.HTTP_STATUS,
            )

        return HttpResponse(
            body=text,
            status_code=resp.status_code,
            headers=dict(resp.headers),
            url=str(resp.url),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


__all__ = ["HttpxTransport"]
