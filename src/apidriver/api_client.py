# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Communicate with a web service API under test.

Subclass APIClient once per service API and give it a ClientDefinition. The
business-domain layer of a test suite then calls the verb helpers on instances
bound to a configured host and transport.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

import httpx

from .config import ClientConfig
from .definition import ClientDefinition
from .errors import UnexpectedResponseError
from .http.client import Transport, TransportError
from .http.models import RequestSpec
from .http.url import add_querystring_to_path, url_for

logger = logging.getLogger(__name__)


class APIClient:
    """
    Request pipeline bound to one host and one transport.

    Each call encodes ``data`` through the definition's encoder, merges the
    definition headers with the call headers, sends exactly one request and
    decodes the response body. Transport failures surface as
    UnexpectedResponseError.
    """

    definition: ClassVar[ClientDefinition] = ClientDefinition()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Subclasses without their own definition start from a copy of the parent's.
        if "definition" not in cls.__dict__:
            cls.definition = cls.definition.copy()

    def __init__(
        self,
        configuration: ClientConfig | str,
        transport: Transport,
        *,
        definition: ClientDefinition | None = None,
    ):
        if isinstance(configuration, str):
            configuration = ClientConfig(app_host=configuration)
        self.configuration = configuration
        self.transport = transport
        if definition is not None:
            self.definition = definition

    @property
    def base_url(self) -> str:
        return self.configuration.app_host

    def get(self, path: str, data: Any = None, headers: Mapping[str, str] | None = None) -> Any:
        """GET ``path``; ``data`` is sent as a querystring."""
        return self.request("GET", add_querystring_to_path(path, data), None, headers)

    def delete(self, path: str, data: Any = None, headers: Mapping[str, str] | None = None) -> Any:
        """DELETE ``path``; ``data`` is sent as a querystring."""
        return self.request("DELETE", add_querystring_to_path(path, data), None, headers)

    def head(self, path: str, data: Any = None, headers: Mapping[str, str] | None = None) -> Any:
        return self.request("HEAD", add_querystring_to_path(path, data), None, headers)

    def options(self, path: str, data: Any = None, headers: Mapping[str, str] | None = None) -> Any:
        return self.request("OPTIONS", add_querystring_to_path(path, data), None, headers)

    def post(self, path: str, data: Any = None, headers: Mapping[str, str] | None = None) -> Any:
        """POST ``data`` as the request body."""
        return self.request("POST", path, data, headers)

    def put(self, path: str, data: Any = None, headers: Mapping[str, str] | None = None) -> Any:
        """PUT ``data`` as the request body."""
        return self.request("PUT", path, data, headers)

    def patch(self, path: str, data: Any = None, headers: Mapping[str, str] | None = None) -> Any:
        return self.request("PATCH", path, data, headers)

    def request(
        self,
        method: str,
        path: str,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Make an HTTP request and return the decoded response body.

        ``path`` is joined with the configured app host unless it is already an
        absolute URL. Without an encoder, ``data`` may be a string (sent as is),
        a mapping (form parameters) or a mapping holding file objects
        (multipart/form-data); encoding is then left to the transport.

        Raises UnexpectedResponseError when the response is outside 2XX-3XX or
        the transport fails. Encoder and decoder errors propagate unchanged.
        """
        call = RequestSpec(method=method.upper(), path=path, data=data, headers=dict(headers or {}))
        return self._execute(call)

    def _execute(self, call: RequestSpec) -> Any:
        definition = self.definition
        body = definition.encode(call.data)
        merged_headers = definition.merged_headers(call.headers)
        url = url_for(self.base_url, call.path)

        logger.debug("%s %s", call.method, url)
        try:
            if body is None:
                response = self.transport.send(call.method, url, headers=merged_headers)
            else:
                response = self.transport.send(call.method, url, body=body, headers=merged_headers)
        except (TransportError, httpx.HTTPError) as exc:
            logger.warning("%s %s failed: %s", call.method, url, exc)
            raise UnexpectedResponseError.from_transport_error(exc, method=call.method, url=url) from exc

        return definition.decode(response.body)

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> APIClient:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


__all__ = ["APIClient"]
