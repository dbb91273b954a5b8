# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Client definitions: codec hooks and default headers shared by a client type.

A definition is built once while the test suite is being set up and then
assigned to an APIClient subclass (or passed to its constructor)::

    class ItemsClient(APIClient):
        definition = (
            ClientDefinition()
            .encode_with(json.dumps)
            .decode_with(json.loads)
            .header("Content-Type", "application/json")
            .header("Accept", "application/json")
        )

Every instance of that client shares the same definition by reference.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

Encoder = Callable[[Any], Any]
Decoder = Callable[[str], Any]


class ClientDefinition:
    """Encoder, decoder and static headers for a family of APIClient instances."""

    def __init__(
        self,
        *,
        encoder: Encoder | None = None,
        decoder: Decoder | None = None,
        headers: Mapping[str, str] | None = None,
    ):
        self._encoder = encoder
        self._decoder = decoder
        self._headers: dict[str, str] = dict(headers or {})

    def encode_with(self, encoder: Encoder) -> ClientDefinition:
        """
        Serialize request data with ``encoder`` before it is sent.

        The encoder is applied to the ``data`` given to ``post``, ``put`` and
        ``request``. It is never called when there is no data.
        """
        self._encoder = encoder
        return self

    def decode_with(self, decoder: Decoder) -> ClientDefinition:
        """Parse every response body with ``decoder`` before it is returned."""
        self._decoder = decoder
        return self

    def header(self, name: str, value: str) -> ClientDefinition:
        """Send ``name: value`` with every request; repeated names overwrite."""
        self._headers[name] = value
        return self

    @property
    def encoder(self) -> Encoder | None:
        return self._encoder

    @property
    def decoder(self) -> Decoder | None:
        return self._decoder

    @property
    def headers(self) -> Mapping[str, str]:
        return MappingProxyType(self._headers)

    def encode(self, data: Any) -> Any:
        if data is None:
            return None
        if self._encoder is None:
            return data
        return self._encoder(data)

    def decode(self, body: str) -> Any:
        if self._decoder is None:
            return body
        return self._decoder(body)

    def merged_headers(self, headers: Mapping[str, str] | None = None) -> dict[str, str]:
        """
        Definition headers overlaid with call-site ``headers``; the call site wins.

        Header names compare case-insensitively, so a call-site ``accept``
        replaces a default ``Accept`` instead of being sent alongside it.
        """
        call_headers = dict(headers or {})
        overridden = {str(name).lower() for name in call_headers}
        merged = {name: value for name, value in self._headers.items() if name.lower() not in overridden}
        merged.update(call_headers)
        return merged

    def copy(self) -> ClientDefinition:
        """Return an independent definition seeded with this one's hooks and headers."""
        return ClientDefinition(encoder=self._encoder, decoder=self._decoder, headers=self._headers)

    def __repr__(self) -> str:
        return (
            f"ClientDefinition(encoder={self._encoder!r}, decoder={self._decoder!r}, "
            f"headers={self._headers!r})"
        )


__all__ = ["ClientDefinition", "Decoder", "Encoder"]
