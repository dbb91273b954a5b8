# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL and querystring helpers for the request pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode, urljoin


def url_for(base_url: str, path: str) -> str:
    """
    Join a request path onto the configured host.

    Absolute URLs replace the base entirely, matching `urljoin()` semantics.
    """
    return urljoin(str(base_url), str(path))


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(prefix: str, value: Any) -> list[tuple[str, str]]:
    if isinstance(value, Mapping):
        pairs: list[tuple[str, str]] = []
        for key, item in value.items():
            pairs.extend(_flatten(f"{prefix}[{key}]", item))
        return pairs
    if isinstance(value, (list, tuple)):
        pairs = []
        for item in value:
            pairs.extend(_flatten(f"{prefix}[]", item))
        return pairs
    return [(prefix, _scalar(value))]


def to_query(data: Any) -> str:
    """
    Form-encode ``data`` for use as a querystring.

    Flat mappings encode like ``urlencode(data, doseq=True)``. Nested mappings
    expand to ``parent[child]`` keys, and sequences below the top level to
    ``parent[child][]``. Mappings or lists inside a top-level list expand
    under ``name[]``. Booleans encode as ``true`` and ``false``. Strings are
    assumed to be encoded already.
    """
    if isinstance(data, str):
        return data
    if not isinstance(data, Mapping):
        return urlencode(list(data))

    pairs: list[tuple[str, str]] = []
    for key, value in data.items():
        name = str(key)
        if isinstance(value, Mapping):
            pairs.extend(_flatten(name, value))
        elif isinstance(value, (list, tuple)):
            for item in value:
                if isinstance(item, (Mapping, list, tuple)):
                    pairs.extend(_flatten(f"{name}[]", item))
                else:
                    pairs.append((name, _scalar(item)))
        else:
            pairs.append((name, _scalar(value)))
    return urlencode(pairs)


def add_querystring_to_path(path: str, data: Any) -> str:
    """Append ``data`` to ``path`` as a querystring; None and empty data leave it untouched."""
    if data is None or (isinstance(data, Mapping) and not data):
        return path
    query = to_query(data)
    if not query:
        return path
    return f"{path}?{query}"


__all__ = ["add_querystring_to_path", "to_query", "url_for"]
