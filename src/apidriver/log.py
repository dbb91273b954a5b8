# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for apidriver."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("APIDRIVER_LOG_LEVEL", "WARNING").upper()
PACKAGE_LOGGER = "apidriver"
# httpx logs every request at INFO; these stay quiet unless asked for.
TRANSPORT_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None, *, include_transport: bool | None = None) -> None:
    """
    Configure logging for a test suite driving an API.

    The level applies to the ``apidriver`` loggers. httpx/httpcore loggers are
    held at WARNING unless ``include_transport`` (or APIDRIVER_LOG_TRANSPORT)
    is set, in which case they follow the same level.
    """
    effective_level = getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.WARNING)
    if include_transport is None:
        include_transport = os.getenv("APIDRIVER_LOG_TRANSPORT", "").strip().lower() in {"1", "true", "yes", "on"}

    logging.basicConfig(
        level=effective_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(effective_level)
    transport_level = effective_level if include_transport else max(effective_level, logging.WARNING)
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)


__all__ = ["setup_logging"]
