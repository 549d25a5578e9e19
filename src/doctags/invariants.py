"""Invariant markers for doctags."""

from __future__ import annotations

from typing import NoReturn

from loguru import logger

from doctags.exceptions import NeverThrown


def never(reason: str = "", **env: object) -> NoReturn:
    """Mark a code path as intentionally unreachable.

    The optional env payload is metadata only; it travels on the raised
    exception for diagnostics.
    """
    reason = reason or "never() marker reached"
    logger.error("invariant violation: {} {}", reason, env)
    raise NeverThrown(reason, env=env)
