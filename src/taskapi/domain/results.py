"""Explicit outcomes of data-access calls.

Repositories return one of these variants instead of raising, and callers
branch on them with ``isinstance``.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    key: str


@dataclass(frozen=True)
class Failed:
    error: Exception


async def settle(awaitable: Awaitable[R]) -> R | Failed:
    """Await ``awaitable``, turning any raised exception into ``Failed``."""
    try:
        return await awaitable
    except Exception as exc:
        logger.debug("Data-access call failed", extra={"error_type": type(exc).__name__})
        return Failed(exc)
