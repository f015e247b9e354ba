"""Timeouts – Deadline on the monotonic clock."""
from __future__ import annotations

import dataclasses
import math
import time
from typing import Union

from tree_context.kernel.errors import InvalidTimeoutError


@dataclasses.dataclass(frozen=True)
class Deadline:
    """An absolute point on ``time.monotonic()`` derived from a timeout."""
    expires_at: float

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        return cls(expires_at=time.monotonic() + seconds)

    @property
    def remaining_seconds(self) -> float:
        return max(0.0, self.expires_at - time.monotonic())

    @property
    def is_expired(self) -> bool:
        return time.monotonic() >= self.expires_at


Timeout = Union[float, int, Deadline, None]


def resolve_timeout(timeout: Timeout) -> float | None:
    """Turn a timeout argument into seconds left, or ``None`` for no deadline.

    Raises :class:`InvalidTimeoutError` for negative, NaN or non-numeric values.
    An expired :class:`Deadline` gives ``0.0``.
    """
    if timeout is None:
        return None
    if isinstance(timeout, Deadline):
        return timeout.remaining_seconds
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        raise InvalidTimeoutError(timeout)
    if math.isnan(timeout) or timeout < 0:
        raise InvalidTimeoutError(timeout)
    if math.isinf(timeout):
        return None
    return float(timeout)


__all__ = ["Deadline", "Timeout", "resolve_timeout"]
