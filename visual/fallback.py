"""Process-wide fallback text with write-once semantics."""

from __future__ import annotations

import logging
import threading

from .errors import FallbackAlreadySetError

__all__ = [
    "DEFAULT_FALLBACK",
    "get_fallback",
    "is_fallback_set",
    "set_fallback",
]

DEFAULT_FALLBACK = ""

logger = logging.getLogger(__name__)


class _FallbackCell:
    """Write-once storage guarded by a lock.

    Readers never take the lock: the stored value is an immutable ``str``
    swapped in with a single assignment, so they observe either the default
    or the committed text.
    """

    __slots__ = ("_lock", "_value", "_is_set")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = DEFAULT_FALLBACK
        self._is_set = False

    @property
    def is_set(self) -> bool:
        return self._is_set

    def get(self) -> str:
        return self._value

    def set(self, value: str) -> None:
        with self._lock:
            if self._is_set:
                raise FallbackAlreadySetError(self._value)
            self._value = value
            self._is_set = True

    def reset(self) -> None:
        """Return to the unset state; used in tests to simulate a fresh process."""

        with self._lock:
            self._value = DEFAULT_FALLBACK
            self._is_set = False


_cell = _FallbackCell()


def set_fallback(text: str) -> None:
    """Commit *text* as the fallback for values with no representation.

    Only the first call succeeds. Later calls raise
    :class:`~visual.errors.FallbackAlreadySetError` and keep the stored
    value. Callers treating the fallback as optional configuration are
    expected to catch that error and carry on.
    """

    if not isinstance(text, str):
        raise TypeError(f"fallback text must be str, not {type(text).__name__}")
    _cell.set(text)
    logger.info("Fallback text set to %r", text)


def get_fallback() -> str:
    """Return the current fallback text (``DEFAULT_FALLBACK`` until set)."""
    return _cell.get()


def is_fallback_set() -> bool:
    """Return ``True`` once :func:`set_fallback` has succeeded."""
    return _cell.is_set
