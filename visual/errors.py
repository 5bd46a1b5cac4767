"""Exception hierarchy for :mod:`visual`."""

from __future__ import annotations

__all__ = ["FallbackAlreadySetError", "VisualError"]


class VisualError(Exception):
    """Root exception for all visual errors."""


class FallbackAlreadySetError(VisualError, RuntimeError):
    """Raised when the fallback text is configured a second time."""

    def __init__(self, current: str) -> None:
        """Remember the *current* committed value for diagnostics."""
        super().__init__(
            f"fallback text is already initialised (current value: {current!r})"
        )
        self.current = current
