"""Pick the most informative text representation available for a type.

Three tiers are probed in strict order:

``RICH``
    The type overrides ``__str__`` somewhere below :class:`object`, or it is
    a :class:`numbers.Number` whose ``str()`` is its display form.
``STRUCTURAL``
    The type overrides ``__repr__`` (containers, dataclasses, ...).
``FALLBACK``
    Neither override exists; the value is ignored and the process-wide
    fallback text is returned instead.

Only the type is inspected, never an instance, so the outcome can be cached
and shared by every value of that type.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from functools import lru_cache
import logging
import numbers
from typing import Any

from .fallback import get_fallback

__all__ = [
    "Strategy",
    "Tier",
    "clear_cache",
    "resolve_strategy",
    "resolve_tier",
]

logger = logging.getLogger(__name__)

Strategy = Callable[[Any], str]


class Tier(StrEnum):
    """Representation tiers ordered from most to least informative."""

    RICH = "rich"
    STRUCTURAL = "structural"
    FALLBACK = "fallback"


def _overrides(tp: type, name: str) -> bool:
    return getattr(tp, name, None) is not getattr(object, name)


def _render_fallback(value: Any) -> str:
    # read on every call so a later set_fallback() is honoured
    return get_fallback()


_BUILTIN_NUMBERS = frozenset(map(id, (int, float, complex)))

_STRATEGIES: dict[Tier, Strategy] = {
    Tier.RICH: str,
    Tier.STRUCTURAL: repr,
    Tier.FALLBACK: _render_fallback,
}


def _is_number(tp: type) -> bool:
    try:
        return issubclass(tp, numbers.Number)
    except TypeError:
        # ABC caches need a hashable class
        return any(base in _BUILTIN_NUMBERS for base in map(id, tp.__mro__))


def _classify(tp: type) -> Tier:
    if _overrides(tp, "__str__") or _is_number(tp):
        tier = Tier.RICH
    elif _overrides(tp, "__repr__"):
        tier = Tier.STRUCTURAL
    else:
        tier = Tier.FALLBACK
    logger.debug("Resolved %s.%s to %s tier", tp.__module__, tp.__qualname__, tier)
    return tier


@lru_cache(maxsize=512)
def _cached_tier(tp: type) -> Tier:
    return _classify(tp)


def resolve_tier(tp: type) -> Tier:
    """Return the single :class:`Tier` that applies to values of *tp*.

    Classes with an unhashable metaclass cannot be cached and are classified
    on every call.
    """
    try:
        return _cached_tier(tp)
    except TypeError:
        return _classify(tp)


def resolve_strategy(tp: type) -> Strategy:
    """Return the rendering function for values of *tp*."""
    return _STRATEGIES[resolve_tier(tp)]


def clear_cache() -> None:
    """Forget cached resolutions, e.g. after patching ``__str__`` on a class."""
    _cached_tier.cache_clear()
