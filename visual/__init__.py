"""Render arbitrary values with the best text representation they offer.

Wrap a value with :func:`vis` and call :meth:`Visual.get_display`. The text
comes from ``__str__`` when the type provides one, else from ``__repr__``,
else from the fallback configured with :func:`set_fallback`::

    from visual import vis

    vis("hello").get_display()    # 'hello'
    vis([1, 2, 3]).get_display()  # '[1, 2, 3]'

    class Opaque:
        __slots__ = ()

    vis(Opaque()).get_display()   # '' until set_fallback() is called
"""

from .display import Visual, display, vis
from .errors import FallbackAlreadySetError, VisualError
from .fallback import DEFAULT_FALLBACK, get_fallback, is_fallback_set, set_fallback
from .resolver import Strategy, Tier, clear_cache, resolve_strategy, resolve_tier
from .settings import VisualSettings, apply_settings

__all__ = [
    "DEFAULT_FALLBACK",
    "FallbackAlreadySetError",
    "Strategy",
    "Tier",
    "Visual",
    "VisualError",
    "VisualSettings",
    "apply_settings",
    "clear_cache",
    "display",
    "get_fallback",
    "is_fallback_set",
    "resolve_strategy",
    "resolve_tier",
    "set_fallback",
    "vis",
]
