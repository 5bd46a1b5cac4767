"""The :class:`Visual` wrapper and its construction helpers."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .resolver import Strategy, resolve_strategy

__all__ = ["Visual", "display", "vis"]

T = TypeVar("T")


def _unwrap(value: Any) -> Any:
    return value._inner if isinstance(value, Visual) else value


def _binary(op: Callable[[Any, Any], Any]) -> Callable[[Visual, Any], Any]:
    def method(self: Visual, other: Any) -> Any:
        return op(self._inner, _unwrap(other))

    return method


def _reflected(op: Callable[[Any, Any], Any]) -> Callable[[Visual, Any], Any]:
    def method(self: Visual, other: Any) -> Any:
        return op(_unwrap(other), self._inner)

    return method


def _inplace(op: Callable[[Any, Any], Any]) -> Callable[[Visual, Any], Visual]:
    def method(self: Visual, other: Any) -> Visual:
        # mutable values are updated in place, immutable ones are rebound
        object.__setattr__(self, "_inner", op(self._inner, _unwrap(other)))
        return self

    return method


def _unary(op: Callable[[Any], Any]) -> Callable[[Visual], Any]:
    def method(self: Visual) -> Any:
        return op(self._inner)

    return method


class Visual(Generic[T]):
    """Hold a value together with the function that renders it as text.

    The rendering strategy is picked once, at construction, from the type of
    the wrapped value and never changes afterwards. Everything else is
    forwarded to the wrapped value, so a ``Visual`` can be used where the
    value itself is expected:

    >>> items = vis([1, 2])
    >>> items.append(3)
    >>> len(items), items[0]
    (3, 1)
    >>> items.get_display()
    '[1, 2, 3]'

    ``str()`` of a wrapper is its rendering, hence wrapping a wrapper
    renders exactly like the inner one.
    """

    __slots__ = ("_inner", "_strategy")

    def __init__(self, value: T, strategy: Strategy | None = None) -> None:
        """Wrap *value*, resolving a strategy for its type unless one is given."""
        if strategy is None:
            strategy = resolve_strategy(type(value))
        object.__setattr__(self, "_inner", value)
        object.__setattr__(self, "_strategy", strategy)

    @property
    def strategy(self) -> Strategy:
        """Return the rendering function bound at construction."""
        return self._strategy

    def into_inner(self) -> T:
        """Return the wrapped value."""
        return self._inner

    def get_display(self) -> str:
        """Render the wrapped value with the bound strategy."""
        return self._strategy(self._inner)

    # ------------------------------------------------------------------
    # text protocols

    def __str__(self) -> str:
        return self.get_display()

    def __repr__(self) -> str:
        return f"Visual({self._inner!r})"

    def __format__(self, format_spec: str) -> str:
        if format_spec:
            return format(self._inner, format_spec)
        return self.get_display()

    def __reduce__(self):
        return (Visual, (self._inner, self._strategy))

    # ------------------------------------------------------------------
    # attribute delegation

    def __getattr__(self, name: str) -> Any:
        if name in Visual.__slots__:
            # not initialised yet (copy, pickle); avoid recursing into ourselves
            raise AttributeError(name)
        return getattr(self._inner, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in Visual.__slots__:
            raise AttributeError(f"{name!r} is read-only on Visual")
        setattr(self._inner, name, value)

    def __delattr__(self, name: str) -> None:
        if name in Visual.__slots__:
            raise AttributeError(f"{name!r} is read-only on Visual")
        delattr(self._inner, name)

    # ------------------------------------------------------------------
    # container and call protocols

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self):
        return iter(self._inner)

    def __next__(self) -> Any:
        return next(self._inner)

    def __reversed__(self):
        return reversed(self._inner)

    def __contains__(self, item: Any) -> bool:
        return item in self._inner

    def __getitem__(self, key: Any) -> Any:
        return self._inner[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._inner[key] = value

    def __delitem__(self, key: Any) -> None:
        del self._inner[key]

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Call the wrapped value with the given arguments."""
        return self._inner(*args, **kwargs)

    def __bool__(self) -> bool:
        return bool(self._inner)

    def __hash__(self) -> int:
        return hash(self._inner)

    # ------------------------------------------------------------------
    # context managers and async protocols

    def __enter__(self) -> Any:
        return self._inner.__enter__()

    def __exit__(self, exc_type, exc_value, traceback) -> Any:
        return self._inner.__exit__(exc_type, exc_value, traceback)

    def __aiter__(self) -> Any:
        return self._inner.__aiter__()

    def __anext__(self) -> Any:
        return self._inner.__anext__()

    async def __aenter__(self) -> Any:
        return await self._inner.__aenter__()

    async def __aexit__(self, exc_type, exc_value, traceback) -> Any:
        return await self._inner.__aexit__(exc_type, exc_value, traceback)

    def __await__(self):
        return self._inner.__await__()

    # ------------------------------------------------------------------
    # comparisons and arithmetic

    __eq__ = _binary(operator.eq)
    __ne__ = _binary(operator.ne)
    __lt__ = _binary(operator.lt)
    __le__ = _binary(operator.le)
    __gt__ = _binary(operator.gt)
    __ge__ = _binary(operator.ge)

    __add__ = _binary(operator.add)
    __sub__ = _binary(operator.sub)
    __mul__ = _binary(operator.mul)
    __matmul__ = _binary(operator.matmul)
    __truediv__ = _binary(operator.truediv)
    __floordiv__ = _binary(operator.floordiv)
    __mod__ = _binary(operator.mod)
    __pow__ = _binary(operator.pow)
    __divmod__ = _binary(divmod)
    __lshift__ = _binary(operator.lshift)
    __rshift__ = _binary(operator.rshift)
    __and__ = _binary(operator.and_)
    __xor__ = _binary(operator.xor)
    __or__ = _binary(operator.or_)

    __radd__ = _reflected(operator.add)
    __rsub__ = _reflected(operator.sub)
    __rmul__ = _reflected(operator.mul)
    __rmatmul__ = _reflected(operator.matmul)
    __rtruediv__ = _reflected(operator.truediv)
    __rfloordiv__ = _reflected(operator.floordiv)
    __rmod__ = _reflected(operator.mod)
    __rpow__ = _reflected(operator.pow)
    __rdivmod__ = _reflected(divmod)
    __rlshift__ = _reflected(operator.lshift)
    __rrshift__ = _reflected(operator.rshift)
    __rand__ = _reflected(operator.and_)
    __rxor__ = _reflected(operator.xor)
    __ror__ = _reflected(operator.or_)

    __iadd__ = _inplace(operator.iadd)
    __isub__ = _inplace(operator.isub)
    __imul__ = _inplace(operator.imul)
    __imatmul__ = _inplace(operator.imatmul)
    __itruediv__ = _inplace(operator.itruediv)
    __ifloordiv__ = _inplace(operator.ifloordiv)
    __imod__ = _inplace(operator.imod)
    __ipow__ = _inplace(operator.ipow)
    __ilshift__ = _inplace(operator.ilshift)
    __irshift__ = _inplace(operator.irshift)
    __iand__ = _inplace(operator.iand)
    __ixor__ = _inplace(operator.ixor)
    __ior__ = _inplace(operator.ior)

    __neg__ = _unary(operator.neg)
    __pos__ = _unary(operator.pos)
    __abs__ = _unary(operator.abs)
    __invert__ = _unary(operator.invert)
    __int__ = _unary(int)
    __float__ = _unary(float)
    __complex__ = _unary(complex)
    __index__ = _unary(operator.index)
    __trunc__ = _unary(math.trunc)
    __floor__ = _unary(math.floor)
    __ceil__ = _unary(math.ceil)

    def __round__(self, ndigits: int | None = None) -> Any:
        if ndigits is None:
            return round(self._inner)
        return round(self._inner, ndigits)


def vis(value: T) -> Visual[T]:
    """Wrap *value* in a :class:`Visual` with a strategy resolved for its type."""
    return Visual(value)


def display(value: Any) -> str:
    """Return the best available text for *value* in one call."""
    return vis(value).get_display()
