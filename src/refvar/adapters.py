"""Vars over ordinary Python mutable state.

Each adapter closes over the target it is given; the Var itself holds
nothing. Failures come straight from the underlying access (AttributeError,
KeyError, LookupError).
"""

from __future__ import annotations

import contextvars
from typing import Any, MutableMapping, TypeVar

from refvar.var import Var

T = TypeVar("T")
K = TypeVar("K")


def cell(initial: T) -> Var[T]:
    """A Var over a fresh one-slot cell that nothing else can reach."""
    slot = [initial]

    def _read() -> T:
        return slot[0]

    def _write(value: T) -> None:
        slot[0] = value

    return Var(_read, _write)


def attr_var(obj: Any, name: str) -> Var[Any]:
    """A Var over obj.<name>."""
    return Var(lambda: getattr(obj, name), lambda value: setattr(obj, name, value))


def item_var(mapping: MutableMapping[K, T], key: K) -> Var[T]:
    """A Var over mapping[key]. Reading a missing key raises KeyError."""

    def _write(value: T) -> None:
        mapping[key] = value

    return Var(lambda: mapping[key], _write)


def context_var(cv: contextvars.ContextVar[T]) -> Var[T]:
    """A Var over a ContextVar in the current context.

    Writes discard the reset token. Use cv.set()/cv.reset() directly when
    the previous value has to be restored.
    """
    return Var(cv.get, lambda value: cv.set(value))
