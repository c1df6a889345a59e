"""Gettable vars: read-only handles over an effectful read action.

A GettableVar holds one zero-argument callable. Every get() runs it again;
nothing is cached. Combinators build new instances and never touch the
wrapped action.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class GettableVar(Generic[T]):
    """A read-only capability wrapping an effectful read action."""

    __slots__ = ("_read",)

    def __init__(self, read_action: Callable[[], T]) -> None:
        self._read = read_action

    def get(self) -> T:
        """Run the read action and return its result."""
        return self._read()

    def map(self, fn: Callable[[T], U]) -> GettableVar[U]:
        return fmap(fn, self)

    def apply(self: GettableVar[Callable[[U], T]], arg: GettableVar[U]) -> GettableVar[T]:
        return apply(self, arg)

    def bind(self, fn: Callable[[T], GettableVar[U]]) -> GettableVar[U]:
        return bind(self, fn)

    def __pos__(self) -> T:
        return self.get()

    def __repr__(self) -> str:
        name = getattr(self._read, "__name__", type(self._read).__name__)
        return f"GettableVar({name})"


def make_gettable_var(read_action: Callable[[], T]) -> GettableVar[T]:
    return GettableVar(read_action)


def fmap(fn: Callable[[T], U], gv: GettableVar[T]) -> GettableVar[U]:
    """Post-process every read through fn.

    Usage:
        celsius = make_gettable_var(sensor.read)
        fahrenheit = fmap(lambda c: c * 9 / 5 + 32, celsius)
    """
    return GettableVar(lambda: fn(gv.get()))


def pure(value: T) -> GettableVar[T]:
    """A getter that always yields value and does nothing else."""
    return GettableVar(lambda: value)


def apply(gf: GettableVar[Callable[[T], U]], ga: GettableVar[T]) -> GettableVar[U]:
    """Read the function, then the argument, then apply.

    The two reads always happen in that order. If reading gf raises,
    ga is never read.
    """

    def _read() -> U:
        fn = gf.get()
        arg = ga.get()
        return fn(arg)

    return GettableVar(_read)


def bind(gv: GettableVar[T], fn: Callable[[T], GettableVar[U]]) -> GettableVar[U]:
    """Read gv, pick the next getter from the result, and read that."""
    return GettableVar(lambda: fn(gv.get()).get())
