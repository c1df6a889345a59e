"""Settable vars: write-only handles over an effectful write action.

The write side carries the richer algebra:

- contramap: pre-process the incoming value (contravariant functor)
- divide/conquer: fan one value out to two sinks, and the no-op sink
- choose/lose: route a tagged value to exactly one of two sinks, and the
  sink for inputs that cannot exist

Every combinator returns a new SettableVar.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Never, TypeVar

from refvar.either import Either, Left, Right, absurd

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")


class SettableVar(Generic[T]):
    """A write-only capability wrapping an effectful write action."""

    __slots__ = ("_write",)

    def __init__(self, write_action: Callable[[T], Any]) -> None:
        self._write = write_action

    def set(self, value: T) -> None:
        """Run the write action with value. Its return value is discarded."""
        self._write(value)

    def contramap(self, fn: Callable[[U], T]) -> SettableVar[U]:
        return contramap(fn, self)

    def __lshift__(self, value: T) -> None:
        self.set(value)

    def __ilshift__(self, value: T) -> SettableVar[T]:
        self.set(value)
        return self

    def __repr__(self) -> str:
        name = getattr(self._write, "__name__", type(self._write).__name__)
        return f"SettableVar({name})"


def make_settable_var(write_action: Callable[[T], Any]) -> SettableVar[T]:
    return SettableVar(write_action)


def contramap(fn: Callable[[U], T], sv: SettableVar[T]) -> SettableVar[U]:
    """Pre-process every write through fn.

    Usage:
        raw = make_settable_var(register.write)
        percent = contramap(lambda p: int(p * 255 / 100), raw)
        percent.set(50)  # register.write(127)
    """
    return SettableVar(lambda value: sv.set(fn(value)))


def divide(
    fn: Callable[[U], tuple[A, B]],
    first: SettableVar[A],
    second: SettableVar[B],
) -> SettableVar[U]:
    """Split each value with fn and write both halves, first then second.

    If the write to first raises, second is never written.
    """

    def _write(value: U) -> None:
        a, b = fn(value)
        first.set(a)
        second.set(b)

    return SettableVar(_write)


def conquer() -> SettableVar[Any]:
    """A setter that ignores every value. Identity for divide()."""
    return SettableVar(_ignore)


def _ignore(value: Any) -> None:
    pass


def choose(
    fn: Callable[[U], Either[A, B]],
    left: SettableVar[A],
    right: SettableVar[B],
) -> SettableVar[U]:
    """Tag each value with fn and write it to exactly one sink.

    Left(a) goes to left, Right(b) goes to right. Anything else is a type
    error and reaches neither sink.
    """

    def _write(value: U) -> None:
        tagged = fn(value)
        if isinstance(tagged, Left):
            left.set(tagged.value)
        elif isinstance(tagged, Right):
            right.set(tagged.value)
        else:
            raise TypeError(f"choose() expected Left or Right, got {tagged!r}")

    return SettableVar(_write)


def lose(fn: Callable[[U], Never]) -> SettableVar[U]:
    """A setter for an uninhabited input type. Identity for choose().

    fn proves U is empty by mapping it into Never, so this setter can never
    be called in a well-typed program. The body exists only to fail loudly
    if the types were subverted.
    """
    return SettableVar(lambda value: absurd(fn(value)))
