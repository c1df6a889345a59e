"""Read-write vars: a matched GettableVar/SettableVar pair.

A Var does not own the value it refers to. It pairs a read action and a
write action that the caller promises point at the same external state.
If they do, set(x) followed by get() with no outside interference yields x.
Nothing here checks that.

update() is a plain read-modify-write with no lock held in between.
Concurrent callers can interleave and lose updates; layer your own
exclusion around it if you need atomicity.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from refvar.gettable import GettableVar, fmap
from refvar.settable import SettableVar, contramap

T = TypeVar("T")
U = TypeVar("U")


class Var(Generic[T]):
    """A read-write capability over an external mutable value."""

    __slots__ = ("_getter", "_setter")

    def __init__(self, read_action: Callable[[], T], write_action: Callable[[T], Any]) -> None:
        self._getter = GettableVar(read_action)
        self._setter = SettableVar(write_action)

    @classmethod
    def from_parts(cls, getter: GettableVar[T], setter: SettableVar[T]) -> Var[T]:
        """Pair an existing getter and setter without re-wrapping them."""
        var = cls.__new__(cls)
        var._getter = getter
        var._setter = setter
        return var

    @property
    def getter(self) -> GettableVar[T]:
        return self._getter

    @property
    def setter(self) -> SettableVar[T]:
        return self._setter

    def get(self) -> T:
        return self._getter.get()

    def set(self, value: T) -> None:
        self._setter.set(value)

    def update(self, fn: Callable[[T], T]) -> None:
        """Read, apply fn, write back. Not atomic."""
        self.set(fn(self.get()))

    def imap(self, to_new: Callable[[T], U], from_new: Callable[[U], T]) -> Var[U]:
        return imap(to_new, from_new, self)

    # --- Operator aliases ---

    def __pos__(self) -> T:
        return self.get()

    def __lshift__(self, value: T) -> None:
        self.set(value)

    def __ilshift__(self, value: T) -> Var[T]:
        self.set(value)
        return self

    def __rshift__(self, fn: Callable[[T], T]) -> None:
        self.update(fn)

    def __irshift__(self, fn: Callable[[T], T]) -> Var[T]:
        self.update(fn)
        return self

    def __repr__(self) -> str:
        return f"Var({self._getter!r}, {self._setter!r})"


def make_var(read_action: Callable[[], T], write_action: Callable[[T], Any]) -> Var[T]:
    """Build a Var from a read action and a write action.

    Usage:
        cell = {"n": 0}
        n = make_var(lambda: cell["n"], lambda x: cell.__setitem__("n", x))
        n.set(5)
        n.update(lambda x: x * 2)
        n.get()  # 10
    """
    return Var(read_action, write_action)


def imap(to_new: Callable[[T], U], from_new: Callable[[U], T], var: Var[T]) -> Var[U]:
    """View var through a pair of conversions.

    Reads go through to_new, writes go through from_new. The two are not
    checked to be inverses; a lossy pair gives lossy round trips.
    """
    return Var.from_parts(fmap(to_new, var.getter), contramap(from_new, var.setter))
