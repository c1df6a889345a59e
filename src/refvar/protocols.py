"""Capability protocols and the functions that dispatch on them.

Each wrapper implements the subset it supports: GettableVar is Gettable,
SettableVar is Settable, Var is all three. Anything else with the same
method shape works too, so get()/set()/update() accept foreign handles
without registration.
"""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Gettable(Protocol[T_co]):
    def get(self) -> T_co: ...


@runtime_checkable
class Settable(Protocol[T_contra]):
    def set(self, value: T_contra) -> None: ...


@runtime_checkable
class Updatable(Protocol[T]):
    def update(self, fn: Callable[[T], T]) -> None: ...


def get(ref: Gettable[T]) -> T:
    return ref.get()


def set(ref: Settable[T], value: T) -> None:
    ref.set(value)


def update(ref, fn: Callable[[T], T]) -> None:
    """Apply fn to the value behind ref.

    Uses ref.update() when the handle has one, otherwise reads then writes.
    Neither path is atomic.
    """
    if isinstance(ref, Updatable):
        ref.update(fn)
    else:
        ref.set(fn(ref.get()))
