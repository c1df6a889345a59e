"""Tagged sums and the empty type: the routing vocabulary for choose/lose.

choose() routes on Left/Right. lose() needs a type with no values; Python
spells that typing.Never, and absurd() is the only function total over it.
"""

from __future__ import annotations

from typing import Generic, Never, NoReturn, TypeVar, Union, assert_never

A = TypeVar("A")
B = TypeVar("B")

Void = Never


class Left(Generic[A]):
    """The left branch of an Either."""

    __slots__ = ("value",)

    def __init__(self, value: A) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Left) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Left, self.value))

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


class Right(Generic[B]):
    """The right branch of an Either."""

    __slots__ = ("value",)

    def __init__(self, value: B) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Right) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Right, self.value))

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


Either = Union[Left[A], Right[B]]


def absurd(value: Never) -> NoReturn:
    """Eliminate a value of the empty type.

    Unreachable in a well-typed program. Reaching it at runtime means a
    value was forged for an uninhabited type, so it fails loudly.
    """
    assert_never(value)
