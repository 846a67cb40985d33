"""The algebraic capabilities the Euclidean routines are written against.

Any object implementing `EuclideanRing` can drive `gcd` and `extended_euclidean_algorithm`. For the common case of a
type that already speaks Python's arithmetic operators (int, big integer wrappers, sympy Integers...) `OperatorRing`
does the job and `ring_of` builds it from a sample value.

Typical usage example:

    ring = ring_of(42)
    ring.rem(42, 5)
    ring.is_zero(ring.zero())
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class EuclideanRing(Protocol[T]):
    """A ring with Euclidean division over the element type `T`.

    `div` and `rem` must pair up as `a == b * div(a, b) + rem(a, b)`, and repeated remainders must reach zero.
    """

    def zero(self) -> T:
        """The additive identity."""
        ...

    def one(self) -> T:
        """The multiplicative identity."""
        ...

    def is_zero(self, a: T) -> bool:
        """Whether `a` equals the additive identity."""
        ...

    def rem(self, a: T, b: T) -> T:
        """Remainder of the Euclidean division of `a` by non-zero `b`."""
        ...

    def sub(self, a: T, b: T) -> T:
        """The difference `a - b`."""
        ...

    def mul(self, a: T, b: T) -> T:
        """The product `a * b`."""
        ...

    def div(self, a: T, b: T) -> T:
        """Quotient of the Euclidean division of `a` by non-zero `b`, paired with `rem`."""
        ...


class OperatorRing:
    """Euclidean ring backed by the native Python operators of `kind`.

    Identities are built as `kind(0)` and `kind(1)`, division is floor division (`//`) and remainder is `%`, so the
    sign conventions are whatever `kind` implements.

    Attributes:
        kind: The element type, called to construct the identities.
    """

    def __init__(self, kind: type) -> None:
        self.kind = kind
        self._zero = kind(0)
        self._one = kind(1)

    def __repr__(self) -> str:
        return f"OperatorRing({self.kind.__name__})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, OperatorRing) and other.kind is self.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def zero(self) -> Any:
        return self._zero

    def one(self) -> Any:
        return self._one

    def is_zero(self, a: Any) -> bool:
        return a == self._zero

    def rem(self, a: Any, b: Any) -> Any:
        return a % b

    def sub(self, a: Any, b: Any) -> Any:
        return a - b

    def mul(self, a: Any, b: Any) -> Any:
        return a * b

    def div(self, a: Any, b: Any) -> Any:
        return a // b


INTEGERS = OperatorRing(int)


def ring_of(value: Any) -> OperatorRing:
    """Get the operator-backed ring for the type of `value`.

    Args:
        value: Sample element. Its type must be constructible from 0 and 1.

    Returns:
        `INTEGERS` for plain ints, a fresh `OperatorRing` otherwise.
    """
    kind = type(value)
    if kind is int:
        return INTEGERS
    return OperatorRing(kind)
