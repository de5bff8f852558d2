from typing import TypeVar

from .vec import NonEmptyVec

__all__ = ["non_empty_vec"]

T = TypeVar("T")


def non_empty_vec(first: T, /, *rest: T) -> NonEmptyVec[T]:
    """
    Build a `NonEmptyVec` from one or more values.

    Calling it without any value is a `TypeError`, and is rejected by
    static type checkers before it ever runs.

    Usage:
        >>> non_empty_vec(10, 20, 30)
        [10, 20, 30]
    """
    return NonEmptyVec.from_first_tail(first, rest)
