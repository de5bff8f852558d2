from __future__ import annotations
from abc import ABC
from collections.abc import Callable, MutableSequence
from typing import Any, Generic, Optional, TypeVar

from .sequence import NonEmptySequence

__all__ = ["NonEmptyMutableSequence"]

T = TypeVar("T")

Self = TypeVar("Self", bound="NonEmptyMutableSequence")


class NonEmptyMutableSequence(NonEmptySequence[T], ABC, Generic[T]):
    """
    A non-empty sequence whose elements may be replaced or reordered in
    place. The length can never be changed through this interface.
    """
    _inner: MutableSequence[T]

    __slots__ = ()

    def __setitem__(self: Self, index: int, element: T, /) -> None:
        if isinstance(index, slice):
            raise TypeError(f"{type(self).__name__} does not support slice assignment")
        try:
            self._inner[index] = element
        except IndexError:
            raise IndexError("index out of range") from None

    def reverse(self: Self, /) -> None:
        self._inner.reverse()

    def sort(self: Self, /, *, key: Optional[Callable[[T], Any]] = None, reverse: bool = False) -> None:
        inner = self._inner
        if isinstance(inner, list):
            inner.sort(key=key, reverse=reverse)
        else:
            inner[:] = sorted(inner, key=key, reverse=reverse)

    def swap(self: Self, i: int, j: int, /) -> None:
        inner = self._inner
        try:
            inner[i], inner[j] = inner[j], inner[i]
        except IndexError:
            raise IndexError("index out of range") from None
