from __future__ import annotations
from abc import ABC
from collections.abc import Iterator, Sequence
from typing import Any, Generic, TypeVar, overload

from .slice_view import SliceView

__all__ = ["WrappedSequence"]

T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="WrappedSequence")

reprs_seen: set[int] = {0} - {0}


class WrappedSequence(Sequence[T_co], ABC, Generic[T_co]):
    """
    Base class for containers which wrap a plain sequence and preserve
    an invariant over it.

    Reading behaves exactly like reading the wrapped sequence, including
    its `repr`, so that a wrapped container may be substituted wherever
    the plain sequence was printed or iterated. Slicing gives up the
    invariant and returns a `SliceView`.
    """
    _inner: Sequence[T_co]

    __slots__ = {
        "_inner":
            "The wrapped sequence holding the elements.",
    }

    def __contains__(self: Self, element: Any, /) -> bool:
        return element in self._inner

    @overload
    def __getitem__(self: Self, index: int, /) -> T_co: ...

    @overload
    def __getitem__(self: Self, index: slice, /) -> SliceView[T_co]: ...

    def __getitem__(self, index, /):
        if isinstance(index, slice):
            return SliceView(self._inner, range(len(self._inner))[index])
        try:
            return self._inner[index]
        except IndexError:
            raise IndexError("index out of range") from None

    def __iter__(self: Self, /) -> Iterator[T_co]:
        return iter(self._inner)

    def __len__(self: Self, /) -> int:
        return len(self._inner)

    def __repr__(self: Self, /) -> str:
        if id(self) in reprs_seen:
            return "[...]"
        reprs_seen.add(id(self))
        try:
            return "[" + ", ".join([repr(x) for x in self._inner]) + "]"
        finally:
            reprs_seen.remove(id(self))

    def __reversed__(self: Self, /) -> Iterator[T_co]:
        return reversed(self._inner)

    def as_slice(self: Self, /) -> SliceView[T_co]:
        return SliceView.of(self._inner)
