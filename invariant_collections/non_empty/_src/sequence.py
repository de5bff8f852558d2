from __future__ import annotations
import copy
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

import invariant_collections.non_empty._src as src
from invariant_collections._src.positive_int import PositiveInt
from invariant_collections._src.slice_view import SliceView
from invariant_collections._src.wrapped_sequence import WrappedSequence

__all__ = ["NonEmptySequence"]

T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="NonEmptySequence")


class NonEmptySequence(WrappedSequence[T_co], ABC, Generic[T_co]):
    """
    A sequence which always holds at least one element.

    Because an element always exists, `first` and `last` never fail and
    return the element itself rather than an optional value. Operations
    which may remove every element, such as `tail` and `init`, return a
    plain `SliceView` instead.

    Subclasses must guarantee that `_inner` is non-empty whenever it is
    observable.
    """

    __slots__ = ()

    def __copy__(self: Self, /) -> src.slice.NonEmptySlice[T_co]:
        return src.slice.NonEmptySlice._new_unchecked((*self._inner,))

    def __deepcopy__(self: Self, memo: dict[int, Any], /) -> src.slice.NonEmptySlice[T_co]:
        return src.slice.NonEmptySlice._new_unchecked(
            (*[copy.deepcopy(x, memo) for x in self._inner],)
        )

    def __eq__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, NonEmptySequence):
            return NotImplemented
        elif len(self._inner) != len(other._inner):
            return False
        else:
            return all(x is y or x == y for x, y in zip(self._inner, other._inner))

    __hash__ = None  # type: ignore

    def __iter__(self: Self, /) -> src.iter.NonEmptyIter[T_co]:
        return src.iter.NonEmptyIter._new_unchecked(self._inner)

    @classmethod
    @abstractmethod
    def _new_unchecked(cls: type[Self], sequence: Any, /) -> Self:
        """
        Wrap `sequence` without checking that it holds an element.

        Only for callers which have already proven `sequence` is
        non-empty. An empty `sequence` breaks every guarantee of the
        returned container. The length is only asserted, so the check
        disappears under `python -O`.
        """
        raise NotImplementedError("_new_unchecked is a required method for non-empty sequences")

    def copy(self: Self, /) -> src.slice.NonEmptySlice[T_co]:
        return copy.copy(self)

    def first(self: Self, /) -> T_co:
        return self._inner[0]

    def init(self: Self, /) -> SliceView[T_co]:
        """Every element except the last. May be empty."""
        return SliceView(self._inner, range(len(self._inner) - 1))

    def iter(self: Self, /) -> src.iter.NonEmptyIter[T_co]:
        return iter(self)

    def last(self: Self, /) -> T_co:
        return self._inner[-1]

    def non_zero_len(self: Self, /) -> PositiveInt:
        return PositiveInt(len(self._inner))

    def split_first(self: Self, /) -> tuple[T_co, SliceView[T_co]]:
        return self.first(), self.tail()

    def split_last(self: Self, /) -> tuple[SliceView[T_co], T_co]:
        return self.init(), self.last()

    def tail(self: Self, /) -> SliceView[T_co]:
        """Every element except the first. May be empty."""
        return SliceView(self._inner, range(1, len(self._inner)))

    def to_non_empty_vec(self: Self, /) -> src.vec.NonEmptyVec[T_co]:
        return src.vec.NonEmptyVec._new_unchecked([*self._inner])
