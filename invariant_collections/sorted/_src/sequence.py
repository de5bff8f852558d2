from __future__ import annotations
import copy
import operator
from abc import ABC, abstractmethod
from bisect import bisect_left, bisect_right
from collections.abc import Callable
from typing import Any, Generic, Literal, Optional, SupportsIndex, Type, TypeVar, overload

import invariant_collections.sorted._src as src
from invariant_collections._src.comparable import SupportsRichComparison
from invariant_collections._src.slice_view import SliceView
from invariant_collections._src.wrapped_sequence import WrappedSequence

__all__ = ["SortedSequence"]

T_co = TypeVar("T_co", bound=SupportsRichComparison, covariant=True)

Self = TypeVar("Self", bound="SortedSequence")


class SortedSequence(WrappedSequence[T_co], ABC, Generic[T_co]):
    """
    An immutable sequence in strictly ascending order.

    No two neighbours compare equal, either by value or, when a key is
    given, by `key(element)`. Lookups use binary search over the
    ordering.
    """
    _inner: tuple[T_co, ...]
    _key: Optional[Callable[[T_co], Any]]

    __slots__ = {
        "_key":
            "The key function used for ordering, or None for the natural order.",
    }

    def __contains__(self: Self, element: Any, /) -> bool:
        key = self._key
        value = element if key is None else key(element)
        i = bisect_left(self._inner, value, key=key)
        if i == len(self._inner):
            return False
        found = self._inner[i] if key is None else key(self._inner[i])
        return not (value is not found != value)

    def __copy__(self: Self, /) -> Self:
        return type(self)._from_sorted_unchecked(self._inner, self._key)

    def __deepcopy__(self: Self, memo: dict[int, Any], /) -> Self:
        return type(self)._from_sorted_unchecked(
            (*[copy.deepcopy(x, memo) for x in self._inner],),
            self._key,
        )

    def __eq__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, SortedSequence):
            return NotImplemented
        return self._inner == other._inner

    def __hash__(self: Self, /) -> int:
        return hash(self._inner)

    @overload
    def __getitem__(self: Self, index: int, /) -> T_co: ...

    @overload
    def __getitem__(self: Self, index: slice, /) -> src.slice.SortedSlice[T_co] | SliceView[T_co]: ...

    def __getitem__(self, index, /):
        if isinstance(index, slice) and (index.step is None or operator.index(index.step) > 0):
            return src.slice.SortedSlice._from_sorted_unchecked(self._inner[index], self._key)
        return super().__getitem__(index)

    @classmethod
    @abstractmethod
    def _from_sorted_unchecked(cls: Type[Self], inner: tuple[T_co, ...], key: Optional[Callable[[T_co], Any]], /) -> Self:
        """
        Wrap `inner` without sorting or deduplicating it.

        Only for callers which already hold a strictly ascending tuple
        under `key`, such as another sorted container.
        """
        raise NotImplementedError("_from_sorted_unchecked is a required method for sorted sequences")

    def between(self: Self, start: Optional[Any] = None, stop: Optional[Any] = None, /) -> src.slice.SortedSlice[T_co]:
        """The elements `x` with `start <= x < stop`, where None is unbounded."""
        i = 0 if start is None else self.index(start, mode="left")
        j = len(self._inner) if stop is None else self.index(stop, mode="left")
        return src.slice.SortedSlice._from_sorted_unchecked(self._inner[i:max(i, j)], self._key)

    def copy(self: Self, /) -> Self:
        return copy.copy(self)

    def count(self: Self, value: Any, /) -> int:
        return 1 if value in self else 0

    def index(self: Self, value: Any, /, start: int = 0, stop: Optional[int] = None, *, mode: Literal["left", "exact", "right"] = "exact") -> int:
        if isinstance(start, int):
            pass
        elif isinstance(start, SupportsIndex):
            start = operator.index(start)
        else:
            raise TypeError(f"could not interpret the start as an integer, got {start!r}")
        if stop is None:
            stop = len(self._inner)
        elif isinstance(stop, int):
            pass
        elif isinstance(stop, SupportsIndex):
            stop = operator.index(stop)
        else:
            raise TypeError(f"could not interpret the stop as an integer, got {stop!r}")
        start, stop, _ = slice(start, stop).indices(len(self._inner))
        key = self._key
        target = value if key is None else key(value)
        if not isinstance(mode, str):
            raise TypeError(f"expected 'left', 'exact', or 'right' for the mode, got {mode!r}")
        elif mode == "left":
            return bisect_left(self._inner, target, start, max(start, stop), key=key)
        elif mode == "right":
            return bisect_right(self._inner, target, start, max(start, stop), key=key)
        elif mode == "exact":
            i = bisect_left(self._inner, target, start, max(start, stop), key=key)
            if i >= stop:
                raise ValueError(f"{value!r} is not in the sorted sequence")
            found = self._inner[i] if key is None else key(self._inner[i])
            if target is not found != target:
                raise ValueError(f"{value!r} is not in the sorted sequence")
            return i
        else:
            raise ValueError(f"expected 'left', 'exact', or 'right' for the mode, got {mode!r}")

    @property
    def key(self: Self, /) -> Optional[Callable[[T_co], Any]]:
        return self._key
