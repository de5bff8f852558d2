from __future__ import annotations
from collections.abc import Callable, Iterable
from typing import Any, Generic, Optional, Type, TypeVar

from invariant_collections._src.comparable import SupportsRichComparison
from .sequence import SortedSequence
from .slice import SortedSlice

__all__ = ["SortedVec"]

T = TypeVar("T", bound=SupportsRichComparison)

Self = TypeVar("Self", bound="SortedVec")


def sort_dedup(iterable: Iterable[T], key: Optional[Callable[[T], Any]], /) -> tuple[T, ...]:
    """
    Sort the elements and collapse runs of equal neighbours.

    Sorting is stable, so a run holds equal elements in input order and
    the last of them, the most recently seen, is kept.
    """
    data = sorted(iterable, key=key)
    result: list[T] = []
    if key is None:
        for element in data:
            if result and not (element is not result[-1] != element):
                result[-1] = element
            else:
                result.append(element)
    else:
        last: Any = None
        for element in data:
            k = key(element)
            if result and not (k is not last != k):
                result[-1] = element
            else:
                result.append(element)
            last = k
    return (*result,)


class SortedVec(SortedSequence[T], Generic[T]):
    """
    An immutable, strictly ascending sequence without duplicates.

    Every construction sorts and deduplicates its input from scratch;
    there is no way to insert into an existing `SortedVec`.

    Usage:
        >>> SortedVec([3, 1, 2, 1])
        [1, 2, 3]
        >>> SortedVec.sort_vec_by_key(["bb", "a", "cc"], len)
        ['a', 'cc']
    """

    __slots__ = ()

    def __init__(self: Self, iterable: Optional[Iterable[T]] = None, /, *, key: Optional[Callable[[T], Any]] = None) -> None:
        if key is not None and not callable(key):
            raise TypeError(f"{type(self).__name__} expected a callable key or None, got {key!r}")
        if iterable is None:
            self._inner = ()
        elif isinstance(iterable, Iterable):
            self._inner = sort_dedup(iterable, key)
        else:
            raise TypeError(f"{type(self).__name__} expected an iterable, got {iterable!r}")
        self._key = key

    @classmethod
    def _from_sorted_unchecked(cls: Type[Self], inner: tuple[T, ...], key: Optional[Callable[[T], Any]], /) -> Self:
        self = cls.__new__(cls)
        self._inner = inner
        self._key = key
        return self

    def as_sorted_slice(self: Self, /) -> SortedSlice[T]:
        return SortedSlice._from_sorted_unchecked(self._inner, self._key)

    @classmethod
    def empty(cls: Type[Self], /) -> Self:
        return cls()

    def into_boxed_slice(self: Self, /) -> SortedSlice[T]:
        # The tuple is immutable, so the slice can own it without a copy.
        return SortedSlice._from_sorted_unchecked(self._inner, self._key)

    def into_vec(self: Self, /) -> list[T]:
        return [*self._inner]

    @classmethod
    def sort_vec(cls: Type[Self], iterable: Iterable[T], /) -> Self:
        return cls(iterable)

    @classmethod
    def sort_vec_by_key(cls: Type[Self], iterable: Iterable[T], key: Callable[[T], Any], /) -> Self:
        return cls(iterable, key=key)
