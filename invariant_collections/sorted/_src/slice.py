from __future__ import annotations
from collections.abc import Callable
from typing import Any, Generic, Optional, Type, TypeVar

import invariant_collections.sorted._src as src
from invariant_collections._src.comparable import SupportsRichComparison
from .sequence import SortedSequence

__all__ = ["SortedSlice"]

T_co = TypeVar("T_co", bound=SupportsRichComparison, covariant=True)

Self = TypeVar("Self", bound="SortedSlice")


class SortedSlice(SortedSequence[T_co], Generic[T_co]):
    """
    A view over elements which are already sorted and deduplicated.

    Sorted slices are only obtained from a `SortedVec` or from slicing
    another sorted container, never by validating arbitrary input.
    """

    __slots__ = ()

    def __init__(self: Self, *args: Any, **kwargs: Any) -> None:
        raise TypeError(
            f"{type(self).__name__} instances are obtained from a SortedVec,"
            f" use SortedVec.as_sorted_slice or SortedVec.into_boxed_slice instead"
        )

    @classmethod
    def _from_sorted_unchecked(cls: Type[Self], inner: tuple[T_co, ...], key: Optional[Callable[[T_co], Any]], /) -> Self:
        self = cls.__new__(cls)
        self._inner = inner
        self._key = key
        return self

    @classmethod
    def empty(cls: Type[Self], /) -> Self:
        return cls._from_sorted_unchecked((), None)

    def to_vec(self: Self, /) -> src.vec.SortedVec[T_co]:
        return src.vec.SortedVec._from_sorted_unchecked(self._inner, self._key)
