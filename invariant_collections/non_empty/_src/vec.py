from __future__ import annotations
import copy
import operator
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Generic, Type, TypeVar

from invariant_collections._src.errors import EmptyError
from invariant_collections._src.positive_int import PositiveInt
from .mutable_sequence import NonEmptyMutableSequence
from .sequence import NonEmptySequence
from .slice import NonEmptySlice
from .slice_mut import NonEmptySliceMut

__all__ = ["NonEmptyVec"]

T = TypeVar("T")

Self = TypeVar("Self", bound="NonEmptyVec")


class NonEmptyVec(NonEmptyMutableSequence[T], Generic[T]):
    """
    A growable list which always holds at least one element.

    Elements can always be added, but only removed by operations which
    provably leave one behind (`truncate` to a `PositiveInt`, `dedup`).
    Every read-only and in-place operation of `NonEmptySlice` and
    `NonEmptySliceMut` is available directly on the vector.

    Usage:
        >>> vec = NonEmptyVec.one(10)
        >>> vec.push(20)
        >>> vec
        [10, 20]
        >>> vec.truncate(PositiveInt(1))
        >>> vec.last()
        10
    """
    _inner: list[T]

    __slots__ = ()

    def __init__(self: Self, iterable: Iterable[T], /) -> None:
        if not isinstance(iterable, Iterable):
            raise TypeError(f"{type(self).__name__} expected an iterable, got {iterable!r}")
        inner = [*iterable]
        if len(inner) == 0:
            raise EmptyError("empty vec")
        self._inner = inner

    def __add__(self: Self, other: Iterable[T], /) -> NonEmptyVec[T]:
        if not isinstance(other, (NonEmptySequence, list, tuple)):
            return NotImplemented
        result = self.copy()
        result.extend(other)
        return result

    def __copy__(self: Self, /) -> Self:
        return type(self)._new_unchecked([*self._inner])

    def __deepcopy__(self: Self, memo: dict[int, Any], /) -> Self:
        return type(self)._new_unchecked([copy.deepcopy(x, memo) for x in self._inner])

    def __iadd__(self: Self, other: Iterable[T], /) -> Self:
        if not isinstance(other, Iterable):
            return NotImplemented
        self.extend(other)
        return self

    @classmethod
    def _new_unchecked(cls: Type[Self], inner: list[T], /) -> Self:
        assert len(inner) > 0
        self = cls.__new__(cls)
        self._inner = inner
        return self

    def append(self: Self, element: T, /) -> None:
        self._inner.append(element)

    def as_non_empty_slice(self: Self, /) -> NonEmptySlice[T]:
        return NonEmptySlice._new_unchecked(self._inner)

    def as_non_empty_slice_mut(self: Self, /) -> NonEmptySliceMut[T]:
        return NonEmptySliceMut._new_unchecked(self._inner)

    def as_vec(self: Self, /) -> list[T]:
        return [*self._inner]

    def copy(self: Self, /) -> Self:
        return copy.copy(self)

    def dedup(self: Self, /) -> None:
        """Collapse runs of equal neighbours to their first element."""
        inner = self._inner
        result = [inner[0]]
        for element in inner[1:]:
            if element is not result[-1] != element:
                result.append(element)
        inner[:] = result

    def dedup_by_key(self: Self, key: Callable[[T], Any], /) -> None:
        """Collapse runs of neighbours with equal keys to their first element."""
        inner = self._inner
        result = [inner[0]]
        last = key(inner[0])
        for element in inner[1:]:
            k = key(element)
            if k is not last != k:
                result.append(element)
                last = k
        inner[:] = result

    def extend(self: Self, iterable: Iterable[T], /) -> None:
        if isinstance(iterable, Iterable):
            self._inner.extend(iterable)
        else:
            raise TypeError(f"expected iterable, got {iterable!r}")

    def extend_from_slice(self: Self, sequence: Sequence[T], /) -> None:
        if isinstance(sequence, Sequence):
            self._inner.extend(sequence)
        else:
            raise TypeError(f"expected sequence, got {sequence!r}")

    @classmethod
    def from_first_tail(cls: Type[Self], first: T, tail: Iterable[T], /) -> Self:
        inner = [first]
        inner.extend(tail)
        return cls._new_unchecked(inner)

    @classmethod
    def from_init_last(cls: Type[Self], init: Iterable[T], last: T, /) -> Self:
        inner = [*init]
        inner.append(last)
        return cls._new_unchecked(inner)

    def into_boxed_slice(self: Self, /) -> NonEmptySlice[T]:
        return NonEmptySlice._new_unchecked((*self._inner,))

    def into_vec(self: Self, /) -> list[T]:
        return [*self._inner]

    @classmethod
    def one(cls: Type[Self], element: T, /) -> Self:
        return cls._new_unchecked([element])

    def push(self: Self, element: T, /) -> None:
        self.append(element)

    def truncate(self: Self, length: PositiveInt, /) -> None:
        """Keep the first `length` elements. Longer lengths do nothing."""
        if not isinstance(length, PositiveInt):
            raise TypeError(f"truncate expected a PositiveInt, got {length!r}")
        del self._inner[length:]

    @classmethod
    def try_from_list(cls: Type[Self], inner: list[T], /) -> Self:
        """Copy `inner` into a new vector, raising `EmptyError` if it is empty."""
        if not isinstance(inner, list):
            raise TypeError(f"{cls.__name__}.try_from_list expected a list, got {inner!r}")
        elif len(inner) == 0:
            raise EmptyError("empty vec")
        return cls._new_unchecked([*inner])

    @classmethod
    def with_capacity(cls: Type[Self], element: T, capacity: int, /) -> Self:
        # Lists over-allocate on growth; the capacity is only validated.
        if operator.index(capacity) < 0:
            raise ValueError(f"capacity must not be negative, got {capacity!r}")
        return cls._new_unchecked([element])

