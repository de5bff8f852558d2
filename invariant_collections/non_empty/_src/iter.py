from __future__ import annotations
import operator
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Sequence
from typing import Any, Final, Generic, Optional, Type, TypeVar

import invariant_collections.non_empty._src as src
from invariant_collections._src.errors import EmptyError
from invariant_collections._src.slice_view import SliceView

__all__ = ["NonEmptyIterator", "NonEmptyIter", "NonEmptyMap"]

S = TypeVar("S")
T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="NonEmptyIterator")


class NonEmptyIterator(Iterator[T_co], ABC, Generic[T_co]):
    """
    An iterator which yields at least one item before it is exhausted.

    Only length-preserving transformations are offered, so collecting
    the items back into a `NonEmptyVec` never needs to check for
    emptiness. Transformations which may drop items, such as `filter`,
    return plain iterators instead.
    """

    __slots__ = ()

    @abstractmethod
    def __next__(self: Self, /) -> T_co:
        raise NotImplementedError("__next__ is a required method for non-empty iterators")

    def collect(self: Self, /) -> src.vec.NonEmptyVec[T_co]:
        """
        Collect the remaining items into a `NonEmptyVec`.

        Raises `EmptyError` if the iterator was already exhausted.
        """
        inner = [*self]
        if len(inner) == 0:
            raise EmptyError("iterator already consumed")
        return src.vec.NonEmptyVec._new_unchecked(inner)

    def filter(self: Self, predicate: Optional[Callable[[T_co], Any]], /) -> Iterator[T_co]:
        return filter(predicate, self)

    def map(self: Self, function: Callable[[T_co], S], /) -> NonEmptyMap[T_co, S]:
        return NonEmptyMap(self, function)


class NonEmptyIter(NonEmptyIterator[T_co], Generic[T_co]):
    """Iterates over the elements of a non-empty container in order."""
    _sequence: Final[Sequence[T_co]]
    _index: int
    _stop: Final[int]

    __slots__ = {
        "_sequence":
            "The non-empty sequence being iterated over.",
        "_index":
            "The index of the next element.",
        "_stop":
            "The length of the sequence when iteration began.",
    }

    def __init__(self: Self, *args: Any, **kwargs: Any) -> None:
        raise TypeError(f"{type(self).__name__} instances are created by iterating over a non-empty container")

    def __length_hint__(self: Self, /) -> int:
        return max(self._end() - self._index, 0)

    def __next__(self: Self, /) -> T_co:
        i = self._index
        if i >= self._end():
            raise StopIteration
        self._index = i + 1
        return self._sequence[i]

    @classmethod
    def _new_unchecked(cls: Type[Self], sequence: Sequence[T_co], /) -> Self:
        assert len(sequence) > 0
        self = cls.__new__(cls)
        self._sequence = sequence
        self._index = 0
        self._stop = len(sequence)
        return self

    def _end(self: Self, /) -> int:
        # Stop early if the owner shrank since iteration began.
        return min(self._stop, len(self._sequence))

    def as_slice(self: Self, /) -> SliceView[T_co]:
        """The items which have not been yielded yet."""
        return SliceView(self._sequence, range(self._index, max(self._index, self._end())))


class NonEmptyMap(NonEmptyIterator[T_co], Generic[S, T_co]):
    """Lazily applies a function to every item of a non-empty iterator."""
    _iterator: Final[NonEmptyIterator[S]]
    _function: Final[Callable[[S], T_co]]

    __slots__ = {
        "_iterator":
            "The non-empty iterator being mapped over.",
        "_function":
            "The function applied to every item.",
    }

    def __init__(self: Self, iterator: NonEmptyIterator[S], function: Callable[[S], T_co], /) -> None:
        if not isinstance(iterator, NonEmptyIterator):
            raise TypeError(f"{type(self).__name__} expected a non-empty iterator, got {iterator!r}")
        elif not callable(function):
            raise TypeError(f"{type(self).__name__} expected a callable, got {function!r}")
        self._iterator = iterator
        self._function = function

    def __length_hint__(self: Self, /) -> int:
        return operator.length_hint(self._iterator)

    def __next__(self: Self, /) -> T_co:
        return self._function(next(self._iterator))
