from __future__ import annotations
from collections.abc import MutableSequence
from typing import Generic, Type, TypeVar

from invariant_collections._src.errors import EmptyError
from .mutable_sequence import NonEmptyMutableSequence

__all__ = ["NonEmptySliceMut"]

T = TypeVar("T")

Self = TypeVar("Self", bound="NonEmptySliceMut")


class NonEmptySliceMut(NonEmptyMutableSequence[T], Generic[T]):
    """
    An exclusive, writable view over a non-empty mutable sequence.

    Elements may be replaced and reordered, but the view offers nothing
    that changes the length of the sequence it borrows.
    """
    _inner: MutableSequence[T]

    __slots__ = ()

    def __init__(self: Self, sequence: MutableSequence[T], /) -> None:
        if not isinstance(sequence, MutableSequence):
            raise TypeError(f"{type(self).__name__} expected a mutable sequence, got {sequence!r}")
        elif len(sequence) == 0:
            raise EmptyError("empty slice")
        self._inner = sequence

    @classmethod
    def _new_unchecked(cls: Type[Self], sequence: MutableSequence[T], /) -> Self:
        assert len(sequence) > 0
        self = cls.__new__(cls)
        self._inner = sequence
        return self

    @classmethod
    def try_from_slice_mut(cls: Type[Self], sequence: MutableSequence[T], /) -> Self:
        return cls(sequence)
