from __future__ import annotations
from collections.abc import Sequence
from typing import Generic, Type, TypeVar

from invariant_collections._src.errors import EmptyError
from .sequence import NonEmptySequence

__all__ = ["NonEmptySlice"]

T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="NonEmptySlice")


class NonEmptySlice(NonEmptySequence[T_co], Generic[T_co]):
    """
    A read-only view over a sequence with at least one element.

    Borrowed views wrap an existing sequence without copying it and are
    valid for as long as the owner keeps at least one element. Boxed
    views own a tuple and are valid indefinitely.

    Usage:
        >>> view = NonEmptySlice.try_from_slice([10, 20, 30])
        >>> view.first(), view.last()
        (10, 30)
        >>> view.tail()
        [20, 30]
    """
    _inner: Sequence[T_co]

    __slots__ = ()

    def __init__(self: Self, sequence: Sequence[T_co], /) -> None:
        if not isinstance(sequence, Sequence):
            raise TypeError(f"{type(self).__name__} expected a sequence, got {sequence!r}")
        elif len(sequence) == 0:
            raise EmptyError("empty slice")
        self._inner = sequence

    @classmethod
    def _new_unchecked(cls: Type[Self], sequence: Sequence[T_co], /) -> Self:
        assert len(sequence) > 0
        self = cls.__new__(cls)
        self._inner = sequence
        return self

    @classmethod
    def try_from_boxed(cls: Type[Self], values: tuple[T_co, ...], /) -> Self:
        """Take ownership of `values`, raising `EmptyError` if it is empty."""
        if not isinstance(values, tuple):
            raise TypeError(f"{cls.__name__}.try_from_boxed expected a tuple, got {values!r}")
        return cls(values)

    @classmethod
    def try_from_slice(cls: Type[Self], sequence: Sequence[T_co], /) -> Self:
        """Borrow `sequence`, raising `EmptyError` if it is empty."""
        return cls(sequence)
