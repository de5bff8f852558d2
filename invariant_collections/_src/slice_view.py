from __future__ import annotations
from collections.abc import Iterator, Sequence
from typing import Any, Final, Generic, TypeVar, overload

__all__ = ["SliceView"]

T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="SliceView")

reprs_seen: set[int] = {0} - {0}


class SliceView(Sequence[T_co], Generic[T_co]):
    """
    A plain, possibly empty view over part of another sequence.

    Elements are not copied: the view reads through to the backing
    sequence, so it is only valid while the owner is not resized.
    """
    _sequence: Final[Sequence[T_co]]
    _range: Final[range]

    __slots__ = {
        "_sequence":
            "The backing sequence.",
        "_range":
            "The indices of the backing sequence which are viewed.",
    }

    def __init__(self: Self, sequence: Sequence[T_co], range_: range, /) -> None:
        assert isinstance(sequence, Sequence)
        assert isinstance(range_, range)
        self._sequence = sequence
        self._range = range_

    @classmethod
    def of(cls: type[Self], sequence: Sequence[T_co], /) -> SliceView[T_co]:
        return cls(sequence, range(len(sequence)))

    def __eq__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, (SliceView, list, tuple)):
            return NotImplemented
        elif len(self) != len(other):
            return False
        else:
            return all(x is y or x == y for x, y in zip(self, other))

    __hash__ = None  # type: ignore

    @overload
    def __getitem__(self: Self, index: int, /) -> T_co: ...

    @overload
    def __getitem__(self: Self, index: slice, /) -> SliceView[T_co]: ...

    def __getitem__(self, index, /):
        if isinstance(index, slice):
            return type(self)(self._sequence, self._range[index])
        try:
            return self._sequence[self._range[index]]
        except TypeError:
            raise TypeError(f"indices must be integers or slices, not {type(index).__name__}") from None
        except IndexError:
            raise IndexError("index out of range") from None

    def __iter__(self: Self, /) -> Iterator[T_co]:
        return map(self._sequence.__getitem__, self._range)

    def __len__(self: Self, /) -> int:
        return len(self._range)

    def __repr__(self: Self, /) -> str:
        if id(self) in reprs_seen:
            return "[...]"
        reprs_seen.add(id(self))
        try:
            return "[" + ", ".join([repr(x) for x in self]) + "]"
        finally:
            reprs_seen.remove(id(self))

    def __reversed__(self: Self, /) -> Iterator[T_co]:
        return map(self._sequence.__getitem__, reversed(self._range))

    def to_list(self: Self, /) -> list[T_co]:
        return [*self]
