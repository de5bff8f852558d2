import operator
from typing import Optional, SupportsIndex, Type, TypeVar

__all__ = ["PositiveInt"]

Self = TypeVar("Self", bound="PositiveInt")


class PositiveInt(int):
    """
    An integer that is at least 1.

    Parameters annotated with `PositiveInt` cannot be given zero, which
    lets length-reducing operations keep at least one element without
    checking the length themselves.
    """

    __slots__ = ()

    def __new__(cls: Type[Self], value: SupportsIndex, /) -> Self:
        try:
            value = operator.index(value)
        except TypeError:
            raise TypeError(f"{cls.__name__} expected an integer, got {value!r}") from None
        if value < 1:
            raise ValueError(f"{cls.__name__} expected an integer of at least 1, got {value!r}")
        return super().__new__(cls, value)

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}({int(self)!r})"

    @classmethod
    def new(cls: Type[Self], value: SupportsIndex, /) -> Optional[Self]:
        if operator.index(value) < 1:
            return None
        return cls(value)
