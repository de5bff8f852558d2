from . import abc
from ._src.iter import NonEmptyIter, NonEmptyMap
from ._src.literal import non_empty_vec
from ._src.slice import NonEmptySlice
from ._src.slice_mut import NonEmptySliceMut
from ._src.vec import NonEmptyVec

__all__ = [
    "NonEmptyIter",
    "NonEmptyMap",
    "NonEmptySlice",
    "NonEmptySliceMut",
    "NonEmptyVec",
    "non_empty_vec",
]
