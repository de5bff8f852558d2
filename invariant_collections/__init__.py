"""
Sequences which carry a structural invariant with them: non-empty
sequences which always hold at least one element, and sorted sequences
which are strictly ascending without duplicates. Any code receiving one
of these containers can rely on the invariant without checking it again.

Plain sequences enter through validating constructors, which raise
`EmptyError` when a non-empty container would be empty. Every other
operation is total.
"""
from . import non_empty, sorted
from ._src.errors import EmptyError
from ._src.positive_int import PositiveInt
from ._src.slice_view import SliceView
from .non_empty import (
    NonEmptyIter,
    NonEmptyMap,
    NonEmptySlice,
    NonEmptySliceMut,
    NonEmptyVec,
    non_empty_vec,
)
from .sorted import SortedSlice, SortedVec

__version__ = "0.1.0"

__all__ = [
    "EmptyError",
    "NonEmptyIter",
    "NonEmptyMap",
    "NonEmptySlice",
    "NonEmptySliceMut",
    "NonEmptyVec",
    "PositiveInt",
    "SliceView",
    "SortedSlice",
    "SortedVec",
    "non_empty_vec",
]
