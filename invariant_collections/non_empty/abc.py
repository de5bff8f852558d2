from ._src.iter import NonEmptyIterator
from ._src.mutable_sequence import NonEmptyMutableSequence
from ._src.sequence import NonEmptySequence

__all__ = [
    "NonEmptyIterator",
    "NonEmptyMutableSequence",
    "NonEmptySequence",
]
