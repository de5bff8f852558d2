from . import abc
from ._src.slice import SortedSlice
from ._src.vec import SortedVec

__all__ = ["SortedSlice", "SortedVec"]
