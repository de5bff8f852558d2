from ._src.sequence import SortedSequence

__all__ = ["SortedSequence"]
