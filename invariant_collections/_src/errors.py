__all__ = ["EmptyError"]


class EmptyError(ValueError):
    """
    Raised when a non-empty container is constructed from zero elements.

    This is the only recoverable error of the library. It is raised at
    the boundary where untrusted input is converted, after which every
    operation on the resulting container is total.
    """

    __slots__ = ()

    def __init__(self, message: str = "empty", /) -> None:
        super().__init__(message)
