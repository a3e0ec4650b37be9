"""Errors raised by the clustering engine."""


class ConvergenceError(RuntimeError):
    """Raised when an empty cluster cannot be refilled.

    Recovery needs a donor cluster with at least two members; when every
    non-empty cluster is a singleton there is nothing to move.
    """

    def __init__(self, message: str = "empty cluster in k-means: no cluster has a point to spare"):
        super().__init__(message)
