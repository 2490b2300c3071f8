"""Module-specific errors for the analytics domain."""

from internal.model.constant import ErrorKind


class QueryError(Exception):
    """Raised when a read needed by the aggregation fails.

    Attributes:
        kind: ErrorKind of the underlying failure
        component: Store that failed
    """

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.UNKNOWN, component: str = ""):
        super().__init__(message)
        self.kind = kind
        self.component = component


__all__ = [
    "QueryError",
]
