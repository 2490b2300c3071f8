"""Module-specific errors for the ingestion domain.

Each error carries the ErrorKind and the component that failed so callers
can react to the kind without parsing messages.
"""

from typing import Optional

from internal.model.constant import ErrorKind
from .constant import (
    COMPONENT_NOTIFICATION,
    COMPONENT_OBJECT_STORE,
    COMPONENT_TRANSFORM,
)


class ErrIngestion(Exception):
    """Base class for per-notification failures."""

    default_component = ""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.UNKNOWN,
        component: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.component = component or self.default_component


class FetchError(ErrIngestion):
    """Raised when the source object cannot be read."""

    default_component = COMPONENT_OBJECT_STORE


class TransformError(ErrIngestion):
    """Raised when the source bytes cannot be turned into an artifact."""

    default_component = COMPONENT_TRANSFORM


class StoreError(ErrIngestion):
    """Raised when writing the artifact, the metadata or the counter fails."""

    default_component = COMPONENT_OBJECT_STORE


class ErrInvalidNotification(ErrIngestion):
    """Raised when a notification record lacks bucket or key."""

    default_component = COMPONENT_NOTIFICATION

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.INVALID_NOTIFICATION)


__all__ = [
    "ErrIngestion",
    "FetchError",
    "TransformError",
    "StoreError",
    "ErrInvalidNotification",
]
