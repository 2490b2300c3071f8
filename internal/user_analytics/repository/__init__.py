from .interface import IUserAnalyticsRepository
from .new import New
from .option import IncrementUploadOptions
from .errors import (
    RepositoryError,
    ErrFailedToGet,
    ErrFailedToUpsert,
    ErrInvalidData,
)

__all__ = [
    "IUserAnalyticsRepository",
    "New",
    "IncrementUploadOptions",
    "RepositoryError",
    "ErrFailedToGet",
    "ErrFailedToUpsert",
    "ErrInvalidData",
]
