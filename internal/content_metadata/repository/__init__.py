from .interface import IContentMetadataRepository
from .new import New
from .option import (
    CreateOptions,
    ListByUserOptions,
    ListRecentOptions,
    FindBySourceOptions,
)
from .errors import (
    RepositoryError,
    ErrFailedToCreate,
    ErrFailedToGet,
    ErrInvalidData,
)

__all__ = [
    "IContentMetadataRepository",
    "New",
    "CreateOptions",
    "ListByUserOptions",
    "ListRecentOptions",
    "FindBySourceOptions",
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
    "ErrInvalidData",
]
