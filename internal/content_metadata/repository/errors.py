from pkg.postgre.constant import DatabaseErrorKind


class RepositoryError(Exception):
    """Base repository error.

    Attributes:
        kind: DatabaseErrorKind classifying the underlying failure
    """

    def __init__(self, *args, kind: DatabaseErrorKind = DatabaseErrorKind.UNKNOWN):
        super().__init__(*args)
        self.kind = kind


class ErrFailedToCreate(RepositoryError):
    pass


class ErrFailedToGet(RepositoryError):
    pass


class ErrInvalidData(RepositoryError):
    pass


__all__ = [
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
    "ErrInvalidData",
]
