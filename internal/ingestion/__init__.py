from .interface import IIngestionUseCase, IIngestionHandler
from .type import Config, Notification, ItemResult, BatchResult
from .constant import Outcome
from .errors import (
    ErrIngestion,
    FetchError,
    TransformError,
    StoreError,
    ErrInvalidNotification,
)
from .usecase.new import New as NewIngestionUseCase

__all__ = [
    "IIngestionUseCase",
    "IIngestionHandler",
    "Config",
    "Notification",
    "ItemResult",
    "BatchResult",
    "Outcome",
    "ErrIngestion",
    "FetchError",
    "TransformError",
    "StoreError",
    "ErrInvalidNotification",
    "NewIngestionUseCase",
]
