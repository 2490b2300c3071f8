"""Analytics Domain.

Aggregates per-user and global upload statistics from stored records.
"""

from .interface import IAnalyticsUseCase
from .type import (
    Config,
    QueryInput,
    UserStats,
    UserContent,
    GlobalStats,
    AnalyticsResult,
)
from .errors import QueryError

from .usecase.new import New as NewAnalyticsUseCase

__all__ = [
    "IAnalyticsUseCase",
    "Config",
    "QueryInput",
    "UserStats",
    "UserContent",
    "GlobalStats",
    "AnalyticsResult",
    "QueryError",
    "NewAnalyticsUseCase",
]
