"""Factory function for creating the analytics query."""

from typing import Optional

from pkg.logger.logger import Logger
from internal.content_metadata.repository.interface import IContentMetadataRepository
from internal.user_analytics.repository.interface import IUserAnalyticsRepository
from ..type import Config
from .usecase import AnalyticsUseCase


def New(
    config: Config,
    content_repository: IContentMetadataRepository,
    user_repository: IUserAnalyticsRepository,
    logger: Optional[Logger] = None,
) -> AnalyticsUseCase:
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    return AnalyticsUseCase(
        config=config,
        content_repository=content_repository,
        user_repository=user_repository,
        logger=logger,
    )


__all__ = ["New"]
