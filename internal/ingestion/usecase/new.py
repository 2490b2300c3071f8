"""Factory function for creating the ingestion pipeline."""

from typing import Optional

from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from pkg.pillow.interface import IImageTransformer
from internal.builder.interface import IMetadataBuilderUseCase
from internal.content_metadata.repository.interface import IContentMetadataRepository
from internal.user_analytics.repository.interface import IUserAnalyticsRepository
from ..type import Config
from .usecase import IngestionUseCase


def New(
    config: Config,
    storage: IObjectStorage,
    transformer: IImageTransformer,
    builder: IMetadataBuilderUseCase,
    content_repository: IContentMetadataRepository,
    user_repository: IUserAnalyticsRepository,
    logger: Optional[Logger] = None,
) -> IngestionUseCase:
    """Create a new ingestion pipeline instance.

    Raises:
        ValueError: If config is invalid
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    return IngestionUseCase(
        config=config,
        storage=storage,
        transformer=transformer,
        builder=builder,
        content_repository=content_repository,
        user_repository=user_repository,
        logger=logger,
    )


__all__ = ["New"]
