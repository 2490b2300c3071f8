from dataclasses import dataclass

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from pkg.minio.minio import MinioAdapter
from pkg.pillow.pillow import ImageTransformer
from internal.model.base import Tables
from config.config import Config


@dataclass
class Dependencies:
    """Infrastructure built once by the consumer entry point.

    The registry turns these into repositories, use cases and the queue
    handler; nothing here knows about the ingestion domain.
    """

    logger: Logger
    db: PostgresDatabase
    minio: MinioAdapter
    transformer: ImageTransformer
    tables: Tables
    config: Config


__all__ = ["Dependencies"]
