from dataclasses import dataclass
from typing import Optional

from internal.consumer.type import Dependencies
from internal.builder import NewMetadataBuilderUseCase
from internal.content_metadata.repository import New as NewContentMetadataRepository
from internal.user_analytics.repository import New as NewUserAnalyticsRepository
from internal.ingestion import (
    NewIngestionUseCase,
    Config as IngestionConfig,
    IIngestionUseCase,
)
from internal.ingestion.delivery.rabbitmq.consumer import (
    New as NewIngestionHandler,
    IngestionHandler,
)


@dataclass
class DomainServices:
    ingestion_usecase: IIngestionUseCase
    ingestion_handler: IngestionHandler


class ConsumerRegistry:
    def __init__(self, deps: Dependencies):
        self.deps = deps
        self.logger = deps.logger
        self.config = deps.config
        self._services: Optional[DomainServices] = None

    def initialize(self) -> DomainServices:
        if self._services is not None:
            self.logger.debug("Returning cached services")
            return self._services

        try:
            content_repository = NewContentMetadataRepository(
                db=self.deps.db,
                table=self.deps.tables.content_metadata,
                logger=self.logger,
            )
            self.logger.info(
                f"ContentMetadataRepository initialized (table: {self.config.table.content_metadata})"
            )

            user_repository = NewUserAnalyticsRepository(
                db=self.deps.db,
                table=self.deps.tables.user_analytics,
                logger=self.logger,
            )
            self.logger.info(
                f"UserAnalyticsRepository initialized (table: {self.config.table.user_analytics})"
            )

            builder = NewMetadataBuilderUseCase(logger=self.logger)
            self.logger.info("Metadata Builder initialized")

            ingestion_usecase = NewIngestionUseCase(
                config=IngestionConfig(
                    processed_bucket=self.config.storage.processed_bucket,
                    accepted_extensions=tuple(self.config.ingestion.accepted_extensions),
                    default_user_id=self.config.ingestion.default_user_id,
                    skip_duplicates=self.config.ingestion.skip_duplicates,
                ),
                storage=self.deps.minio,
                transformer=self.deps.transformer,
                builder=builder,
                content_repository=content_repository,
                user_repository=user_repository,
                logger=self.logger,
            )
            self.logger.info("Ingestion Use case initialized")

            ingestion_handler = NewIngestionHandler(
                usecase=ingestion_usecase,
                logger=self.logger,
            )
            self.logger.info("Ingestion Handler initialized")

            self._services = DomainServices(
                ingestion_usecase=ingestion_usecase,
                ingestion_handler=ingestion_handler,
            )
            return self._services

        except Exception as e:
            self.logger.error(f"Failed to initialize domain services: {type(e).__name__}: {e}")
            raise

    def get_services(self) -> DomainServices:
        if self._services is None:
            raise RuntimeError(
                "Domain services not initialized. Call initialize() first."
            )
        return self._services

    def shutdown(self) -> None:
        self.logger.info("Shutting down domain services...")
        self._services = None
        self.logger.info("Domain services shutdown complete")


__all__ = ["ConsumerRegistry", "DomainServices"]
