"""
Image Ingestion API - Main entry point.
Loads config, initializes storage adapters and use cases, and starts the FastAPI service.
"""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI  # type: ignore

from pkg.logger.logger import Logger, LoggerConfig
from pkg.postgre.postgres import PostgresDatabase
from pkg.postgre.type import PostgresConfig
from pkg.minio.minio import MinioAdapter
from pkg.minio.type import MinIOConfig as MinioPkgConfig
from pkg.pillow.pillow import ImageTransformer
from pkg.pillow.type import TransformConfig
from config.config import load_config, Config
from internal.api.main import create_app as create_internal_app
from internal.model import new_tables
from internal.builder import NewMetadataBuilderUseCase
from internal.content_metadata.repository import New as NewContentMetadataRepository
from internal.user_analytics.repository import New as NewUserAnalyticsRepository
from internal.ingestion import NewIngestionUseCase, Config as IngestionConfig
from internal.analytics import NewAnalyticsUseCase, Config as AnalyticsConfig


config: Config = load_config()

logger = Logger(
    LoggerConfig(
        level="DEBUG" if config.logging.debug else config.logging.level,
        serialize=config.logging.serialize,
        service_name=config.logging.service_name,
    )
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown.
    Open PostgreSQL and MinIO once and share them across requests. The engine
    is disposed even when startup fails after it was created.
    """
    logger.info(f"========== Starting {config.logging.service_name} API service ==========")
    logger.info(f"API: {config.api.host}:{config.api.port}")

    db = PostgresDatabase(
        PostgresConfig(
            database_url=config.database.url,
            schema=config.database.schema,
            pool_size=config.database.pool_size,
            max_overflow=config.database.max_overflow,
            pool_timeout=config.database.pool_timeout,
            command_timeout=config.database.command_timeout,
        )
    )
    try:
        if not await db.health_check():
            logger.warning("PostgreSQL is not reachable yet, /health/detailed will report it")

        storage = MinioAdapter(
            MinioPkgConfig(
                endpoint=config.minio.endpoint,
                access_key=config.minio.access_key,
                secret_key=config.minio.secret_key,
                secure=config.minio.secure,
                region=config.minio.region,
                connect_timeout=config.minio.connect_timeout,
                read_timeout=config.minio.read_timeout,
                max_retries=config.minio.max_retries,
            )
        )
        if config.storage.create_buckets:
            await asyncio.to_thread(storage.ensure_bucket, config.storage.processed_bucket)

        app.state.db = db
        app.state.storage = storage
        _wire_usecases(app, db, storage)
        logger.info(f"========== {config.logging.service_name} API service started successfully ==========")

        yield
    finally:
        logger.info("========== Shutting down API service ==========")
        app.state.ingestion_usecase = None
        app.state.analytics_usecase = None
        await db.close()
        logger.info("========== API service stopped successfully ==========")


def _wire_usecases(app: FastAPI, db: PostgresDatabase, storage: MinioAdapter) -> None:
    tables = new_tables(
        content_table=config.table.content_metadata,
        user_table=config.table.user_analytics,
        schema=config.database.schema,
    )
    content_repository = NewContentMetadataRepository(
        db=db, table=tables.content_metadata, logger=logger
    )
    user_repository = NewUserAnalyticsRepository(db=db, table=tables.user_analytics, logger=logger)

    app.state.ingestion_usecase = NewIngestionUseCase(
        config=IngestionConfig(
            processed_bucket=config.storage.processed_bucket,
            accepted_extensions=tuple(config.ingestion.accepted_extensions),
            default_user_id=config.ingestion.default_user_id,
            skip_duplicates=config.ingestion.skip_duplicates,
        ),
        storage=storage,
        transformer=ImageTransformer(
            TransformConfig(
                max_width=config.transform.max_width,
                max_height=config.transform.max_height,
                quality=config.transform.quality,
                output_format=config.transform.output_format,
            )
        ),
        builder=NewMetadataBuilderUseCase(logger=logger),
        content_repository=content_repository,
        user_repository=user_repository,
        logger=logger,
    )
    app.state.analytics_usecase = NewAnalyticsUseCase(
        config=AnalyticsConfig(
            default_user_id=config.ingestion.default_user_id,
            global_window=config.analytics.global_window,
            recent_user_items=config.analytics.recent_user_items,
            recent_global_items=config.analytics.recent_global_items,
        ),
        content_repository=content_repository,
        user_repository=user_repository,
        logger=logger,
    )


def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    return create_internal_app(
        lifespan=lifespan,
        logger=logger,
        cors_origins=config.api.cors_origins,
        root_path=config.api.root_path,
    )


app = create_app()


def run():
    """Entry point for console script."""
    import uvicorn  # type: ignore

    logger.info("========== Starting Uvicorn Server ==========")
    logger.info(f"Host: {config.api.host}")
    logger.info(f"Port: {config.api.port}")
    logger.info(f"Reload: {config.api.reload}")

    # Use string path when reload=True
    uvicorn.run(
        "commands.api.main:app" if config.api.reload else app,
        host=config.api.host,
        port=config.api.port,
        reload=config.api.reload,
        log_level="info",
    )


# Run with: python -m commands.api.main
if __name__ == "__main__":
    run()
