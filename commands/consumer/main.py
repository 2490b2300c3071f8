"""
Image Ingestion Consumer - Main entry point.
Loads config, initializes storage adapters and RabbitMQ, starts the consumer service.
"""

import asyncio
import signal

from pkg.logger.logger import Logger, LoggerConfig
from pkg.postgre.postgres import PostgresDatabase
from pkg.postgre.type import PostgresConfig
from pkg.minio.minio import MinioAdapter
from pkg.minio.type import MinIOConfig as MinioPkgConfig
from pkg.pillow.pillow import ImageTransformer
from pkg.pillow.type import TransformConfig
from config.config import load_config, Config
from internal.consumer import ConsumerServer, Dependencies
from internal.model import new_tables


async def init_dependencies(config: Config) -> Dependencies:
    """Initialize all service dependencies.

    Args:
        config: Application configuration

    Returns:
        Dependencies struct with all initialized instances
    """
    # Initialize logger
    logger = Logger(
        LoggerConfig(
            level="DEBUG" if config.logging.debug else config.logging.level,
            serialize=config.logging.serialize,
            service_name=config.logging.service_name,
        )
    )
    logger.info("Logger initialized")

    # Initialize PostgreSQL database
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
    if not await db.health_check():
        raise RuntimeError("PostgreSQL health check failed")
    logger.info("PostgreSQL connection verified")

    # Initialize MinIO
    minio = MinioAdapter(
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
        await asyncio.to_thread(minio.ensure_bucket, config.storage.processed_bucket)
    logger.info("MinIO storage initialized")

    # Initialize image transformer
    transformer = ImageTransformer(
        TransformConfig(
            max_width=config.transform.max_width,
            max_height=config.transform.max_height,
            quality=config.transform.quality,
            output_format=config.transform.output_format,
        )
    )
    logger.info("Image transformer initialized")

    tables = new_tables(
        content_table=config.table.content_metadata,
        user_table=config.table.user_analytics,
        schema=config.database.schema,
    )

    return Dependencies(
        logger=logger,
        db=db,
        minio=minio,
        transformer=transformer,
        tables=tables,
        config=config,
    )


async def main():
    """Main entry point for the ingestion consumer service."""
    deps = None
    server = None
    logger = None

    try:
        # Load configuration
        app_config = load_config()

        # Initialize all dependencies
        deps = await init_dependencies(app_config)
        logger = deps.logger

        server = ConsumerServer(deps)

        # Setup signal handlers for graceful shutdown
        loop = asyncio.get_running_loop()

        def signal_handler(sig):
            """Handle shutdown signals."""
            logger.info(f"Received signal {sig}, shutting down gracefully...")
            if server:
                asyncio.create_task(server.shutdown())

        for sig in (signal.SIGTERM, signal.SIGINT):
            loop.add_signal_handler(sig, lambda s=sig: signal_handler(s))

        # Start server
        await server.start()

    except KeyboardInterrupt:
        if logger:
            logger.info("Shutdown requested by user")
    except Exception as e:
        if logger:
            logger.error(f"Failed to start consumer: {e}")
            logger.exception("Consumer startup error:")
        else:
            raise
    finally:
        if server:
            await server.shutdown()
        if deps:
            deps.logger.info("Cleaning up dependencies...")
            await deps.db.close()


def run():
    """Entry point for console script."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nShutdown complete")


if __name__ == "__main__":
    run()
