import asyncio
from typing import Optional

from pkg.rabbitmq.consumer import RabbitMQClient
from pkg.rabbitmq.type import RabbitMQConfig as RabbitMQClientConfig

from .interface import IConsumerServer
from .registry import ConsumerRegistry, DomainServices
from .type import Dependencies


class ConsumerServer(IConsumerServer):
    """Runs the ingestion pipeline against the bucket notification queue.

    start() wires the domain services through the registry and then blocks
    on a single consumer task. The broker's prefetch count, not this class,
    bounds how many notifications are in flight.
    """

    def __init__(self, deps: Dependencies, consumer: Optional[RabbitMQClient] = None):
        self.deps = deps
        self.logger = deps.logger
        self.consumer = consumer
        self.consumer_task: Optional[asyncio.Task] = None
        self.registry: Optional[ConsumerRegistry] = None
        self.domain_services: Optional[DomainServices] = None
        self._running = False

    def _build_consumer(self) -> RabbitMQClient:
        rabbitmq = self.deps.config.rabbitmq
        return RabbitMQClient(
            RabbitMQClientConfig(
                url=rabbitmq.url,
                queue_name=rabbitmq.queue.name,
                exchange_name=rabbitmq.queue.exchange,
                exchange_type=rabbitmq.queue.exchange_type,
                routing_key=rabbitmq.queue.routing_key,
                prefetch_count=rabbitmq.queue.prefetch_count,
                reconnect_interval=rabbitmq.reconnect_interval,
            )
        )

    async def start(self) -> None:
        """Wire the services and consume until shutdown() or cancellation.

        Raises:
            Exception: If wiring or the broker connection fails
        """
        queue_config = self.deps.config.rabbitmq.queue
        try:
            self.registry = ConsumerRegistry(self.deps)
            self.domain_services = self.registry.initialize()
            self.logger.info("Domain services initialized via registry")

            if not queue_config.enabled:
                self.logger.warning(
                    f"Queue '{queue_config.name}' is disabled, server will not consume messages"
                )
                return

            if self.consumer is None:
                self.consumer = self._build_consumer()
            await self.consumer.connect()

        except Exception as e:
            self.logger.error(f"Failed to start consumer server: {e}")
            self.logger.exception("Server start error:")
            raise

        self.logger.info(
            f"Consuming '{queue_config.name}' "
            f"(exchange: {queue_config.exchange}, routing_key: {queue_config.routing_key})"
        )
        self._running = True
        self.consumer_task = asyncio.create_task(
            self.consumer.consume(self.domain_services.ingestion_handler.handle),
            name=f"consumer-{queue_config.name}",
        )
        await asyncio.gather(self.consumer_task, return_exceptions=True)

    async def _stop_consumer(self) -> None:
        if self.consumer_task is not None and not self.consumer_task.done():
            self.consumer_task.cancel()
            await asyncio.gather(self.consumer_task, return_exceptions=True)
        if self.consumer is not None:
            await self.consumer.close()

    async def shutdown(self) -> None:
        """Stop consuming, close the broker connection and drop domain services."""
        if not self._running and self.registry is None:
            return

        self.logger.info("Shutting down consumer server...")
        self._running = False
        try:
            await self._stop_consumer()
        except Exception as e:
            self.logger.exception(f"Error stopping consumer: {e}")
        finally:
            if self.registry is not None:
                self.registry.shutdown()
                self.registry = None
        self.logger.info("Consumer server shutdown complete")

    def is_running(self) -> bool:
        return self._running


__all__ = ["ConsumerServer"]
