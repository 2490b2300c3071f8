from __future__ import annotations

import asyncio
from typing import Optional

import aio_pika
from aio_pika.abc import AbstractQueue, AbstractRobustChannel, AbstractRobustConnection
from loguru import logger

from .interface import IMessageConsumer, MessageHandler
from .constant import *
from .type import RabbitMQConfig


class RabbitMQClient(IMessageConsumer):
    """RabbitMQ client for robust message consumption.

    Manages the connection lifecycle and the queue the bucket notifications
    land in. The QoS prefetch count bounds how many deliveries are handled
    concurrently.

    Attributes:
        config: RabbitMQ configuration
        connection: Active RabbitMQ connection
        channel: Active RabbitMQ channel
        queue: Declared notification queue
    """

    def __init__(self, config: RabbitMQConfig):
        self.config = config
        self.connection: Optional[AbstractRobustConnection] = None
        self.channel: Optional[AbstractRobustChannel] = None
        self.queue: Optional[AbstractQueue] = None
        self._stopped: Optional[asyncio.Event] = None
        self._consumer_tag: Optional[str] = None

    async def connect(self) -> None:
        """Open a robust connection and declare the notification queue.

        Raises:
            Exception: If the broker is unreachable or a declaration fails
        """
        try:
            self.connection = await aio_pika.connect_robust(
                self.config.url,
                reconnect_interval=self.config.reconnect_interval,
            )
            self.channel = await self.connection.channel()
            await self.channel.set_qos(prefetch_count=self.config.prefetch_count)

            self.queue = await self.channel.declare_queue(
                self.config.queue_name, durable=self.config.durable
            )
            await self._bind_exchange()

        except Exception as e:
            logger.error(f"Failed to connect to RabbitMQ: {e}")
            logger.exception("RabbitMQ connection error details:")
            raise

    async def _bind_exchange(self) -> None:
        # MinIO publishes to an exchange; without one the queue is fed directly
        if not (self.config.exchange_name and self.config.routing_key):
            logger.info(f"Queue {self.config.queue_name} declared without exchange binding")
            return

        exchange = await self.channel.declare_exchange(
            self.config.exchange_name,
            aio_pika.ExchangeType(self.config.exchange_type),
            durable=self.config.durable,
        )
        await self.queue.bind(exchange, routing_key=self.config.routing_key)
        logger.info(
            f"Queue {self.config.queue_name} bound to "
            f"{self.config.exchange_name} ({self.config.routing_key})"
        )

    async def close(self) -> None:
        """Stop consuming, then close the channel and connection.

        Deliveries already handed to the handler finish on their own; the
        broker requeues anything left unacked when the channel closes.
        """
        logger.info("Closing RabbitMQ connection...")
        if self._stopped is not None:
            self._stopped.set()

        try:
            await self._cancel_consumer()

            if self.channel and not self.channel.is_closed:
                await self.channel.close()
                logger.info("RabbitMQ channel closed")

            if self.connection and not self.connection.is_closed:
                await self.connection.close()
                logger.info("RabbitMQ connection closed")

        except Exception as e:
            logger.error(f"Error closing RabbitMQ connection: {e}")
            logger.exception("RabbitMQ close error details:")

    async def consume(self, message_handler: MessageHandler) -> None:
        """Dispatch deliveries to message_handler until close() or cancellation.

        Args:
            message_handler: Async callable that owns ack / requeue of each message

        Raises:
            RuntimeError: If connect() has not succeeded
        """
        if not self.is_connected() or self.queue is None:
            raise RuntimeError(ERROR_NOT_CONNECTED)

        self._stopped = asyncio.Event()
        self._consumer_tag = await self.queue.consume(message_handler)
        logger.info(
            f"Consumer started on {self.config.queue_name} "
            f"(prefetch={self.config.prefetch_count}), waiting for notifications..."
        )

        try:
            await self._stopped.wait()
        finally:
            await self._cancel_consumer()
            logger.info(f"Consumer on {self.config.queue_name} stopped")

    async def _cancel_consumer(self) -> None:
        tag, self._consumer_tag = self._consumer_tag, None
        if tag is None or self.queue is None or not self.is_connected():
            return
        try:
            await self.queue.cancel(tag)
        except Exception as e:
            logger.warning(f"Failed to cancel consumer {tag}: {e}")

    def is_connected(self) -> bool:
        return (
            self.connection is not None
            and not self.connection.is_closed
            and self.channel is not None
            and not self.channel.is_closed
        )


__all__ = ["RabbitMQClient"]
