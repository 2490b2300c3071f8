from dataclasses import dataclass
from typing import Optional

from .constant import *


@dataclass
class RabbitMQConfig:
    """RabbitMQ connection configuration.

    The queue is bound to exchange_name when both exchange_name and
    routing_key are set. MinIO's AMQP notification target publishes
    bucket events to that exchange.
    """

    url: str
    queue_name: str = DEFAULT_QUEUE_NAME
    prefetch_count: int = DEFAULT_PREFETCH_COUNT
    exchange_name: Optional[str] = None
    exchange_type: str = EXCHANGE_TYPE_TOPIC
    routing_key: Optional[str] = None
    durable: bool = DEFAULT_DURABLE
    reconnect_interval: float = DEFAULT_RECONNECT_INTERVAL

    def __post_init__(self):
        """Validate configuration."""
        if not self.url or not self.url.strip():
            raise ValueError(ERROR_URL_EMPTY)

        if not self.queue_name or not self.queue_name.strip():
            raise ValueError(ERROR_QUEUE_NAME_EMPTY)

        if self.prefetch_count <= 0:
            raise ValueError(
                ERROR_PREFETCH_COUNT_POSITIVE.format(count=self.prefetch_count)
            )

        self.exchange_type = self.exchange_type.lower()
        if self.exchange_type not in EXCHANGE_TYPES:
            raise ValueError(
                ERROR_EXCHANGE_TYPE_INVALID.format(
                    types=EXCHANGE_TYPES, value=self.exchange_type
                )
            )


__all__ = ["RabbitMQConfig"]
