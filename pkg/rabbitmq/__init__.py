from .type import RabbitMQConfig
from .interface import IMessageConsumer
from .consumer import RabbitMQClient

__all__ = [
    "IMessageConsumer",
    "RabbitMQClient",
    "RabbitMQConfig",
]
