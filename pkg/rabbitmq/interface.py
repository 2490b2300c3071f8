"""Interface of the notification queue consumer."""

from typing import Awaitable, Callable, Protocol, runtime_checkable

from aio_pika import IncomingMessage

# Called once per delivery; it owns the ack / requeue of the message
MessageHandler = Callable[[IncomingMessage], Awaitable[None]]


@runtime_checkable
class IMessageConsumer(Protocol):
    """Queue-bound consumer.

    connect() declares the queue (and its exchange binding), consume() then
    dispatches deliveries until close() is called.
    """

    async def connect(self) -> None: ...

    async def consume(self, message_handler: MessageHandler) -> None: ...

    async def close(self) -> None: ...

    def is_connected(self) -> bool: ...


__all__ = ["IMessageConsumer", "MessageHandler"]
