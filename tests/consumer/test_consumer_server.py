"""Tests for the consumer registry, server and RabbitMQ client."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest  # type: ignore

from config.config import Config
from pkg.pillow.pillow import ImageTransformer
from pkg.rabbitmq.consumer import RabbitMQClient
from pkg.rabbitmq.type import RabbitMQConfig
from internal.consumer import ConsumerRegistry, ConsumerServer, Dependencies
from internal.ingestion.delivery.rabbitmq.consumer import IngestionHandler
from internal.ingestion.usecase.usecase import IngestionUseCase
from internal.model import new_tables
from support import FakeObjectStorage


@pytest.fixture
def deps():
    return Dependencies(
        logger=MagicMock(),
        db=MagicMock(),
        minio=FakeObjectStorage(),
        transformer=ImageTransformer(),
        tables=new_tables(),
        config=Config(),
    )


def _consumer():
    consumer = MagicMock()
    consumer.connect = AsyncMock()
    consumer.consume = AsyncMock()
    consumer.close = AsyncMock()
    return consumer


class TestConsumerRegistry:
    def test_wires_pipeline(self, deps):
        services = ConsumerRegistry(deps).initialize()

        assert isinstance(services.ingestion_usecase, IngestionUseCase)
        assert isinstance(services.ingestion_handler, IngestionHandler)
        assert services.ingestion_handler.usecase is services.ingestion_usecase
        assert services.ingestion_usecase.storage is deps.minio
        assert services.ingestion_usecase.config.processed_bucket == "processed-content-bucket"
        assert services.ingestion_usecase.config.accepted_extensions == (".jpg", ".jpeg")

    def test_uses_configured_tables(self, deps):
        deps.tables = new_tables("items", "counters")

        usecase = ConsumerRegistry(deps).initialize().ingestion_usecase

        assert usecase.content_repository.table.name == "items"
        assert usecase.user_repository.table.name == "counters"

    def test_initialize_is_cached(self, deps):
        registry = ConsumerRegistry(deps)

        assert registry.initialize() is registry.initialize()

    def test_get_services_before_initialize(self, deps):
        with pytest.raises(RuntimeError):
            ConsumerRegistry(deps).get_services()

    def test_shutdown_drops_services(self, deps):
        registry = ConsumerRegistry(deps)
        registry.initialize()

        registry.shutdown()

        with pytest.raises(RuntimeError):
            registry.get_services()


class TestConsumerServer:
    async def test_start_consumes_with_handler(self, deps):
        consumer = _consumer()
        server = ConsumerServer(deps, consumer=consumer)

        await server.start()

        consumer.connect.assert_awaited_once()
        handler = consumer.consume.await_args.args[0]
        assert handler == server.domain_services.ingestion_handler.handle
        assert server.is_running()

        await server.shutdown()

        consumer.close.assert_awaited_once()
        assert not server.is_running()
        assert server.registry is None

    async def test_disabled_queue_does_not_connect(self, deps):
        deps.config.rabbitmq.queue.enabled = False
        consumer = _consumer()
        server = ConsumerServer(deps, consumer=consumer)

        await server.start()

        consumer.connect.assert_not_called()
        assert not server.is_running()
        assert server.domain_services is not None

    async def test_connect_failure_propagates(self, deps):
        consumer = _consumer()
        consumer.connect.side_effect = ConnectionError("refused")

        with pytest.raises(ConnectionError):
            await ConsumerServer(deps, consumer=consumer).start()

    async def test_shutdown_cancels_running_consumer(self, deps):
        consumer = _consumer()

        async def forever(handler):
            await asyncio.Event().wait()

        consumer.consume.side_effect = forever
        server = ConsumerServer(deps, consumer=consumer)

        start = asyncio.create_task(server.start())
        while server.consumer_task is None:
            await asyncio.sleep(0)

        await server.shutdown()
        await start

        assert server.consumer_task.cancelled()
        consumer.close.assert_awaited_once()

    async def test_shutdown_before_start_is_noop(self, deps):
        await ConsumerServer(deps, consumer=_consumer()).shutdown()


def _broker():
    queue = MagicMock()
    queue.bind = AsyncMock()
    queue.consume = AsyncMock(return_value="ctag-1")
    queue.cancel = AsyncMock()
    channel = MagicMock(is_closed=False)
    channel.set_qos = AsyncMock()
    channel.declare_queue = AsyncMock(return_value=queue)
    channel.declare_exchange = AsyncMock(return_value=MagicMock())
    channel.close = AsyncMock()
    connection = MagicMock(is_closed=False)
    connection.channel = AsyncMock(return_value=channel)
    connection.close = AsyncMock()
    return connection, channel, queue


class TestRabbitMQClient:
    def test_config_validation(self):
        with pytest.raises(ValueError):
            RabbitMQConfig(url="amqp://localhost", prefetch_count=0)
        with pytest.raises(ValueError):
            RabbitMQConfig(url="amqp://localhost", exchange_type="bogus")

    async def test_connect_declares_and_binds(self):
        channel = MagicMock()
        channel.set_qos = AsyncMock()
        queue = MagicMock()
        queue.bind = AsyncMock()
        channel.declare_queue = AsyncMock(return_value=queue)
        exchange = MagicMock()
        channel.declare_exchange = AsyncMock(return_value=exchange)
        connection = MagicMock()
        connection.channel = AsyncMock(return_value=channel)

        config = RabbitMQConfig(
            url="amqp://localhost",
            queue_name="image_ingest_queue",
            exchange_name="bucketevents",
            routing_key="bucketlogs",
            prefetch_count=4,
        )
        with patch("pkg.rabbitmq.consumer.aio_pika.connect_robust", AsyncMock(return_value=connection)):
            client = RabbitMQClient(config)
            await client.connect()

        channel.set_qos.assert_awaited_once_with(prefetch_count=4)
        channel.declare_queue.assert_awaited_once_with("image_ingest_queue", durable=True)
        queue.bind.assert_awaited_once_with(exchange, routing_key="bucketlogs")

    async def test_consume_requires_connection(self):
        client = RabbitMQClient(RabbitMQConfig(url="amqp://localhost"))

        with pytest.raises(RuntimeError):
            await client.consume(AsyncMock())

    async def test_without_exchange_skips_binding(self):
        connection, channel, queue = _broker()

        with patch("pkg.rabbitmq.consumer.aio_pika.connect_robust", AsyncMock(return_value=connection)):
            client = RabbitMQClient(RabbitMQConfig(url="amqp://localhost"))
            await client.connect()

        channel.declare_exchange.assert_not_called()
        queue.bind.assert_not_called()
        assert client.is_connected()

    async def test_consume_until_closed(self):
        connection, channel, queue = _broker()
        handler = AsyncMock()

        with patch("pkg.rabbitmq.consumer.aio_pika.connect_robust", AsyncMock(return_value=connection)):
            client = RabbitMQClient(RabbitMQConfig(url="amqp://localhost"))
            await client.connect()

        task = asyncio.create_task(client.consume(handler))
        while not queue.consume.await_count:
            await asyncio.sleep(0)

        await client.close()
        await asyncio.wait_for(task, timeout=1)

        queue.consume.assert_awaited_once_with(handler)
        queue.cancel.assert_awaited_once_with("ctag-1")
        channel.close.assert_awaited_once()
        connection.close.assert_awaited_once()
