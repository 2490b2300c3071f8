DEFAULT_QUEUE_NAME = "image_ingest_queue"
DEFAULT_PREFETCH_COUNT = 4
DEFAULT_DURABLE = True
DEFAULT_RECONNECT_INTERVAL = 5.0

# Exchange Types
EXCHANGE_TYPE_TOPIC = "topic"
EXCHANGE_TYPE_DIRECT = "direct"
EXCHANGE_TYPE_FANOUT = "fanout"
EXCHANGE_TYPES = (EXCHANGE_TYPE_TOPIC, EXCHANGE_TYPE_DIRECT, EXCHANGE_TYPE_FANOUT)

# Errors
ERROR_URL_EMPTY = "url cannot be empty"
ERROR_QUEUE_NAME_EMPTY = "queue_name cannot be empty"
ERROR_PREFETCH_COUNT_POSITIVE = "prefetch_count must be positive, got {count}"
ERROR_EXCHANGE_TYPE_INVALID = "exchange_type must be one of {types}, got {value}"
ERROR_NOT_CONNECTED = "Not connected to RabbitMQ. Call connect() first."
