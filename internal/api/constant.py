"""Constants for the HTTP API."""

API_TITLE = "Image Ingestion API"
API_DESCRIPTION = "Ingest bucket notifications and query upload analytics"
API_VERSION = "1.0.0"

REQUEST_ID_HEADER = "X-Request-ID"

# Context names reported in error envelopes
CONTEXT_INGESTION = "ingestion"
CONTEXT_ANALYTICS = "analytics_query"
CONTEXT_API = "api"

__all__ = [
    "API_TITLE",
    "API_DESCRIPTION",
    "API_VERSION",
    "REQUEST_ID_HEADER",
    "CONTEXT_INGESTION",
    "CONTEXT_ANALYTICS",
    "CONTEXT_API",
]
