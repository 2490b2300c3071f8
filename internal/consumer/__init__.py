"""Consumer package for the image ingestion service.

This package contains:
- Dependencies: Struct holding all service dependencies
- IConsumerServer: Protocol interface for consumer server
- ConsumerServer: Implementation of consumer server
- ConsumerRegistry: Builds the domain services the server needs
"""

from .type import Dependencies
from .interface import IConsumerServer
from .server import ConsumerServer
from .registry import ConsumerRegistry, DomainServices

__all__ = [
    "Dependencies",
    "IConsumerServer",
    "ConsumerServer",
    "ConsumerRegistry",
    "DomainServices",
]
