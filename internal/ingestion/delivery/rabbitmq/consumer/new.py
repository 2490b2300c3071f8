"""Factory function for creating the notification handler."""

from typing import Optional

from pkg.logger.logger import Logger
from internal.ingestion.interface import IIngestionUseCase
from .handler import IngestionHandler


def New(
    usecase: IIngestionUseCase,
    logger: Optional[Logger] = None,
) -> IngestionHandler:
    """Create a new notification handler instance.

    Raises:
        ValueError: If usecase is None
    """
    if usecase is None:
        raise ValueError("usecase cannot be None")

    return IngestionHandler(usecase=usecase, logger=logger)


__all__ = ["New"]
