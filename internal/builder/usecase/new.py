from typing import Optional

from pkg.logger.logger import Logger
from ..interface import IMetadataBuilderUseCase
from .usecase import MetadataBuilderUseCase


def New(
    logger: Optional[Logger] = None,
) -> IMetadataBuilderUseCase:
    return MetadataBuilderUseCase(logger=logger)


__all__ = ["New"]
