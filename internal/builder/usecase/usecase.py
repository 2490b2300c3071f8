from typing import Optional

from pkg.logger.logger import Logger
from internal.model.content_metadata import ContentMetadata
from ..interface import IMetadataBuilderUseCase
from ..type import BuildInput
from .process import process as _process


class MetadataBuilderUseCase(IMetadataBuilderUseCase):
    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger

    def build(self, input_data: BuildInput) -> ContentMetadata:
        return _process(input_data, self.logger)


__all__ = ["MetadataBuilderUseCase"]
