from .interface import IMetadataBuilderUseCase
from .type import BuildInput
from .errors import ErrInvalidSize, ErrMissingField
from .usecase.new import New as NewMetadataBuilderUseCase
from .usecase.process import build_content_metadata

__all__ = [
    "IMetadataBuilderUseCase",
    "BuildInput",
    "ErrInvalidSize",
    "ErrMissingField",
    "NewMetadataBuilderUseCase",
    "build_content_metadata",
]
