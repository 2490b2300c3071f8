from __future__ import annotations

from typing import Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from internal.model.content_metadata import ContentMetadata
    from .type import BuildInput


@runtime_checkable
class IMetadataBuilderUseCase(Protocol):
    def build(self, input_data: "BuildInput") -> "ContentMetadata":
        ...


__all__ = ["IMetadataBuilderUseCase"]
