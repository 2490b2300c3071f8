from typing import List, Optional, Protocol, runtime_checkable

from internal.model.content_metadata import ContentMetadata
from .option import (
    CreateOptions,
    ListByUserOptions,
    ListRecentOptions,
    FindBySourceOptions,
)


@runtime_checkable
class IContentMetadataRepository(Protocol):
    async def create(self, opt: CreateOptions) -> ContentMetadata: ...
    async def detail(self, content_id: str) -> Optional[ContentMetadata]: ...
    async def list_by_user(self, opt: ListByUserOptions) -> List[ContentMetadata]: ...
    async def list_recent(self, opt: ListRecentOptions) -> List[ContentMetadata]: ...
    async def find_by_source(self, opt: FindBySourceOptions) -> Optional[ContentMetadata]: ...


__all__ = ["IContentMetadataRepository"]
