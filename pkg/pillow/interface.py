from typing import Optional, Protocol, Tuple, runtime_checkable

from .type import TransformResult


@runtime_checkable
class IImageTransformer(Protocol):
    """Deterministic bytes -> bytes image transform."""

    def transform(
        self,
        data: bytes,
        max_size: Optional[Tuple[int, int]] = None,
        quality: Optional[int] = None,
    ) -> TransformResult:
        """Resize within the bounding box and re-encode."""
        ...


__all__ = ["IImageTransformer"]
