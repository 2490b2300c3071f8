from dataclasses import dataclass

from .constant import *


@dataclass
class TransformConfig:
    """Resize / re-encode settings.

    Attributes:
        max_width: Bounding box width, output never exceeds it
        max_height: Bounding box height, output never exceeds it
        quality: Encoder quality (1-95)
        output_format: Pillow format name (JPEG, PNG, WEBP)
        max_input_pixels: Larger inputs are rejected before decoding
    """

    max_width: int = DEFAULT_MAX_WIDTH
    max_height: int = DEFAULT_MAX_HEIGHT
    quality: int = DEFAULT_QUALITY
    output_format: str = DEFAULT_OUTPUT_FORMAT
    max_input_pixels: int = DEFAULT_MAX_INPUT_PIXELS

    def __post_init__(self):
        if self.max_width <= 0 or self.max_height <= 0:
            raise ValueError(
                f"max_width and max_height must be positive, got {self.max_width}x{self.max_height}"
            )

        if not MIN_QUALITY <= self.quality <= MAX_QUALITY:
            raise ValueError(
                f"quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {self.quality}"
            )

        self.output_format = self.output_format.upper()
        if self.output_format == "JPG":
            self.output_format = "JPEG"
        if self.output_format not in FORMAT_INFO:
            raise ValueError(
                f"output_format must be one of {sorted(FORMAT_INFO)}, got {self.output_format}"
            )

        if self.max_input_pixels <= 0:
            raise ValueError("max_input_pixels must be positive")

    @property
    def content_type(self) -> str:
        return FORMAT_INFO[self.output_format][0]

    @property
    def extension(self) -> str:
        return FORMAT_INFO[self.output_format][1]


@dataclass
class TransformResult:
    """Processed artifact.

    Attributes:
        data: Encoded bytes
        width: Output width in pixels
        height: Output height in pixels
        format: Pillow format name
        content_type: MIME type of data
        extension: File extension without dot
    """

    data: bytes
    width: int
    height: int
    format: str
    content_type: str
    extension: str

    @property
    def size(self) -> int:
        return len(self.data)


__all__ = [
    "TransformConfig",
    "TransformResult",
]
