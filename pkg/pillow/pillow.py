from __future__ import annotations

import io
from typing import Optional, Tuple

from PIL import Image, ImageOps, UnidentifiedImageError  # type: ignore

from loguru import logger
from .interface import IImageTransformer
from .type import TransformConfig, TransformResult
from .constant import *


class TransformError(Exception):
    """Raised when an image cannot be decoded, resized or encoded."""

    def __init__(self, message: str, reason: str = "decode"):
        super().__init__(message)
        self.reason = reason


class ImageTransformer(IImageTransformer):
    """Pillow based resize + re-encode.

    The output fits inside the configured bounding box with the aspect ratio
    preserved. Smaller images keep their size and are only re-encoded.

    Usage:
        transformer = ImageTransformer(TransformConfig(max_width=800, max_height=800))
        result = transformer.transform(raw_bytes)
        result.data, result.width, result.height
    """

    def __init__(self, config: Optional[TransformConfig] = None):
        self.config = config or TransformConfig()

    def transform(
        self,
        data: bytes,
        max_size: Optional[Tuple[int, int]] = None,
        quality: Optional[int] = None,
    ) -> TransformResult:
        """Resize within the bounding box and re-encode.

        Args:
            data: Source image bytes, left untouched
            max_size: Overrides the configured (width, height) bounding box
            quality: Overrides the configured encoder quality

        Returns:
            TransformResult with the encoded artifact and its dimensions

        Raises:
            TransformError: Undecodable input, oversized input or encoder failure
        """
        if not data:
            raise TransformError("empty input", reason="decode")

        box = max_size or (self.config.max_width, self.config.max_height)
        if box[0] <= 0 or box[1] <= 0:
            raise ValueError(f"max_size must be positive, got {box}")

        q = self.config.quality if quality is None else quality
        if not MIN_QUALITY <= q <= MAX_QUALITY:
            raise ValueError(f"quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {q}")

        fmt = self.config.output_format

        try:
            with Image.open(io.BytesIO(data)) as src:
                src_width, src_height = src.size
                if src_width * src_height > self.config.max_input_pixels:
                    raise TransformError(
                        f"input of {src_width}x{src_height} exceeds {self.config.max_input_pixels} pixels",
                        reason="too_large",
                    )

                img = ImageOps.exif_transpose(src)
                img.thumbnail(box, Image.Resampling.LANCZOS)

                if fmt == "JPEG" and img.mode in NON_JPEG_MODES:
                    img = img.convert("RGB")

                save_kwargs = {}
                if fmt in ("JPEG", "WEBP"):
                    save_kwargs["quality"] = q
                if fmt == "PNG":
                    save_kwargs["optimize"] = True

                out_io = io.BytesIO()
                img.save(out_io, format=fmt, **save_kwargs)
                width, height = img.size
        except TransformError:
            raise
        except UnidentifiedImageError as exc:
            raise TransformError(f"unsupported or corrupt image: {exc}", reason="decode") from exc
        except Image.DecompressionBombError as exc:
            raise TransformError(str(exc), reason="too_large") from exc
        except (OSError, ValueError, SyntaxError) as exc:
            # Pillow reports truncated data and encoder failures this way
            raise TransformError(f"image processing failed: {exc}", reason="encode") from exc

        out_bytes = out_io.getvalue()
        logger.debug(
            f"Image processed: {len(data)} bytes ({src_width}x{src_height}) -> "
            f"{len(out_bytes)} bytes ({width}x{height})"
        )

        content_type, extension = FORMAT_INFO[fmt]
        return TransformResult(
            data=out_bytes,
            width=width,
            height=height,
            format=fmt,
            content_type=content_type,
            extension=extension,
        )


__all__ = [
    "ImageTransformer",
    "TransformError",
]
