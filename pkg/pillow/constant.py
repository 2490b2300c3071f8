DEFAULT_MAX_WIDTH = 800
DEFAULT_MAX_HEIGHT = 800
DEFAULT_QUALITY = 90
DEFAULT_OUTPUT_FORMAT = "JPEG"

MIN_QUALITY = 1
MAX_QUALITY = 95

# Roughly a 12k x 12k image; anything larger is treated as a decompression bomb
DEFAULT_MAX_INPUT_PIXELS = 144_000_000

# Output format -> (content type, file extension)
FORMAT_INFO = {
    "JPEG": ("image/jpeg", "jpg"),
    "PNG": ("image/png", "png"),
    "WEBP": ("image/webp", "webp"),
}

# Modes JPEG cannot encode directly
NON_JPEG_MODES = ("RGBA", "LA", "P", "PA", "CMYK", "I", "I;16", "F")
