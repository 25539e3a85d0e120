"""Output format names understood by the persistence layer."""

PIL_FORMATS: dict[str, str] = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "png": "PNG",
    "webp": "WEBP",
    "gif": "GIF",
    "bmp": "BMP",
    "tiff": "TIFF",
}


def get_pil_format(format_str: str) -> str:
    """Convert format string to PIL format name."""
    return PIL_FORMATS.get(format_str.lower(), format_str.upper())


def is_supported_format(format_str: str) -> bool:
    return format_str.lower() in PIL_FORMATS
