"""Common module - errors, schemas and configuration."""

from .config import load_generator_config
from .errors import (
    ImageDecodeError,
    InvalidImageDataError,
    InvalidMimeTypeError,
    InvalidScalerError,
    NoTransformSpecifiedError,
    OutputNameError,
    ProcessingError,
    ThumbnailError,
)
from .formats import get_pil_format
from .schemas import (
    DEFAULT_THUMBNAIL_PERCENTAGE,
    DEFAULT_THUMBNAIL_SIZE,
    GenerationResult,
    GeneratorConfig,
    ImageDimension,
    ImageSize,
)

__all__ = [
    "DEFAULT_THUMBNAIL_PERCENTAGE",
    "DEFAULT_THUMBNAIL_SIZE",
    "GenerationResult",
    "GeneratorConfig",
    "ImageDimension",
    "ImageSize",
    "ImageDecodeError",
    "InvalidImageDataError",
    "InvalidMimeTypeError",
    "InvalidScalerError",
    "NoTransformSpecifiedError",
    "OutputNameError",
    "ProcessingError",
    "ThumbnailError",
    "get_pil_format",
    "load_generator_config",
]
