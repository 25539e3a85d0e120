"""cl_thumbnail - Multi-size thumbnail generation for images."""

from .algo.naming import OutputLocation, resolve_output_path
from .algo.persistence import get_pil_format, save_image, save_raw
from .algo.resize import ResizeMode, create_thumbnail, resolve_resize_mode, target_size
from .common.config import load_generator_config
from .common.errors import (
    ImageDecodeError,
    InvalidImageDataError,
    InvalidMimeTypeError,
    InvalidScalerError,
    NoTransformSpecifiedError,
    OutputNameError,
    ProcessingError,
    ThumbnailError,
)
from .common.schemas import (
    DEFAULT_THUMBNAIL_PERCENTAGE,
    DEFAULT_THUMBNAIL_SIZE,
    GenerationResult,
    GeneratorConfig,
    ImageDimension,
    ImageSize,
)
from .generator import Generator
from .image import (
    SourceImage,
    image_from_bytes,
    image_from_file,
    image_from_file_with_fallback,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_THUMBNAIL_PERCENTAGE",
    "DEFAULT_THUMBNAIL_SIZE",
    "GenerationResult",
    "Generator",
    "GeneratorConfig",
    "ImageDecodeError",
    "ImageDimension",
    "ImageSize",
    "InvalidImageDataError",
    "InvalidMimeTypeError",
    "InvalidScalerError",
    "NoTransformSpecifiedError",
    "OutputLocation",
    "OutputNameError",
    "ProcessingError",
    "ResizeMode",
    "SourceImage",
    "ThumbnailError",
    "__version__",
    "create_thumbnail",
    "get_pil_format",
    "image_from_bytes",
    "image_from_file",
    "image_from_file_with_fallback",
    "load_generator_config",
    "resolve_output_path",
    "resolve_resize_mode",
    "save_image",
    "save_raw",
    "target_size",
]
