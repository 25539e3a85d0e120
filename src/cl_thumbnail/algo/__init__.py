"""Resize, naming and persistence algorithms."""

from .naming import OutputLocation, resolve_output_path
from .persistence import get_pil_format, save_image, save_raw
from .resize import ResizeMode, create_thumbnail, resolve_resize_mode, target_size

__all__ = [
    "OutputLocation",
    "ResizeMode",
    "create_thumbnail",
    "get_pil_format",
    "resolve_output_path",
    "resolve_resize_mode",
    "save_image",
    "save_raw",
    "target_size",
]
