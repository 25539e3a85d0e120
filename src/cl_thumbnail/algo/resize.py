"""Dimension resolution and resizing (single image)."""

from enum import StrEnum
from math import floor

from loguru import logger
from PIL import Image

from ..common.errors import InvalidImageDataError, NoTransformSpecifiedError, ProcessingError
from ..common.schemas import ImageDimension
from ..image import SourceImage


class ResizeMode(StrEnum):
    PERCENTAGE = "percentage"
    EXACT = "exact"
    WIDTH = "width"
    HEIGHT = "height"


def resolve_resize_mode(dimension: ImageDimension) -> ResizeMode:
    """Pick the resize mode for a dimension, first match wins.

    Raises:
        NoTransformSpecifiedError: If neither percentage, width nor height is set
    """
    if dimension.percentage > 0.0:
        return ResizeMode.PERCENTAGE
    elif dimension.width > 0 and dimension.height > 0:
        return ResizeMode.EXACT
    elif dimension.width > 0:
        return ResizeMode.WIDTH
    elif dimension.height > 0:
        return ResizeMode.HEIGHT
    raise NoTransformSpecifiedError()


def _scale(value: float) -> int:
    # round half up, never below one pixel
    return max(1, floor(value + 0.5))


def target_size(source_size: tuple[int, int], dimension: ImageDimension) -> tuple[int, int]:
    """
    Compute the output size for a source of ``source_size``.

    Args:
        source_size: (width, height) of the pixels being resized
        dimension: Requested output dimension

    Returns:
        (width, height) of the resized image

    Raises:
        NoTransformSpecifiedError: If the dimension has no resize mode
    """
    src_w, src_h = source_size
    mode = resolve_resize_mode(dimension)

    if mode == ResizeMode.PERCENTAGE:
        return _scale(src_w * dimension.percentage), _scale(src_h * dimension.percentage)
    elif mode == ResizeMode.EXACT:
        return dimension.width, dimension.height
    elif mode == ResizeMode.WIDTH:
        return dimension.width, _scale(dimension.width * src_h / src_w)
    else:
        return _scale(dimension.height * src_w / src_h), dimension.height


def create_thumbnail(image: SourceImage | None, dimension: ImageDimension) -> Image.Image:
    """
    Resize the current pixels of ``image`` according to ``dimension``.

    The source image is not modified.

    Raises:
        InvalidImageDataError: If there is no image or no pixel data
        NoTransformSpecifiedError: If the dimension has no resize mode
        ProcessingError: If Pillow fails while resizing
    """
    if image is None or image.data is None:
        raise InvalidImageDataError()

    mode = resolve_resize_mode(dimension)

    try:
        size = target_size(image.data.size, dimension)
        return image.data.resize(size, Image.Resampling.LANCZOS)
    except Exception as e:
        logger.error(f"failed to resize image {image.path or '<memory>'} ({mode}): {e}")
        raise ProcessingError("resize", e) from e
