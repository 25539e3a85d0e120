"""Source image model and loaders."""

from dataclasses import dataclass, field
from io import BytesIO
from os import PathLike
from pathlib import Path

from loguru import logger
from PIL import Image

from .common.errors import ImageDecodeError
from .common.schemas import ImageSize


@dataclass
class SourceImage:
    """A decoded image and information about it.

    Fields:
        path: Path the image was loaded from ("" for in-memory images).
        data: Decoded pixels. Replaced in place while a generator chains
            resizes, so it does not necessarily hold the original pixels
            after a generation.
        size: Dimensions measured at load time. Never recomputed.
    """

    path: str = ""
    data: Image.Image | None = None
    size: ImageSize = field(default_factory=lambda: ImageSize(width=0, height=0))

    @classmethod
    def from_pil(cls, data: Image.Image, path: str = "") -> "SourceImage":
        return cls(
            path=path,
            data=data,
            size=ImageSize(width=data.width, height=data.height),
        )


def _decode(source: str | Path | BytesIO) -> Image.Image:
    with Image.open(source) as img:
        img.load()
        return img.copy()


def image_from_file(path: str | PathLike[str]) -> SourceImage:
    """
    Read and decode an image file.

    Args:
        path: Path to the image on disk

    Returns:
        SourceImage with the path and measured size recorded

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If Pillow fails to read or decode the image
        PIL.Image.DecompressionBombError: If the image exceeds Pillow's pixel limit
    """
    try:
        data = _decode(Path(path))
    except (OSError, Image.DecompressionBombError) as e:
        logger.error(f"failed to open image: {e}")
        raise

    return SourceImage.from_pil(data, path=str(path))


def image_from_file_with_fallback(
    path: str | PathLike[str],
    fallback_path: str | PathLike[str] | None = None,
) -> SourceImage:
    """Load ``path``, falling back to ``fallback_path`` if it cannot be read.

    When both fail, or no fallback is given, the error for ``path`` is raised.
    """
    try:
        return image_from_file(path)
    except (OSError, Image.DecompressionBombError) as primary_error:
        if not fallback_path:
            raise

        logger.warning(f"Falling back to {fallback_path} after failing to load {path}")
        try:
            return image_from_file(fallback_path)
        except (OSError, Image.DecompressionBombError):
            raise primary_error


def image_from_bytes(buffer: bytes | bytearray) -> SourceImage:
    """Decode an in-memory image. The resulting image has no path."""
    try:
        data = _decode(BytesIO(buffer))
    except (OSError, Image.DecompressionBombError) as e:
        logger.error(f"failed to decode image: {e}")
        raise ImageDecodeError(f"failed to decode image: {e}") from e

    return SourceImage.from_pil(data)
