"""Encoding and writing images to disk."""

from os import PathLike
from pathlib import Path

from loguru import logger
from PIL import Image

from ..common.errors import InvalidImageDataError, ProcessingError
from ..common.formats import get_pil_format
from ..common.schemas import GenerationResult

DIRECTORY_MODE = 0o755


def _prepare(pixels: Image.Image, pil_format: str) -> Image.Image:
    # JPEG does not support alpha channel
    if pil_format == "JPEG" and pixels.mode not in ("RGB", "L", "CMYK"):
        return pixels.convert("RGB")
    return pixels


def _write(path: Path, pixels: Image.Image, pil_format: str) -> None:
    try:
        _prepare(pixels, pil_format).save(path, format=pil_format)
    except OSError:
        raise
    except Exception as e:
        raise ProcessingError("encode", e) from e


def save_image(
    path: str | PathLike[str],
    pixels: Image.Image | None,
    image_format: str = "jpeg",
) -> None:
    """
    Encode ``pixels`` and write them to ``path``.

    A missing destination directory is created (mode 0o755) and the write
    is retried once.

    Args:
        path: Destination file path
        pixels: Image to write
        image_format: Output format (jpg, png, webp, etc.)

    Raises:
        InvalidImageDataError: If ``pixels`` is None; nothing is written
        OSError: If the write fails for any other reason, or fails again
            after the directory was created
        ProcessingError: If the encoder fails with a non-I/O error
    """
    if pixels is None:
        raise InvalidImageDataError()

    output_path = Path(path)
    pil_format = get_pil_format(image_format)

    try:
        _write(output_path, pixels, pil_format)
        return
    except FileNotFoundError:
        logger.warning(f"Destination directory missing, creating {output_path.parent}")
    except OSError as e:
        logger.error(f"failed to write image: {e}")
        raise

    output_path.parent.mkdir(parents=True, exist_ok=True, mode=DIRECTORY_MODE)

    try:
        _write(output_path, pixels, pil_format)
    except OSError as e:
        logger.error(f"failed to write image: {e}")
        raise


def save_raw(
    pixels: Image.Image | None,
    path: str | PathLike[str],
    image_format: str = "jpeg",
) -> GenerationResult:
    """Write ``pixels`` to exactly ``path`` without a generator."""
    if pixels is None:
        raise InvalidImageDataError()
    if not path or str(path) in ("", "."):
        raise InvalidImageDataError("no destination path provided")

    save_image(path, pixels, image_format)

    return GenerationResult(filename=Path(path).name, path=str(path))
