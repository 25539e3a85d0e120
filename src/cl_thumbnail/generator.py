"""Generator - produces every configured thumbnail variant for a source image."""

from dataclasses import replace
from os import PathLike

from loguru import logger
from PIL import Image

from .algo.naming import resolve_output_path
from .algo.persistence import save_image
from .algo.resize import create_thumbnail
from .common.errors import InvalidImageDataError, NoTransformSpecifiedError, ThumbnailError
from .common.schemas import GenerationResult, GeneratorConfig, ImageDimension
from .image import (
    SourceImage,
    image_from_bytes,
    image_from_file,
    image_from_file_with_fallback,
)


class Generator:
    """
    Thumbnail generator bound to one configuration.

    - Variants are produced strictly in ``config.output_dimensions`` order
    - A failing variant is reported in its result and never stops the others
    - By default each variant is resized from the previous variant's pixels
      and the source image's ``data`` is replaced along the way; set
      ``config.independent_outputs`` to resize every variant from the
      original pixels instead
    """

    def __init__(self, config: GeneratorConfig | None = None):
        self._config: GeneratorConfig = config if config is not None else GeneratorConfig()

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    def generator_dimension(self) -> ImageDimension:
        """Dimension built from the generator's default size.

        Falls back to ``default_percentage`` when no default width and
        height are configured.
        """
        if self._config.width > 0 and self._config.height > 0:
            return ImageDimension(width=self._config.width, height=self._config.height)
        return ImageDimension(percentage=self._config.default_percentage)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def new_image_from_file(self, path: str | PathLike[str]) -> SourceImage:
        return image_from_file(path)

    def new_image_from_file_with_default(
        self,
        path: str | PathLike[str],
        default_path: str | PathLike[str] | None = None,
    ) -> SourceImage:
        return image_from_file_with_fallback(path, default_path)

    def new_image_from_bytes(self, buffer: bytes | bytearray) -> SourceImage:
        return image_from_bytes(buffer)

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------

    def get_processed_image(self, image: SourceImage, dimension: ImageDimension) -> Image.Image:
        return create_thumbnail(image, dimension)

    def generate(self, image: SourceImage | None) -> list[GenerationResult]:
        """
        Produce every configured output variant of ``image``.

        Args:
            image: Source image. In chained mode its ``data`` ends up holding
                the last successfully resized variant.

        Returns:
            One GenerationResult per configured dimension, in order. Failed
            variants carry the error and the source path as filename and path.

        Raises:
            InvalidImageDataError: If ``image`` is None
            NoTransformSpecifiedError: If no output dimensions are configured
        """
        if image is None:
            raise InvalidImageDataError()
        if not self._config.output_dimensions:
            raise NoTransformSpecifiedError("no output dimensions configured")

        results: list[GenerationResult] = []
        original = image.data

        for dimension in self._config.output_dimensions:
            working = image
            if self._config.independent_outputs:
                working = replace(image, data=original)

            try:
                thumb = self.get_processed_image(working, dimension)
            except (ThumbnailError, OSError) as e:
                results.append(GenerationResult(filename=image.path, path=image.path, error=e))
                continue

            if self._config.independent_outputs:
                working = replace(working, data=thumb)
            else:
                image.data = thumb

            try:
                results.append(self.save_with_dimension(working, dimension))
            except (ThumbnailError, OSError) as e:
                logger.error(f"failed to write image: {e}")
                results.append(GenerationResult(filename=image.path, path=image.path, error=e))

        failed = sum(1 for r in results if not r.ok)
        logger.info(
            f"Generated {len(results) - failed}/{len(results)} thumbnails "
            + f"for {image.path or '<memory>'}"
        )
        return results

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------

    def save_with_dimension(
        self,
        image: SourceImage | None,
        dimension: ImageDimension | None,
    ) -> GenerationResult:
        """Write ``image`` using the naming rules of ``dimension``.

        Raises:
            InvalidImageDataError: If there is no image, pixel data or dimension
            OutputNameError: If no filename can be resolved
            OSError: If the file cannot be written
        """
        if image is None or image.data is None or dimension is None:
            raise InvalidImageDataError()

        location = resolve_output_path(self._config, image, dimension)
        save_image(location.path, image.data, self._config.preferred_format)
        logger.info(f"Saved thumbnail {location.path}")

        return GenerationResult(filename=location.filename, path=str(location.path))

    def save(self, image: SourceImage | None) -> GenerationResult:
        """Write ``image`` using the generator's default naming only."""
        if image is None or image.data is None:
            raise InvalidImageDataError()

        location = resolve_output_path(self._config, image)
        save_image(location.path, image.data, self._config.preferred_format)
        logger.info(f"Saved thumbnail {location.path}")

        return GenerationResult(filename=location.filename, path=str(location.path))
