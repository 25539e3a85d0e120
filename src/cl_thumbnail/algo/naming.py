"""Output filename and destination path resolution."""

from pathlib import Path
from typing import NamedTuple

from ..common.errors import OutputNameError
from ..common.schemas import GeneratorConfig, ImageDimension
from ..image import SourceImage


class OutputLocation(NamedTuple):
    directory: Path
    filename: str
    path: Path


def resolve_output_path(
    config: GeneratorConfig,
    image: SourceImage,
    dimension: ImageDimension | None = None,
) -> OutputLocation:
    """
    Resolve where an output variant is written.

    Filename: ``dimension.name`` (base name only), else ``config.name``,
    else the base name of ``image.path``.

    Prefix: ``dimension.prefix``, else ``config.prefix``. Prepended to the
    filename without a separator.

    Path: ``dimension.destination_override`` verbatim when set, otherwise
    ``config.destination_path / (prefix + filename)``.

    The reported filename is ``prefix + filename`` in both cases, even though
    an override path may end in a different name.

    Args:
        config: Generator configuration supplying the defaults
        image: Source image, used for the fallback filename
        dimension: Per-variant overrides; None resolves from defaults only

    Returns:
        OutputLocation(directory, filename, path)

    Raises:
        OutputNameError: If no filename can be resolved
    """
    dim_name = dimension.name if dimension is not None else ""
    dim_prefix = dimension.prefix if dimension is not None else ""
    override = dimension.destination_override if dimension is not None else ""

    if dim_name:
        basename = Path(dim_name).name
    elif config.name:
        basename = config.name
    else:
        basename = Path(image.path).name

    if not basename:
        raise OutputNameError(
            "no output filename: set a name on the dimension or the generator, "
            + "or load the image from a file"
        )

    prefix = dim_prefix or config.prefix
    filename = prefix + basename

    if override:
        path = Path(override)
        return OutputLocation(directory=path.parent, filename=filename, path=path)

    directory = Path(config.destination_path)
    return OutputLocation(directory=directory, filename=filename, path=directory / filename)
