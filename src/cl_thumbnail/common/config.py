"""Loading generator configuration from disk."""

from os import PathLike
from pathlib import Path

from loguru import logger

from .schemas import GeneratorConfig


def load_generator_config(path: str | PathLike[str]) -> GeneratorConfig:
    """Read a JSON generator configuration.

    Args:
        path: Path to a JSON document matching ``GeneratorConfig``

    Returns:
        Validated, frozen configuration

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the document is not a valid configuration
    """
    config_path = Path(path).expanduser()
    if not config_path.is_file():
        raise FileNotFoundError(f"Generator config not found: {config_path}")

    config = GeneratorConfig.model_validate_json(config_path.read_text(encoding="utf-8"))
    logger.info(
        f"Loaded generator config from {config_path} "
        + f"({len(config.output_dimensions)} output dimensions)"
    )
    return config
