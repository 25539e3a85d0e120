"""Unit tests for schemas and configuration loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from cl_thumbnail import (
    DEFAULT_THUMBNAIL_PERCENTAGE,
    DEFAULT_THUMBNAIL_SIZE,
    GenerationResult,
    GeneratorConfig,
    ImageDimension,
    load_generator_config,
)

# ============================================================================
# SCHEMA TESTS
# ============================================================================


def test_image_dimension_defaults():
    """Test ImageDimension has every field unset by default."""
    dimension = ImageDimension()

    assert dimension.width == 0
    assert dimension.height == 0
    assert dimension.percentage == 0.0
    assert dimension.prefix == ""
    assert dimension.name == ""
    assert dimension.destination_override == ""


def test_image_dimension_rejects_negative_values():
    """Test negative sizes are invalid."""
    with pytest.raises(ValidationError):
        _ = ImageDimension(width=-1)

    with pytest.raises(ValidationError):
        _ = ImageDimension(percentage=-0.5)


def test_generator_config_defaults():
    """Test GeneratorConfig defaults."""
    config = GeneratorConfig()

    assert config.width == DEFAULT_THUMBNAIL_SIZE.width == 220
    assert config.height == DEFAULT_THUMBNAIL_SIZE.height == 220
    assert config.default_percentage == DEFAULT_THUMBNAIL_PERCENTAGE == 0.4
    assert config.preferred_format == "jpeg"
    assert config.output_dimensions == ()
    assert config.independent_outputs is False


def test_generator_config_is_frozen():
    """Test configuration cannot be changed after construction."""
    config = GeneratorConfig()

    with pytest.raises(ValidationError):
        config.prefix = "changed_"  # pyright: ignore[reportAttributeAccessIssue]


def test_generator_config_format_validation():
    """Test preferred_format is validated and normalized."""
    assert GeneratorConfig(preferred_format="PNG").preferred_format == "png"

    with pytest.raises(ValidationError):
        _ = GeneratorConfig(preferred_format="xyz")


def test_generator_config_rejects_unknown_fields():
    """Test unknown configuration keys are rejected."""
    with pytest.raises(ValidationError):
        _ = GeneratorConfig.model_validate({"destination": "/tmp"})


def test_generation_result_ok():
    """Test GenerationResult.ok reflects the error field."""
    assert GenerationResult(filename="a.jpg", path="/a.jpg").ok
    assert not GenerationResult(filename="a.jpg", path="/a.jpg", error=OSError("x")).ok


# ============================================================================
# CONFIG FILE LOADING
# ============================================================================


def test_load_generator_config(tmp_path: Path):
    """Test loading a JSON configuration with output dimensions."""
    config_path = tmp_path / "thumbnails.json"
    _ = config_path.write_text(
        json.dumps(
            {
                "destination_path": "/srv/thumbs",
                "prefix": "t_",
                "preferred_format": "webp",
                "output_dimensions": [
                    {"width": 640, "prefix": "lg_"},
                    {"percentage": 0.5},
                    {"height": 64, "name": "icon.webp"},
                ],
            }
        ),
        encoding="utf-8",
    )

    config = load_generator_config(config_path)

    assert config.destination_path == "/srv/thumbs"
    assert config.preferred_format == "webp"
    assert len(config.output_dimensions) == 3
    assert config.output_dimensions[0] == ImageDimension(width=640, prefix="lg_")
    assert config.output_dimensions[2].name == "icon.webp"


def test_load_generator_config_missing(tmp_path: Path):
    """Test a missing config file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        _ = load_generator_config(tmp_path / "missing.json")


def test_load_generator_config_invalid(tmp_path: Path):
    """Test invalid content raises ValidationError."""
    config_path = tmp_path / "bad.json"
    _ = config_path.write_text('{"output_dimensions": [{"width": -5}]}', encoding="utf-8")

    with pytest.raises(ValidationError):
        _ = load_generator_config(config_path)
