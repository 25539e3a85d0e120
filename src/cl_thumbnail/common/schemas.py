"""Pydantic schemas for thumbnail dimensions, generator configuration and results."""

from dataclasses import dataclass
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .formats import PIL_FORMATS, is_supported_format

# ─────────────────────────────────────────────────────────────
# Sizes
# ─────────────────────────────────────────────────────────────


class ImageSize(BaseModel):
    """Width and height of an image in pixels."""

    width: int = Field(..., ge=0, description="Width in pixels")
    height: int = Field(..., ge=0, description="Height in pixels")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


DEFAULT_THUMBNAIL_PERCENTAGE: float = 0.4
DEFAULT_THUMBNAIL_SIZE: ImageSize = ImageSize(width=220, height=220)


# ─────────────────────────────────────────────────────────────
# Output dimension (one requested variant)
# ─────────────────────────────────────────────────────────────


class ImageDimension(BaseModel):
    """Sizing and naming rule for one output variant.

    Resize mode precedence: percentage, then width and height, then width
    only, then height only. A dimension with none of them set cannot be
    resolved.

    Naming precedence: ``prefix`` and ``name`` override the generator's
    defaults. ``destination_override`` replaces the computed output path.
    """

    width: int = Field(default=0, ge=0, description="Target width in pixels (0 = unset)")
    height: int = Field(default=0, ge=0, description="Target height in pixels (0 = unset)")
    percentage: float = Field(
        default=0.0,
        ge=0.0,
        description="Scale factor applied to both axes, e.g. 0.5 for half size (0 = unset)",
    )

    prefix: str = Field(default="", description="Filename prefix override")
    name: str = Field(default="", description="Filename override (base name only)")
    destination_override: str = Field(
        default="",
        description="Full output path, used verbatim when set",
    )


# ─────────────────────────────────────────────────────────────
# Generator configuration
# ─────────────────────────────────────────────────────────────


class GeneratorConfig(BaseModel):
    """Configuration of a thumbnail generator.

    Frozen, so a configuration cannot change while a generation runs.
    """

    width: int = Field(
        default=DEFAULT_THUMBNAIL_SIZE.width,
        ge=0,
        description="Default thumbnail width",
    )
    height: int = Field(
        default=DEFAULT_THUMBNAIL_SIZE.height,
        ge=0,
        description="Default thumbnail height",
    )
    default_percentage: float = Field(
        default=DEFAULT_THUMBNAIL_PERCENTAGE,
        gt=0.0,
        description="Scale factor used when no default width/height is configured",
    )
    preferred_format: str = Field(default="jpeg", description="Output encoding format")

    name: str = Field(default="", description="Default output filename")
    destination_path: str = Field(default="", description="Output directory")
    prefix: str = Field(default="", description="Default filename prefix")

    output_dimensions: tuple[ImageDimension, ...] = Field(
        default=(),
        description="Variants produced per source image, in production order",
    )
    independent_outputs: bool = Field(
        default=False,
        description=(
            "Resize every variant from the original pixels. When False, each "
            "variant is resized from the previous variant's output."
        ),
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @field_validator("preferred_format")
    @classmethod
    def validate_preferred_format(cls, v: str) -> str:
        if not is_supported_format(v):
            raise ValueError(
                f"Unsupported format: {v}. Supported: {', '.join(sorted(PIL_FORMATS))}"
            )
        return v.lower()


# ─────────────────────────────────────────────────────────────
# Generation result
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of producing one output variant.

    ``error`` is None on success.
    """

    filename: str
    path: str
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
