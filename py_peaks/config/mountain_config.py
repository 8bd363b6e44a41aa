"""
Mountain peak configuration.

Callers describe a skyline with a nested dictionary that is deep-merged onto
a copy of ``DEFAULT_CONFIG`` and validated into ``MountainConfig``. Keys use
the camelCase names of the configuration format (``minY``, ``maxY``,
``startWithPeak``, ``initPeaks``). The snake_case field names are accepted
only when the models are built directly, since merging is done on raw keys.
"""

import copy
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)

from ..exceptions import ConfigError
from ..utils.merge import merge_deep

DEFAULT_CONFIG: Dict[str, Any] = {
    "stage": {"width": 600, "height": 300},
    "peaks": {"count": 1, "detail": 4, "minY": 200, "maxY": 300},
    "valleys": {"minY": 50},
    "fill": {},
}


def default_config() -> Dict[str, Any]:
    """Return a fresh copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


class ConfigModel(BaseModel):
    """Base for configuration sections."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", allow_inf_nan=False)


class StageSpec(ConfigModel):
    """Output coordinate space."""

    width: float = Field(gt=0, description="Extent of the x-axis")
    height: float = Field(gt=0, description="Stage floor; elevation is measured up from it")


class PeakSpec(ConfigModel):
    """Tall peak placement and roughness."""

    count: int = Field(ge=0, description="Number of tall peaks")
    detail: int = Field(ge=0, description="Number of subdivision passes")
    min_y: float = Field(alias="minY", description="Lowest elevation of a tall peak")
    max_y: float = Field(alias="maxY", description="Highest elevation of a tall peak")
    start_with_peak: bool = Field(
        default=False,
        alias="startWithPeak",
        description="Whether the leftmost point is a peak instead of a valley",
    )

    @model_validator(mode="after")
    def check_band(self):
        if self.min_y > self.max_y:
            raise ValueError(
                f"peaks.minY ({self.min_y:g}) is above peaks.maxY ({self.max_y:g})"
            )
        return self


class ValleySpec(ConfigModel):
    """Valley floor."""

    min_y: float = Field(alias="minY", description="Lowest elevation of a valley")


class FlatAlign(str, Enum):
    """How a flat's position relates to the leveled run."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class FlatSpec(ConfigModel):
    """A plateau to level into the skyline."""

    position: float = Field(
        ge=0,
        le=1,
        validation_alias=AliasChoices("position", "pos"),
        description="Fraction of the skyline width where the flat is placed",
    )
    width: float = Field(ge=0, description="Run length to level, in x units")
    align: FlatAlign = Field(default=FlatAlign.LEFT, description="Alignment of position")
    name: str = Field(default="", description="Label attached to the anchor coordinate")


class GradientSpec(ConfigModel):
    """Linear gradient with ordered stop attribute maps."""

    x1: Union[float, str]
    y1: Union[float, str]
    x2: Union[float, str]
    y2: Union[float, str]
    stops: List[Dict[str, Any]] = Field(default_factory=list)


class FillSpec(ConfigModel):
    """Mountain body paint."""

    color: Optional[str] = None
    gradient: Optional[GradientSpec] = None


class ShadowSpec(ConfigModel):
    """Shadow region paint."""

    color: Optional[str] = None
    gradient: Optional[GradientSpec] = None


class RidgeSpec(ConfigModel):
    """Stroke along the skyline."""

    color: Optional[str] = None
    thickness: Optional[float] = Field(default=None, ge=0)


class MountainConfig(ConfigModel):
    """Fully resolved configuration for one generation call."""

    stage: StageSpec
    peaks: PeakSpec
    valleys: ValleySpec
    fill: FillSpec = Field(default_factory=FillSpec)
    init_peaks: Optional[List[float]] = Field(default=None, alias="initPeaks")
    flats: Optional[List[FlatSpec]] = None
    shadow: Optional[ShadowSpec] = None
    ridge: Optional[RidgeSpec] = None

    @model_validator(mode="after")
    def check_valley_floor(self):
        if self.valleys.min_y > self.peaks.min_y:
            raise ValueError(
                f"valleys.minY ({self.valleys.min_y:g}) is above "
                f"peaks.minY ({self.peaks.min_y:g})"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Configuration as a camelCase dictionary, unset options omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def resolve_config(
    config: Optional[Union[Mapping[str, Any], MountainConfig]] = None,
) -> MountainConfig:
    """
    Merge a partial configuration onto the defaults and validate it.

    Args:
        config: Partial configuration mapping, a resolved MountainConfig,
            or None for the defaults

    Returns:
        Validated MountainConfig

    Raises:
        ConfigError: If the merged configuration is malformed
    """
    if isinstance(config, MountainConfig):
        return config

    merged = default_config()
    if config is not None:
        if not isinstance(config, Mapping):
            raise ConfigError(
                f"Configuration must be a mapping, got {type(config).__name__}"
            )
        merge_deep(merged, config)

    try:
        return MountainConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
