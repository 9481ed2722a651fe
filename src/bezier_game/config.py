"""
Configuration models and loader for curve scenes.

Scenes are described in YAML files and validated with pydantic. When no file
is given, :func:`default_scene_config` reproduces the built-in layout of five
handles arranged around the canvas centre.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, confloat, conint, field_validator

logger = logging.getLogger(__name__)


PositiveFloat = confloat(gt=0)

DEFAULT_RESOLUTION = 25
DEFAULT_USE_POINTS = 5
DEFAULT_HANDLE_SIZE = 10.0

# Offsets from the canvas centre for the default handle layout.
DEFAULT_HANDLE_OFFSETS = [
    (-150.0, 50.0),
    (-50.0, -50.0),
    (0.0, -75.0),
    (50.0, -50.0),
    (150.0, 50.0),
]

DragPolicy = Literal["first", "all"]


class ConfigurationError(ValueError):
    """Raised when a scene is built from values that cannot produce a curve."""


class CanvasConfig(BaseModel):
    """Initial canvas size in pixels."""

    width: conint(gt=0) = Field(default=800, description="Canvas width in pixels")
    height: conint(gt=0) = Field(default=600, description="Canvas height in pixels")


class CurveConfig(BaseModel):
    """Sampling settings for the curve. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    resolution: conint(ge=2) = Field(
        default=DEFAULT_RESOLUTION,
        description="Number of curve steps; odd values are rounded down to even",
    )
    use_points: conint(ge=0) = Field(
        default=DEFAULT_USE_POINTS,
        description="How many leading handles feed the curve",
    )


class HandleConfig(BaseModel):
    """Initial placement of one handle; ``x``/``y`` is the handle centre."""

    x: float
    y: float
    width: PositiveFloat = Field(default=DEFAULT_HANDLE_SIZE, description="Drawn width in pixels")
    height: PositiveFloat = Field(default=DEFAULT_HANDLE_SIZE, description="Drawn height in pixels")
    hit_radius: Optional[PositiveFloat] = Field(
        default=None, description="Grab radius; defaults to max(width, height)"
    )
    name: Optional[str] = None

    def effective_hit_radius(self) -> float:
        if self.hit_radius is not None:
            return float(self.hit_radius)
        return float(max(self.width, self.height))


class SceneConfig(BaseModel):
    """Top-level configuration object for a curve scene."""

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    curve: CurveConfig = Field(default_factory=CurveConfig)
    drag_policy: DragPolicy = Field(
        default="first",
        description="'first': one handle per press; 'all': every handle under the pointer",
    )
    handles: List[HandleConfig]

    @field_validator("handles")
    @classmethod
    def _validate_handles(cls, value: Iterable[HandleConfig]) -> List[HandleConfig]:
        handles = list(value)
        if not handles:
            raise ValueError("The scene must include at least one handle")
        return handles


def default_scene_config(width: int = 800, height: int = 600) -> SceneConfig:
    """Return the built-in scene: five 10x10 handles around the canvas centre."""
    center_x = width / 2.0
    center_y = height / 2.0
    handles = [
        HandleConfig(x=center_x + dx, y=center_y + dy, name=f"P{index}")
        for index, (dx, dy) in enumerate(DEFAULT_HANDLE_OFFSETS)
    ]
    return SceneConfig(
        canvas=CanvasConfig(width=width, height=height),
        curve=CurveConfig(resolution=DEFAULT_RESOLUTION, use_points=DEFAULT_USE_POINTS),
        handles=handles,
    )


def scene_config_to_dict(config: SceneConfig) -> Dict[str, Any]:
    """Plain-data form of ``config`` suitable for ``yaml.safe_dump``."""
    data = config.model_dump(mode="json")
    for handle in data["handles"]:
        for key in ("hit_radius", "name"):
            if handle.get(key) is None:
                handle.pop(key, None)
    return data


def load_scene_config(path: Union[str, Path]) -> SceneConfig:
    """
    Load and validate a scene from a YAML file.

    Parameters
    ----------
    path:
        Path to the YAML scene file.

    Returns
    -------
    SceneConfig
        Parsed and validated configuration object.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    pydantic.ValidationError
        If the content does not describe a valid scene.
    """

    config_path = Path(path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Scene file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        raw_data = yaml.safe_load(handle) or {}

    config = SceneConfig.model_validate(raw_data)
    logger.debug("Loaded scene %s with %d handles", config_path, len(config.handles))
    return config
