"""Application settings loaded from the environment or .env via pydantic-settings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)


class GameSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BEZIER_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    scene: Optional[Path] = Field(default=None, description="Scene file opened when none is given")
    fps: int = Field(default=60, gt=0, le=240, description="Frame passes per second")
    canvas_width: int = Field(default=800, gt=0)
    canvas_height: int = Field(default=600, gt=0)

    @field_validator("scene", mode="before")
    @classmethod
    def _expand_scene(cls, value: Optional[Path]) -> Optional[Path]:
        if value in (None, ""):
            return None
        return Path(value).expanduser().resolve()

    @field_validator("scene")
    @classmethod
    def _validate_scene(cls, value: Optional[Path]) -> Optional[Path]:
        if value is not None and not value.exists():
            raise ValueError(f"Scene file does not exist: {value}")
        return value


_settings: Optional[GameSettings] = None


def get_settings() -> GameSettings:
    global _settings
    if _settings is None:
        _settings = GameSettings()
        logger.debug(
            "Settings: scene=%s fps=%d canvas=%dx%d",
            _settings.scene,
            _settings.fps,
            _settings.canvas_width,
            _settings.canvas_height,
        )
    return _settings


def default_scene_path() -> Optional[Path]:
    return get_settings().scene


def reset_settings_cache() -> None:
    global _settings
    _settings = None
