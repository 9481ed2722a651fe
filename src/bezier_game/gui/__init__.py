"""Interactive window for the curve editor."""

from .app import CurveEditor, resolve_scene_config, run

__all__ = ["CurveEditor", "resolve_scene_config", "run"]
