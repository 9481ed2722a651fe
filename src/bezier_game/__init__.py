"""
Interactive Bezier curve with draggable control points.

The package is split into the pure model (``bezier_game.core``: curve
evaluation, handles, pointer routing and the scene) and the PySide6/PyQtGraph
window in ``bezier_game.gui``, which is only imported when the window is
opened.
"""

from .config import (
    ConfigurationError,
    CurveConfig,
    HandleConfig,
    SceneConfig,
    default_scene_config,
    load_scene_config,
)
from .core.curve import (
    CurveEvaluator,
    InvalidInputError,
    effective_denominator,
    evaluate,
    tessellate,
)
from .core.geometry import Point, Rect, lerp
from .core.handle import DraggableHandle, HandleState
from .core.input import PointerEvent, PointerEventKind, PointerInputRouter, PointerSnapshot
from .core.scene import FrameData, Scene
from .settings import get_settings, reset_settings_cache

__all__ = [
    "ConfigurationError",
    "CurveConfig",
    "HandleConfig",
    "SceneConfig",
    "default_scene_config",
    "load_scene_config",
    "CurveEvaluator",
    "InvalidInputError",
    "effective_denominator",
    "evaluate",
    "tessellate",
    "Point",
    "Rect",
    "lerp",
    "DraggableHandle",
    "HandleState",
    "PointerEvent",
    "PointerEventKind",
    "PointerInputRouter",
    "PointerSnapshot",
    "FrameData",
    "Scene",
    "get_settings",
    "reset_settings_cache",
]
