"""Curve evaluation and the interactive handle model."""

from .curve import (
    CurveEvaluator,
    InvalidInputError,
    effective_denominator,
    evaluate,
    polyline_array,
    sample_parameters,
    tessellate,
)
from .geometry import ORIGIN, Point, Rect, lerp
from .handle import (
    DraggableHandle,
    HandleState,
    HandleVisual,
    HitTestable,
    Positioned,
    Renderable,
    Tickable,
)
from .input import (
    KeyTracker,
    PointerButtons,
    PointerEvent,
    PointerEventKind,
    PointerInputRouter,
    PointerSnapshot,
)
from .scene import FrameData, Scene

__all__ = [
    "CurveEvaluator",
    "InvalidInputError",
    "effective_denominator",
    "evaluate",
    "polyline_array",
    "sample_parameters",
    "tessellate",
    "ORIGIN",
    "Point",
    "Rect",
    "lerp",
    "DraggableHandle",
    "HandleState",
    "HandleVisual",
    "HitTestable",
    "Positioned",
    "Renderable",
    "Tickable",
    "KeyTracker",
    "PointerButtons",
    "PointerEvent",
    "PointerEventKind",
    "PointerInputRouter",
    "PointerSnapshot",
    "FrameData",
    "Scene",
]
