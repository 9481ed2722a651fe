"""Canvas components for curve drawing and pointer input."""

from .curve_canvas import CurveCanvas
from .curve_renderer import CurveRenderer

__all__ = ["CurveCanvas", "CurveRenderer"]
