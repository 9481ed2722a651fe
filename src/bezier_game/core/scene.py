"""Scene state: the ordered handles, the curve settings and the input router.

The scene is the application state owned by the frame loop. Input events are
dispatched through :attr:`Scene.router` as they arrive; once per frame the
loop calls :meth:`Scene.frame`, which reads the current handle positions and
produces everything the renderer needs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..config import ConfigurationError, CurveConfig, SceneConfig
from .curve import CurveEvaluator, polyline_array
from .geometry import Point
from .handle import DraggableHandle, HandleVisual
from .input import KeyTracker, PointerInputRouter, PointerSnapshot

logger = logging.getLogger(__name__)


DRAG_POLICIES = ("first", "all")


@dataclass(frozen=True)
class FrameData:
    """Render payload for one frame."""

    polyline: List[Point]
    handles: List[HandleVisual]
    pointer: PointerSnapshot = field(default_factory=PointerSnapshot)

    def polyline_array(self) -> np.ndarray:
        return polyline_array(self.polyline)


class Scene:
    """Owns the handles in control-point order and turns them into a curve.

    Args:
        handles: Handles in control-point order. The order never changes.
        resolution: Curve steps per frame (at least 2).
        use_points: Number of leading handles that feed the curve.
        drag_policy: ``"first"`` lets only the first handle under the pointer
            take a press; ``"all"`` lets every handle under it start dragging.
        router: Input router to attach the handles to. A new one is created
            when omitted.

    Raises:
        ConfigurationError: If there are no handles, ``resolution < 2``,
            ``use_points < 0`` or the drag policy is unknown.
    """

    def __init__(
        self,
        handles: Sequence[DraggableHandle],
        resolution: int = 25,
        use_points: int = 5,
        *,
        drag_policy: str = "first",
        router: Optional[PointerInputRouter] = None,
    ) -> None:
        if not handles:
            raise ConfigurationError("A scene needs at least one handle")
        if resolution < 2:
            raise ConfigurationError(f"Resolution must be at least 2, got {resolution}")
        if use_points < 0:
            raise ConfigurationError(f"use_points cannot be negative, got {use_points}")
        if drag_policy not in DRAG_POLICIES:
            raise ConfigurationError(
                f"Unknown drag policy '{drag_policy}'. Available: {list(DRAG_POLICIES)}"
            )
        if resolution % 2:
            logger.info(
                "Resolution %d is odd; the curve is sampled in %d steps",
                resolution,
                resolution - 1,
            )
        if use_points > len(handles):
            logger.debug("use_points=%d exceeds %d handles; using all of them", use_points, len(handles))

        self._handles: Tuple[DraggableHandle, ...] = tuple(handles)
        self.curve = CurveConfig(resolution=resolution, use_points=use_points)
        self.evaluator = CurveEvaluator(resolution)
        self.drag_policy = drag_policy
        self.router = router or PointerInputRouter()
        self.router.exclusive = drag_policy == "first"
        self.keys = KeyTracker()
        for handle in self._handles:
            handle.attach(self.router)

    @classmethod
    def from_config(cls, config: SceneConfig) -> "Scene":
        handles = [
            DraggableHandle(
                Point(item.x, item.y),
                width=item.width,
                height=item.height,
                hit_radius=item.effective_hit_radius(),
                name=item.name or f"P{index}",
            )
            for index, item in enumerate(config.handles)
        ]
        return cls(
            handles,
            resolution=config.curve.resolution,
            use_points=config.curve.use_points,
            drag_policy=config.drag_policy,
        )

    # ------------------------------------------------------------------
    @property
    def handles(self) -> Tuple[DraggableHandle, ...]:
        return self._handles

    @property
    def active_count(self) -> int:
        return min(len(self._handles), self.curve.use_points)

    def control_points(self) -> List[Point]:
        """Current positions of the handles that feed the curve, in order."""
        return [handle.position for handle in self._handles[: self.active_count]]

    def dragging_handles(self) -> List[DraggableHandle]:
        return [handle for handle in self._handles if handle.is_dragging]

    def polyline(self) -> List[Point]:
        """Tessellate the curve; empty when no handle feeds it."""
        points = self.control_points()
        if not points:
            return []
        return self.evaluator.tessellate(points)

    def tick(self) -> None:
        for handle in self._handles:
            handle.tick(self)

    def frame(self) -> FrameData:
        """Run the per-frame update and build the render payload."""
        self.tick()
        pointer = self.router.snapshot
        return FrameData(
            polyline=self.polyline(),
            handles=[handle.visual(pointer.position) for handle in self._handles],
            pointer=pointer,
        )
