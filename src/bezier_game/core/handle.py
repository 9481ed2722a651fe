"""Draggable control-point handles.

A handle is built from small capabilities instead of a class hierarchy: it has
a position (:class:`Positioned`), can be hit-tested (:class:`HitTestable`),
describes how it should be drawn (:class:`Renderable`) and receives a
per-frame update (:class:`Tickable`).

Drag lifecycle::

    IDLE --pointer-down within hit radius--> DRAGGING
    DRAGGING --pointer-up (anywhere)-------> IDLE

While dragging, each pointer-move puts the handle centre exactly on the
pointer; no grab offset is kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, List, Optional, Protocol, runtime_checkable

from .geometry import Point, Rect
from .input import PointerEventKind, PointerInputRouter, PointerSnapshot

if TYPE_CHECKING:
    from .scene import Scene

logger = logging.getLogger(__name__)


DEFAULT_HANDLE_SIZE = 10.0


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------

@runtime_checkable
class Positioned(Protocol):
    @property
    def position(self) -> Point:
        ...


@runtime_checkable
class HitTestable(Protocol):
    def hit_test(self, point: Point) -> bool:
        ...

    def contains(self, point: Point) -> bool:
        ...


@runtime_checkable
class Renderable(Protocol):
    def visual(self, pointer: Point) -> "HandleVisual":
        ...


@runtime_checkable
class Tickable(Protocol):
    def tick(self, scene: "Scene") -> None:
        ...


# ---------------------------------------------------------------------------
# Handle
# ---------------------------------------------------------------------------

class HandleState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class HandleVisual:
    """What the renderer needs to draw one handle."""

    position: Point
    width: float
    height: float
    radius: float
    emphasized: bool


MoveListener = Callable[["DraggableHandle", Point], None]


class DraggableHandle:
    """A control point the user can grab and move with the pointer.

    Args:
        position: Initial centre of the handle.
        width: Drawn width; also the width of the generic bounding box.
        height: Drawn height; also the height of the generic bounding box.
        hit_radius: Grab distance around the centre. Defaults to the larger
            of ``width`` and ``height``.
        name: Optional label used in logs and the status bar.

    Raises:
        ValueError: If the hit radius is not positive.
    """

    def __init__(
        self,
        position: Point,
        width: float = DEFAULT_HANDLE_SIZE,
        height: float = DEFAULT_HANDLE_SIZE,
        hit_radius: Optional[float] = None,
        name: Optional[str] = None,
    ) -> None:
        radius = float(hit_radius) if hit_radius is not None else float(max(width, height))
        if radius <= 0:
            raise ValueError(f"Handle hit radius must be positive, got {radius}")
        self._position = Point.of(position)
        self._width = float(width)
        self._height = float(height)
        self._hit_radius = radius
        self._state = HandleState.IDLE
        self._move_listeners: List[MoveListener] = []
        self.name = name or "handle"

    def __repr__(self) -> str:
        return (
            f"DraggableHandle(name={self.name!r}, position={self._position!r}, "
            f"hit_radius={self._hit_radius!r}, state={self._state.value!r})"
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def position(self) -> Point:
        return self._position

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def hit_radius(self) -> float:
        return self._hit_radius

    @property
    def state(self) -> HandleState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return self._state is HandleState.DRAGGING

    # ------------------------------------------------------------------
    # Hit testing
    # ------------------------------------------------------------------
    def hit_test(self, point: Point) -> bool:
        """Radius test used for grabbing and hover emphasis (edge inclusive)."""
        return self._position.distance_to(point) <= self._hit_radius

    def bounding_box(self) -> Rect:
        return Rect(self._position.x, self._position.y, self._width, self._height)

    def contains(self, point: Point) -> bool:
        """Generic box test shared by all scene objects; not used for dragging."""
        return self.bounding_box().contains(point)

    # ------------------------------------------------------------------
    # Drag state machine
    # ------------------------------------------------------------------
    def attach(self, router: PointerInputRouter) -> None:
        """Subscribe this handle's transitions to ``router``."""
        router.subscribe(PointerEventKind.DOWN, self.on_pointer_down)
        router.subscribe(PointerEventKind.UP, self.on_pointer_up)
        router.subscribe(PointerEventKind.MOVE, self.on_pointer_move)

    def detach(self, router: PointerInputRouter) -> None:
        router.unsubscribe(PointerEventKind.DOWN, self.on_pointer_down)
        router.unsubscribe(PointerEventKind.UP, self.on_pointer_up)
        router.unsubscribe(PointerEventKind.MOVE, self.on_pointer_move)

    def on_pointer_down(self, snapshot: PointerSnapshot) -> bool:
        """Start dragging when the press lands within the hit radius.

        Returns True when the handle took the press.
        """
        grabbed = not snapshot.claimed and self.hit_test(snapshot.position)
        previous = self._state
        self._state = HandleState.DRAGGING if grabbed else HandleState.IDLE
        if grabbed and previous is not HandleState.DRAGGING:
            logger.debug("%s: drag started at %s", self.name, snapshot.position)
        return grabbed

    def on_pointer_up(self, snapshot: PointerSnapshot) -> bool:
        if self._state is HandleState.DRAGGING:
            logger.debug("%s: drag ended at %s", self.name, self._position)
        self._state = HandleState.IDLE
        return False

    def on_pointer_move(self, snapshot: PointerSnapshot) -> bool:
        if self._state is not HandleState.DRAGGING:
            return False
        self._position = snapshot.position
        self.on_move(self._position)
        for listener in list(self._move_listeners):
            listener(self, self._position)
        return True

    def on_move(self, position: Point) -> None:
        """Called after every position change while dragging. No-op by default."""

    def add_move_listener(self, listener: MoveListener) -> None:
        self._move_listeners.append(listener)

    def remove_move_listener(self, listener: MoveListener) -> None:
        if listener in self._move_listeners:
            self._move_listeners.remove(listener)

    # ------------------------------------------------------------------
    # Per-frame hooks
    # ------------------------------------------------------------------
    def is_emphasized(self, pointer: Point) -> bool:
        """Hovered or dragging; hover uses the same radius test as grabbing."""
        return self.is_dragging or self.hit_test(pointer)

    def visual(self, pointer: Point) -> HandleVisual:
        return HandleVisual(
            position=self._position,
            width=self._width,
            height=self._height,
            radius=self._hit_radius,
            emphasized=self.is_emphasized(pointer),
        )

    def tick(self, scene: "Scene") -> None:
        pass
