"""Plot widget that feeds Qt input into the scene and draws its frames."""

from __future__ import annotations

import logging
from typing import Optional

import pyqtgraph as pg
from PySide6.QtCore import QPoint, Qt
from PySide6.QtGui import QCursor
from PySide6.QtWidgets import QWidget

from ...core import FrameData, Point, PointerEvent, PointerEventKind, Scene
from ...core.input import MIDDLE_BUTTON, PRIMARY_BUTTON, SECONDARY_BUTTON
from .curve_renderer import CurveRenderer


logger = logging.getLogger(__name__)


def buttons_bitmask(buttons) -> int:
    """Convert Qt mouse button flags into the router's button bitmask."""
    mask = 0
    if buttons & Qt.MouseButton.LeftButton:
        mask |= PRIMARY_BUTTON
    if buttons & Qt.MouseButton.RightButton:
        mask |= SECONDARY_BUTTON
    if buttons & Qt.MouseButton.MiddleButton:
        mask |= MIDDLE_BUTTON
    return mask


def key_name(event) -> str:
    text = event.text()
    if text and text.isprintable():
        return text
    try:
        return Qt.Key(event.key()).name
    except ValueError:
        return str(event.key())


class CurveCanvas(pg.PlotWidget):
    """Canvas in pixel coordinates with the origin at the top-left corner.

    The view range always matches the widget size, so one scene unit is one
    pixel. PyQtGraph's own pan/zoom and context menu are disabled; every mouse
    event is turned into a :class:`PointerEvent` for the scene's router.
    """

    def __init__(self, curve_scene: Scene, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent=parent, background="w")
        self.curve_scene = curve_scene

        plot_item = self.getPlotItem()
        plot_item.hideAxis("left")
        plot_item.hideAxis("bottom")
        plot_item.hideButtons()
        plot_item.setMenuEnabled(False)
        plot_item.layout.setContentsMargins(0, 0, 0, 0)

        view_box = plot_item.getViewBox()
        view_box.setMouseEnabled(x=False, y=False)
        view_box.invertY(True)
        view_box.enableAutoRange(enable=False)

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.renderer = CurveRenderer(plot_item)
        self._sync_view_range()

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------
    def widget_to_scene(self, pos: QPoint) -> Point:
        view_pos = self.getPlotItem().getViewBox().mapSceneToView(self.mapToScene(pos))
        return Point(float(view_pos.x()), float(view_pos.y()))

    def _sync_view_range(self) -> None:
        width = max(self.width(), 1)
        height = max(self.height(), 1)
        self.getPlotItem().getViewBox().setRange(
            xRange=(0, width), yRange=(0, height), padding=0
        )

    # ------------------------------------------------------------------
    # Frame pass
    # ------------------------------------------------------------------
    def refresh_pointer(self) -> None:
        """Per-frame pointer refresh so hover emphasis follows the cursor."""
        local = self.mapFromGlobal(QCursor.pos())
        self.curve_scene.router.refresh(self.widget_to_scene(local))

    def draw_frame(self) -> FrameData:
        frame = self.curve_scene.frame()
        self.renderer.draw(frame)
        return frame

    # ------------------------------------------------------------------
    # Qt event handlers
    # ------------------------------------------------------------------
    def _dispatch(self, kind: PointerEventKind, event) -> None:
        position = self.widget_to_scene(event.position().toPoint())
        self.curve_scene.router.dispatch(
            PointerEvent(kind=kind, position=position, buttons=buttons_bitmask(event.buttons()))
        )

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        self._dispatch(PointerEventKind.DOWN, event)
        event.accept()

    def mouseReleaseEvent(self, event) -> None:  # type: ignore[override]
        self._dispatch(PointerEventKind.UP, event)
        event.accept()

    def mouseMoveEvent(self, event) -> None:  # type: ignore[override]
        self._dispatch(PointerEventKind.MOVE, event)
        event.accept()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        if not event.isAutoRepeat():
            self.curve_scene.keys.press(key_name(event))
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event) -> None:  # type: ignore[override]
        if not event.isAutoRepeat():
            self.curve_scene.keys.release(key_name(event))
        super().keyReleaseEvent(event)

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._sync_view_range()
