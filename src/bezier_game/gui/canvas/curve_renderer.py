"""Draws one frame of the scene onto a PyQtGraph plot."""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pyqtgraph as pg

from ...core import FrameData, HandleVisual


CURVE_COLOR: Tuple[int, ...] = (0, 0, 0)
CURVE_WIDTH = 1.5

# (pen RGBA, brush RGB) for each handle appearance.
EMPHASIZED_STYLE = ((0, 0, 0, 128), (0xFF, 0xFF, 0xFF))
IDLE_STYLE = ((80, 80, 80, 50), (0x88, 0x88, 0x88))


class CurveRenderer:
    """Renders curve polylines and handle markers for a scene.

    The curve is stroked as an open path; each handle is drawn as a circle of
    its own size, bright while hovered or dragged and gray otherwise.

    Attributes:
        plot_item: PyQtGraph plot item the items are added to
    """

    def __init__(self, plot_item: pg.PlotItem):
        self.plot_item = plot_item
        self._curve_item = pg.PlotCurveItem(pen=pg.mkPen(CURVE_COLOR, width=CURVE_WIDTH))
        self._curve_item.setZValue(1)
        self._handle_item = pg.ScatterPlotItem(pxMode=True)
        self._handle_item.setZValue(10)
        self.plot_item.addItem(self._curve_item)
        self.plot_item.addItem(self._handle_item)
        self._emphasized_pen = pg.mkPen(EMPHASIZED_STYLE[0])
        self._emphasized_brush = pg.mkBrush(EMPHASIZED_STYLE[1])
        self._idle_pen = pg.mkPen(IDLE_STYLE[0])
        self._idle_brush = pg.mkBrush(IDLE_STYLE[1])

    def draw(self, frame: FrameData) -> None:
        """Replace the drawn curve and handles with the content of ``frame``."""
        points = frame.polyline_array()
        if points.shape[0] == 0:
            self._curve_item.clear()
        else:
            self._curve_item.setData(points[:, 0], points[:, 1])
        self._handle_item.setData(spots=self.handle_spots(frame.handles))

    def handle_spots(self, handles: List[HandleVisual]) -> List[Dict[str, Any]]:
        """Build scatter spots for ``handles``, in scene order."""
        spots: List[Dict[str, Any]] = []
        for handle in handles:
            pen, brush = self.style_for(handle)
            spots.append(
                {
                    "pos": handle.position.as_tuple(),
                    "size": max(handle.width, handle.height),
                    "symbol": "o",
                    "pen": pen,
                    "brush": brush,
                }
            )
        return spots

    def style_for(self, handle: HandleVisual):
        if handle.emphasized:
            return self._emphasized_pen, self._emphasized_brush
        return self._idle_pen, self._idle_brush

    def clear(self) -> None:
        self._curve_item.clear()
        self._handle_item.clear()
