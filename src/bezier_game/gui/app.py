"""PySide6/PyQtGraph window for editing the curve interactively."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication, QMainWindow

from ..config import SceneConfig, default_scene_config, load_scene_config
from ..core import DraggableHandle, FrameData, Point, Scene
from ..settings import get_settings
from .canvas import CurveCanvas


logger = logging.getLogger(__name__)


class CurveEditor(QMainWindow):
    """Main window: one canvas, a status bar and the frame timer.

    Input reaches the scene through the canvas event handlers as Qt delivers
    it; the timer then runs one frame pass, so every frame sees the handle
    positions left by all input processed before it.
    """

    def __init__(self, config: SceneConfig, fps: int = 60):
        super().__init__()
        self.setWindowTitle("Bezier Curve")
        self.config = config
        self.state = Scene.from_config(config)
        self.canvas = CurveCanvas(self.state, self)
        self.setCentralWidget(self.canvas)
        self.resize(config.canvas.width, config.canvas.height)

        for handle in self.state.handles:
            handle.add_move_listener(self._on_handle_moved)

        self._frame_interval_ms = max(1, int(round(1000.0 / fps)))
        self._timer = QTimer(self)
        self._timer.timeout.connect(self._on_frame)
        self._timer.start(self._frame_interval_ms)

        self.statusBar().showMessage(
            f"{len(self.state.handles)} handles | resolution {self.state.curve.resolution}"
        )

    def _on_frame(self) -> FrameData:
        self.canvas.refresh_pointer()
        return self.canvas.draw_frame()

    def _on_handle_moved(self, handle: DraggableHandle, position: Point) -> None:
        self.statusBar().showMessage(f"{handle.name} moved to ({position.x:.1f}, {position.y:.1f})")

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        if event.key() == Qt.Key.Key_Escape:
            self.close()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._timer.stop()
        super().closeEvent(event)


def resolve_scene_config(scene_path: Optional[Path] = None) -> SceneConfig:
    """Load ``scene_path``, the configured default scene, or the built-in layout."""
    settings = get_settings()
    path = scene_path or settings.scene
    if path is not None:
        logger.info("Loading scene %s", path)
        return load_scene_config(path)
    return default_scene_config(settings.canvas_width, settings.canvas_height)


def run(scene_path: Optional[Path] = None) -> None:
    config = resolve_scene_config(scene_path)
    app = QApplication.instance() or QApplication([])

    app.setStyle("Fusion")
    dark_palette = QPalette()
    dark_palette.setColor(QPalette.ColorRole.Window, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ColorRole.WindowText, QColor(255, 255, 255))
    dark_palette.setColor(QPalette.ColorRole.Base, QColor(35, 35, 35))
    dark_palette.setColor(QPalette.ColorRole.Text, QColor(255, 255, 255))
    dark_palette.setColor(QPalette.ColorRole.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ColorRole.ButtonText, QColor(255, 255, 255))
    dark_palette.setColor(QPalette.ColorRole.Highlight, QColor(42, 130, 218))
    app.setPalette(dark_palette)

    editor = CurveEditor(config, fps=get_settings().fps)
    editor.show()
    app.exec()
