import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

pytest.importorskip("PySide6")
pytest.importorskip("pyqtgraph")

from PySide6.QtCore import Qt  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402

from bezier_game.config import default_scene_config  # noqa: E402
from bezier_game.gui import CurveEditor, resolve_scene_config  # noqa: E402
from bezier_game.gui.canvas.curve_canvas import buttons_bitmask  # noqa: E402


def test_editor_draws_a_frame() -> None:
    app = QApplication.instance() or QApplication([])
    editor = CurveEditor(default_scene_config(), fps=30)

    frame = editor._on_frame()

    assert len(frame.polyline) == 25
    assert len(editor.canvas.renderer.handle_spots(frame.handles)) == 5
    editor.close()
    app.processEvents()


def test_buttons_bitmask() -> None:
    assert buttons_bitmask(Qt.MouseButton.LeftButton) == 1
    assert buttons_bitmask(Qt.MouseButton.LeftButton | Qt.MouseButton.MiddleButton) == 5
    assert buttons_bitmask(Qt.MouseButton.NoButton) == 0


def test_resolve_scene_config_prefers_explicit_file(scene_file) -> None:
    assert resolve_scene_config(scene_file).canvas.width == 400
    assert resolve_scene_config().canvas.width == 800
