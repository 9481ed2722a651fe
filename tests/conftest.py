from pathlib import Path

import pytest

from bezier_game.settings import reset_settings_cache


SCENE_YAML = """\
canvas:
  width: 400
  height: 300
curve:
  resolution: 10
  use_points: 3
handles:
  - {x: 50, y: 250, name: start}
  - {x: 200, y: 50}
  - {x: 350, y: 250, name: end}
  - {x: 390, y: 20, width: 6, height: 6}
"""


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    for name in ("SCENE", "FPS", "CANVAS_WIDTH", "CANVAS_HEIGHT"):
        monkeypatch.delenv(f"BEZIER_GAME_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def scene_file(tmp_path: Path) -> Path:
    path = tmp_path / "scene.yaml"
    path.write_text(SCENE_YAML, encoding="utf-8")
    return path
