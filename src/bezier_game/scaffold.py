"""Scene scaffolding utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml

from .config import CurveConfig, default_scene_config, scene_config_to_dict


def write_stub(
    target_path: Path,
    width: int = 800,
    height: int = 600,
    resolution: Optional[int] = None,
    use_points: Optional[int] = None,
) -> Path:
    """Write a scene YAML with the default handle layout for a canvas size.

    Returns:
        The resolved path that was written.
    """
    target_path = Path(target_path).resolve()
    target_path.parent.mkdir(parents=True, exist_ok=True)

    config = default_scene_config(width, height)
    if resolution is not None or use_points is not None:
        config.curve = CurveConfig(
            resolution=resolution if resolution is not None else config.curve.resolution,
            use_points=use_points if use_points is not None else config.curve.use_points,
        )

    stub = scene_config_to_dict(config)
    target_path.write_text(yaml.safe_dump(stub, sort_keys=False), encoding="utf-8")
    return target_path
