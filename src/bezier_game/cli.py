"""
Command-line interface for the interactive Bezier curve.

Usage:
    bezier-game gui [path/to/scene.yaml]
    bezier-game validate path/to/scene.yaml
    bezier-game scaffold path/to/scene.yaml [--width 800] [--height 600]
    bezier-game preview path/to/scene.yaml [--output curve.png]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from .config import SceneConfig, load_scene_config
from .core import FrameData, Scene, effective_denominator
from .scaffold import write_stub

Logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(message)s")


def add_shared_scene_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "scene",
        type=Path,
        help="Path to the YAML file describing the curve scene.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bezier-game",
        description="Interactive Bezier curve with draggable control points.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # gui command
    gui_parser = subparsers.add_parser(
        "gui",
        help="Open the interactive curve window.",
    )
    gui_parser.add_argument(
        "scene",
        type=Path,
        nargs="?",
        help="Optional scene file (defaults to BEZIER_GAME_SCENE or the built-in layout).",
    )

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a scene file and print a summary.",
    )
    add_shared_scene_argument(validate_parser)

    # scaffold command
    scaffold_parser = subparsers.add_parser(
        "scaffold",
        help="Create a stub YAML scene with the default handle layout.",
    )
    scaffold_parser.add_argument("path", type=Path, help="Path where the YAML stub will be written.")
    scaffold_parser.add_argument("--width", type=int, default=800, help="Canvas width in pixels (default 800).")
    scaffold_parser.add_argument("--height", type=int, default=600, help="Canvas height in pixels (default 600).")
    scaffold_parser.add_argument("--resolution", type=int, default=None, help="Curve resolution (default 25).")
    scaffold_parser.add_argument(
        "--use-points", type=int, default=None, help="Number of leading handles feeding the curve (default 5)."
    )

    # preview command
    preview_parser = subparsers.add_parser(
        "preview",
        help="Tessellate the curve without opening a window (optional PNG preview).",
    )
    add_shared_scene_argument(preview_parser)
    preview_parser.add_argument("--output", type=Path, help="Optional path to save a curve preview PNG.")

    return parser


def summarize_scene(scene_path: Path, config: Optional[SceneConfig] = None) -> str:
    if config is None:
        config = load_scene_config(scene_path)
    denominator = effective_denominator(config.curve.resolution)
    lines = [
        f"Scene: {scene_path}",
        f"  Canvas: {config.canvas.width}x{config.canvas.height} px",
        f"  Curve: resolution {config.curve.resolution} "
        f"({denominator} steps, {denominator + 1} samples) | use_points {config.curve.use_points}",
        f"  Drag policy: {config.drag_policy}",
        f"  Handles ({len(config.handles)}):",
    ]
    for idx, handle in enumerate(config.handles):
        marker = "*" if idx < config.curve.use_points else " "
        lines.append(
            f"   {marker}{idx + 1}. {handle.name or f'P{idx}'} at ({handle.x}, {handle.y}) "
            f"size {handle.width}x{handle.height} | hit radius {handle.effective_hit_radius()}"
        )
    if config.curve.resolution % 2:
        lines.append(
            f"  Note: odd resolution {config.curve.resolution} samples like {config.curve.resolution - 1}."
        )
    return "\n".join(lines)


def validate_command(args: argparse.Namespace) -> int:
    scene_path: Path = args.scene
    if not scene_path.exists():
        Logger.error("Scene file not found: %s", scene_path)
        return 2
    try:
        config = load_scene_config(scene_path)
    except (ValidationError, ValueError) as exc:
        Logger.error("Scene validation failed: %s", exc)
        return 1
    print(summarize_scene(scene_path, config))
    return 0


def scaffold_command(args: argparse.Namespace) -> int:
    try:
        written = write_stub(
            args.path,
            width=args.width,
            height=args.height,
            resolution=args.resolution,
            use_points=args.use_points,
        )
    except (ValidationError, ValueError) as exc:
        Logger.error("Could not create scene stub: %s", exc)
        return 1
    Logger.info("Scene stub written to %s", written)
    return 0


def preview_command(args: argparse.Namespace) -> int:
    scene_path: Path = args.scene
    if not scene_path.exists():
        Logger.error("Scene file not found: %s", scene_path)
        return 2

    try:
        config = load_scene_config(scene_path)
        frame = Scene.from_config(config).frame()
    except Exception as exc:  # noqa: BLE001
        Logger.error("Preview failed: %s", exc)
        return 1

    Logger.info("Preview succeeded: %d samples, %d handles", len(frame.polyline), len(frame.handles))

    if args.output:
        try:
            _write_preview_image(args.output, config, frame)
            Logger.info("Preview image saved to %s", args.output)
        except Exception as exc:  # noqa: BLE001
            Logger.error("Failed to write preview image: %s", exc)
            return 1

    return 0


def gui_command(args: argparse.Namespace) -> int:
    try:
        from .gui import run
    except Exception as exc:  # noqa: BLE001
        Logger.error("GUI is unavailable: %s", exc)
        return 1

    scene_path: Optional[Path] = args.scene
    if scene_path is not None and not scene_path.exists():
        Logger.error("Scene file not found: %s", scene_path)
        return 2
    run(scene_path)
    return 0


def _write_preview_image(output_path: Path, config: SceneConfig, frame: FrameData) -> None:
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(6, 5))
    curve = frame.polyline_array()
    if curve.shape[0]:
        ax.plot(curve[:, 0], curve[:, 1], color="black", linewidth=1.5, label="Curve")
    xs = [handle.position.x for handle in frame.handles]
    ys = [handle.position.y for handle in frame.handles]
    ax.plot(xs, ys, linestyle="--", color="tab:gray", alpha=0.5)
    ax.scatter(xs, ys, color="tab:blue", zorder=3, label="Handles")
    ax.set_xlim(0, config.canvas.width)
    ax.set_ylim(config.canvas.height, 0)
    ax.set_aspect("equal", adjustable="box")
    ax.legend(loc="upper right")
    ax.set_title("Curve Preview")
    ax.set_xlabel("X (px)")
    ax.set_ylabel("Y (px)")
    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.verbose)

    if args.command == "gui":
        return gui_command(args)
    if args.command == "validate":
        return validate_command(args)
    if args.command == "scaffold":
        return scaffold_command(args)
    if args.command == "preview":
        return preview_command(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
