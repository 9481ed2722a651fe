import pytest

from bezier_game.config import ConfigurationError, default_scene_config
from bezier_game.core import (
    DraggableHandle,
    Point,
    PointerEvent,
    PointerEventKind,
    PointerInputRouter,
    Scene,
)


def _handles(*coords):
    return [DraggableHandle(Point(x, y), name=f"P{i}") for i, (x, y) in enumerate(coords)]


def _press(scene: Scene, x: float, y: float) -> None:
    scene.router.dispatch(PointerEvent(PointerEventKind.DOWN, Point(x, y), buttons=1))


def _move(scene: Scene, x: float, y: float) -> None:
    scene.router.dispatch(PointerEvent(PointerEventKind.MOVE, Point(x, y)))


def _release(scene: Scene, x: float, y: float) -> None:
    scene.router.dispatch(PointerEvent(PointerEventKind.UP, Point(x, y)))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"resolution": 1},
        {"use_points": -1},
        {"drag_policy": "nearest"},
    ],
)
def test_invalid_scene_settings_are_rejected(kwargs) -> None:
    with pytest.raises(ConfigurationError):
        Scene(_handles((0.0, 0.0)), **kwargs)


def test_scene_requires_handles() -> None:
    with pytest.raises(ConfigurationError):
        Scene([])


def test_use_points_truncates_control_points() -> None:
    scene = Scene(_handles((0, 0), (10, 0), (20, 0), (30, 0)), resolution=4, use_points=2)

    assert scene.control_points() == [Point(0, 0), Point(10, 0)]
    assert scene.polyline()[-1] == Point(10.0, 0.0)


def test_moving_an_inactive_handle_leaves_the_curve_unchanged() -> None:
    scene = Scene(_handles((0, 0), (50, 50), (300, 300)), resolution=8, use_points=2)
    before = scene.polyline()

    _press(scene, 300.0, 300.0)
    _move(scene, 320.0, 280.0)
    _release(scene, 320.0, 280.0)

    assert scene.handles[2].position == Point(320.0, 280.0)
    assert scene.polyline() == before


def test_use_points_larger_than_handle_count_uses_all() -> None:
    scene = Scene(_handles((0, 0), (10, 10)), use_points=9)
    assert scene.active_count == 2
    assert len(scene.control_points()) == 2


def test_use_points_zero_gives_empty_polyline() -> None:
    scene = Scene(_handles((0, 0), (10, 10)), use_points=0)
    frame = scene.frame()
    assert frame.polyline == []
    assert frame.polyline_array().shape == (0, 2)
    assert len(frame.handles) == 2


def test_dragging_a_control_point_reshapes_the_curve() -> None:
    scene = Scene(_handles((0, 0), (50, 0), (100, 0)), resolution=2, use_points=3)
    assert scene.polyline()[1] == Point(50.0, 0.0)

    _press(scene, 50.0, 0.0)
    _move(scene, 50.0, 100.0)

    assert scene.dragging_handles() == [scene.handles[1]]
    assert scene.polyline()[1] == Point(50.0, 50.0)


def test_first_policy_grabs_only_the_earliest_overlapping_handle() -> None:
    scene = Scene(_handles((100, 100), (104, 100)), drag_policy="first")

    _press(scene, 102.0, 100.0)
    _move(scene, 200.0, 200.0)

    assert scene.handles[0].position == Point(200.0, 200.0)
    assert scene.handles[1].position == Point(104.0, 100.0)
    assert scene.dragging_handles() == [scene.handles[0]]


def test_all_policy_moves_every_overlapping_handle() -> None:
    scene = Scene(_handles((100, 100), (104, 100)), drag_policy="all")

    _press(scene, 102.0, 100.0)
    _move(scene, 200.0, 200.0)

    assert [h.position for h in scene.handles] == [Point(200.0, 200.0)] * 2


def test_router_can_be_shared() -> None:
    router = PointerInputRouter()
    scene = Scene(_handles((0, 0)), router=router)
    assert scene.router is router
    assert len(router.observers(PointerEventKind.DOWN)) == 1


def test_frame_reports_hover_from_the_pointer_snapshot() -> None:
    scene = Scene.from_config(default_scene_config())
    first = scene.handles[0]

    scene.router.refresh(first.position)
    frame = scene.frame()

    assert len(frame.polyline) == 25
    assert frame.polyline[0] == first.position
    assert frame.polyline[-1] == scene.handles[-1].position
    assert [visual.emphasized for visual in frame.handles] == [True, False, False, False, False]
    assert frame.pointer.position == first.position


def test_from_config_names_and_sizes_handles() -> None:
    scene = Scene.from_config(default_scene_config(400, 400))

    assert [h.name for h in scene.handles] == ["P0", "P1", "P2", "P3", "P4"]
    assert scene.handles[2].position == Point(200.0, 125.0)
    assert scene.curve.resolution == 25
    assert scene.evaluator.sample_count == 25
    assert scene.router.exclusive
