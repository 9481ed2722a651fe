from typing import List

from bezier_game.core import (
    KeyTracker,
    Point,
    PointerButtons,
    PointerEvent,
    PointerEventKind,
    PointerInputRouter,
    PointerSnapshot,
)
from bezier_game.core.input import MIDDLE_BUTTON, PRIMARY_BUTTON, SECONDARY_BUTTON


def test_button_bitmask_mapping() -> None:
    buttons = PointerButtons.from_bitmask(PRIMARY_BUTTON | MIDDLE_BUTTON)
    assert buttons.primary and buttons.middle and not buttons.secondary
    assert buttons.bitmask == 5
    assert PointerButtons.from_bitmask(SECONDARY_BUTTON).secondary
    assert PointerButtons().bitmask == 0


def test_observers_are_called_in_registration_order() -> None:
    router = PointerInputRouter()
    calls: List[str] = []
    router.subscribe(PointerEventKind.UP, lambda snap: calls.append("first"))
    router.subscribe(PointerEventKind.UP, lambda snap: calls.append("second"))
    router.subscribe(PointerEventKind.DOWN, lambda snap: calls.append("down"))

    router.dispatch(PointerEvent(PointerEventKind.UP, Point(1.0, 1.0)))

    assert calls == ["first", "second"]


def test_snapshot_tracks_position_and_previous() -> None:
    router = PointerInputRouter()
    seen: List[PointerSnapshot] = []
    router.subscribe(PointerEventKind.MOVE, seen.append)

    router.dispatch(PointerEvent(PointerEventKind.MOVE, Point(10.0, 20.0)))
    router.dispatch(PointerEvent(PointerEventKind.MOVE, Point(15.0, 25.0)))

    assert seen[-1].position == Point(15.0, 25.0)
    assert seen[-1].previous == Point(10.0, 20.0)
    assert router.snapshot is seen[-1]


def test_move_keeps_previous_buttons() -> None:
    router = PointerInputRouter()
    router.dispatch(PointerEvent(PointerEventKind.DOWN, Point(0.0, 0.0), buttons=PRIMARY_BUTTON))
    router.dispatch(PointerEvent(PointerEventKind.MOVE, Point(5.0, 5.0), buttons=0))
    assert router.snapshot.buttons.primary

    router.dispatch(PointerEvent(PointerEventKind.UP, Point(5.0, 5.0), buttons=0))
    assert not router.snapshot.buttons.primary


def test_refresh_updates_position_without_broadcasting() -> None:
    router = PointerInputRouter()
    calls: List[PointerSnapshot] = []
    router.subscribe(PointerEventKind.MOVE, calls.append)
    router.dispatch(PointerEvent(PointerEventKind.DOWN, Point(1.0, 1.0), buttons=PRIMARY_BUTTON))

    snapshot = router.refresh(Point(40.0, 30.0))

    assert calls == []
    assert snapshot.position == Point(40.0, 30.0)
    assert snapshot.previous == Point(1.0, 1.0)
    assert snapshot.buttons.primary


def test_exclusive_down_marks_later_observers_claimed() -> None:
    router = PointerInputRouter(exclusive=True)
    flags: List[bool] = []

    def grabbing(snapshot: PointerSnapshot) -> bool:
        flags.append(snapshot.claimed)
        return not snapshot.claimed

    router.subscribe(PointerEventKind.DOWN, grabbing)
    router.subscribe(PointerEventKind.DOWN, grabbing)

    claims = router.dispatch(PointerEvent(PointerEventKind.DOWN, Point(0.0, 0.0)))

    assert claims == 1
    assert flags == [False, True]


def test_non_exclusive_down_never_marks_claims() -> None:
    router = PointerInputRouter(exclusive=False)
    router.subscribe(PointerEventKind.DOWN, lambda snap: not snap.claimed)
    router.subscribe(PointerEventKind.DOWN, lambda snap: not snap.claimed)

    assert router.dispatch(PointerEvent(PointerEventKind.DOWN, Point(0.0, 0.0))) == 2


def test_unsubscribe_and_camera_offset() -> None:
    router = PointerInputRouter(camera_offset=Point(100.0, 0.0))
    observer = lambda snap: None  # noqa: E731
    router.subscribe(PointerEventKind.MOVE, observer)

    assert router.unsubscribe(PointerEventKind.MOVE, observer)
    assert not router.unsubscribe(PointerEventKind.MOVE, observer)
    assert router.observers(PointerEventKind.MOVE) == []

    router.dispatch(PointerEvent(PointerEventKind.MOVE, Point(5.0, 5.0)))
    assert router.snapshot.position == Point(105.0, 5.0)


def test_key_tracker() -> None:
    keys = KeyTracker()
    keys.press("a")
    keys.press("Key_Shift")
    keys.release("a")
    keys.release("never-pressed")

    assert not keys.is_pressed("a")
    assert keys.pressed() == frozenset({"Key_Shift"})
    keys.clear()
    assert keys.pressed() == frozenset()
