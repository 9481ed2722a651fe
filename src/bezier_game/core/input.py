"""Pointer and keyboard state shared by the scene objects.

The router keeps one :class:`PointerSnapshot` describing the most recent known
pointer state. Every raw event replaces the snapshot and is then broadcast to
the observers subscribed to that event kind, synchronously and in
registration order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, FrozenSet, List, Optional, Set

from .geometry import ORIGIN, Point

logger = logging.getLogger(__name__)


# Bit values follow the DOM / Qt convention.
PRIMARY_BUTTON = 1
SECONDARY_BUTTON = 2
MIDDLE_BUTTON = 4


class PointerEventKind(str, Enum):
    DOWN = "pointer-down"
    UP = "pointer-up"
    MOVE = "pointer-move"


@dataclass(frozen=True)
class PointerButtons:
    """Which pointer buttons are currently held."""

    primary: bool = False
    middle: bool = False
    secondary: bool = False

    @classmethod
    def from_bitmask(cls, mask: int) -> "PointerButtons":
        return cls(
            primary=bool(mask & PRIMARY_BUTTON),
            middle=bool(mask & MIDDLE_BUTTON),
            secondary=bool(mask & SECONDARY_BUTTON),
        )

    @property
    def bitmask(self) -> int:
        mask = 0
        if self.primary:
            mask |= PRIMARY_BUTTON
        if self.secondary:
            mask |= SECONDARY_BUTTON
        if self.middle:
            mask |= MIDDLE_BUTTON
        return mask


@dataclass(frozen=True)
class PointerEvent:
    """Raw pointer event in screen coordinates.

    ``buttons`` is the bitmask of buttons held after the event; it is ignored
    for move events, which keep the previously known button state.
    """

    kind: PointerEventKind
    position: Point
    buttons: int = 0


@dataclass(frozen=True)
class PointerSnapshot:
    """Most recent known pointer state, in scene coordinates.

    ``claimed`` is only set while a pointer-down is being broadcast with
    exclusive claiming enabled: it tells later observers that an earlier one
    already took the press.
    """

    position: Point = ORIGIN
    previous: Point = ORIGIN
    buttons: PointerButtons = PointerButtons()
    claimed: bool = False


PointerObserver = Callable[[PointerSnapshot], Optional[bool]]


class PointerInputRouter:
    """Turns raw pointer events into snapshots and broadcasts them.

    Attributes:
        camera_offset: Added to screen positions to obtain scene positions.
            Always ``(0, 0)`` for now; panning would move it.
        exclusive: When True, only the first observer returning True from a
            pointer-down claims it; the rest see ``snapshot.claimed``.
    """

    def __init__(self, camera_offset: Point = ORIGIN, exclusive: bool = True) -> None:
        self.camera_offset = camera_offset
        self.exclusive = exclusive
        self._snapshot = PointerSnapshot()
        self._observers: Dict[PointerEventKind, List[PointerObserver]] = {
            kind: [] for kind in PointerEventKind
        }

    @property
    def snapshot(self) -> PointerSnapshot:
        return self._snapshot

    def subscribe(self, kind: PointerEventKind, observer: PointerObserver) -> None:
        self._observers[PointerEventKind(kind)].append(observer)

    def unsubscribe(self, kind: PointerEventKind, observer: PointerObserver) -> bool:
        observers = self._observers[PointerEventKind(kind)]
        if observer in observers:
            observers.remove(observer)
            return True
        return False

    def observers(self, kind: PointerEventKind) -> List[PointerObserver]:
        return list(self._observers[PointerEventKind(kind)])

    def to_scene(self, position: Point) -> Point:
        return position + self.camera_offset

    def dispatch(self, event: PointerEvent) -> int:
        """Update the snapshot from ``event`` and notify its observers.

        Returns:
            Number of observers that reported a claim (returned True).
        """
        if event.kind is PointerEventKind.MOVE:
            buttons = self._snapshot.buttons
        else:
            buttons = PointerButtons.from_bitmask(event.buttons)

        snapshot = PointerSnapshot(
            position=self.to_scene(event.position),
            previous=self._snapshot.position,
            buttons=buttons,
        )
        self._snapshot = snapshot

        claims = 0
        exclusive_down = self.exclusive and event.kind is PointerEventKind.DOWN
        for observer in list(self._observers[event.kind]):
            delivered = replace(snapshot, claimed=True) if exclusive_down and claims else snapshot
            if observer(delivered):
                claims += 1
        if claims and event.kind is not PointerEventKind.MOVE:
            logger.debug("%s at %s claimed by %d observer(s)", event.kind.value, snapshot.position, claims)
        return claims

    def refresh(self, position: Point) -> PointerSnapshot:
        """Per-frame refresh of the pointer position; nothing is broadcast."""
        self._snapshot = PointerSnapshot(
            position=self.to_scene(position),
            previous=self._snapshot.position,
            buttons=self._snapshot.buttons,
        )
        return self._snapshot


class KeyTracker:
    """Set of keys currently held down, keyed by their text or name."""

    def __init__(self) -> None:
        self._pressed: Set[str] = set()

    def press(self, key: str) -> None:
        self._pressed.add(key)

    def release(self, key: str) -> None:
        self._pressed.discard(key)

    def is_pressed(self, key: str) -> bool:
        return key in self._pressed

    def pressed(self) -> FrozenSet[str]:
        return frozenset(self._pressed)

    def clear(self) -> None:
        self._pressed.clear()
