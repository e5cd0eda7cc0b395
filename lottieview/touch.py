"""Multi-touch gesture tracking: pinch zoom, rotation and pan deltas."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence
from dataclasses import dataclass

Point = tuple[float, float]


def _div(a: float, b: float) -> float:
    """Float division that yields inf/nan instead of raising on zero."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a)
    return a / b


class TouchPhase(enum.Enum):
    """Lifecycle stage of a single touch."""

    STARTED = "started"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


class PinchType(enum.Enum):
    """Axis along which a two-finger pinch scales."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    PROPORTIONAL = "proportional"

    @classmethod
    def classify(cls, positions: Sequence[Point]) -> PinchType:
        """Pick a pinch axis from the touch positions, ordered by touch id.

        Two fingers at roughly the same height pinch horizontally, two roughly
        above one another pinch vertically; anything else is proportional.
        """
        if len(positions) != 2:
            return cls.PROPORTIONAL
        (x0, y0), (x1, y1) = positions
        dx = abs(x0 - x1)
        dy = abs(y0 - y1)
        if dx > 3.0 * dy:
            return cls.HORIZONTAL
        if dy > 3.0 * dx:
            return cls.VERTICAL
        return cls.PROPORTIONAL


@dataclass(frozen=True)
class MultiTouchInfo:
    """Gesture deltas between the previous and the current frame."""

    num_touches: int
    zoom_delta: float
    zoom_delta_2d: tuple[float, float]
    rotation_delta: float
    translation_delta: tuple[float, float]
    zoom_centre: Point


@dataclass(frozen=True)
class _DynGestureState:
    avg_distance: float
    avg_abs_distance2: tuple[float, float]
    avg_pos: Point
    heading: float


@dataclass
class _GestureState:
    pinch_type: PinchType
    previous: _DynGestureState | None
    current: _DynGestureState


class TouchState:
    """Tracks the touches of one device and derives gesture information."""

    def __init__(self) -> None:
        self._active: dict[int, Point] = {}
        self._gesture: _GestureState | None = None
        self._added_or_removed = False

    def _positions(self) -> list[Point]:
        return [self._active[key] for key in sorted(self._active)]

    def add_event(self, touch_id: int, phase: TouchPhase, x: float, y: float) -> None:
        """Record a touch event for ``touch_id`` at ``(x, y)``."""
        phase = TouchPhase(phase)
        if phase is TouchPhase.STARTED:
            self._active[touch_id] = (float(x), float(y))
            self._added_or_removed = True
        elif phase is TouchPhase.MOVED:
            if touch_id in self._active:
                self._active[touch_id] = (float(x), float(y))
        else:
            self._active.pop(touch_id, None)
            self._added_or_removed = True

    def end_frame(self) -> None:
        """Advance the gesture by one frame; call once per frame."""
        self._update_gesture()
        if self._added_or_removed and self._gesture is not None:
            # Finger count changes make averages jump; drop the delta for this frame.
            self._gesture.previous = None
        self._added_or_removed = False

    def info(self) -> MultiTouchInfo | None:
        """Gesture deltas for the last frame, or ``None`` without touches."""
        state = self._gesture
        if state is None:
            return None
        current = state.current
        previous = state.previous if state.previous is not None else current
        num_touches = len(self._active)

        if num_touches > 1:
            zoom_delta = _div(current.avg_distance, previous.avg_distance)
            if state.pinch_type is PinchType.HORIZONTAL:
                zoom_2d = (
                    _div(current.avg_abs_distance2[0], previous.avg_abs_distance2[0]),
                    1.0,
                )
            elif state.pinch_type is PinchType.VERTICAL:
                zoom_2d = (
                    1.0,
                    _div(current.avg_abs_distance2[1], previous.avg_abs_distance2[1]),
                )
            else:
                zoom_2d = (zoom_delta, zoom_delta)
        else:
            zoom_delta = 1.0
            zoom_2d = (1.0, 1.0)

        return MultiTouchInfo(
            num_touches=num_touches,
            zoom_delta=zoom_delta,
            zoom_delta_2d=zoom_2d,
            rotation_delta=current.heading - previous.heading,
            translation_delta=(
                current.avg_pos[0] - previous.avg_pos[0],
                current.avg_pos[1] - previous.avg_pos[1],
            ),
            zoom_centre=current.avg_pos,
        )

    def _update_gesture(self) -> None:
        dyn_state = self._calc_dynamic_state()
        if dyn_state is None:
            self._gesture = None
        elif self._gesture is not None:
            self._gesture.previous = self._gesture.current
            self._gesture.current = dyn_state
        else:
            self._gesture = _GestureState(
                pinch_type=PinchType.classify(self._positions()),
                previous=None,
                current=dyn_state,
            )

    def _calc_dynamic_state(self) -> _DynGestureState | None:
        positions = self._positions()
        if not positions:
            return None
        n = len(positions)
        avg_x = sum(x for x, _ in positions) / n
        avg_y = sum(y for _, y in positions) / n
        avg_distance = sum(math.hypot(avg_x - x, avg_y - y) for x, y in positions) / n
        abs_x = sum(abs(avg_x - x) for x, _ in positions) / n
        abs_y = sum(abs(avg_y - y) for _, y in positions) / n
        first_x, first_y = positions[0]
        heading = math.atan2(avg_y - first_y, avg_x - first_x)
        return _DynGestureState(
            avg_distance=avg_distance,
            avg_abs_distance2=(abs_x, abs_y),
            avg_pos=(avg_x, avg_y),
            heading=heading,
        )

    def __repr__(self) -> str:
        touches = ", ".join(f"#{k}: {v}" for k, v in sorted(self._active.items()))
        return f"TouchState(touches=[{touches}], gesture={self._gesture!r})"