"""Frame-time statistics over a sliding window of samples."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

SLIDING_WINDOW_SIZE = 100

_U64_MAX = 2**64 - 1

_AA_NAMES = {
    "area": "Analytic Area",
    "msaa16": "16xMSAA",
    "msaa8": "8xMSAA",
}


def round_up(n: int, f: int) -> int:
    """Round ``n`` up to the nearest multiple of ``f``."""
    if n < 1 or f < 1:
        raise ValueError(f"round_up needs positive arguments, got n={n}, f={f}")
    return n - 1 - (n - 1) % f + f


def bar_color(sample_us: int) -> tuple[int, int, int]:
    """RGB colour of a frame-time bar for a sample in microseconds."""
    if sample_us <= 16_667:
        return (100, 143, 255)
    if sample_us <= 33_334:
        return (255, 176, 0)
    return (220, 38, 127)


def _fmt_number(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Snapshot:
    """Frame-time summary in milliseconds."""

    fps: float
    frame_time_ms: float
    frame_time_min_ms: float
    frame_time_max_ms: float

    def display_max(self) -> float:
        """Upper bound of the frame-time graph in milliseconds.

        The maximum sample is used unless it exceeds three times the average,
        in which case 4/3 of the average rounded up to a multiple of 5 ms is.
        """
        if self.frame_time_max_ms > 3.0 * self.frame_time_ms:
            return float(round_up(int(1.33334 * self.frame_time_ms), 5))
        return self.frame_time_max_ms

    def labels(
        self,
        viewport_width: float,
        viewport_height: float,
        vsync: bool,
        aa_method: str,
    ) -> list[str]:
        """Text lines of the statistics overlay.

        ``aa_method`` is one of ``"area"``, ``"msaa8"`` or ``"msaa16"``.
        """
        try:
            aa_name = _AA_NAMES[aa_method.lower()]
        except KeyError:
            raise ValueError(f"unknown antialiasing method {aa_method!r}") from None
        return [
            f"Frame Time: {self.frame_time_ms:.2f} ms",
            f"Frame Time (min): {self.frame_time_min_ms:.2f} ms",
            f"Frame Time (max): {self.frame_time_max_ms:.2f} ms",
            f"VSync: {'on' if vsync else 'off'}",
            f"AA method: {aa_name}",
            f"Resolution: {_fmt_number(viewport_width)}x{_fmt_number(viewport_height)}",
        ]


class Stats:
    """Running frame-time statistics with a fixed-size sample window."""

    def __init__(self) -> None:
        self._count = 0
        self._sum = 0
        self._min = _U64_MAX
        self._max = 0
        self._samples: deque[int] = deque()

    def samples(self) -> Iterator[int]:
        """Iterate over the samples in the window, oldest first."""
        return iter(self._samples)

    def snapshot(self) -> Snapshot:
        """Summarise the current window."""
        if self._count:
            frame_time_ms = (self._sum / self._count) * 0.001
        else:
            frame_time_ms = math.nan
        fps = 1000.0 / frame_time_ms if frame_time_ms else math.inf
        return Snapshot(
            fps=fps,
            frame_time_ms=frame_time_ms,
            frame_time_min_ms=self._min * 0.001,
            frame_time_max_ms=self._max * 0.001,
        )

    def clear_min_and_max(self) -> None:
        """Forget the extreme samples seen so far."""
        self._min = _U64_MAX
        self._max = 0

    def add_sample(self, frame_time_us: int) -> None:
        """Add a frame time in microseconds, evicting the oldest when full."""
        if frame_time_us < 0:
            raise ValueError(f"frame time must not be negative, got {frame_time_us}")
        if self._count < SLIDING_WINDOW_SIZE:
            self._count += 1
            oldest = None
        else:
            oldest = self._samples.popleft()
        self._sum += frame_time_us
        self._samples.append(frame_time_us)
        if oldest is not None:
            self._sum -= oldest
        self._min = min(self._min, frame_time_us)
        self._max = max(self._max, frame_time_us)