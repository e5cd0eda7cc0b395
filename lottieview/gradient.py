"""Gradient colour stop decoding for Lottie gradient properties.

Lottie stores gradient colours as a flat list of numbers: ``count`` groups of
``(offset, r, g, b)`` followed by an optional run of ``(offset, alpha)`` pairs.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

ColorStop = tuple[float, float, float, float, float]


def normalize_to_range(a: float, b: float, x: float) -> float:
    """Return where ``x`` lies between ``a`` and ``b`` (0 at ``a``, 1 at ``b``).

    A degenerate range (``a == b``) yields 0.0.
    """
    if a == b:
        return 0.0
    return (x - a) / (b - a)


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate from ``a`` to ``b`` by ``t``."""
    return a + (b - a) * t


def _chunks(values: Sequence[float], size: int) -> Iterator[Sequence[float]]:
    """Yield consecutive full chunks of ``size``, dropping any remainder."""
    for start in range(0, len(values) - size + 1, size):
        yield values[start : start + size]


def _stop_alpha(offset: float, alpha_stops: Sequence[tuple[float, float]]) -> float:
    """Smallest alpha the stop at ``offset`` takes across all alpha segments."""
    alpha = 1.0
    for (a, alpha_a), (b, alpha_b) in zip(alpha_stops, alpha_stops[1:]):
        t = normalize_to_range(a, b, offset)
        interp = lerp(alpha_a, alpha_b, t)
        inside = a <= offset <= b
        # Snap near the ends so the falloff resembles common Lottie players.
        if inside and t <= 0.25 and offset <= 0.1:
            interp = alpha_a
        if inside and t >= 0.75 and offset >= 0.9:
            interp = alpha_b
        alpha = min(alpha, interp)
    return alpha


def conv_stops(value: Sequence[float], count: int) -> list[ColorStop]:
    """Decode flat gradient data into ``(offset, r, g, b, alpha)`` stops.

    Colour stops are read four numbers at a time. Once ``count`` stops have
    been read, the numbers after the colour block are read as
    ``(offset, alpha)`` pairs and each stop takes the lowest alpha
    interpolated from them. If the data holds fewer than ``count`` colour
    stops, every stop read is returned fully opaque.
    """
    if count < 0:
        raise ValueError(f"stop count must not be negative, got {count}")

    stops: list[ColorStop] = []
    for offset, r, g, b in _chunks(value, 4):
        stops.append((offset, r, g, b, 1.0))
        if len(stops) >= count:
            alpha_stops = [
                (pair[0], pair[1]) for pair in list(_chunks(value, 2))[count * 2 :]
            ]
            return [
                (o, r_, g_, b_, min(alpha, _stop_alpha(o, alpha_stops)))
                for o, r_, g_, b_, alpha in stops
            ]
    return stops