"""Decoding of Lottie bezier shape data into flat point lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain, repeat

Point = tuple[float, float]

_ZERO: Sequence[float] = (0.0, 0.0)


def _point(component: Sequence[float], what: str) -> Point:
    if len(component) < 2:
        raise ValueError(f"{what} needs at least two coordinates, got {list(component)!r}")
    return (float(component[0]), float(component[1]))


def conv_spline(
    vertices: Iterable[Sequence[float]],
    in_tangents: Iterable[Sequence[float]],
    out_tangents: Iterable[Sequence[float]],
    closed: bool | None,
) -> tuple[list[Point], bool]:
    """Flatten a Lottie bezier into ``[vertex, in_tangent, out_tangent, ...]``.

    Each vertex contributes three points. When fewer tangents than vertices
    are given, the missing ones are taken as ``(0, 0)``; surplus tangents are
    ignored. A missing ``closed`` flag means the path is open.
    """
    points: list[Point] = []
    for vertex, tin, tout in zip(
        vertices,
        chain(in_tangents, repeat(_ZERO)),
        chain(out_tangents, repeat(_ZERO)),
    ):
        points.append(_point(vertex, "vertex"))
        points.append(_point(tin, "in tangent"))
        points.append(_point(tout, "out tangent"))
    return points, bool(closed) if closed is not None else False