"""Catmull-Rom path following for targets with ``x`` and ``y`` properties."""
from __future__ import annotations

from typing import Any, Sequence

from tick_motion import props
from tick_motion.easing import EasingRef, ease
from tick_motion.types import FrameFn

Point = tuple[float, float]
Segment = tuple[Point, Point, Point, Point]

_END_EPSILON = 1e-5


def catmull_rom(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Point at ``t`` on the segment between ``p1`` and ``p2``."""
    t2 = t * t
    t3 = t2 * t

    def axis(a: float, b: float, c: float, d: float) -> float:
        return 0.5 * (
            2 * b
            + (-a + c) * t
            + (2 * a - 5 * b + 4 * c - d) * t2
            + (-a + 3 * b - 3 * c + d) * t3
        )

    return (axis(p0[0], p1[0], p2[0], p3[0]), axis(p0[1], p1[1], p2[1], p3[1]))


def segments(points: Sequence[Point]) -> list[Segment]:
    """One segment per consecutive point pair; end points are repeated as guides."""
    last = len(points) - 1
    out: list[Segment] = []
    for i in range(last):
        out.append((
            points[max(i - 1, 0)],
            points[i],
            points[i + 1],
            points[min(i + 2, last)],
        ))
    return out


def point_at(segs: Sequence[Segment], t: float) -> Point:
    """Position at overall progress ``t``, clamped to the path."""
    total = len(segs)
    seg_t = min(max(t * total, 0.0), total - _END_EPSILON)
    index = int(seg_t)
    return catmull_rom(*segs[index], seg_t - index)


def make_path_frame(
    target: Any,
    points: Sequence[Point],
    duration: int,
    easing: EasingRef = "linear",
) -> FrameFn:
    segs = segments(points)
    curve = ease(easing)
    end = points[-1]

    def frame(n: int) -> None:
        if n == duration - 1:
            x, y = end
        else:
            x, y = point_at(segs, curve(n / duration))
        props.write(target, "x", x)
        props.write(target, "y", y)

    return frame
