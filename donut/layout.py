"""Slice layout: turns labelled values into angular sectors."""
import math
from typing import NamedTuple
from shared.types import Point
from shared.geometry import GeometryError, point_on_circle, mid_angle
from .constants import PALETTE


class DonutSlice(NamedTuple):
    label: str; value: float; fraction: float
    start_angle: float; end_angle: float
    color: str

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle


class DonutLayout(NamedTuple):
    cx: float; cy: float
    outer_r: float; inner_r: float
    total: float
    slices: list[DonutSlice]


def compute_layout(
    data: list[tuple[str, float]],
    cx: float, cy: float, outer_r: float, inner_r: float = 0.0,
    start_angle: float = 0.0, gap: float = 0.0,
    palette: list[str] = PALETTE,
) -> DonutLayout:
    """Lay out *data* as clockwise slices starting at *start_angle*.

    Each slice sweeps 360*value/total degrees, less *gap* (half taken off
    each side). Zero values get no slice. Raises GeometryError for negative
    or non-finite values, a zero total, or bad radii.
    """
    if not (0 <= inner_r < outer_r):
        raise GeometryError(f"Bad radii: inner_r={inner_r}, outer_r={outer_r}")
    if gap < 0:
        raise GeometryError(f"Negative gap: {gap}")
    for label, value in data:
        if not math.isfinite(value) or value < 0:
            raise GeometryError(f"Bad value for {label!r}: {value}")
    total = sum(value for _, value in data)
    if total <= 0:
        raise GeometryError(f"Nothing to draw: total={total}")

    slices = []
    a = start_angle
    for i, (label, value) in enumerate(data):
        if value == 0:
            continue
        sweep = 360 * value / total
        sa = a + gap/2; ea = a + sweep - gap/2
        if ea < sa:  # gap wider than slice
            sa = ea = a + sweep/2
        slices.append(DonutSlice(label, value, value/total, sa, ea,
                                 palette[i % len(palette)]))
        a += sweep
    return DonutLayout(cx, cy, outer_r, inner_r, total, slices)


def label_point(layout: DonutLayout, s: DonutSlice) -> Point:
    """Label anchor: slice mid angle, halfway across the ring."""
    r = (layout.outer_r + layout.inner_r) / 2
    return point_on_circle(layout.cx, layout.cy, r, mid_angle(s.start_angle, s.end_angle))
