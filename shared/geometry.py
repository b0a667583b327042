"""Circle geometry, sector path construction, and number formatting.

Angles are in degrees, measured clockwise from the 12 o'clock position,
which matches SVG's y-down coordinate space.
"""
import math
from .types import Point

# Decimal places used when rendering path coordinates.
PATH_PRECISION = 6

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for sector parameters that cannot describe a valid slice."""

# ============================================================
# Circle Points
# ============================================================
def point_on_circle(cx: float, cy: float, r: float, angle: float) -> Point:
    """Point on the circle at *angle* degrees clockwise from 12 o'clock.

    The angle is not normalised: 0 and 360 give the same point.
    Non-finite input gives a non-finite Point.
    """
    rad = math.radians(angle - 90)
    if not math.isfinite(rad):
        # math.cos raises on inf
        return Point(math.nan, math.nan)
    return Point(cx + r*math.cos(rad), cy + r*math.sin(rad))

def mid_angle(start_angle: float, end_angle: float) -> float:
    """Angle bisecting the sector from start_angle to end_angle."""
    return (start_angle + end_angle) / 2

def large_arc_flag(start_angle: float, end_angle: float) -> int:
    """SVG large-arc flag: 1 when the sector sweeps more than 180 degrees."""
    return 0 if (end_angle - start_angle) <= 180 else 1

# ============================================================
# Formatting
# ============================================================
def fmt_num(v: float, precision: int | None = PATH_PRECISION) -> str:
    """Format a path number, e.g. 10.0 -> '10', 2.50 -> '2.5', -0.0 -> '0'.

    With precision=None the shortest round-trip repr is used instead of
    fixed rounding, which can produce scientific notation for tiny values.
    """
    s = repr(float(v)) if precision is None else f"{v:.{precision}f}"
    if "." in s and "e" not in s:
        s = s.rstrip('0').rstrip('.')
    return "0" if s == "-0" else s

# ============================================================
# Sector Paths
# ============================================================
def describe_sector_path(
    cx: float, cy: float, r: float, start_angle: float, end_angle: float,
    precision: int | None = PATH_PRECISION,
) -> str:
    """SVG path data for the pie slice between start_angle and end_angle.

    The path starts at the end_angle point and arcs counter-clockwise
    (sweep flag 0) back to the start_angle point, then closes through
    the center:

        M sx sy A r r 0 <large-arc> 0 ex ey L cx cy Z

    Never raises. Reversed angles and r=0 give a well-formed but
    meaningless path; use check_sector() to reject them.
    """
    start = point_on_circle(cx, cy, r, end_angle)
    end = point_on_circle(cx, cy, r, start_angle)
    flag = large_arc_flag(start_angle, end_angle)
    def f(v):
        return fmt_num(v, precision)
    return " ".join([
        f"M {f(start.x)} {f(start.y)}",
        f"A {f(r)} {f(r)} 0 {flag} 0 {f(end.x)} {f(end.y)}",
        f"L {f(cx)} {f(cy)}",
        "Z",
    ])

def check_sector(cx: float, cy: float, r: float, start_angle: float, end_angle: float) -> None:
    """Raise GeometryError unless the arguments describe a drawable sector."""
    for name, v in (("cx", cx), ("cy", cy), ("r", r),
                    ("start_angle", start_angle), ("end_angle", end_angle)):
        if not math.isfinite(v):
            raise GeometryError(f"Non-finite {name}: {v}")
    if r < 0:
        raise GeometryError(f"Negative radius: r={r}")
    if start_angle > end_angle:
        raise GeometryError(
            f"Reversed sector: start_angle={start_angle} > end_angle={end_angle}")
