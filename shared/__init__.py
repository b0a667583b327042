"""Shared types, circle geometry, and SVG utilities."""

from .types import Point
from .geometry import (
    GeometryError, PATH_PRECISION,
    point_on_circle, mid_angle, large_arc_flag,
    fmt_num, describe_sector_path, check_sector,
)
from .svg import svg_open, svg_close, svg_path, svg_circle, svg_text
