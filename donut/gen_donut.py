"""Render a donut (or pie) chart as a standalone SVG document."""
import os
from shared.geometry import describe_sector_path, check_sector
from shared.svg import svg_open, svg_close, svg_path, svg_circle, svg_text
from .constants import (
    WIDTH, HEIGHT, BACKGROUND,
    OUTER_RADIUS, INNER_RADIUS, START_ANGLE, GAP_ANGLE,
    SLICE_STROKE, SLICE_STROKE_WIDTH,
    LABEL_FONT_SIZE, LABEL_COLOR, LABEL_MIN_FRACTION,
    TITLE_FONT_SIZE, TITLE_COLOR,
    PALETTE, SAMPLE_TITLE, SAMPLE_DATA,
)
from .layout import DonutLayout, compute_layout, label_point


def render_slices(out: list, layout: DonutLayout):
    """Append one filled element per slice."""
    for s in layout.slices:
        if s.sweep == 0:
            continue
        if s.sweep >= 360:
            # A full-turn arc has coincident endpoints and renders as nothing.
            out.append(svg_circle(layout.cx, layout.cy, layout.outer_r, s.color))
            continue
        check_sector(layout.cx, layout.cy, layout.outer_r, s.start_angle, s.end_angle)
        d = describe_sector_path(layout.cx, layout.cy, layout.outer_r,
                                 s.start_angle, s.end_angle)
        out.append(svg_path(d, s.color, SLICE_STROKE, SLICE_STROKE_WIDTH))


def render_labels(out: list, layout: DonutLayout):
    """Append percentage labels for slices big enough to hold one."""
    for s in layout.slices:
        if s.sweep == 0 or s.fraction < LABEL_MIN_FRACTION:
            continue
        p = label_point(layout, s)
        out.append(svg_text(p.x, p.y, f"{s.fraction*100:.0f}%", LABEL_FONT_SIZE,
                            LABEL_COLOR, bold=True))


def render_donut_svg(
    data: list[tuple[str, float]],
    title: str | None = None,
    width: float = WIDTH, height: float = HEIGHT,
    outer_r: float = OUTER_RADIUS, inner_r: float = INNER_RADIUS,
    start_angle: float = START_ANGLE, gap: float = GAP_ANGLE,
    palette: list[str] = PALETTE, background: str = BACKGROUND,
) -> str:
    """Return the SVG document for *data*, a list of (label, value) pairs.

    The chart is centered on the canvas. The title goes in the hole, so a
    plain pie (inner_r=0) has none. Raises GeometryError (via compute_layout)
    for data that cannot be drawn.
    """
    layout = compute_layout(data, width/2, height/2, outer_r, inner_r,
                            start_angle, gap, palette)
    out = [svg_open(width, height)]
    out.append(f'<rect width="100%" height="100%" fill="{background}"/>')
    render_slices(out, layout)
    if layout.inner_r > 0:
        out.append(svg_circle(layout.cx, layout.cy, layout.inner_r, background))
    render_labels(out, layout)
    if title and layout.inner_r > 0:
        out.append(svg_text(layout.cx, layout.cy, title, TITLE_FONT_SIZE,
                            TITLE_COLOR, bold=True))
    out.append(svg_close())
    return "\n".join(out)


# ============================================================
# Main entry point
# ============================================================

if __name__ == "__main__":
    svg_content = render_donut_svg(SAMPLE_DATA, SAMPLE_TITLE)
    svg_path_out = os.path.join(os.path.dirname(os.path.abspath(__file__)), "donut.svg")
    with open(svg_path_out, "w") as f:
        f.write(svg_content)

    layout = compute_layout(SAMPLE_DATA, WIDTH/2, HEIGHT/2, OUTER_RADIUS, INNER_RADIUS,
                            START_ANGLE, GAP_ANGLE)
    print(f"Donut chart written to {svg_path_out}")
    print(f"Total: {layout.total:.2f}")
    print()
    for s in layout.slices:
        print(f"  {s.label:<12s} {s.value:10.2f}  {s.fraction*100:5.1f}%"
              f"  ({s.start_angle:7.2f} -> {s.end_angle:7.2f} deg)")
