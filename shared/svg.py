"""SVG element helpers."""
from xml.sax.saxutils import escape
from .geometry import fmt_num


def svg_open(width: float, height: float) -> str:
    """Opening <svg> tag with a matching viewBox."""
    w, h = fmt_num(width), fmt_num(height)
    return (f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}"'
            f' viewBox="0 0 {w} {h}">')


def svg_close() -> str:
    """Closing </svg> tag."""
    return '</svg>'


def svg_path(d: str, fill: str, stroke: str = "none", stroke_width: float = 0) -> str:
    """Filled <path>; stroke attributes are omitted when stroke is "none"."""
    if stroke == "none":
        return f'<path d="{d}" fill="{fill}" stroke="none"/>'
    return f'<path d="{d}" fill="{fill}" stroke="{stroke}" stroke-width="{fmt_num(stroke_width)}"/>'


def svg_circle(cx: float, cy: float, r: float, fill: str) -> str:
    """Filled <circle>."""
    return f'<circle cx="{fmt_num(cx)}" cy="{fmt_num(cy)}" r="{fmt_num(r)}" fill="{fill}"/>'


def svg_text(x: float, y: float, text: str, font_size: float, fill: str = "#333",
             bold: bool = False) -> str:
    """Centered text label; *text* is XML-escaped."""
    weight = ' font-weight="bold"' if bold else ''
    return (f'<text x="{fmt_num(x, 1)}" y="{fmt_num(y, 1)}" text-anchor="middle"'
            f' dominant-baseline="central" font-family="Arial"'
            f' font-size="{fmt_num(font_size)}"{weight} fill="{fill}">{escape(text)}</text>')
