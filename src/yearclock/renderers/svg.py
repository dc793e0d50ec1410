"""SVG dial renderer.

Produces a standalone SVG string, embeddable in HTML or written to disk.

Coordinate system:
  viewBox "0 0 size size", centre at (size/2, size/2).
  Angles are degrees clockwise from east; SVG's y-axis points down, so
  (cos θ, sin θ) already runs clockwise on screen.
"""

from __future__ import annotations

import html
import math

from yearclock.models import DialData

_RING_COLOR = "#8e8e93"
_SEPARATOR_COLOR = "#000000"
_LABEL_COLOR = "#ffffff"
_POINTER_COLOR = "#ffffff"
_PROGRESS_COLOR = "#ffffff"

# Proportions of the dial, relative to its size.
RING_THICKNESS = 0.16
POINTER_LENGTH = 0.82  # of the radius
POINTER_WIDTH = 0.055
HUB_RADIUS = 0.06
LABEL_FONT = 0.09


def polar(cx: float, cy: float, radius: float, angle_deg: float) -> tuple[float, float]:
    """Point at `radius` from the centre, `angle_deg` clockwise from east."""
    rad = math.radians(angle_deg)
    return cx + math.cos(rad) * radius, cy + math.sin(rad) * radius


def wedge_path(
    cx: float, cy: float, radius: float, start_deg: float, end_deg: float
) -> str:
    """Pie-slice path from the centre, sweeping clockwise from start to end."""
    x1, y1 = polar(cx, cy, radius, start_deg)
    x2, y2 = polar(cx, cy, radius, end_deg)
    large = 1 if end_deg - start_deg > 180 else 0
    return (
        f"M {cx:.3f},{cy:.3f} L {x1:.3f},{y1:.3f} "
        f"A {radius:.3f},{radius:.3f} 0 {large} 1 {x2:.3f},{y2:.3f} Z"
    )


def arc_path(
    cx: float, cy: float, radius: float, start_deg: float, sweep_deg: float
) -> str:
    """Open clockwise arc. A full sweep is shortened slightly to stay drawable."""
    sweep = min(sweep_deg, 359.99)
    x1, y1 = polar(cx, cy, radius, start_deg)
    x2, y2 = polar(cx, cy, radius, start_deg + sweep)
    large = 1 if sweep > 180 else 0
    return (
        f"M {x1:.3f},{y1:.3f} "
        f"A {radius:.3f},{radius:.3f} 0 {large} 1 {x2:.3f},{y2:.3f}"
    )


def render_svg(dial: DialData, size: int = 220) -> str:
    """Return a standalone SVG document for the dial.

    Layers, bottom to top: outer tick ring, month wedges, separators,
    ticks, labels, optional progress arc, pointer, hub.

    Args:
        dial: Fully computed dial data.
        size: Width and height in user units.

    Returns:
        SVG markup as a string.
    """
    radius = size / 2.0
    cx = cy = radius
    ring = size * RING_THICKNESS
    label_radius = radius - ring * 1.2
    pointer_length = radius * POINTER_LENGTH
    pointer_width = size * POINTER_WIDTH
    hub_radius = size * HUB_RADIUS

    # --- Wedges ---
    wedge_parts: list[str] = []
    for s in dial.slices:
        wedge_parts.append(
            f'<path d="{wedge_path(cx, cy, radius, s.start_deg, s.end_deg)}"'
            f' fill="{s.color}" data-month="{s.month_index}"/>'
        )

    # --- Separators ---
    separator_parts: list[str] = []
    for angle in dial.separators:
        x, y = polar(cx, cy, radius, angle)
        separator_parts.append(
            f'<line x1="{cx:.3f}" y1="{cy:.3f}" x2="{x:.3f}" y2="{y:.3f}"'
            f' stroke="{_SEPARATOR_COLOR}" stroke-opacity="0.15" stroke-width="1"/>'
        )

    # --- Ticks (inward from the rim) ---
    tick_parts: list[str] = []
    for tick in dial.ticks:
        length = ring * (0.3 if tick.major else 0.15)
        x0, y0 = polar(cx, cy, radius, tick.angle_deg)
        x1, y1 = polar(cx, cy, radius - length, tick.angle_deg)
        opacity = 0.8 if tick.major else 0.4
        tick_parts.append(
            f'<line x1="{x0:.3f}" y1="{y0:.3f}" x2="{x1:.3f}" y2="{y1:.3f}"'
            f' stroke="{_LABEL_COLOR}" stroke-opacity="{opacity}" stroke-width="1"/>'
        )

    # --- Labels ---
    font_size = size * LABEL_FONT
    label_parts: list[str] = []
    for s in dial.slices:
        x, y = polar(cx, cy, label_radius, s.center_deg)
        label_parts.append(
            f'<text x="{x:.3f}" y="{y:.3f}" font-size="{font_size:.2f}"'
            f' font-weight="bold" font-family="ui-rounded, system-ui, sans-serif"'
            f' text-anchor="middle" dominant-baseline="central"'
            f' fill="{_LABEL_COLOR}" fill-opacity="0.9">{html.escape(s.label)}</text>'
        )

    # --- Continuous progress, drawn as an arc just inside the rim ---
    progress_svg = ""
    if dial.show_progress and dial.progress_deg > 0:
        d = arc_path(cx, cy, radius - ring * 0.1, dial.rotation_offset, dial.progress_deg)
        progress_svg = (
            f'<path d="{d}" fill="none" stroke="{_PROGRESS_COLOR}"'
            f' stroke-opacity="0.7" stroke-width="{ring * 0.12:.3f}"'
            f' stroke-linecap="round"/>'
        )

    # --- Pointer: capsule from centre towards the month centre ---
    px, py = polar(cx, cy, pointer_length - pointer_width / 2, dial.pointer_deg)
    pointer_svg = (
        f'<line x1="{cx:.3f}" y1="{cy:.3f}" x2="{px:.3f}" y2="{py:.3f}"'
        f' stroke="{_POINTER_COLOR}" stroke-width="{pointer_width:.3f}"'
        f' stroke-linecap="round" filter="url(#pointer-shadow)"/>'
    )

    ring_width = ring * 0.25
    wedges_svg = "\n    ".join(wedge_parts)
    separators_svg = "\n    ".join(separator_parts)
    ticks_svg = "\n    ".join(tick_parts)
    labels_svg = "\n    ".join(label_parts)

    return f"""<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {size} {size}" width="{size}" height="{size}">
  <defs>
    <filter id="pointer-shadow" x="-50%" y="-50%" width="200%" height="200%">
      <feDropShadow dx="0" dy="1" stdDeviation="2" flood-color="#000000" flood-opacity="0.25"/>
    </filter>
  </defs>
  <circle cx="{cx:.3f}" cy="{cy:.3f}" r="{radius:.3f}" fill="none" stroke="{_RING_COLOR}" stroke-opacity="0.25" stroke-width="{ring_width:.3f}"/>
  <g id="wedges">
    {wedges_svg}
  </g>
  <g id="separators">
    {separators_svg}
  </g>
  <g id="ticks">
    {ticks_svg}
  </g>
  <g id="labels">
    {labels_svg}
  </g>
  {progress_svg}
  <g id="pointer">
    {pointer_svg}
  </g>
  <circle id="hub" cx="{cx:.3f}" cy="{cy:.3f}" r="{hub_radius:.3f}" fill="{_POINTER_COLOR}" stroke="#000000" stroke-opacity="0.1" stroke-width="1"/>
</svg>"""


def render_svg_html(dial: DialData, size: int = 220, background: str = "#1c1c1e") -> str:
    """Wrap the SVG in a minimal page, for st.components.v1.html()."""
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>
html, body {{ margin: 0; padding: 0; background: {background}; }}
.dial {{ display: flex; align-items: center; justify-content: center; padding: 8px; }}
</style>
</head>
<body>
<div class="dial">
{render_svg(dial, size)}
</div>
</body>
</html>"""
