"""Matplotlib static PNG renderer."""

import math
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Arc, Circle, Wedge

from yearclock.models import DialData
from yearclock.renderers.svg import (
    HUB_RADIUS,
    POINTER_LENGTH,
    POINTER_WIDTH,
    RING_THICKNESS,
)

_ROOT = Path(__file__).parent.parent.parent.parent
_BG = "#1c1c1e"


def _xy(radius: float, angle_deg: float) -> tuple[float, float]:
    """Clockwise-from-east angle → matplotlib (y up) coordinates."""
    rad = math.radians(-angle_deg)
    return radius * math.cos(rad), radius * math.sin(rad)


def _points(length: float, chart_size: float) -> float:
    """Data-unit length → line width in points (axes span 2.1 units)."""
    return length * 72 * chart_size / 2.1


def render_static_dial(dial: DialData, chart_size: float = 4) -> Figure:
    """Render DialData as a static matplotlib image.

    The dial has radius 1 in data units. Matplotlib's y-axis points up,
    so clockwise screen angles are negated.

    Args:
        dial: Fully computed dial data.
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(chart_size, chart_size))
    fig.patch.set_facecolor(_BG)
    ax.set_facecolor(_BG)

    ring = 2 * RING_THICKNESS  # size = 2 radius units

    ax.add_patch(
        Circle(
            (0, 0), 1,
            fill=False, edgecolor="#8e8e93", alpha=0.25,
            linewidth=_points(ring * 0.25, chart_size),
        )
    )  # fmt: skip

    # Clockwise span [start, end] is counter-clockwise [-end, -start]
    for s in dial.slices:
        ax.add_patch(
            Wedge(
                (0, 0), 1, -s.end_deg, -s.start_deg,
                facecolor=s.color, linewidth=0, zorder=1,
            )
        )  # fmt: skip

    for angle in dial.separators:
        x, y = _xy(1, angle)
        ax.plot([0, x], [0, y], color="black", alpha=0.15, linewidth=0.8, zorder=2)

    tick_angles = np.radians([-t.angle_deg for t in dial.ticks])
    tick_len = np.array([ring * (0.3 if t.major else 0.15) for t in dial.ticks])
    for theta, length, tick in zip(tick_angles, tick_len, dial.ticks):
        r0, r1 = 1.0, 1.0 - length
        ax.plot(
            [r0 * np.cos(theta), r1 * np.cos(theta)],
            [r0 * np.sin(theta), r1 * np.sin(theta)],
            color="white",
            alpha=0.8 if tick.major else 0.4,
            linewidth=0.6,
            zorder=2,
        )

    label_radius = 1 - ring * 1.2
    for s in dial.slices:
        x, y = _xy(label_radius, s.center_deg)
        ax.text(
            x, y, s.label,
            ha="center", va="center",
            color="white", alpha=0.9, fontweight="bold",
            fontsize=chart_size * 3.2, zorder=3,
        )  # fmt: skip

    if dial.show_progress and dial.progress_deg > 0:
        ax.add_patch(
            Arc(
                (0, 0), 2 * (1 - ring * 0.1), 2 * (1 - ring * 0.1),
                theta1=-(dial.rotation_offset + dial.progress_deg),
                theta2=-dial.rotation_offset,
                color="white", alpha=0.7, linewidth=1.5, zorder=3,
            )
        )  # fmt: skip

    # Pointer width is POINTER_WIDTH * size = 2 * POINTER_WIDTH radius units
    px, py = _xy(POINTER_LENGTH - POINTER_WIDTH, dial.pointer_deg)
    ax.plot(
        [0, px], [0, py],
        color="white", linewidth=_points(2 * POINTER_WIDTH, chart_size),
        solid_capstyle="round", zorder=4,
    )  # fmt: skip
    ax.add_patch(Circle((0, 0), 2 * HUB_RADIUS, color="white", zorder=5))

    ax.set_xlim(-1.05, 1.05)
    ax.set_ylim(-1.05, 1.05)
    ax.set_aspect("equal")
    ax.axis("off")

    return fig


def save_static_dial(dial: DialData, output_path: Path | None = None) -> Path:
    """Save DialData as a PNG file.

    Args:
        dial: Fully computed dial data.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        when_str = dial.when.strftime("%Y_%m_%d")
        output_path = _ROOT / "results" / f"yearclock__{when_str}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_dial(dial)
    fig.savefig(output_path, facecolor=_BG)
    plt.close(fig)
    return output_path
