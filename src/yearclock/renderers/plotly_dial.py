"""Plotly interactive dial renderer.

Uses a barpolar trace for the twelve wedges. The angular axis is set to
clockwise with 0° at east, so DialData angles are used unchanged.
"""

import numpy as np
import plotly.graph_objects as go

from yearclock.models import DialData

_BG = "#1c1c1e"
_POINTER_COLOR = "#ffffff"


def render_plotly_dial(dial: DialData) -> go.Figure:
    """Render DialData as a Plotly polar figure.

    Wedges are a single barpolar trace (one bar per month, hover shows the
    month label). The pointer is a thick radial line, ticks a scatter of
    short segments, the optional progress arc a line trace at the rim.

    Args:
        dial: Fully computed dial data.

    Returns:
        Plotly Figure object.
    """
    wedge_trace = go.Barpolar(
        r=[1.0] * len(dial.slices),
        theta=[s.center_deg for s in dial.slices],
        width=[s.end_deg - s.start_deg for s in dial.slices],
        marker=dict(
            color=[s.color for s in dial.slices],
            line=dict(color="rgba(0,0,0,0.15)", width=1),
        ),
        text=[s.label for s in dial.slices],
        hovertemplate="%{text}<extra></extra>",
        name="months",
    )

    label_trace = go.Scatterpolar(
        r=[0.7] * len(dial.slices),
        theta=[s.center_deg for s in dial.slices],
        mode="text",
        text=[s.label for s in dial.slices],
        textfont=dict(color="rgba(255,255,255,0.9)", size=14),
        hoverinfo="skip",
        name="labels",
    )

    # Ticks: single trace using None separators
    tr: list[float | None] = []
    tt: list[float | None] = []
    for tick in dial.ticks:
        length = 0.1 if tick.major else 0.05
        tr += [1.0, 1.0 - length, None]
        tt += [tick.angle_deg, tick.angle_deg, None]
    tick_trace = go.Scatterpolar(
        r=tr,
        theta=tt,
        mode="lines",
        line=dict(color="rgba(255,255,255,0.6)", width=1),
        hoverinfo="skip",
        name="ticks",
    )

    pointer_trace = go.Scatterpolar(
        r=[0.0, 0.78],
        theta=[dial.pointer_deg, dial.pointer_deg],
        mode="lines",
        line=dict(color=_POINTER_COLOR, width=8),
        hoverinfo="skip",
        name="pointer",
    )

    traces = [wedge_trace, label_trace, tick_trace, pointer_trace]

    if dial.show_progress and dial.progress_deg > 0:
        arc_theta = np.linspace(
            dial.rotation_offset, dial.rotation_offset + dial.progress_deg, 90
        )
        traces.append(
            go.Scatterpolar(
                r=[0.97] * len(arc_theta),
                theta=list(arc_theta),
                mode="lines",
                line=dict(color="rgba(255,255,255,0.7)", width=3),
                hovertemplate=f"{dial.progress:.1%}<extra></extra>",
                name="progress",
            )
        )

    fig = go.Figure(data=traces)
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=10, r=10, t=10, b=10),
        width=400,
        height=400,
        polar=dict(
            bgcolor=_BG,
            bargap=0,
            radialaxis=dict(visible=False, range=[0, 1.0]),
            angularaxis=dict(
                visible=False,
                direction="clockwise",
                rotation=0,
            ),
        ),
    )
    return fig
