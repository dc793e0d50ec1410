import xml.etree.ElementTree as ET
from datetime import datetime

import matplotlib.pyplot as plt
import pytest
from matplotlib.figure import Figure

from yearclock.compute import compute_dial_data
from yearclock.config import DialConfig
from yearclock.models import Palette
from yearclock.renderers.plotly_dial import render_plotly_dial
from yearclock.renderers.static import render_static_dial, save_static_dial
from yearclock.renderers.svg import arc_path, polar, render_svg, render_svg_html, wedge_path

SVG_NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture
def dial():
    return compute_dial_data(datetime(2025, 9, 1), DialConfig(tz_name="UTC"))


@pytest.fixture
def progress_dial():
    config = DialConfig(tz_name="UTC", palette=Palette.MONTH, show_progress=True)
    return compute_dial_data(datetime(2025, 12, 15), config)


def _group(root, name):
    return root.find(f"{SVG_NS}g[@id='{name}']")


def test_polar_is_clockwise_on_screen():
    x, y = polar(100, 100, 50, 90)
    # 90° clockwise from east points down in screen coordinates
    assert x == pytest.approx(100)
    assert y == pytest.approx(150)


def test_wedge_path_shape():
    d = wedge_path(0, 0, 10, 0, 30)
    assert d.startswith("M 0.000,0.000 L 10.000,0.000 A 10.000,10.000 0 0 1")
    assert d.endswith("Z")


def test_arc_path_uses_large_arc_past_half():
    assert " 0 1 1 " in arc_path(0, 0, 10, 0, 200)
    assert " 0 0 1 " in arc_path(0, 0, 10, 0, 90)


def test_svg_is_well_formed(dial):
    root = ET.fromstring(render_svg(dial, size=220))
    assert root.tag == f"{SVG_NS}svg"
    assert root.get("viewBox") == "0 0 220 220"


def test_svg_layers(dial):
    root = ET.fromstring(render_svg(dial))
    wedges = _group(root, "wedges").findall(f"{SVG_NS}path")
    assert [w.get("data-month") for w in wedges] == [str(m) for m in range(12)]
    assert [w.get("fill") for w in wedges] == [s.color for s in dial.slices]
    assert len(_group(root, "separators")) == 12
    assert len(_group(root, "ticks")) == len(dial.ticks)
    labels = [t.text for t in _group(root, "labels")]
    assert labels[:3] == ["Jan", "Feb", "Mar"]
    assert root.find(f"{SVG_NS}circle[@id='hub']") is not None


def test_svg_pointer_direction(dial):
    # September, pointer at 150°: left of centre and below it
    root = ET.fromstring(render_svg(dial, size=200))
    line = _group(root, "pointer").find(f"{SVG_NS}line")
    assert float(line.get("x2")) < 100
    assert float(line.get("y2")) > 100


def test_svg_progress_arc_only_when_enabled(dial, progress_dial):
    assert 'stroke-opacity="0.7"' not in render_svg(dial)
    assert 'stroke-opacity="0.7"' in render_svg(progress_dial)


def test_svg_html_wraps_svg(dial):
    page = render_svg_html(dial, size=300)
    assert page.startswith("<!DOCTYPE html>")
    assert 'viewBox="0 0 300 300"' in page


def test_static_dial_figure(dial):
    fig = render_static_dial(dial)
    try:
        assert isinstance(fig, Figure)
        ax = fig.axes[0]
        assert len(ax.texts) == 12
    finally:
        plt.close(fig)


def test_save_static_dial(progress_dial, tmp_path):
    out = save_static_dial(progress_dial, tmp_path / "out" / "dial.png")
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_plotly_dial(dial):
    fig = render_plotly_dial(dial)
    wedges = fig.data[0]
    assert wedges.type == "barpolar"
    assert list(wedges.theta) == [s.center_deg for s in dial.slices]
    assert list(wedges.text) == [s.label for s in dial.slices]
    assert fig.layout.polar.angularaxis.direction == "clockwise"
    pointer = next(t for t in fig.data if t.name == "pointer")
    assert list(pointer.theta) == [150.0, 150.0]
    assert not any(t.name == "progress" for t in fig.data)


def test_plotly_progress_trace(progress_dial):
    fig = render_plotly_dial(progress_dial)
    progress = next(t for t in fig.data if t.name == "progress")
    assert progress.theta[0] == pytest.approx(progress_dial.rotation_offset)
    assert progress.theta[-1] == pytest.approx(
        progress_dial.rotation_offset + progress_dial.progress_deg
    )
