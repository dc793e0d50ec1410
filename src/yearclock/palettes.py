"""Fixed lookup tables for month labels, seasons and color palettes."""

import colorsys

from yearclock.models import Palette

MONTH_LABELS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)  # fmt: skip

SEASON_NAMES: tuple[str, ...] = ("spring", "summer", "fall", "winter")

# Jan, Feb -> winter; Mar-May -> spring; Jun-Aug -> summer; Sep-Nov -> fall; Dec -> winter
MONTH_TO_SEASON: tuple[int, ...] = (3, 3, 0, 0, 0, 1, 1, 1, 2, 2, 2, 3)


def _hsb(hue: float, saturation: float, brightness: float) -> str:
    """HSB (all in [0, 1]) → "#rrggbb"."""
    r, g, b = colorsys.hsv_to_rgb(hue, saturation, brightness)
    return f"#{round(r * 255):02x}{round(g * 255):02x}{round(b * 255):02x}"


SEASON_COLORS: tuple[str, ...] = (
    _hsb(0.35, 0.65, 0.75),  # spring - green
    _hsb(0.12, 0.70, 0.80),  # summer - yellow/olive
    _hsb(0.09, 0.65, 0.70),  # fall - orange/brown
    _hsb(0.60, 0.45, 0.70),  # winter - blue
)

# Jan..Dec. Cold blues through spring greens, summer golds and autumn rusts.
MONTH_COLORS: tuple[str, ...] = (
    "#5b7fb0",  # Jan
    "#6a95b8",  # Feb
    "#5fae8a",  # Mar
    "#6fbf6a",  # Apr
    "#97c656",  # May
    "#c6c44a",  # Jun
    "#d9b13f",  # Jul
    "#d9943a",  # Aug
    "#c97a3a",  # Sep
    "#b0623c",  # Oct
    "#8c5f6e",  # Nov
    "#5d6fa0",  # Dec
)


def palette_color(palette: Palette, month_index: int) -> str:
    """Return the wedge color for a 0-based month index under the given palette."""
    if not 0 <= month_index < 12:
        raise ValueError(f"month_index out of range: {month_index}")
    if palette is Palette.MONTH:
        return MONTH_COLORS[month_index]
    return SEASON_COLORS[MONTH_TO_SEASON[month_index]]
