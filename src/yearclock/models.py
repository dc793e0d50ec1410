"""Data model definitions: boundaries between input, compute and render layers."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Palette(str, Enum):
    """Wedge coloring policy."""

    SEASON = "season"  # 4 colors, one per season
    MONTH = "month"  # 12 colors approximating a gradient


@dataclass(frozen=True)
class DialQuery:
    """Raw host input. Naive datetimes are local wall time in the configured zone."""

    when: datetime


@dataclass(frozen=True)
class MonthSlice:
    """One 30° wedge of the dial."""

    month_index: int  # 0=Jan … 11=Dec
    dial_index: int  # 0=Mar … 11=Feb, clockwise position on the dial
    label: str  # "Jan", "Feb", …
    start_deg: float  # Clockwise from east, rotation offset applied
    end_deg: float  # start_deg + 30
    color: str  # "#rrggbb"

    @property
    def center_deg(self) -> float:
        return (self.start_deg + self.end_deg) / 2.0


@dataclass(frozen=True)
class Tick:
    """Decorative tick mark on the outer ring."""

    angle_deg: float
    major: bool


@dataclass(frozen=True)
class DialData:
    """The sole input to renderers. Fully computed state."""

    when: datetime  # Query instant in the configured local zone
    month_index: int
    dial_index: int
    pointer_deg: float  # Center of the current month's wedge
    progress: float  # Elapsed fraction of the March-anchored year, [0, 1]
    progress_deg: float  # progress * 360, 0° = anchor before rotation offset
    slices: tuple[MonthSlice, ...]  # Month order (Jan..Dec), not angular order
    separators: tuple[float, ...]  # Radial divider angles, equal to slice starts
    ticks: tuple[Tick, ...]
    palette: Palette
    rotation_offset: float
    show_progress: bool = False


@dataclass(frozen=True)
class TimelineEntry:
    """A timestamp the host should render at, with its precomputed dial."""

    when: datetime
    dial: DialData
