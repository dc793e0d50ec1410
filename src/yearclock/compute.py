"""Dial computation layer: calendar anchor mapping and dial layout."""

import logging
from datetime import datetime, timedelta, tzinfo

import pytz
from pytz.exceptions import InvalidTimeError
from pytz.tzinfo import BaseTzInfo

from yearclock.config import DialConfig
from yearclock.models import DialData, DialQuery, MonthSlice, Palette, Tick
from yearclock.palettes import MONTH_LABELS, palette_color

logger = logging.getLogger(__name__)

MONTH_COUNT = 12
DEGREES_PER_MONTH = 360.0 / MONTH_COUNT
ANCHOR_MONTH = 3  # March
MAJOR_TICK_EVERY = 10

# Used only when the next anchor cannot be built from the calendar.
_APPROX_YEAR = timedelta(days=365)


def to_local(when: datetime, tz: BaseTzInfo | None) -> datetime:
    """Express `when` in `tz`. Naive input is taken as local wall time."""
    if tz is None:
        return when
    if when.tzinfo is None:
        return tz.localize(when)
    return when.astimezone(tz)


def local_midnight(tz: tzinfo | None, year: int, month: int) -> datetime:
    """Local midnight on the first of `month`, in the same zone as the query."""
    naive = datetime(year, month, 1)
    if tz is None:
        return naive
    localize = getattr(tz, "localize", None)
    if localize is not None:
        return localize(naive, is_dst=None)
    return naive.replace(tzinfo=tz)


def _absolute(when: datetime) -> datetime:
    # Same-tzinfo subtraction ignores utcoffset(), which drops DST shifts
    # for zones that share one tzinfo object across offsets (zoneinfo).
    if when.tzinfo is None:
        return when
    return when.astimezone(pytz.utc)


def _anchors(local: datetime) -> tuple[datetime, datetime] | None:
    """Most recent past March 1 anchor and the one after it, or None."""
    try:
        anchor = local_midnight(local.tzinfo, local.year, ANCHOR_MONTH)
        if local < anchor:
            anchor = local_midnight(local.tzinfo, local.year - 1, ANCHOR_MONTH)
    except (InvalidTimeError, ValueError, OverflowError) as e:
        logger.warning("Cannot build year anchor for %s: %s", local, e)
        return None

    try:
        next_anchor = local_midnight(local.tzinfo, anchor.year + 1, ANCHOR_MONTH)
    except (InvalidTimeError, ValueError, OverflowError) as e:
        logger.warning(
            "Cannot build next anchor after %s (%s), approximating with 365 days",
            anchor,
            e,
        )
        try:
            next_anchor = anchor + _APPROX_YEAR
        except OverflowError:
            return None
    return anchor, next_anchor


def month_index(when: datetime, tz: BaseTzInfo | None = None) -> int:
    """0-based month (Jan=0) of `when` in local time."""
    return to_local(when, tz).month - 1


def dial_index(month_idx: int) -> int:
    """Map a month index (0=Jan) to its dial position (0=Mar, clockwise).

    Raises:
        ValueError: If month_idx is outside 0..11.
    """
    if not 0 <= month_idx < MONTH_COUNT:
        raise ValueError(f"month index out of range: {month_idx}")
    shift = ANCHOR_MONTH - 1
    return month_idx - shift if month_idx >= shift else month_idx + MONTH_COUNT - shift


def year_fraction(when: datetime, tz: BaseTzInfo | None = None) -> float:
    """Elapsed fraction of the year running from the last March 1 to the next.

    Anchors are local midnight on March 1, built from the calendar so that
    leap years are exact. Elapsed time is absolute, so DST shifts count.
    Returns 0.0 if the anchor cannot be constructed.
    """
    local = to_local(when, tz)
    anchors = _anchors(local)
    if anchors is None:
        return 0.0
    anchor, next_anchor = anchors
    total = (_absolute(next_anchor) - _absolute(anchor)).total_seconds()
    elapsed = (_absolute(local) - _absolute(anchor)).total_seconds()
    return max(0.0, min(1.0, elapsed / total))


def year_progress(when: datetime, tz: BaseTzInfo | None = None) -> float:
    """Year progress in degrees [0, 360]. 0° is the March 1 anchor at east."""
    return year_fraction(when, tz) * 360.0


def month_dial_angle(
    when: datetime,
    rotation_offset: float = -45.0,
    tz: BaseTzInfo | None = None,
) -> float:
    """Pointer angle: center of the current month's wedge, clockwise from east.

    Steps once per month; does not track continuous progress.
    """
    idx = dial_index(month_index(when, tz))
    return idx * DEGREES_PER_MONTH + rotation_offset + DEGREES_PER_MONTH / 2.0


def build_slices(
    palette: Palette = Palette.SEASON,
    rotation_offset: float = -45.0,
) -> tuple[MonthSlice, ...]:
    """Return the twelve wedges in month order (Jan..Dec).

    Angular order differs from month order: March starts at the rotation
    offset and months advance clockwise.
    """
    slices: list[MonthSlice] = []
    for month_idx in range(MONTH_COUNT):
        d_idx = dial_index(month_idx)
        start = d_idx * DEGREES_PER_MONTH + rotation_offset
        slices.append(
            MonthSlice(
                month_index=month_idx,
                dial_index=d_idx,
                label=MONTH_LABELS[month_idx],
                start_deg=start,
                end_deg=start + DEGREES_PER_MONTH,
                color=palette_color(palette, month_idx),
            )
        )
    return tuple(slices)


def build_separators(rotation_offset: float = -45.0) -> tuple[float, ...]:
    """Radial divider angles. separators[i] is the start of dial position i."""
    return tuple(i * DEGREES_PER_MONTH + rotation_offset for i in range(MONTH_COUNT))


def build_ticks(count: int, rotation_offset: float = -45.0) -> tuple[Tick, ...]:
    """Evenly spaced ticks starting at the rotation offset; every 10th is major."""
    if count < 0:
        raise ValueError(f"tick count must be >= 0, got {count}")
    if count == 0:
        return ()
    step = 360.0 / count
    return tuple(
        Tick(angle_deg=i * step + rotation_offset, major=i % MAJOR_TICK_EVERY == 0)
        for i in range(count)
    )


def compute_dial_data(when: datetime, config: DialConfig | None = None) -> DialData:
    """Compute everything a renderer needs for a single instant.

    Args:
        when: Query instant. Naive values are local wall time in config's zone.
        config: Dial settings. Defaults to DialConfig().

    Returns:
        DialData with slices, separators, ticks, pointer and progress.
    """
    if config is None:
        config = DialConfig()
    tz = config.tz
    local = to_local(when, tz)
    m_idx = local.month - 1
    fraction = year_fraction(local, tz)

    return DialData(
        when=local,
        month_index=m_idx,
        dial_index=dial_index(m_idx),
        pointer_deg=month_dial_angle(local, config.rotation_offset, tz),
        progress=fraction,
        progress_deg=fraction * 360.0,
        slices=build_slices(config.palette, config.rotation_offset),
        separators=build_separators(config.rotation_offset),
        ticks=build_ticks(config.tick_count, config.rotation_offset),
        palette=config.palette,
        rotation_offset=config.rotation_offset,
        show_progress=config.show_progress,
    )


def run(query: DialQuery, config: DialConfig | None = None) -> DialData:
    """Top-level entry point: takes a DialQuery and returns a DialData.

    Args:
        query: Host input (query instant).
        config: Dial settings. Defaults to DialConfig().

    Returns:
        Fully computed DialData.
    """
    logger.debug("Computing dial for %s", query.when)
    return compute_dial_data(query.when, config)
