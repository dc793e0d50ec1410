"""Widget timeline: which instants a host should render, precomputed ahead of time.

The host decides when to redraw; this module only picks timestamps and
calls the pure dial computation at each of them.
"""

import logging
from datetime import datetime, timedelta
from enum import Enum

from pytz.exceptions import InvalidTimeError

from yearclock.compute import compute_dial_data, local_midnight, to_local
from yearclock.config import DialConfig
from yearclock.models import TimelineEntry

logger = logging.getLogger(__name__)

MONTHLY_ENTRY_COUNT = 12
HOURLY_ENTRY_COUNT = 5


class TimelinePolicy(str, Enum):
    MONTHLY = "monthly"  # one entry per upcoming month boundary
    HOURLY = "hourly"  # five entries an hour apart


def _add_months(year: int, month: int, offset: int) -> tuple[int, int]:
    total = year * 12 + (month - 1) + offset
    return total // 12, total % 12 + 1


def month_starts(now: datetime, count: int, config: DialConfig) -> list[datetime]:
    """Local midnight on day 1 of the current month and the following months.

    A midnight that falls in a DST gap or overlap resolves to standard time.
    """
    tz = config.tz
    local = to_local(now, tz)
    starts: list[datetime] = []
    for offset in range(count):
        year, month = _add_months(local.year, local.month, offset)
        try:
            start = local_midnight(tz, year, month)
        except InvalidTimeError as e:
            logger.warning("Ambiguous or missing midnight %s, using standard time", e)
            start = tz.normalize(tz.localize(datetime(year, month, 1), is_dst=False))
        starts.append(start)
    return starts


def hour_steps(now: datetime, count: int, config: DialConfig) -> list[datetime]:
    """`now` and the following hours, in absolute time."""
    local = to_local(now, config.tz)
    return [config.tz.normalize(local + timedelta(hours=h)) for h in range(count)]


def build_timeline(
    now: datetime,
    config: DialConfig | None = None,
    policy: TimelinePolicy = TimelinePolicy.MONTHLY,
) -> tuple[TimelineEntry, ...]:
    """Precompute timeline entries starting at `now`.

    Args:
        now: Current instant. Naive values are local wall time.
        config: Dial settings. Defaults to DialConfig().
        policy: MONTHLY (12 month starts) or HOURLY (5 hourly entries).

    Returns:
        Entries in chronological order, each carrying its DialData.
    """
    if config is None:
        config = DialConfig()
    if policy is TimelinePolicy.MONTHLY:
        instants = month_starts(now, MONTHLY_ENTRY_COUNT, config)
    else:
        instants = hour_steps(now, HOURLY_ENTRY_COUNT, config)
    logger.debug("Built %d %s timeline entries", len(instants), policy.value)
    return tuple(
        TimelineEntry(when=t, dial=compute_dial_data(t, config)) for t in instants
    )


def next_reload(entries: tuple[TimelineEntry, ...]) -> datetime | None:
    """When the host should ask for a new timeline: after the last entry."""
    if not entries:
        return None
    return entries[-1].when
