"""CLI entry point for dial generation.

Writes the dial for now, or for the date given as the first argument,
as SVG and PNG under results/:
    uv run yearclock
    uv run yearclock 2025-09-01
    uv run yearclock "2025-12-15 08:30"

Exit codes:
 0 = success
 2 = input error (bad date, bad configuration)
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from yearclock.compute import run
from yearclock.config import ConfigError, load_config
from yearclock.models import DialQuery
from yearclock.renderers.static import save_static_dial
from yearclock.renderers.svg import render_svg

log = logging.getLogger("yearclock.cli")

_DATE_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%d")


def _setup_logging() -> None:
    level_name = os.getenv("YEARCLOCK_LOGLEVEL", "INFO").strip().upper()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    root = logging.getLogger("yearclock")
    if not root.handlers:
        root.addHandler(handler)
    root.setLevel(getattr(logging, level_name, logging.INFO))


def parse_when(raw: str) -> datetime:
    """Parse "YYYY-MM-DD" or "YYYY-MM-DD HH:MM" as naive local wall time."""
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(raw.strip(), fmt)
        except ValueError:
            continue
    raise ValueError(f"Unrecognized date {raw!r}; expected YYYY-MM-DD [HH:MM]")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv
    load_dotenv()
    _setup_logging()

    try:
        config = load_config()
        if len(argv) >= 2:
            when = parse_when(argv[1])
        else:
            when = datetime.now(config.tz)
    except (ConfigError, ValueError) as e:
        log.error(str(e))
        return 2

    dial = run(DialQuery(when=when), config)
    log.info(
        "%s: %s (dial %d), pointer %.1f°, year %.1f%%",
        dial.when.strftime("%Y-%m-%d %H:%M %Z"),
        dial.slices[dial.month_index].label,
        dial.dial_index,
        dial.pointer_deg,
        dial.progress * 100,
    )

    stem = f"yearclock__{dial.when.strftime('%Y_%m_%d')}"
    png_path = save_static_dial(dial, Path("results") / f"{stem}.png")
    svg_path = png_path.with_suffix(".svg")
    svg_path.write_text(render_svg(dial), encoding="utf-8")
    log.info("Saved: %s", png_path)
    log.info("Saved: %s", svg_path)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
