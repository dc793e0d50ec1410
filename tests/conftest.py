import matplotlib
import pytest

matplotlib.use("Agg")

from yearclock.config import DialConfig  # noqa: E402


@pytest.fixture
def utc_config() -> DialConfig:
    return DialConfig(tz_name="UTC")


@pytest.fixture
def stockholm_config() -> DialConfig:
    return DialConfig(tz_name="Europe/Stockholm")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "YEARCLOCK_TZ",
        "YEARCLOCK_LAT",
        "YEARCLOCK_LNG",
        "YEARCLOCK_PALETTE",
        "YEARCLOCK_ROTATION_OFFSET",
        "YEARCLOCK_TICKS",
        "YEARCLOCK_SHOW_PROGRESS",
        "YEARCLOCK_LOGLEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
