import re

import pytest

from yearclock.models import Palette
from yearclock.palettes import (
    MONTH_COLORS,
    MONTH_LABELS,
    MONTH_TO_SEASON,
    SEASON_COLORS,
    SEASON_NAMES,
    palette_color,
)

HEX = re.compile(r"^#[0-9a-f]{6}$")


def test_tables_have_expected_sizes():
    assert len(MONTH_LABELS) == 12
    assert all(len(label) == 3 for label in MONTH_LABELS)
    assert len(MONTH_TO_SEASON) == 12
    assert len(SEASON_COLORS) == len(SEASON_NAMES) == 4
    assert len(MONTH_COLORS) == 12


def test_colors_are_hex():
    for color in SEASON_COLORS + MONTH_COLORS:
        assert HEX.match(color), color


def test_spring_is_green():
    r, g, b = (int(SEASON_COLORS[0][i : i + 2], 16) for i in (1, 3, 5))
    assert g > r and g > b


def test_december_is_winter():
    assert SEASON_NAMES[MONTH_TO_SEASON[11]] == "winter"
    assert palette_color(Palette.SEASON, 11) == SEASON_COLORS[3]


def test_month_palette_lookup():
    assert palette_color(Palette.MONTH, 4) == MONTH_COLORS[4]


@pytest.mark.parametrize("bad", [-1, 12])
def test_palette_color_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        palette_color(Palette.SEASON, bad)
