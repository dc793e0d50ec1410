from datetime import datetime

import pytest

from yearclock.cli import main, parse_when


def test_parse_when_date_only():
    assert parse_when("2025-09-01") == datetime(2025, 9, 1)


def test_parse_when_with_time():
    assert parse_when(" 2025-12-15 08:30 ") == datetime(2025, 12, 15, 8, 30)


def test_parse_when_rejects_garbage():
    with pytest.raises(ValueError, match="Unrecognized date"):
        parse_when("next tuesday")


def test_main_writes_png_and_svg(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["yearclock", "2025-09-01"]) == 0
    results = tmp_path / "results"
    assert (results / "yearclock__2025_09_01.png").exists()
    svg = (results / "yearclock__2025_09_01.svg").read_text(encoding="utf-8")
    assert svg.startswith("<svg")


def test_main_bad_date_is_input_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["yearclock", "2025-13-40"]) == 2
    assert not (tmp_path / "results").exists()


def test_main_bad_config_is_input_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("YEARCLOCK_PALETTE", "rainbow")
    assert main(["yearclock", "2025-09-01"]) == 2
