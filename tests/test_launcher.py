"""Demo launcher tests: data generation, argument parsing, window wiring, export path."""

from __future__ import annotations

import json
import random

import pytest

from vizmorph.app.config_store import ChartSettings, save_settings
from vizmorph.charting.appearance import ChartAppearance
from vizmorph.launcher import DemoWindow, build_parser, main, random_values


def test_random_values_count_and_bounds():
    values = random_values(rng=random.Random(1))
    assert len(values) == 30
    assert all(-40.0 <= v <= 40.0 for v in values)


def test_random_values_reproducible_with_seed():
    assert random_values(5, rng=random.Random(7)) == random_values(5, rng=random.Random(7))


def test_parser_size_option():
    args = build_parser().parse_args(["--size", "320x240"])
    assert args.size == (320, 240)
    assert build_parser().parse_args([]).size == (640, 400)


@pytest.mark.parametrize("bad", ["wide", "0x10", "10"])
def test_parser_rejects_bad_size(bad):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--size", bad])


def test_demo_window_buttons(qtbot):
    win = DemoWindow(ChartSettings(), [1.0, 2.0, 3.0], seed=3)
    qtbot.addWidget(win)
    assert not win.chart.is_bar_chart()
    win.toggle_button.click()
    assert win.chart.is_bar_chart()
    win.randomize_button.click()
    values = win.chart.values()
    assert len(values) == 30
    assert values != [1.0, 2.0, 3.0]


def test_demo_window_starts_settled_in_bar_mode(qtbot):
    win = DemoWindow(ChartSettings(is_bar_chart=True), [1.0, 2.0])
    qtbot.addWidget(win)
    assert win.chart.progress() == 1.0


def test_main_export_png(qapp, tmp_path):
    out = tmp_path / "demo.png"
    rc = main(["--export", str(out), "--values", "1,2,3", "--bar", "--size", "200x120"])
    assert rc == 0
    assert out.exists() and out.stat().st_size > 0


def test_main_export_honours_settings_file(qapp, tmp_path):
    settings_path = tmp_path / "settings.json"
    save_settings(
        ChartSettings(appearance=ChartAppearance(chart_title="Saved", show_values=True)),
        settings_path,
    )
    assert json.loads(settings_path.read_text(encoding="utf-8"))["appearance"]["chart_title"] == "Saved"
    out = tmp_path / "demo.svg"
    rc = main(["--export", str(out), "--settings", str(settings_path), "--values", "4,-2"])
    assert rc == 0
    assert "<svg" in out.read_text(encoding="utf-8")


def test_parser_values_option():
    assert build_parser().parse_args(["--values", "1, 2.5,3"]).values == [1.0, 2.5, 3.0]
    assert build_parser().parse_args(["--values=-1,4"]).values == [-1.0, 4.0]
    assert build_parser().parse_args([]).values is None


@pytest.mark.parametrize("bad", ["1,abc", "nan", "1,inf", ","])
def test_parser_rejects_bad_values(bad, capsys):
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["--values", bad])
    assert info.value.code == 2
    assert "--values" in capsys.readouterr().err
