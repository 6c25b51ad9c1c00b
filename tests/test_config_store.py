from vizmorph.app.config_store import (
    ChartSettings,
    load_settings,
    save_settings,
    SETTINGS_VERSION,
    DEFAULT_FILENAME,
)
from vizmorph.charting.appearance import ChartAppearance
from pathlib import Path
import json


def test_load_returns_defaults_when_missing(tmp_path: Path):
    settings = load_settings(tmp_path / "nope.json")
    assert settings.version == SETTINGS_VERSION
    assert settings.appearance == ChartAppearance()
    assert settings.is_bar_chart is False


def test_save_and_reload_round_trip(tmp_path: Path):
    settings = ChartSettings(
        appearance=ChartAppearance(chart_title="Revenue", bar_color="#224466", show_values=True),
        is_bar_chart=True,
    )
    path = save_settings(settings, tmp_path / "chart.json")
    loaded = load_settings(path)
    assert loaded.to_dict() == settings.to_dict()


def test_directory_uses_default_filename(tmp_path: Path):
    path = save_settings(ChartSettings(), tmp_path)
    assert path == tmp_path / DEFAULT_FILENAME
    assert load_settings(tmp_path).version == SETTINGS_VERSION


def test_corrupt_file_graceful_fallback(tmp_path: Path):
    p = tmp_path / "chart.json"
    p.write_text("not json", encoding="utf-8")
    settings = load_settings(p)
    assert isinstance(settings, ChartSettings)
    assert settings.appearance == ChartAppearance()


def test_out_of_range_option_falls_back(tmp_path: Path):
    p = tmp_path / "chart.json"
    p.write_text(
        json.dumps({"version": SETTINGS_VERSION, "appearance": {"animation_step": 5}}),
        encoding="utf-8",
    )
    assert load_settings(p).appearance.animation_step == ChartAppearance().animation_step


def test_version_mismatch_resets(tmp_path: Path):
    p = tmp_path / "chart.json"
    data = {
        "version": SETTINGS_VERSION + 10,
        "appearance": {"chart_title": "old"},
        "is_bar_chart": True,
    }
    p.write_text(json.dumps(data), encoding="utf-8")
    settings = load_settings(p)
    assert settings.appearance.chart_title == ""
    assert settings.is_bar_chart is False


def test_unknown_appearance_keys_ignored(tmp_path: Path):
    p = tmp_path / "chart.json"
    data = {
        "version": SETTINGS_VERSION,
        "appearance": {"chart_title": "kept", "gradient": "rainbow"},
    }
    p.write_text(json.dumps(data), encoding="utf-8")
    assert load_settings(p).appearance.chart_title == "kept"


def test_no_tmp_file_left_behind(tmp_path: Path):
    save_settings(ChartSettings(), tmp_path / "chart.json")
    assert sorted(f.name for f in tmp_path.iterdir()) == ["chart.json"]
