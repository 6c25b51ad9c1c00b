"""Demo launcher for `python -m vizmorph` or the `vizmorph-demo` script.

Shows a chart with two buttons: one toggles line/bar, the other replaces
the data with 30 random values in [-40, 40]. ``--export`` renders a single
frame off-screen instead of opening a window.
"""

from __future__ import annotations

import argparse
import logging
import math
import os
import random
import sys
from typing import List, Optional, Tuple

from PyQt6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .app.config_store import ChartSettings, load_settings
from .charting.engine import MorphingChartEngine
from .charting.export import export_chart
from .components.morphing_chart import MorphingChartWidget

__all__ = [
    "RANDOM_COUNT",
    "RANDOM_LIMIT",
    "random_values",
    "build_parser",
    "configure_logging",
    "DemoWindow",
    "main",
]

log = logging.getLogger(__name__)

RANDOM_COUNT = 30
RANDOM_LIMIT = 40.0


def random_values(
    count: int = RANDOM_COUNT, limit: float = RANDOM_LIMIT, rng: Optional[random.Random] = None
) -> List[float]:
    rng = rng or random.Random()
    return [rng.uniform(-limit, limit) for _ in range(count)]


def _parse_size(text: str) -> Tuple[int, int]:
    try:
        w, h = (int(part) for part in text.lower().split("x", 1))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"size must look like 640x400, got {text!r}") from exc
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError("size must be positive")
    return w, h


def _parse_values(text: str) -> List[float]:
    try:
        values = [float(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"values must be comma separated numbers, got {text!r}"
        ) from exc
    if not values:
        raise argparse.ArgumentTypeError("values must not be empty")
    if not all(math.isfinite(v) for v in values):
        raise argparse.ArgumentTypeError("values must be finite numbers")
    return values


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="vizmorph-demo", description="Line/bar morphing chart demo")
    p.add_argument("--bar", action="store_true", help="Start in bar chart mode")
    p.add_argument("--title", default=None, help="Chart title")
    p.add_argument("--show-values", action="store_true", help="Draw permanent value labels")
    p.add_argument("--settings", default=None, help="Settings JSON file to load")
    p.add_argument(
        "--values",
        type=_parse_values,
        default=None,
        help="Comma separated values (default: random)",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for random demo data")
    p.add_argument("--export", default=None, help="Write one frame to PNG/SVG and exit")
    p.add_argument("--size", type=_parse_size, default=(640, 400), help="Export size, e.g. 640x400")
    p.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        help="Logging level (default from LOG_LEVEL or INFO)",
    )
    return p


def configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _settings_from_args(args: argparse.Namespace) -> ChartSettings:
    settings = load_settings(args.settings) if args.settings else ChartSettings()
    changes = {}
    if args.title is not None:
        changes["chart_title"] = args.title
    if args.show_values:
        changes["show_values"] = True
    if changes:
        settings.appearance = settings.appearance.updated(**changes)
    if args.bar:
        settings.is_bar_chart = True
    return settings


def _values_from_args(args: argparse.Namespace) -> List[float]:
    if args.values is not None:
        return list(args.values)
    return random_values(rng=random.Random(args.seed))


class DemoWindow(QMainWindow):
    def __init__(self, settings: ChartSettings, values: List[float], *, seed: Optional[int] = None):
        super().__init__()
        self.setWindowTitle("VizMorph")
        self._rng = random.Random(seed)
        self.chart = MorphingChartWidget(appearance=settings.appearance, values=values)
        if settings.is_bar_chart:
            self.chart.set_bar_chart(True)
            self.chart.engine().finish_animation()
        self._build_ui()

    def _build_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.addWidget(self.chart, 1)
        buttons = QHBoxLayout()
        self.toggle_button = QPushButton("Toggle chart type", central)
        self.toggle_button.clicked.connect(self.toggle_chart_type)  # type: ignore[attr-defined]
        self.randomize_button = QPushButton("Randomize data", central)
        self.randomize_button.clicked.connect(self.randomize_data)  # type: ignore[attr-defined]
        buttons.addWidget(self.toggle_button)
        buttons.addWidget(self.randomize_button)
        buttons.addStretch(1)
        layout.addLayout(buttons)
        self.setCentralWidget(central)
        self.resize(720, 480)

    def toggle_chart_type(self) -> None:
        self.chart.set_bar_chart(not self.chart.is_bar_chart())

    def randomize_data(self) -> None:
        self.chart.set_values(random_values(rng=self._rng))


def _export(args: argparse.Namespace, settings: ChartSettings, values: List[float]) -> int:
    engine = MorphingChartEngine(appearance=settings.appearance, values=values)
    engine.set_bar_chart(settings.is_bar_chart)
    engine.finish_animation()
    width, height = args.size
    fmt = "svg" if str(args.export).lower().endswith(".svg") else "png"
    path = export_chart(engine, args.export, width=width, height=height, format=fmt)
    log.info("exported %s (%dx%d)", path, width, height)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    settings = _settings_from_args(args)
    values = _values_from_args(args)
    if args.export:
        os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance() or QApplication(sys.argv[:1])
    if args.export:
        return _export(args, settings, values)
    win = DemoWindow(settings, values, seed=args.seed)
    win.show()
    return app.exec()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
