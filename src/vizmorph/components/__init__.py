"""Qt widgets hosting the chart engine."""

from __future__ import annotations

from .morphing_chart import MorphingChartWidget, QtTickScheduler

__all__ = ["MorphingChartWidget", "QtTickScheduler"]
