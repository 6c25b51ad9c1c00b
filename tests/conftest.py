# Forces the offscreen Qt platform before any QApplication exists and provides
# fallback 'qapp'/'qtbot' fixtures if pytest-qt is not installed. If pytest-qt
# is installed, its fixtures win.

import sys
import os
import contextlib
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:  # If pytest-qt present, do nothing (its fixtures will be used)
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover
    from PyQt6.QtWidgets import QApplication

    @pytest.fixture
    def qapp():  # type: ignore
        return QApplication.instance() or QApplication(sys.argv)  # type: ignore

    @pytest.fixture
    def qtbot(qapp):  # type: ignore
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

            @contextlib.contextmanager
            def waitSignal(self, *args, **kwargs):  # no-op stub
                yield

        yield Bot()
        for w in widgets:
            w.close()
        qapp.processEvents()
