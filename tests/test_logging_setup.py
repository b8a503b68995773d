import sys
import os
import logging

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from PySide6.QtCore import QtMsgType

from open_notes.logging_setup import install_global_exception_hooks, qt_log_level


def test_qt_log_level_mapping():
    assert qt_log_level(QtMsgType.QtDebugMsg) == logging.DEBUG
    assert qt_log_level(QtMsgType.QtInfoMsg) == logging.INFO
    assert qt_log_level(QtMsgType.QtWarningMsg) == logging.WARNING
    assert qt_log_level(QtMsgType.QtCriticalMsg) == logging.ERROR
    assert qt_log_level(QtMsgType.QtFatalMsg) == logging.CRITICAL


def test_unknown_qt_mode_is_warning():
    assert qt_log_level(None) == logging.WARNING


def test_excepthook_logs_uncaught(monkeypatch, caplog):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(sys, "__excepthook__", lambda *args: None)
    install_global_exception_hooks()

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        exc_info = sys.exc_info()

    with caplog.at_level(logging.CRITICAL):
        sys.excepthook(*exc_info)
    assert "Uncaught exception" in caplog.text
    assert "boom" in caplog.text
