from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler

from open_notes.settings import APP_NAME, LOG_DIR, LOG_PATH

SESSION_ID = uuid.uuid4().hex[:8]


class EnsureSessionFilter(logging.Filter):
    """Ensure record.session exists so Formatter never crashes."""
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


class SessionAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        extra.setdefault("session", SESSION_ID)
        return msg, kwargs


def setup_logging() -> logging.Logger:
    """
    Configure the application logger: rotating file + console.
    Safe to call more than once.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.DEBUG)

    if logger.handlers:
        return logger

    logger.propagate = False

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"
    )
    session_filter = EnsureSessionFilter()

    ch = logging.StreamHandler(sys.stderr or sys.stdout)
    ch.setLevel(logging.INFO)
    ch.setFormatter(fmt)
    ch.addFilter(session_filter)
    logger.addHandler(ch)

    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            LOG_PATH, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
    except OSError:
        # без файла логов приложение всё равно работает, остаётся консоль
        logger.warning("File logging disabled, cannot open %s", LOG_PATH, exc_info=True)
    else:
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        fh.addFilter(session_filter)
        logger.addHandler(fh)
        logger.info("Logging initialized. log_file=%s", LOG_PATH)

    return logger


log = SessionAdapter(logging.getLogger(APP_NAME), {})


def qt_log_level(mode) -> int:
    """Python logging level for a Qt message type."""
    from PySide6.QtCore import QtMsgType

    levels = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }
    return levels.get(mode, logging.WARNING)


def install_global_exception_hooks() -> None:
    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook

    try:
        from PySide6.QtCore import qInstallMessageHandler
    except ImportError:
        log.warning("PySide6 not importable, Qt messages will not be logged")
        return

    def _qt_message_handler(mode, context, message):
        file = getattr(context, "file", None)
        line = getattr(context, "line", None)
        func = getattr(context, "function", None)
        where = f"{file}:{line} {func}" if file or line or func else "unknown"
        log.log(qt_log_level(mode), "Qt: %s | where=%s", message, where)

    qInstallMessageHandler(_qt_message_handler)
    log.info("Qt message handler installed")
