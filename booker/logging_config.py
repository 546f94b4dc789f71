"""
Logging setup for test runs.

Every record carries the name of the pytest test that emitted it, and
with a log directory configured each test gets its own log file.
"""

import logging
import os
import re
from pathlib import Path

from booker.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(test_name)s] %(message)s"
UNKNOWN_TEST = "Unknown"
MAX_TEST_NAME_LENGTH = 200

_CONSOLE_HANDLER_NAME = "booker.console"
_FILE_HANDLER_NAME = "booker.per_test_file"

_INVALID_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f ()\[\]]')
_PHASE_SUFFIX = re.compile(r" \((setup|call|teardown)\)$")


def sanitize_test_name(name: str | None) -> str:
    """Make a test name safe to use as a file name."""
    if not name:
        return UNKNOWN_TEST
    return _INVALID_CHARS.sub("_", name)[:MAX_TEST_NAME_LENGTH]


def current_test_name() -> str:
    """Node id of the running pytest test, or "Unknown" outside a test."""
    current = os.environ.get("PYTEST_CURRENT_TEST")
    if not current:
        return UNKNOWN_TEST
    return _PHASE_SUFFIX.sub("", current)


class PytestNodeFilter(logging.Filter):
    """Adds record.test_name; never drops records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "test_name"):
            record.test_name = current_test_name()
        return True


class PerTestFileHandler(logging.Handler):
    """Appends each record to <log_dir>/<sanitized test name>.log."""

    def __init__(self, log_dir: str | Path, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self._current_path: Path | None = None
        self._stream = None

    def path_for(self, test_name: str) -> Path:
        return self.log_dir / f"{sanitize_test_name(test_name)}.log"

    def emit(self, record: logging.LogRecord) -> None:
        try:
            test_name = getattr(record, "test_name", None) or current_test_name()
            path = self.path_for(test_name)
            if path != self._current_path:
                # Only the running test's file stays open.
                self._close_stream()
                self._stream = path.open("a", encoding="utf-8")
                self._current_path = path
            self._stream.write(self.format(record) + "\n")
            self._stream.flush()
        except Exception:
            self.handleError(record)

    @property
    def current_path(self) -> Path | None:
        return self._current_path

    def _close_stream(self) -> None:
        if self._stream is not None:
            self._stream.close()
        self._stream = None
        self._current_path = None

    def close(self) -> None:
        self.acquire()
        try:
            self._close_stream()
        finally:
            self.release()
        super().close()


def configure_logging(settings: Settings) -> None:
    """
    Install the console handler (and the per-test file handler when
    settings.log_dir is set) on the root logger.

    Calling it again only updates the level.
    """
    root = logging.getLogger()
    root.setLevel(settings.log_level.upper())

    installed = {handler.get_name() for handler in root.handlers}
    formatter = logging.Formatter(LOG_FORMAT)

    if _CONSOLE_HANDLER_NAME not in installed:
        console = logging.StreamHandler()
        console.set_name(_CONSOLE_HANDLER_NAME)
        console.addFilter(PytestNodeFilter())
        console.setFormatter(formatter)
        root.addHandler(console)

    if settings.log_dir and _FILE_HANDLER_NAME not in installed:
        per_test = PerTestFileHandler(settings.log_dir)
        per_test.set_name(_FILE_HANDLER_NAME)
        per_test.addFilter(PytestNodeFilter())
        per_test.setFormatter(formatter)
        root.addHandler(per_test)
