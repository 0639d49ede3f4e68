"""
Tests for the uncaught-exception hook and its record of recent log lines.
"""

import logging
import sys
from collections import deque

import pytest

from shapecanvas import bug_report
from shapecanvas.logger import LogEmitter, QtHandler, log_emitter
from shapecanvas.shapes import UnknownShapeKindError


@pytest.fixture
def crash_log(tmp_path, monkeypatch):
    log_dir = tmp_path / "logs"
    log_file = log_dir / "shapecanvas.log"
    monkeypatch.setattr(bug_report, "LOG_DIR", str(log_dir))
    monkeypatch.setattr(bug_report, "LOG_FILE", str(log_file))
    monkeypatch.setattr(bug_report, "recent_records",
                        deque(maxlen=bug_report.RECENT_LIMIT))
    return log_file


def _raise_unknown_kind():
    try:
        raise UnknownShapeKindError("TRIANGLE")
    except UnknownShapeKindError:
        return sys.exc_info()


def test_excepthook_writes_crash_log(crash_log, monkeypatch):
    forwarded = []
    monkeypatch.setattr(sys, "__excepthook__",
                        lambda *args: forwarded.append(args))

    exc_info = _raise_unknown_kind()
    bug_report._excepthook(*exc_info)

    text = crash_log.read_text(encoding="utf-8")
    assert "UnknownShapeKindError" in text
    assert "Invalid shape type: 'TRIANGLE'" in text
    assert "last log records" not in text
    assert forwarded == [exc_info]


def test_crash_log_includes_records_from_the_log_signal(crash_log, monkeypatch):
    monkeypatch.setattr(sys, "__excepthook__", lambda *args: None)
    emitter = LogEmitter()
    emitter.log_record.connect(bug_report._remember)

    handler = QtHandler(emitter)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))
    log = logging.getLogger("shapecanvas.tests.crash_log")
    log.propagate = False
    log.setLevel(logging.DEBUG)
    log.addHandler(handler)
    try:
        log.info("Generated %d random shapes", 10)
    finally:
        log.removeHandler(handler)

    bug_report._excepthook(*_raise_unknown_kind())

    text = crash_log.read_text(encoding="utf-8")
    assert "--- last log records ---\nINFO:Generated 10 random shapes\n" in text
    assert text.index("Generated 10") < text.index("Traceback")


def test_recent_records_are_bounded(crash_log):
    for i in range(bug_report.RECENT_LIMIT + 5):
        bug_report._remember(f"line {i}")
    assert len(bug_report.recent_records) == bug_report.RECENT_LIMIT
    assert bug_report.recent_records[0] == "line 5"


def test_install_excepthook_listens_to_log_signal(monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    bug_report.install_excepthook()
    bug_report.install_excepthook()
    assert sys.excepthook is bug_report._excepthook
    assert log_emitter.receivers(log_emitter.log_record) == 1
