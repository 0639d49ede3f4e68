import sys
import os
import traceback
from collections import deque
from datetime import datetime

from .logger import log_emitter

LOG_DIR = os.path.join(os.path.expanduser("~"), "shapecanvas_logs")
LOG_FILE = os.path.join(LOG_DIR, "shapecanvas.log")
RECENT_LIMIT = 50

# formatted log lines received through log_emitter, newest last
recent_records = deque(maxlen=RECENT_LIMIT)
_listening = False


def _remember(msg):
    recent_records.append(msg)


def _excepthook(exc_type, exc_value, exc_tb):
    """Append the recent log lines and the traceback to the crash log."""
    os.makedirs(LOG_DIR, exist_ok=True)
    with open(LOG_FILE, "a", encoding="utf-8") as f:
        f.write(f"\n=== {datetime.now().isoformat()} ===\n")
        if recent_records:
            f.write("--- last log records ---\n")
            for line in recent_records:
                f.write(line + "\n")
            f.write("--- traceback ---\n")
        traceback.print_exception(exc_type, exc_value, exc_tb, file=f)

    sys.__excepthook__(exc_type, exc_value, exc_tb)


def install_excepthook():
    """Record log lines for crash reports and log uncaught exceptions."""
    global _listening
    if not _listening:
        log_emitter.log_record.connect(_remember)
        _listening = True
    sys.excepthook = _excepthook
