import logging
import sys
from PyQt5.QtCore import QObject, pyqtSignal

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class LogEmitter(QObject):
    log_record = pyqtSignal(str)

log_emitter = LogEmitter()

class QtHandler(logging.Handler):
    """Forward formatted records through a Qt signal."""

    def __init__(self, emitter=None):
        super().__init__()
        self.emitter = emitter if emitter is not None else log_emitter

    def emit(self, record):
        msg = self.format(record)
        self.emitter.log_record.emit(msg)

def setup_logging(level="WARNING"):
    logger = logging.getLogger()
    if any(isinstance(h, QtHandler) for h in logger.handlers):
        return
    logger.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT)
    # stdout carries the report
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(fmt)
    logger.addHandler(stream)

    qt_handler = QtHandler()
    qt_handler.setFormatter(fmt)
    logger.addHandler(qt_handler)
