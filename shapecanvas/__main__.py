# shapecanvas/__main__.py
import logging

from shapecanvas.bug_report import install_excepthook
from shapecanvas.core import Canvas
from shapecanvas.logger import setup_logging
from shapecanvas.settings import GenerationSettings

logger = logging.getLogger(__name__)


def main():
    # Ensure uncaught exceptions are logged and reported
    install_excepthook()
    settings = GenerationSettings.load()
    setup_logging(settings.log_level)

    canvas = Canvas(settings=settings)
    canvas.generate_random_shapes()
    canvas.display_shapes()
    logger.debug("Displayed %d shapes", len(canvas))


if __name__ == "__main__":
    main()
