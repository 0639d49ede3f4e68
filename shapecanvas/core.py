# shapecanvas/core.py

import logging
import random
import sys

from .settings import GenerationSettings, distinct_shape_count
from .shapes import GENERATION_KINDS, ShapeFactory, IdCounter, shape_key
from .utils import format_report

logger = logging.getLogger(__name__)


class Canvas:
    """
    Owns an ordered list of shapes:
    - shapes are appended, never removed
    - fills itself with random non-duplicate shapes
    - prints a text report of what it holds
    """

    def __init__(self, shapes=None, factory: ShapeFactory = None,
                 rng: random.Random = None,
                 settings: GenerationSettings = None):
        self._shapes: list = list(shapes) if shapes else []
        if factory is None:
            last_id = max((s.get_id() for s in self._shapes), default=0)
            factory = ShapeFactory(IdCounter(last_id))
        self.factory = factory
        self.rng = rng if rng is not None else random.Random()
        self.settings = (settings if settings is not None
                         else GenerationSettings()).validate()

    @property
    def shapes(self) -> tuple:
        return tuple(self._shapes)

    def __len__(self):
        return len(self._shapes)

    def __iter__(self):
        return iter(self._shapes)

    def add_shape(self, shape):
        self._shapes.append(shape)

    def generate_random_shapes(self, count: int = None) -> list:
        """Add ``count`` random shapes, no two of them with the same kind and
        dimensions. Returns the shapes added."""
        if count is None:
            count = self.settings.shape_count
        low = self.settings.min_dimension
        high = self.settings.max_dimension
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        if count > distinct_shape_count(low, high):
            raise ValueError(
                f"cannot draw {count} distinct shapes from [{low}, {high}]")

        accepted = []
        seen = set()
        rejected = 0
        while len(accepted) < count:
            kind = self.rng.choice(GENERATION_KINDS)
            dims = self.factory.random_dimensions(kind, self.rng, low, high)
            key = shape_key(kind, dims)
            if key in seen:
                rejected += 1
                logger.debug("Rejected duplicate %s %s", kind.value, dims)
                continue
            seen.add(key)
            shape = self.factory.create(kind, *dims)
            accepted.append(shape)
            self.add_shape(shape)

        logger.info("Generated %d random shapes (%d duplicates rejected)",
                    len(accepted), rejected)
        return accepted

    def report_lines(self) -> list:
        return format_report(self._shapes)

    def display_shapes(self, stream=None):
        """Print the report, one shape per line, in insertion order."""
        out = stream if stream is not None else sys.stdout
        for line in self.report_lines():
            print(line, file=out)
