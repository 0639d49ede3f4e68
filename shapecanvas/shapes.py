# shapecanvas/shapes.py

import enum
import logging

logger = logging.getLogger(__name__)


class ShapeKind(enum.Enum):
    """Variant tag of a shape."""

    CIRCLE = "CIRCLE"
    OVAL = "OVAL"
    RECTANGLE = "RECTANGLE"
    SQUARE = "SQUARE"


class UnknownShapeKindError(RuntimeError):
    """Raised when a shape kind has no constructor. Always a code defect."""

    def __init__(self, kind):
        super().__init__(f"Invalid shape type: {kind!r}")
        self.kind = kind


def shape_key(kind, dimensions) -> tuple:
    """Duplicate-detection identity: identifiers never take part in it."""
    return (kind, tuple(dimensions))


def _check_dimension(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


class Shape:
    """
    Base of every shape on a canvas:
    - an identifier handed out by an :class:`IdCounter`
    - a kind tag and the kind's dimensions
    - a human readable description (:meth:`get_info`)

    Instances are read-only once built.
    """

    __slots__ = ("_id",)
    kind: ShapeKind

    def __init__(self, shape_id: int):
        object.__setattr__(self, "_id", shape_id)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def shape_id(self) -> int:
        return self._id

    def get_id(self) -> int:
        return self._id

    @property
    def dimensions(self) -> tuple:
        raise NotImplementedError

    @property
    def key(self) -> tuple:
        """Kind and dimensions; two shapes with the same key are duplicates."""
        return shape_key(self.kind, self.dimensions)

    def get_info(self) -> str:
        raise NotImplementedError

    def __repr__(self):
        dims = ", ".join(str(d) for d in self.dimensions)
        return f"{type(self).__name__}(id={self._id}, {dims})"


class Oval(Shape):
    __slots__ = ("_h", "_v")
    kind = ShapeKind.OVAL

    def __init__(self, shape_id: int, horizontal_radius: int, vertical_radius: int):
        super().__init__(shape_id)
        object.__setattr__(
            self, "_h", _check_dimension("horizontal_radius", horizontal_radius))
        object.__setattr__(
            self, "_v", _check_dimension("vertical_radius", vertical_radius))

    @property
    def horizontal_radius(self) -> int:
        return self._h

    @property
    def vertical_radius(self) -> int:
        return self._v

    @property
    def dimensions(self) -> tuple:
        return (self._h, self._v)

    def get_info(self) -> str:
        return f"OVAL {self._h}x{self._v}"


class Circle(Shape):
    """An oval with equal radii."""

    __slots__ = ("_r",)
    kind = ShapeKind.CIRCLE

    def __init__(self, shape_id: int, radius: int):
        super().__init__(shape_id)
        object.__setattr__(self, "_r", _check_dimension("radius", radius))

    @property
    def radius(self) -> int:
        return self._r

    @property
    def horizontal_radius(self) -> int:
        return self._r

    @property
    def vertical_radius(self) -> int:
        return self._r

    @property
    def dimensions(self) -> tuple:
        return (self._r,)

    def get_info(self) -> str:
        return f"CIRCLE {self._r}"


class Rectangle(Shape):
    __slots__ = ("_length", "_width")
    kind = ShapeKind.RECTANGLE

    def __init__(self, shape_id: int, length: int, width: int):
        super().__init__(shape_id)
        object.__setattr__(self, "_length", _check_dimension("length", length))
        object.__setattr__(self, "_width", _check_dimension("width", width))

    @property
    def length(self) -> int:
        return self._length

    @property
    def width(self) -> int:
        return self._width

    @property
    def dimensions(self) -> tuple:
        return (self._length, self._width)

    def get_info(self) -> str:
        return f"RECTANGLE {self._length}x{self._width}"


class Square(Shape):
    """A rectangle with equal sides, described with the rectangle format."""

    __slots__ = ("_side",)
    kind = ShapeKind.SQUARE

    def __init__(self, shape_id: int, side: int):
        super().__init__(shape_id)
        object.__setattr__(self, "_side", _check_dimension("side", side))

    @property
    def side(self) -> int:
        return self._side

    @property
    def length(self) -> int:
        return self._side

    @property
    def width(self) -> int:
        return self._side

    @property
    def dimensions(self) -> tuple:
        return (self._side,)

    def get_info(self) -> str:
        return f"RECTANGLE {self._side}x{self._side}"


# order used when picking a random kind
GENERATION_KINDS = (
    ShapeKind.CIRCLE,
    ShapeKind.OVAL,
    ShapeKind.SQUARE,
    ShapeKind.RECTANGLE,
)


class IdCounter:
    """Sequential shape identifiers: increment, then hand out (first id is 1)."""

    def __init__(self, start: int = 0):
        self._value = start

    @property
    def value(self) -> int:
        return self._value

    def peek(self) -> int:
        """The id the next call to :meth:`next_id` will return."""
        return self._value + 1

    def next_id(self) -> int:
        self._value += 1
        return self._value


class ShapeFactory:
    """
    Builds shapes from a kind tag, numbering them with its own counter.
    """

    def __init__(self, counter: IdCounter = None):
        self.counter = counter if counter is not None else IdCounter()

    def create(self, kind, *dimensions) -> Shape:
        if kind is ShapeKind.CIRCLE:
            cls = Circle
        elif kind is ShapeKind.OVAL:
            cls = Oval
        elif kind is ShapeKind.SQUARE:
            cls = Square
        elif kind is ShapeKind.RECTANGLE:
            cls = Rectangle
        else:
            raise UnknownShapeKindError(kind)
        # the id is only taken once the constructor accepted the dimensions
        shape = cls(self.counter.peek(), *dimensions)
        self.counter.next_id()
        logger.debug("Created %r", shape)
        return shape

    @staticmethod
    def random_dimensions(kind, rng, low: int = 1, high: int = 100) -> tuple:
        """Draw the dimensions of ``kind`` uniformly in [low, high]."""
        if kind in (ShapeKind.CIRCLE, ShapeKind.SQUARE):
            return (rng.randint(low, high),)
        if kind in (ShapeKind.OVAL, ShapeKind.RECTANGLE):
            return (rng.randint(low, high), rng.randint(low, high))
        raise UnknownShapeKindError(kind)

    def circle(self, radius: int) -> Circle:
        return self.create(ShapeKind.CIRCLE, radius)

    def oval(self, horizontal_radius: int, vertical_radius: int) -> Oval:
        return self.create(ShapeKind.OVAL, horizontal_radius, vertical_radius)

    def rectangle(self, length: int, width: int) -> Rectangle:
        return self.create(ShapeKind.RECTANGLE, length, width)

    def square(self, side: int) -> Square:
        return self.create(ShapeKind.SQUARE, side)
