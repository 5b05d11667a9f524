"""
Point types for translational pattern discovery.

A point is an immutable vector with a lexicographic total order. Every
point type supports:
- Component-wise addition and subtraction (yields difference vectors)
- Scalar multiplication
- is_zero(), component(i) (None when out of range), dimensionality
- Equality and hashing consistent with the ordering

Component 0 is the onset (time) axis. The windowed SIATEC variants read it
to bound inter-onset intervals.

Provides:
- Point: shared base for all point types
- Point2D: float coordinates
- Point2DRounded: float coordinates compared on a 5-decimal rounded onset
- Point2DInt: integer coordinates
- POINT_TYPES: name -> point class lookup used by readers and runners
- points_to_array: stack points into an (n, d) numpy array
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Type, TypeVar

import numpy as np

# Decimal places kept by Point2DRounded when comparing onsets
ROUNDING_DECIMALS = 5
_ROUNDING_SCALE = 10 ** ROUNDING_DECIMALS


class Point(ABC):
    """Base class for point types. Subclasses are frozen, ordered dataclasses."""

    @abstractmethod
    def is_zero(self) -> bool:
        """True when every component is zero."""

    @abstractmethod
    def component(self, index: int) -> Optional[float]:
        """Component at index, None when out of range."""

    @property
    @abstractmethod
    def dimensionality(self) -> int:
        """Number of components."""

    def components(self) -> tuple:
        """All components in axis order."""
        return tuple(self.component(i) for i in range(self.dimensionality))

    def __iter__(self) -> Iterator[float]:
        """Allow tuple unpacking: x, y = point"""
        return iter(self.components())


P = TypeVar("P", bound=Point)


@dataclass(frozen=True, order=True)
class Point2D(Point):
    """Two-dimensional point with float coordinates (x = onset, y = pitch)."""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __add__(self, other: "Point2D") -> "Point2D":
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point2D") -> "Point2D":
        return Point2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Point2D":
        return Point2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def component(self, index: int) -> Optional[float]:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        return None

    @property
    def dimensionality(self) -> int:
        return 2


def _round_onset(value: float) -> float:
    # Half away from zero, independent of the built-in round()'s banker's rounding
    scaled = math.floor(abs(value) * _ROUNDING_SCALE + 0.5)
    return math.copysign(scaled, value) / _ROUNDING_SCALE


@dataclass(frozen=True, order=True, init=False)
class Point2DRounded(Point):
    """
    Two-dimensional float point whose onset is compared after rounding.

    Equality, ordering and hashing use (rounded_x, y). Arithmetic uses the
    unrounded raw_x so rounding errors do not accumulate through chains of
    differences.
    """
    rounded_x: float
    y: float
    raw_x: float = field(compare=False, repr=False)

    def __init__(self, x: float, y: float):
        object.__setattr__(self, "raw_x", float(x))
        object.__setattr__(self, "rounded_x", _round_onset(float(x)))
        object.__setattr__(self, "y", float(y))

    @property
    def x(self) -> float:
        return self.rounded_x

    def __add__(self, other: "Point2DRounded") -> "Point2DRounded":
        return Point2DRounded(self.raw_x + other.raw_x, self.y + other.y)

    def __sub__(self, other: "Point2DRounded") -> "Point2DRounded":
        return Point2DRounded(self.raw_x - other.raw_x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Point2DRounded":
        return Point2DRounded(self.raw_x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def is_zero(self) -> bool:
        return self.rounded_x == 0.0 and self.y == 0.0

    def component(self, index: int) -> Optional[float]:
        if index == 0:
            return self.rounded_x
        if index == 1:
            return self.y
        return None

    @property
    def dimensionality(self) -> int:
        return 2


@dataclass(frozen=True, order=True)
class Point2DInt(Point):
    """Two-dimensional point with integer coordinates."""
    x: int
    y: int

    def __post_init__(self):
        object.__setattr__(self, "x", int(self.x))
        object.__setattr__(self, "y", int(self.y))

    def __add__(self, other: "Point2DInt") -> "Point2DInt":
        return Point2DInt(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point2DInt") -> "Point2DInt":
        return Point2DInt(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Point2DInt":
        # Scalar is truncated toward zero before multiplying
        factor = int(scalar)
        return Point2DInt(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def component(self, index: int) -> Optional[float]:
        if index == 0:
            return float(self.x)
        if index == 1:
            return float(self.y)
        return None

    @property
    def dimensionality(self) -> int:
        return 2


POINT_TYPES: Dict[str, Type[Point]] = {
    "float": Point2D,
    "rounded": Point2DRounded,
    "int": Point2DInt,
}


def point_type_from_name(name: str) -> Type[Point]:
    """Look up a point class by its short name ("float", "rounded", "int")."""
    if name not in POINT_TYPES:
        raise ValueError(
            f"Invalid point type '{name}'. Must be one of {sorted(POINT_TYPES)}"
        )
    return POINT_TYPES[name]


def points_to_array(points: Iterable[Point]) -> np.ndarray:
    """
    Stack points into an (n, d) float array.

    Missing components (points of lower dimensionality) become NaN.
    Returns an array of shape (0, 0) for no points.
    """
    rows = [point.components() for point in points]
    if not rows:
        return np.zeros((0, 0), dtype=float)
    width = max(len(row) for row in rows)
    array = np.full((len(rows), width), np.nan, dtype=float)
    for i, row in enumerate(rows):
        array[i, : len(row)] = row
    return array
