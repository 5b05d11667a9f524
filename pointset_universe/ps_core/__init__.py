"""
ps_core: Core value types for translational pattern discovery.

Provides:
- types: Point2D, Point2DRounded, Point2DInt and the point-type registry
- pattern: Pattern (ordered point sequence, vectorize/translate)
- point_set: PointSet (sorted, duplicate-free, set algebra, binary search)
- tec: Mtp, Tec (expand, covered set, conjugate, redundant-translator removal)
"""

from .pattern import Pattern
from .point_set import PointSet
from .tec import Mtp, Tec, remove_translational_duplicates
from .types import Point, Point2D, Point2DInt, Point2DRounded

__all__ = [
    "Mtp",
    "Pattern",
    "Point",
    "Point2D",
    "Point2DInt",
    "Point2DRounded",
    "PointSet",
    "Tec",
    "remove_translational_duplicates",
]
