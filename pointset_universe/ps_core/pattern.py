"""
Pattern: an ordered sequence of points.

Patterns are value objects. Equality is structural and ordering is
lexicographic over the point sequence (a proper prefix sorts first), which
is exactly Python tuple ordering over the underlying points.

Provides:
- Pattern.vectorize(): consecutive difference vectors (translation-invariant shape)
- Pattern.translate(v): copy shifted by a vector
- Pattern.to_array(): (n, d) numpy view of the coordinates
"""

from dataclasses import dataclass
from typing import Generic, Iterator, Tuple, Union, overload

import numpy as np

from .types import P, points_to_array


@dataclass(frozen=True, order=True)
class Pattern(Generic[P]):
    """Ordered sequence of points. Any iterable is copied into a tuple."""
    points: Tuple[P, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[P]:
        return iter(self.points)

    @overload
    def __getitem__(self, index: int) -> P: ...

    @overload
    def __getitem__(self, index: slice) -> "Pattern[P]": ...

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return Pattern(self.points[index])
        return self.points[index]

    def is_empty(self) -> bool:
        return not self.points

    def vectorize(self) -> "Pattern[P]":
        """
        Differences between consecutive points.

        Two patterns are translations of each other exactly when their
        vectorized forms are equal. A pattern of length n yields n - 1
        vectors; length 0 or 1 yields the empty pattern.
        """
        return Pattern(
            self.points[i] - self.points[i - 1] for i in range(1, len(self.points))
        )

    def translate(self, vector: P) -> "Pattern[P]":
        return Pattern(point + vector for point in self.points)

    def to_array(self) -> np.ndarray:
        return points_to_array(self.points)
