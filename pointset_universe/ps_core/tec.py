"""
Maximal translatable patterns (MTPs) and translational equivalence classes (TECs).

Mtp: a translator vector with the pattern of all points that map into the
point set under it.

Tec: a pattern with the set of non-zero translators mapping it inside the
point set. Covered set = pattern ∪ every translated copy.

Provides:
- Mtp.to_tec()
- Tec.expand(), covered_set(), conjugate(), remove_redundant_translators()
- remove_translational_duplicates(): keep one TEC per pattern shape
"""

import logging
from dataclasses import dataclass
from itertools import chain, groupby
from typing import Generic, List, Sequence, Tuple

from .pattern import Pattern
from .point_set import PointSet
from .types import P

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mtp(Generic[P]):
    """Maximal translatable pattern for a single translator."""
    translator: P
    pattern: Pattern[P]

    def to_tec(self) -> "Tec[P]":
        return Tec(self.pattern, (self.translator,))


@dataclass(frozen=True)
class Tec(Generic[P]):
    """
    Translational equivalence class.

    Attributes:
        pattern: Representative pattern
        translators: Non-zero vectors mapping the pattern inside the point set

    Raises:
        ValueError: If a translator is the zero vector
    """
    pattern: Pattern[P]
    translators: Tuple[P, ...] = ()

    def __post_init__(self):
        if not isinstance(self.pattern, Pattern):
            object.__setattr__(self, "pattern", Pattern(self.pattern))
        object.__setattr__(self, "translators", tuple(self.translators))
        if any(t.is_zero() for t in self.translators):
            raise ValueError(f"TEC translators must be non-zero, got {self.translators}")

    def expand(self) -> List[Pattern[P]]:
        """The pattern followed by each translated copy, in translator order."""
        return [self.pattern] + [self.pattern.translate(t) for t in self.translators]

    def covered_set(self) -> PointSet[P]:
        return PointSet(chain.from_iterable(self.expand()))

    def conjugate(self) -> "Tec[P]":
        """
        Swap the roles of pattern and translators.

        With first point p0 and translators t1..tk:
            pattern'     = [p0, p0 + t1, ..., p0 + tk]
            translators' = [p - p0 for p in pattern[1:]]

        The covered set is unchanged, with one exception: a pattern point
        whose offset from p0 is zero (distinct rounded points can be that
        close) contributes no translator, so its copies are not covered by
        the conjugate. An empty pattern conjugates to itself.
        """
        if self.pattern.is_empty():
            return self
        first = self.pattern[0]
        pattern = Pattern([first] + [first + t for t in self.translators])
        offsets = (point - first for point in self.pattern.points[1:])
        return Tec(pattern, [offset for offset in offsets if not offset.is_zero()])

    def remove_redundant_translators(self) -> "Tec[P]":
        """
        Drop translators whose removal leaves the covered set unchanged.

        Algorithm:
        1. Deduplicate translators, keeping first occurrence
        2. Walk them in order; drop one when the remaining kept translators
           still cover the original covered set
        """
        distinct: List[P] = []
        seen = set()
        for translator in self.translators:
            if translator not in seen and not translator.is_zero():
                seen.add(translator)
                distinct.append(translator)

        target = self.covered_set()
        kept = list(distinct)
        for translator in distinct:
            trial = [t for t in kept if t != translator]
            if Tec(self.pattern, trial).covered_set() == target:
                kept = trial

        if len(kept) < len(self.translators):
            logger.debug(
                f"Removed {len(self.translators) - len(kept)} redundant translators "
                f"from pattern of size {len(self.pattern)}"
            )
        return Tec(self.pattern, kept)


def remove_translational_duplicates(tecs: Sequence[Tec[P]]) -> List[Tec[P]]:
    """
    Keep one TEC per pattern shape (vectorized form).

    Sorts by (vector count, vectorized pattern) and keeps the first TEC of
    each group. The sort is stable, so ties keep input order.
    """
    keyed = sorted(
        ((tec.pattern.vectorize(), tec) for tec in tecs),
        key=lambda item: (len(item[0]), item[0]),
    )
    return [next(group)[1] for _, group in groupby(keyed, key=lambda item: item[0])]
