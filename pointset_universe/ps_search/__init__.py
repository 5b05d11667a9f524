"""
ps_search: Translation-invariant pattern search.

Provides:
- pattern_matcher: PatternMatcher interface (indices / occurrences, streaming + eager)
- exact_matcher: ExactMatcher (all points of the query must match)
- partial_matcher: PartialMatcher (at least min_match_size points match)
"""

from .exact_matcher import ExactMatcher
from .partial_matcher import PartialMatcher
from .pattern_matcher import PatternMatcher

__all__ = ["ExactMatcher", "PartialMatcher", "PatternMatcher"]
