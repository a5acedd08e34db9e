"""
Match resolution layer.

Key components:
- levenshtein / levenshtein_insensitive: edit distance primitives
- EditDistanceMatcher: threshold test against a record's name and title
- MatchDecision: SINGLE / LISTING / EMPTY outcome
- ModMatchSelector: selection rules over catalog candidates
"""
from .levenshtein import levenshtein, levenshtein_insensitive
from .fuzzy_matcher import EditDistanceMatcher
from .semantic_resolver import DecisionKind, MatchDecision, MatchSelector
from .match_selector import ModMatchSelector

__all__ = [
    "levenshtein",
    "levenshtein_insensitive",
    "EditDistanceMatcher",
    "DecisionKind",
    "MatchDecision",
    "MatchSelector",
    "ModMatchSelector",
]
