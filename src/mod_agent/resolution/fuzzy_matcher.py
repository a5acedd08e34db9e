"""
Edit-distance matching strategy for a single record.

Accepts a record when its internal name or display title is close to the query.
"""
from .levenshtein import levenshtein, levenshtein_insensitive
from ..models import ModRecord


class EditDistanceMatcher:
    """
    Threshold test on Levenshtein distance.
    
    Compares the raw query against both the internal name and the
    display title of a record. Case-sensitive unless ``insensitive`` is set.
    """
    
    def __init__(self, threshold: int = 3, insensitive: bool = False):
        """
        Initialize matcher.
        
        :param threshold: Largest distance still counted as a match
        :param insensitive: Fold case and punctuation before comparing
        """
        if threshold < 0:
            raise ValueError(f"Threshold must be non-negative, got {threshold}")
        
        self.threshold = threshold
        self.insensitive = insensitive
        self._distance = levenshtein_insensitive if insensitive else levenshtein
    
    def distance(self, query: str, record: ModRecord) -> int:
        """Smallest distance between the query and the record's name or title."""
        return min(self._distance(record.name, query), self._distance(record.title, query))
    
    def matches(self, query: str, record: ModRecord) -> bool:
        return self.distance(query, record) <= self.threshold
