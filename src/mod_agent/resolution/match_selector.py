"""
Match selection over catalog candidates.

Picks one record when the query names it closely enough, otherwise lists them.
"""
import logging
from typing import List, Optional

from .fuzzy_matcher import EditDistanceMatcher
from .semantic_resolver import MatchDecision, MatchSelector
from ..models import ModRecord

logger = logging.getLogger(__name__)


class ModMatchSelector(MatchSelector):
    """
    Selection rules, in order:
    
    1. No candidates: EMPTY
    2. Exactly one candidate: SINGLE, without a similarity check
    3. First candidate whose name or title is within the threshold: SINGLE
    4. Otherwise: LISTING of the candidates, capped at ``listing_cap``
    
    Usage:
        selector = ModMatchSelector()
        decision = selector.select("foo", records)
    """
    
    def __init__(
        self,
        matcher: Optional[EditDistanceMatcher] = None,
        listing_cap: int = 10,
    ):
        """
        Initialize selector.
        
        :param matcher: Matcher deciding closeness (defaults to case-sensitive, threshold 3)
        :param listing_cap: Maximum number of records in a listing
        """
        if listing_cap < 1:
            raise ValueError(f"Listing cap must be positive, got {listing_cap}")
        
        self._matcher = matcher or EditDistanceMatcher()
        self.listing_cap = listing_cap
    
    def select(
        self,
        query: str,
        candidates: List[ModRecord],
    ) -> MatchDecision:
        if not candidates:
            return MatchDecision.empty()
        
        if len(candidates) == 1:
            return MatchDecision.single(candidates[0])
        
        for record in candidates:
            if self._matcher.matches(query, record):
                logger.debug(f"Query '{query}' matched '{record.name}'")
                return MatchDecision.single(record)
        
        logger.debug(f"No close match for '{query}' among {len(candidates)} candidates")
        return MatchDecision.listing(candidates[: self.listing_cap])
