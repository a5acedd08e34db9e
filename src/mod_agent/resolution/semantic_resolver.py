"""
Core abstractions for match selection.

Defines the decision type returned for one query and the selector protocol.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from ..models import ModRecord


class DecisionKind(Enum):
    """Outcome of selecting among catalog candidates."""
    SINGLE = auto()
    LISTING = auto()
    EMPTY = auto()


@dataclass(frozen=True)
class MatchDecision:
    """
    Immutable result of match selection.
    
    Attributes:
        kind: Which of the three outcomes was reached
        record: The selected record for SINGLE, otherwise None
        candidates: The records to list for LISTING, otherwise empty
    """
    kind: DecisionKind
    record: Optional[ModRecord] = None
    candidates: List[ModRecord] = field(default_factory=list)
    
    @classmethod
    def single(cls, record: ModRecord) -> "MatchDecision":
        return cls(kind=DecisionKind.SINGLE, record=record)
    
    @classmethod
    def listing(cls, candidates: List[ModRecord]) -> "MatchDecision":
        return cls(kind=DecisionKind.LISTING, candidates=list(candidates))
    
    @classmethod
    def empty(cls) -> "MatchDecision":
        return cls(kind=DecisionKind.EMPTY)
    
    def __post_init__(self):
        """Validate payload against kind."""
        if self.kind is DecisionKind.SINGLE and self.record is None:
            raise ValueError("SINGLE decision requires a record")
        if self.kind is DecisionKind.LISTING and not self.candidates:
            raise ValueError("LISTING decision requires candidates")


class MatchSelector(ABC):
    """
    Protocol for choosing which catalog record(s) answer a query.
    """
    
    @abstractmethod
    def select(
        self,
        query: str,
        candidates: List[ModRecord],
    ) -> MatchDecision:
        """
        Decide between a single record, a listing, or nothing.
        
        :param query: The user's query string
        :param candidates: Version-filtered records in catalog order
        :return: MatchDecision
        """
        pass
