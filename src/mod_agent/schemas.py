from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class RecordCard:
    title: str
    description: str
    author_name: str
    author_url: str
    thumbnail_url: str
    color: Tuple[int, int, int]
    timestamp: str
    fields: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class ListingCard:
    title: str
    description: str
    color: Tuple[int, int, int]
    timestamp: str


@dataclass
class CommandOutcome:
    success: bool
    error: Optional[str] = None
