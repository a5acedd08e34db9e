"""
Builds the outward-facing payloads for resolved mods.

Presentation conventions (link markup, the "None" sentinel, field order)
live here and nowhere else.
"""
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from ..models import ModRecord
from ..schemas import ListingCard, RecordCard

CARD_COLOR: Tuple[int, int, int] = (255, 34, 108)
LISTING_TITLE = "Search results:"
MISSING_LINK = "None"
UNTAGGED = "Not tagged."


def rfc3339(timestamp: Optional[datetime] = None) -> str:
    """RFC 3339 text for a timestamp, defaulting to now. Naive times are read as UTC."""
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)
    elif timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.isoformat()


def _link(label: str, url: Optional[str]) -> str:
    if not url:
        return MISSING_LINK
    return f"[{label}]({url})"


class ModOutputFormatter:
    """Formats ModRecord objects into record and listing cards."""
    
    def __init__(self, color: Tuple[int, int, int] = CARD_COLOR):
        self.color = color
    
    def record_card(self, record: ModRecord, timestamp: Optional[datetime] = None) -> RecordCard:
        fields = [
            ("Author", record.author),
            ("Downloads", f"{record.downloads} downloads"),
            ("Source code", _link("Source", record.source_url)),
            ("Homepage", _link("Home", record.homepage_url)),
            ("Last updated", record.updated_at),
            ("Dependencies", record.dependencies),
            ("Tagged", record.tag or UNTAGGED),
            ("Created on", record.created_at),
            ("Latest mod version", record.latest_version),
            ("Factorio version", record.factorio_version),
        ]
        return RecordCard(
            title=record.title,
            description=record.summary,
            author_name=record.title,
            author_url=record.link,
            thumbnail_url=record.thumbnail_url,
            color=self.color,
            timestamp=rfc3339(timestamp),
            fields=fields,
        )
    
    def listing_card(self, records: List[ModRecord], timestamp: Optional[datetime] = None) -> ListingCard:
        return ListingCard(
            title=LISTING_TITLE,
            description=self.listing_text(records),
            color=self.color,
            timestamp=rfc3339(timestamp),
        )
    
    def listing_text(self, records: List[ModRecord]) -> str:
        return "".join(f"[{r.title}]({r.link}) by {r.author}\n" for r in records)
