from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ModRecord:
    name: str
    title: str
    author: str
    summary: str
    created_at: str
    updated_at: str
    downloads: int
    latest_version: str
    factorio_version: str
    dependencies: str
    thumbnail_url: str
    link: str
    homepage_url: Optional[str] = None
    source_url: Optional[str] = None
    tag: Optional[str] = None
