from typing import Any, Dict, List, Optional
from .models import ModRecord

PLACEHOLDER_THUMBNAIL = "http://i.imgur.com/ckaei9P.png"
DEFAULT_CATALOG_HOST = "mods.factorio.com"


class ModCanonicalizer:
    """
    Turns raw mod portal records into ModRecord objects.

    Every field degrades to a fallback, so parsing never raises.
    """

    def __init__(self, catalog_host: str = DEFAULT_CATALOG_HOST):
        self.catalog_host = catalog_host

    def parse_mod(self, raw: Any) -> ModRecord:
        if not isinstance(raw, dict):
            raw = {}

        release = self._as_dict(raw.get("latest_release"))
        info = self._as_dict(release.get("info_json"))
        name = self._text(raw.get("name"))
        owner = self._text(raw.get("owner"))

        return ModRecord(
            name=name,
            title=self._text(raw.get("title")),
            author=owner,
            summary=self._text(raw.get("summary"), "No summary."),
            created_at=self._date(raw.get("created_at")),
            updated_at=self._date(raw.get("updated_at")),
            downloads=self._count(raw.get("downloads_count")),
            latest_version=self._text(release.get("version")),
            factorio_version=self._text(release.get("factorio_version")),
            dependencies=summarize_dependencies(info.get("dependencies")),
            thumbnail_url=self._thumbnail(raw.get("first_media_file")),
            link=self.mod_link(owner, name),
            homepage_url=self._optional(raw.get("homepage")),
            source_url=self._source(raw.get("github_path")),
            tag=self._tag(raw.get("tags")),
        )

    def parse_all(self, document: Any, limit: Optional[int] = None) -> List[ModRecord]:
        """
        Parse the ``results`` array of a search response, in catalog order.

        Non-object entries are skipped. At most ``limit`` records are returned.
        """
        if not isinstance(document, dict):
            return []
        results = document.get("results")
        if not isinstance(results, list):
            return []

        records: List[ModRecord] = []
        for entry in results:
            if limit is not None and len(records) >= limit:
                break
            if isinstance(entry, dict):
                records.append(self.parse_mod(entry))
        return records

    def mod_link(self, owner: str, name: str) -> str:
        # URLs can't have spaces
        return f"https://{self.catalog_host}/mods/{owner}/{name}".replace(" ", "%20")

    def _as_dict(self, value: Any) -> Dict[str, Any]:
        return value if isinstance(value, dict) else {}

    def _text(self, value: Any, default: str = "Unknown") -> str:
        if value is None:
            return default
        value = str(value).strip()
        return value if value else default

    def _optional(self, value: Any) -> Optional[str]:
        if value is None:
            return None
        value = str(value).strip()
        return value if value else None

    def _date(self, value: Any) -> str:
        # Drop the time of day
        return self._text(value).split(" ", 1)[0]

    def _count(self, value: Any) -> int:
        if isinstance(value, bool):
            return 0
        try:
            count = int(value)
        except (TypeError, ValueError):
            return 0
        return max(count, 0)

    def _thumbnail(self, media: Any) -> str:
        urls = self._as_dict(self._as_dict(media).get("urls"))
        return self._optional(urls.get("thumb")) or PLACEHOLDER_THUMBNAIL

    def _source(self, github_path: Any) -> Optional[str]:
        path = self._optional(github_path)
        if path is None:
            return None
        return f"https://github.com/{path}"

    def _tag(self, tags: Any) -> Optional[str]:
        if not isinstance(tags, list) or not tags:
            return None
        first = self._as_dict(tags[0])
        return self._optional(first.get("title"))


def summarize_dependencies(dependencies: Any) -> str:
    """
    Render a dependency list, one required entry per line.

    Entries starting with ``?`` are optional and only counted.
    """
    if not isinstance(dependencies, list) or not dependencies:
        return "No dependencies."

    lines = []
    optional = 0
    for entry in dependencies:
        entry = str(entry)
        if entry.startswith("?"):
            optional += 1
        else:
            lines.append(f"{entry}\n")

    summary = "".join(lines)
    if optional == 1:
        summary += "...and 1 optional dependency."
    elif optional > 1:
        summary += f"...and {optional} optional dependencies."
    return summary


def parse_version(version: str) -> float:
    """Numeric value of a game version string, 0.0 when unparseable."""
    try:
        return float(version)
    except (TypeError, ValueError):
        return 0.0


def filter_supported(records: List[ModRecord], minimum: float = 0.15) -> List[ModRecord]:
    """Keep records whose supported game version is at least ``minimum``."""
    return [r for r in records if parse_version(r.factorio_version) >= minimum]
