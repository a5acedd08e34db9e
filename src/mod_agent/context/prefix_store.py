"""
Per-context command prefix store.

A single shared map from context id to prefix, persisted as a JSON object.
"""
import json
import logging
import threading
from pathlib import Path
from typing import Dict, Union

from ..exceptions import PrefixStoreLoadError

logger = logging.getLogger(__name__)

MAX_CONTEXT_ID = 2 ** 64 - 1


class PrefixStore:
    """
    Thread-safe prefix map backed by a JSON file.

    Purpose:
    - One prefix per context (server/channel), empty string when unset
    - Bulk load at startup, explicit save on backup

    Key traits:
    - Every read and write holds one lock
    - load/save keep the lock for the whole file traversal
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize prefix store.

        :param path: Location of the persisted JSON document
        """
        self._path = Path(path)
        self._prefixes: Dict[int, str] = {}
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, context_id: int) -> str:
        """
        Get the prefix configured for a context.

        :param context_id: Context identifier
        :return: Prefix string, or "" if none is set
        """
        with self._lock:
            return self._prefixes.get(context_id, "")

    def set(self, context_id: int, prefix: str) -> None:
        """Insert or replace the prefix for a context."""
        with self._lock:
            self._prefixes[context_id] = prefix

    def snapshot(self) -> Dict[int, str]:
        """Copy of the current map."""
        with self._lock:
            return dict(self._prefixes)

    def load(self) -> None:
        """
        Replace the in-memory map with the persisted document.

        Creates the document with body ``{}`` when it does not exist.

        :raises: PrefixStoreLoadError if the document exists but cannot be parsed
        """
        with self._lock:
            if not self._path.exists():
                logger.info(f"Did not find prefix file {self._path}, creating it")
                try:
                    self._path.write_text("{}", encoding="utf-8")
                except OSError as e:
                    raise PrefixStoreLoadError(f"Could not create prefix file {self._path}: {e}") from e
                self._prefixes = {}
                return

            try:
                data = json.loads(self._path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                raise PrefixStoreLoadError(f"Could not parse prefix file {self._path}: {e}") from e

            if not isinstance(data, dict):
                raise PrefixStoreLoadError(f"Prefix file {self._path} must hold a JSON object")

            prefixes: Dict[int, str] = {}
            for key, value in data.items():
                # Unsigned 64-bit decimal ids only: no sign, spaces or underscores
                if not (key.isascii() and key.isdigit()) or int(key) > MAX_CONTEXT_ID:
                    raise PrefixStoreLoadError(f"Invalid context id {key!r} in {self._path}")
                if not isinstance(value, str):
                    raise PrefixStoreLoadError(f"Prefix for {key} in {self._path} is not a string")
                prefixes[int(key)] = value

            self._prefixes = prefixes
            logger.info(f"Loaded {len(prefixes)} prefixes from {self._path}")

    def save(self) -> bool:
        """
        Overwrite the persisted document with the current map.

        :return: True on success, False if the file could not be written
        """
        with self._lock:
            document = {str(context_id): prefix for context_id, prefix in self._prefixes.items()}
            try:
                with open(self._path, "w", encoding="utf-8") as f:
                    json.dump(document, f)
            except OSError as e:
                logger.error(f"Couldn't back up prefix list to {self._path}: {e}")
                return False

        logger.info(f"Backed up {len(document)} prefixes to {self._path}")
        return True
