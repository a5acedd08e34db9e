"""
Mod portal search client.

Failures never raise: an empty document means the search did not work.
"""
import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class CatalogClient:
    """
    Issues search requests against the mod portal API.
    
    Usage:
        client = CatalogClient()
        document = client.search("bob's mods")
        if not document:
            ...  # transport, status or parse failure
    """
    
    def __init__(
        self,
        host: str = "mods.factorio.com",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize catalog client.
        
        :param host: Catalog host name
        :param timeout: Seconds to wait for connect and read
        :param session: Optional requests session (shared connection pool)
        """
        self.host = host
        self.timeout = timeout
        self._session = session or requests.Session()
    
    @property
    def search_url(self) -> str:
        return f"https://{self.host}/api/mods"
    
    def search(self, query: str) -> Dict[str, Any]:
        """
        Search the catalog.
        
        :param query: Free-text query, URL-escaped into the ``q`` parameter
        :return: Decoded JSON object, or {} on any failure
        """
        try:
            resp = self._session.get(self.search_url, params={"q": query}, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Catalog request for '{query}' failed: {e}")
            return {}
        
        if not resp.ok:
            logger.warning(f"Catalog returned status {resp.status_code} for '{query}'")
            return {}
        
        try:
            document = resp.json()
        except ValueError:
            logger.warning(f"Catalog returned a non-JSON body for '{query}'")
            return {}
        
        if not isinstance(document, dict):
            logger.warning(f"Catalog returned a non-object document for '{query}'")
            return {}
        
        return document
    
    def close(self) -> None:
        self._session.close()
