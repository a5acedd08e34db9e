"""
Outward response channel.

The chat transport implements this; the resolution pipeline only calls it.
"""
from abc import ABC, abstractmethod
from typing import Union

from ..schemas import ListingCard, RecordCard


class ResponseSink(ABC):
    """
    Destination for one command's response.
    
    Implementations raise ResponseSinkError when a message cannot be
    delivered. Callers also tolerate any other exception a transport throws.
    """
    
    @abstractmethod
    def send_card(self, card: Union[RecordCard, ListingCard]) -> None:
        """Deliver a structured card. Raises ResponseSinkError on failure."""
        pass
    
    @abstractmethod
    def send_text(self, text: str) -> None:
        """Deliver a plain message. Raises ResponseSinkError on failure."""
        pass
