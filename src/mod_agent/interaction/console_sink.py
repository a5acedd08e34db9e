"""
Terminal response sink, used by the interactive demo.
"""
import sys
from typing import Optional, TextIO, Union

from .response_sink import ResponseSink
from ..exceptions import ResponseSinkError
from ..schemas import ListingCard, RecordCard


class ConsoleSink(ResponseSink):
    """Prints responses instead of sending them to a chat platform."""
    
    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream or sys.stdout
    
    def send_card(self, card: Union[RecordCard, ListingCard]) -> None:
        lines = [f"\n🧩 {card.title}", card.description]
        if isinstance(card, RecordCard):
            lines.append(f"🔗 {card.author_url}")
            lines.extend(f"  {name}: {value}" for name, value in card.fields)
        lines.append("-" * 60)
        self._write(lines)
    
    def send_text(self, text: str) -> None:
        self._write([f"\n💬 {text}", "-" * 60])
    
    def _write(self, lines) -> None:
        try:
            self._stream.write("\n".join(lines) + "\n")
            self._stream.flush()
        except (OSError, ValueError) as e:
            # ValueError: write to a closed stream
            raise ResponseSinkError(f"Could not write to console: {e}") from e
