"""
Strips a context's prefix and a command keyword from raw chat text.
"""
from typing import Optional

from ..context.prefix_store import PrefixStore


class MessageNormalizer:
    """
    Turns "<prefix><keyword> <args>" into "<args>".
    
    Text that does not start with the context's prefix and the keyword is
    returned unchanged; the caller decides what that means.
    """
    
    def __init__(self, prefix_store: PrefixStore):
        self._prefix_store = prefix_store
    
    def normalize(self, raw_text: str, command_keyword: str, context_id: int) -> str:
        """
        Remove the leading prefix and keyword.
        
        :param raw_text: Message text as received
        :param command_keyword: Command name, e.g. "linkmod"
        :param context_id: Context the message came from
        :return: Remaining argument string
        """
        head = self._prefix_store.get(context_id) + command_keyword
        if raw_text.startswith(head):
            return raw_text[len(head):].strip()
        return raw_text
    
    def extract_keyword(self, raw_text: str, context_id: int) -> Optional[str]:
        """
        Word written directly after the context's prefix, or None.
        
        Whitespace between the prefix and the word means no command, so
        a keyword found here always strips cleanly in normalize().
        """
        prefix = self._prefix_store.get(context_id)
        if not raw_text.startswith(prefix):
            return None
        rest = raw_text[len(prefix):]
        if not rest or rest[0].isspace():
            return None
        return rest.split(None, 1)[0]
