"""
Command dispatch table.

Maps command keywords to handlers with a uniform (context, args) signature.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional

from .message_normalizer import MessageNormalizer
from .response_sink import ResponseSink
from ..schemas import CommandOutcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandContext:
    """Everything a handler may need besides its arguments."""
    context_id: int
    raw_text: str
    sink: ResponseSink
    timestamp: Optional[datetime] = None
    is_admin: bool = False


CommandHandler = Callable[[CommandContext, str], CommandOutcome]


class CommandRegistry:
    """
    Registry of chat commands.
    
    Usage:
        registry = CommandRegistry(normalizer)
        registry.register("linkmod", handler)
        outcome = registry.dispatch(CommandContext(42, "!linkmod foo", sink))
    """
    
    def __init__(self, normalizer: MessageNormalizer):
        self._normalizer = normalizer
        self._handlers: Dict[str, CommandHandler] = {}
    
    def register(self, keyword: str, handler: CommandHandler) -> None:
        """Register a handler under a keyword, replacing any previous one."""
        self._handlers[keyword] = handler
    
    def keywords(self) -> List[str]:
        return sorted(self._handlers)
    
    def dispatch(self, context: CommandContext) -> Optional[CommandOutcome]:
        """
        Find and run the handler for a raw message.
        
        :param context: Message context
        :return: CommandOutcome, or None if the message is not a known command
        """
        keyword = self._normalizer.extract_keyword(context.raw_text, context.context_id)
        handler = self._handlers.get(keyword) if keyword else None
        if handler is None:
            return None
        
        args = self._normalizer.normalize(context.raw_text, keyword, context.context_id)
        try:
            outcome = handler(context, args)
        except Exception as e:
            # One broken command must not take the dispatcher down
            logger.exception(f"Command '{keyword}' failed in context {context.context_id}")
            return CommandOutcome(success=False, error=str(e))
        
        if not outcome.success:
            logger.info(f"Command '{keyword}' in context {context.context_id} failed: {outcome.error}")
        return outcome
