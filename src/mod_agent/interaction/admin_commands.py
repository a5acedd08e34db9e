"""
Prefix administration commands.
"""
import logging

from .command_registry import CommandContext
from ..context.prefix_store import PrefixStore
from ..schemas import CommandOutcome

logger = logging.getLogger(__name__)

NOT_ADMIN = "You need to be an administrator to do that."
MISSING_PREFIX = "Expected a prefix to set."
BACKUP_FAILED = "Couldn't back up the prefix list."


class PrefixCommands:
    """Handlers for ``setprefix`` and ``backupprefixes``."""
    
    def __init__(self, store: PrefixStore):
        self._store = store
    
    def set_prefix(self, context: CommandContext, args: str) -> CommandOutcome:
        if not context.is_admin:
            return self._reply(context, NOT_ADMIN, success=False)
        if not args:
            return self._reply(context, MISSING_PREFIX, success=False)
        
        self._store.set(context.context_id, args)
        logger.info(f"Prefix for context {context.context_id} set to '{args}'")
        return self._reply(context, f"Prefix set to `{args}`.", success=True)
    
    def backup(self, context: CommandContext, args: str) -> CommandOutcome:
        if not context.is_admin:
            return self._reply(context, NOT_ADMIN, success=False)
        if not self._store.save():
            return self._reply(context, BACKUP_FAILED, success=False)
        return self._reply(context, "Backed up prefixes.", success=True)
    
    def _reply(self, context: CommandContext, text: str, success: bool) -> CommandOutcome:
        try:
            context.sink.send_text(text)
        except Exception as e:
            logger.error(f"Could not send message '{text}': {e}")
            success = False
        return CommandOutcome(success=success, error=None if success else text)
