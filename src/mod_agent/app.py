"""
Public application facade for Mod Agent Service.

This is the single stable entry point for the library.
All internal structure can change freely, but this API remains stable.
"""
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime
from typing import Optional

from .config import ModAgentConfig
from .exceptions import AgentNotInitializedError
from .interaction import CommandContext, ResponseSink
from .schemas import CommandOutcome
from .service import ModAgentService

logger = logging.getLogger(__name__)


class ModAgentApp:
    """
    Public application facade for Mod Agent Service.
    
    Usage:
        config = load_config_from_env()
        app = ModAgentApp(config)
        app.initialize()
        future = app.submit_message(guild_id, "!linkmod bobs", sink)
        ...
        app.shutdown()
    """
    
    def __init__(self, config: ModAgentConfig, service: Optional[ModAgentService] = None):
        """
        Initialize the application facade.
        
        :param config: ModAgentConfig instance
        :param service: Optional pre-built service (tests inject one)
        """
        self._config = config
        self._service = service
        self._executor: Optional[ThreadPoolExecutor] = None
    
    @property
    def service(self) -> ModAgentService:
        if not self._service or not self._executor:
            raise AgentNotInitializedError("App not initialized. Call initialize() first.")
        return self._service
    
    def initialize(self) -> None:
        """
        Build the service and load persisted prefixes.
        
        Call this once before handling messages.
        
        :raises: PrefixStoreLoadError if the prefix file is malformed
        """
        if self._executor:
            return
        
        if self._service is None:
            self._service = ModAgentService(self._config)
        
        # Fatal on a malformed file: starting without it would drop admin config
        self._service.prefix_store.load()
        
        self._executor = ThreadPoolExecutor(
            max_workers=self._config.max_workers,
            thread_name_prefix="mod-agent",
        )
        logger.info(f"Mod agent ready with {self._config.max_workers} workers")
    
    def handle_message(
        self,
        context_id: int,
        text: str,
        sink: ResponseSink,
        timestamp: Optional[datetime] = None,
        is_admin: bool = False,
    ) -> Optional[CommandOutcome]:
        """
        Handle one message on the calling thread.
        
        :return: CommandOutcome, or None if the text is not a command
        """
        context = CommandContext(
            context_id=context_id,
            raw_text=text,
            sink=sink,
            timestamp=timestamp,
            is_admin=is_admin,
        )
        return self.service.handle(context)
    
    def submit_message(
        self,
        context_id: int,
        text: str,
        sink: ResponseSink,
        timestamp: Optional[datetime] = None,
        is_admin: bool = False,
    ) -> "Future[Optional[CommandOutcome]]":
        """
        Handle one message on the worker pool.
        
        Commands run independently; no ordering between them is guaranteed.
        """
        if not self._executor:
            raise AgentNotInitializedError("App not initialized. Call initialize() first.")
        return self._executor.submit(
            self.handle_message, context_id, text, sink, timestamp, is_admin
        )
    
    def backup_prefixes(self) -> bool:
        return self.service.prefix_store.save()
    
    def shutdown(self) -> None:
        """Wait for running commands, back up prefixes and stop the pool."""
        if not self._executor:
            return
        self._executor.shutdown(wait=True)
        self._executor = None
        if self._service:
            self._service.prefix_store.save()
            self._service.catalog.close()
