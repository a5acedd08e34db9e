from typing import Optional

from .agent.output_formatter import ModOutputFormatter
from .canonicalizer import ModCanonicalizer
from .config import ModAgentConfig
from .context.prefix_store import PrefixStore
from .interaction import CommandContext, CommandRegistry, MessageNormalizer, PrefixCommands
from .orchestration import ResolutionOrchestrator
from .resolution import EditDistanceMatcher, ModMatchSelector
from .schemas import CommandOutcome
from .tools import CatalogClient


class ModAgentService:
    """
    Facade over the command-resolution subsystem.
    The ONLY entry point for the chat transport layers.
    """

    def __init__(
        self,
        config: ModAgentConfig,
        prefix_store: Optional[PrefixStore] = None,
        catalog: Optional[CatalogClient] = None,
    ):
        """
        Composition root.
        One PrefixStore instance is shared by every component that needs it.
        """
        self.config = config
        self.prefix_store = prefix_store or PrefixStore(config.prefix_file_path)
        self.catalog = catalog or CatalogClient(
            host=config.catalog_host,
            timeout=config.request_timeout,
        )

        self._normalizer = MessageNormalizer(self.prefix_store)
        self._orchestrator = ResolutionOrchestrator(
            normalizer=self._normalizer,
            catalog=self.catalog,
            canonicalizer=ModCanonicalizer(catalog_host=config.catalog_host),
            selector=ModMatchSelector(
                matcher=EditDistanceMatcher(threshold=config.match_threshold),
                listing_cap=config.listing_cap,
            ),
            formatter=ModOutputFormatter(),
            command_keyword=config.command_keyword,
            min_factorio_version=config.min_factorio_version,
            listing_cap=config.listing_cap,
        )

        self.registry = CommandRegistry(self._normalizer)
        self._register_builtins()

    # ----------------------------
    # Command table
    # ----------------------------
    def _register_builtins(self) -> None:
        prefix_commands = PrefixCommands(self.prefix_store)
        self.registry.register(self.config.command_keyword, self._link_mod)
        self.registry.register("setprefix", prefix_commands.set_prefix)
        self.registry.register("backupprefixes", prefix_commands.backup)

    def _link_mod(self, context: CommandContext, args: str) -> CommandOutcome:
        return self._orchestrator.resolve(args, context.sink, context.timestamp)

    # ----------------------------
    # Message handling
    # ----------------------------
    def handle(self, context: CommandContext) -> Optional[CommandOutcome]:
        """
        Dispatch one chat message.
        Returns None when the message is not a registered command.
        """
        return self.registry.dispatch(context)
