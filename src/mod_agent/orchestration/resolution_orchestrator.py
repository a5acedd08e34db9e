"""
Resolution orchestrator - the linkmod command end to end.

normalize → search → canonicalize → version filter → select → respond
"""
import logging
from datetime import datetime
from typing import Optional, Union

from ..agent.output_formatter import ModOutputFormatter
from ..canonicalizer import ModCanonicalizer, filter_supported
from ..interaction.message_normalizer import MessageNormalizer
from ..interaction.response_sink import ResponseSink
from ..resolution.semantic_resolver import DecisionKind, MatchSelector
from ..schemas import CommandOutcome, ListingCard, RecordCard
from ..tools.catalog_client import CatalogClient

logger = logging.getLogger(__name__)

MISSING_QUERY = "Expected a mod to search for."
NO_RESPONSE = "Couldn't get a response back from the mod portal."
NO_RESULTS = "There are no results for current factorio version or higher."
CARD_FAILED = "Unable to make an embed here."
LISTING_FAILED = "Unable to make an embed of search results here."


class ResolutionOrchestrator:
    """
    Orchestrates one mod lookup.

    Sends exactly one response per call (record card, listing card or
    error text) and never lets a failure escape to the caller.
    """

    def __init__(
        self,
        normalizer: MessageNormalizer,
        catalog: CatalogClient,
        canonicalizer: ModCanonicalizer,
        selector: MatchSelector,
        formatter: ModOutputFormatter,
        command_keyword: str = "linkmod",
        min_factorio_version: float = 0.15,
        listing_cap: int = 10,
    ):
        """
        Initialize orchestrator.

        :param normalizer: Strips prefix and keyword from raw text
        :param catalog: Mod portal client
        :param canonicalizer: Raw JSON → ModRecord parser
        :param selector: Single/listing/empty decision
        :param formatter: Card builder
        :param command_keyword: Keyword stripped from the message
        :param min_factorio_version: Oldest supported game version kept
        :param listing_cap: Maximum number of records parsed per search
        """
        self._normalizer = normalizer
        self._catalog = catalog
        self._canonicalizer = canonicalizer
        self._selector = selector
        self._formatter = formatter
        self.command_keyword = command_keyword
        self.min_factorio_version = min_factorio_version
        self.listing_cap = listing_cap

    def handle(
        self,
        context_id: int,
        raw_text: str,
        sink: ResponseSink,
        timestamp: Optional[datetime] = None,
    ) -> CommandOutcome:
        query = self._normalizer.normalize(raw_text, self.command_keyword, context_id)
        return self.resolve(query, sink, timestamp)

    def resolve(
        self,
        query: str,
        sink: ResponseSink,
        timestamp: Optional[datetime] = None,
    ) -> CommandOutcome:
        """
        Resolve an already-normalized query and respond.

        :param query: Argument string left after normalization
        :param sink: Where the response goes
        :param timestamp: Message time shown on cards (defaults to now)
        :return: CommandOutcome for the dispatcher
        """
        if not query:
            return self._fail(sink, MISSING_QUERY)

        document = self._catalog.search(query)
        if not document:
            return self._fail(sink, NO_RESPONSE)

        records = self._canonicalizer.parse_all(document, limit=self.listing_cap)
        candidates = filter_supported(records, self.min_factorio_version)
        logger.info(
            f"Search '{query}': {len(records)} results, {len(candidates)} "
            f"for {self.min_factorio_version} or higher"
        )

        decision = self._selector.select(query, candidates)

        if decision.kind is DecisionKind.EMPTY:
            return self._fail(sink, NO_RESULTS)

        if decision.kind is DecisionKind.SINGLE:
            card = self._formatter.record_card(decision.record, timestamp)
            return self._deliver(sink, card, CARD_FAILED)

        card = self._formatter.listing_card(decision.candidates, timestamp)
        return self._deliver(sink, card, LISTING_FAILED)

    def _deliver(
        self,
        sink: ResponseSink,
        card: Union[RecordCard, ListingCard],
        fallback: str,
    ) -> CommandOutcome:
        try:
            sink.send_card(card)
            return CommandOutcome(success=True)
        except Exception as e:
            logger.warning(f"Could not send card '{card.title}': {e}")

        self._say(sink, fallback)
        return CommandOutcome(success=False, error=fallback)

    def _fail(self, sink: ResponseSink, message: str) -> CommandOutcome:
        self._say(sink, message)
        return CommandOutcome(success=False, error=message)

    def _say(self, sink: ResponseSink, text: str) -> None:
        try:
            sink.send_text(text)
        except Exception as e:
            logger.error(f"Could not send message '{text}': {e}")
