"""Voter search service: routes form input to voter ID or name resolution.

Also provides ``SearchSequencer`` for long-lived callers, such as a search
box that fires a query on every keystroke, that must drop responses
superseded by a newer search.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, TypeVar

from loguru import logger

from voter_lookup.lib.search import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_VOTER_ID_SCAN_LIMIT,
    IndexResolver,
    ResultAssembler,
    SearchMode,
    SearchOutcome,
    SearchStatus,
    looks_like_voter_id,
    split_query,
)
from voter_lookup.lib.store import VoterStore
from voter_lookup.lib.transliterator import Transliterator, contains_devanagari, load_word_file
from voter_lookup.schemas.search import SearchFormData, TransliterationResponse

if TYPE_CHECKING:
    from voter_lookup.core.config import Settings

DEFAULT_SEARCH_RESULT_LIMIT = 50

T = TypeVar("T")


class SearchService:
    """Entry point for voter searches.

    Args:
        store: Voter store.
        transliterator: Transliterator for Latin name input.
        batch_size: Records fetched concurrently per batch.
        voter_id_scan_limit: Cap of the voter ID substring fallback.
        search_result_limit: Cap on voter IDs assembled for a name search.
    """

    def __init__(
        self,
        store: VoterStore,
        transliterator: Transliterator | None = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        voter_id_scan_limit: int = DEFAULT_VOTER_ID_SCAN_LIMIT,
        search_result_limit: int = DEFAULT_SEARCH_RESULT_LIMIT,
    ) -> None:
        self.transliterator = transliterator or Transliterator()
        self.assembler = ResultAssembler(store, batch_size=batch_size)
        self.resolver = IndexResolver(
            store,
            assembler=self.assembler,
            transliterator=self.transliterator,
            voter_id_scan_limit=voter_id_scan_limit,
        )
        self._search_result_limit = search_result_limit

    async def perform_search(self, form: SearchFormData) -> SearchOutcome:
        """Run a search for the submitted form.

        A non-empty voter ID takes priority over name fields, and name fields
        over the free-text query.  A form with none of them returns an empty
        outcome without reading the store.
        """
        if form.has_voter_id:
            outcome = await self.lookup_voter(form.voter_id)
        elif form.has_name:
            outcome = await self.search_by_name(form.first_name, form.middle_name, form.last_name)
        elif form.has_query:
            outcome = await self.search_by_query(form.query)
        else:
            outcome = SearchOutcome(mode=SearchMode.NONE)

        if outcome.status is SearchStatus.DEGRADED:
            logger.warning(
                f"Search ({outcome.mode.value}) degraded: {len(outcome.failures)} failed read(s), "
                f"{len(outcome.results)} result(s)"
            )
        else:
            logger.info(f"Search ({outcome.mode.value}) returned {len(outcome.results)} result(s)")
        logger.bind(
            json_output=True,
            mode=outcome.mode.value,
            status=outcome.status.value,
            results=len(outcome.results),
            failures=len(outcome.failures),
        ).info("search completed")
        return outcome

    async def lookup_voter(self, voter_id: str) -> SearchOutcome:
        """Search by voter ID only."""
        fetch = await self.resolver.resolve_by_voter_id(voter_id)
        return SearchOutcome(mode=SearchMode.VOTER_ID, results=fetch.results, failures=fetch.failures)

    async def search_by_query(self, query: str) -> SearchOutcome:
        """Search free text: a voter ID, or a name written surname first."""
        if looks_like_voter_id(query):
            return await self.lookup_voter(query)
        first, middle, last = split_query(query)
        return await self.search_by_name(first, middle, last)

    async def search_by_name(self, first: str, middle: str, last: str) -> SearchOutcome:
        """Search by name fields only."""
        resolution = await self.resolver.resolve_by_name(first, middle, last)

        voter_ids = sorted(resolution.ids)
        if len(voter_ids) > self._search_result_limit:
            logger.info(f"Name search matched {len(voter_ids)} voters; keeping first {self._search_result_limit}")
            voter_ids = voter_ids[: self._search_result_limit]

        fetch = await self.assembler.fetch_records(voter_ids)
        return SearchOutcome(
            mode=SearchMode.NAME,
            results=fetch.results,
            failures=resolution.failures + fetch.failures,
            keys=resolution.keys,
        )

    def transliterate(self, text: str) -> TransliterationResponse:
        """Describe how ``text`` will be matched against the roll."""
        stripped = text.strip()
        return TransliterationResponse(
            text=stripped,
            is_marathi=contains_devanagari(stripped),
            transliterated=self.transliterator.transliterate(stripped),
            variations=self.transliterator.variations(stripped),
        )


class SearchSequencer:
    """Discards results of searches superseded by a newer one.

    Each search is issued a token from a monotonically increasing counter.
    A finished search's result is kept only if no newer token was issued
    while it was in flight.  The service itself is stateless between calls;
    a caller that can overlap searches owns one sequencer.  HTTP clients do
    the same bookkeeping with the ``sequence`` field that ``POST /search``
    echoes back.
    """

    def __init__(self) -> None:
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def issue(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest

    async def run(self, token: int, search: Awaitable[T]) -> T | None:
        """Await ``search`` and return its result, or None if it went stale."""
        result = await search
        if not self.is_current(token):
            logger.debug(f"Discarding stale search result {token} (latest is {self._latest})")
            return None
        return result


def build_search_service(settings: Settings, store: VoterStore) -> SearchService:
    """Create a SearchService configured from application settings.

    Extra transliteration words are merged over the curated dictionary when
    ``transliteration_words_file`` is set.
    """
    transliterator = Transliterator()
    if settings.transliteration_words_file:
        transliterator = transliterator.with_words(load_word_file(settings.transliteration_words_file))

    return SearchService(
        store,
        transliterator=transliterator,
        batch_size=settings.record_batch_size,
        voter_id_scan_limit=settings.voter_id_scan_limit,
        search_result_limit=settings.search_result_limit,
    )
