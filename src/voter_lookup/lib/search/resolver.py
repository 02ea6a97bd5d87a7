"""Resolve name fields and voter IDs to voter records through the store.

Index tiers are probed one after another, most specific first.  The first
hit in the exact tier ends name resolution; otherwise the broader tiers are
probed with every key and their hits are merged.
"""

import re

from loguru import logger

from voter_lookup.lib.search.assembler import ResultAssembler, assemble_record
from voter_lookup.lib.search.keys import generate_keys
from voter_lookup.lib.search.types import (
    TIER_ORDER,
    IndexTier,
    NameResolution,
    ProbeFailure,
    RecordFetch,
    SearchResult,
)
from voter_lookup.lib.store import VOTERS_PATH, StoreReadError, VoterStore
from voter_lookup.lib.transliterator import Transliterator

DEFAULT_VOTER_ID_SCAN_LIMIT = 10

_VOTER_ID_PATTERN = re.compile(r"[A-Za-z0-9]*[0-9][A-Za-z0-9]*")


def normalize_voter_id(voter_id: str) -> str:
    """Strip whitespace and upper-case a voter ID (EPIC number)."""
    return "".join(voter_id.split()).upper()


def looks_like_voter_id(text: str) -> bool:
    """True for a single Latin alphanumeric token with at least one digit."""
    return _VOTER_ID_PATTERN.fullmatch(text.strip()) is not None


class IndexResolver:
    """Turns search input into voter IDs and records.

    Args:
        store: Voter store holding ``voters`` and the name indexes.
        assembler: Assembler used to fetch records for resolved IDs.
        transliterator: Transliterator for Latin name input.
        voter_id_scan_limit: Maximum matches of the voter ID substring fallback.
    """

    def __init__(
        self,
        store: VoterStore,
        assembler: ResultAssembler | None = None,
        transliterator: Transliterator | None = None,
        voter_id_scan_limit: int = DEFAULT_VOTER_ID_SCAN_LIMIT,
    ) -> None:
        self._store = store
        self._assembler = assembler or ResultAssembler(store)
        self._transliterator = transliterator or Transliterator()
        self._voter_id_scan_limit = voter_id_scan_limit

    @property
    def assembler(self) -> ResultAssembler:
        return self._assembler

    async def resolve_by_name(self, first: str, middle: str, last: str) -> NameResolution:
        """Resolve name fields to a set of voter IDs.

        Args:
            first: Given name.
            middle: Middle name.
            last: Surname.

        Returns:
            NameResolution with the matched IDs, the keys probed, the tiers
            that contributed, and any failed probes.
        """
        keys = generate_keys(first, middle, last, self._transliterator)
        resolution = NameResolution(keys=keys)
        if not keys:
            return resolution

        for tier in TIER_ORDER:
            tier_hits: set[str] = set()
            for key in keys:
                members = await self._probe(tier, key, resolution.failures)
                if tier is IndexTier.EXACT and members:
                    logger.debug(f"Exact index hit for {key!r}: {len(members)} voter(s)")
                    resolution.ids = members
                    resolution.tiers = [tier]
                    return resolution
                tier_hits |= members
            if tier_hits:
                resolution.tiers.append(tier)
                resolution.ids |= tier_hits

        logger.debug(
            f"Name resolution for keys {keys} found {len(resolution.ids)} voter(s) "
            f"in tiers {[str(t) for t in resolution.tiers]}"
        )
        return resolution

    async def resolve_by_voter_id(self, voter_id: str) -> RecordFetch:
        """Resolve a voter ID, exactly first and then by substring.

        The exact lookup uses the upper-cased ID.  When no record is stored
        under it, every stored ID containing the input (case-insensitively)
        is fetched, up to the scan limit.

        Args:
            voter_id: Full or partial voter ID.

        Returns:
            RecordFetch with the matching records and any failed reads.
        """
        normalized = normalize_voter_id(voter_id)
        fetch = RecordFetch()
        if not normalized:
            return fetch

        try:
            raw = await self._store.get_record(normalized)
        except StoreReadError as e:
            logger.warning(f"Exact voter ID lookup failed for {normalized}: {e.message}")
            fetch.failures.append(ProbeFailure(path=f"{VOTERS_PATH}/{normalized}", message=e.message))
            raw = None

        if raw is not None:
            fetch.results.append(SearchResult(voter_id=normalized, record=assemble_record(normalized, raw)))
            return fetch

        try:
            stored_ids = await self._store.list_voter_ids()
        except StoreReadError as e:
            logger.warning(f"Voter ID scan failed: {e.message}")
            fetch.failures.append(ProbeFailure(path=VOTERS_PATH, message=e.message))
            return fetch

        needle = normalized.lower()
        matches = [vid for vid in sorted(stored_ids) if needle in vid.lower()][: self._voter_id_scan_limit]
        logger.debug(f"Voter ID scan for {normalized!r} matched {len(matches)} ID(s)")

        scanned = await self._assembler.fetch_records(matches)
        fetch.results.extend(scanned.results)
        fetch.failures.extend(scanned.failures)
        return fetch

    async def _probe(self, tier: IndexTier, key: str, failures: list[ProbeFailure]) -> set[str]:
        try:
            return await self._store.get_index_members(tier.value, key)
        except StoreReadError as e:
            logger.warning(f"Index probe {tier.value}/{key} failed: {e.message}")
            failures.append(ProbeFailure(path=f"{tier.value}/{key}", message=e.message))
            return set()
