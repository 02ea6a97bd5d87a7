"""Search library: name index resolution and record assembly.

Public API:
    - generate_keys: Ordered name index keys from name fields
    - split_query / looks_like_voter_id: Interpret free-text search input
    - IndexResolver: Name and voter ID resolution over the index tiers
    - ResultAssembler: Batched record fetching
    - parse_name_parts / build_reference / assemble_record: Record shaping
    - IndexTier, SearchStatus, SearchMode: Enums
    - NameParts, VoterRecord, SearchResult, ProbeFailure, RecordFetch,
      NameResolution, SearchOutcome: Result dataclasses
"""

from voter_lookup.lib.search.assembler import (
    DEFAULT_BATCH_SIZE,
    ResultAssembler,
    assemble_record,
    batched,
    build_reference,
    parse_name_parts,
)
from voter_lookup.lib.search.keys import KEY_DELIMITER, canonicalize, generate_keys, split_query
from voter_lookup.lib.search.resolver import (
    DEFAULT_VOTER_ID_SCAN_LIMIT,
    IndexResolver,
    looks_like_voter_id,
    normalize_voter_id,
)
from voter_lookup.lib.search.types import (
    TIER_ORDER,
    IndexTier,
    NameParts,
    NameResolution,
    ProbeFailure,
    RecordFetch,
    SearchMode,
    SearchOutcome,
    SearchResult,
    SearchStatus,
    VoterRecord,
)

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_VOTER_ID_SCAN_LIMIT",
    "KEY_DELIMITER",
    "TIER_ORDER",
    "IndexResolver",
    "IndexTier",
    "NameParts",
    "NameResolution",
    "ProbeFailure",
    "RecordFetch",
    "ResultAssembler",
    "SearchMode",
    "SearchOutcome",
    "SearchResult",
    "SearchStatus",
    "VoterRecord",
    "assemble_record",
    "batched",
    "build_reference",
    "canonicalize",
    "generate_keys",
    "looks_like_voter_id",
    "normalize_voter_id",
    "parse_name_parts",
    "split_query",
]
