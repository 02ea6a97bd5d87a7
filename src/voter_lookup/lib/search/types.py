"""Search data types.

Dataclasses for assembled voter records, per-probe failures, and the
outcome of a search.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class IndexTier(StrEnum):
    """Name index tiers; each value is the store path of the index."""

    EXACT = "name_index"
    FIRST_LAST = "name_index_first_last"
    LAST = "name_index_last"


# Most specific first
TIER_ORDER: tuple[IndexTier, ...] = (IndexTier.EXACT, IndexTier.FIRST_LAST, IndexTier.LAST)


class SearchStatus(StrEnum):
    """Overall result of a search invocation."""

    OK = "ok"
    EMPTY = "empty"
    DEGRADED = "degraded"


class SearchMode(StrEnum):
    """Which resolution path served a search."""

    VOTER_ID = "voter_id"
    NAME = "name"
    NONE = "none"


@dataclass(frozen=True)
class NameParts:
    """Positional split of a full name."""

    first: str = ""
    middle: str = ""
    last: str = ""


@dataclass
class VoterRecord:
    """Display model of one electoral-roll entry."""

    voter_id: str
    full_name: str
    name_parts: NameParts
    gender: str = ""
    age: int | None = None
    reference: str = ""
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class SearchResult:
    """A voter ID paired with its assembled record."""

    voter_id: str
    record: VoterRecord


@dataclass(frozen=True)
class ProbeFailure:
    """A store read that failed and was treated as no data."""

    path: str
    message: str


@dataclass
class RecordFetch:
    """Records assembled for a set of voter IDs."""

    results: list[SearchResult] = field(default_factory=list)
    failures: list[ProbeFailure] = field(default_factory=list)


@dataclass
class NameResolution:
    """Voter IDs resolved from name fields through the index tiers."""

    ids: set[str] = field(default_factory=set)
    keys: list[str] = field(default_factory=list)
    tiers: list[IndexTier] = field(default_factory=list)
    failures: list[ProbeFailure] = field(default_factory=list)


@dataclass
class SearchOutcome:
    """Results of a search plus enough context to tell empty from degraded."""

    mode: SearchMode
    results: list[SearchResult] = field(default_factory=list)
    failures: list[ProbeFailure] = field(default_factory=list)
    keys: list[str] = field(default_factory=list)

    @property
    def status(self) -> SearchStatus:
        if self.failures:
            return SearchStatus.DEGRADED
        if self.results:
            return SearchStatus.OK
        return SearchStatus.EMPTY
