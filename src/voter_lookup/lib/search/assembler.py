"""Fetch voter records in bounded batches and shape them for display."""

import asyncio
from collections.abc import Iterable, Iterator
from typing import Any

from loguru import logger

from voter_lookup.lib.search.types import NameParts, ProbeFailure, RecordFetch, SearchResult, VoterRecord
from voter_lookup.lib.store import VOTERS_PATH, StoreReadError, VoterStore

DEFAULT_BATCH_SIZE = 10

# (raw field, label) in the order they appear in the reference string
REFERENCE_FIELDS: tuple[tuple[str, str], ...] = (
    ("village", "गाव"),
    ("gan", "गण"),
    ("gat", "गट"),
    ("ward", "प्रभाग"),
    ("booth", "मतदान केंद्र"),
    ("serial_no", "अनुक्रमांक"),
)
REFERENCE_SEPARATOR = ", "


def parse_name_parts(full_name: str) -> NameParts:
    """Split a full name positionally.

    First token is the given name, last token the surname, anything between
    is the middle name.  A single token is used as both first and last name.
    """
    tokens = full_name.split()
    if not tokens:
        return NameParts()
    if len(tokens) == 1:
        return NameParts(first=tokens[0], last=tokens[0])
    return NameParts(first=tokens[0], middle=" ".join(tokens[1:-1]), last=tokens[-1])


def build_reference(raw: dict[str, Any]) -> str:
    """Join the record's locality fields into one reference line.

    Falls back to a pre-built ``reference`` field when the record carries no
    locality fields.
    """
    parts = []
    for field_name, label in REFERENCE_FIELDS:
        value = raw.get(field_name)
        if value is None or str(value).strip() == "":
            continue
        parts.append(f"{label}: {str(value).strip()}")
    if parts:
        return REFERENCE_SEPARATOR.join(parts)
    reference = raw.get("reference")
    return str(reference).strip() if reference else ""


def _parse_age(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def assemble_record(voter_id: str, raw: dict[str, Any]) -> VoterRecord:
    """Build the display model from a raw store record.

    Missing fields become empty strings (or ``None`` for age).
    """
    full_name = " ".join(str(raw.get("full_name") or "").split())
    name_parts = parse_name_parts(full_name)

    stored_parts = raw.get("name_parts")
    if not full_name and isinstance(stored_parts, dict):
        name_parts = NameParts(
            first=str(stored_parts.get("first") or ""),
            middle=str(stored_parts.get("middle") or ""),
            last=str(stored_parts.get("last") or ""),
        )
        full_name = " ".join(p for p in (name_parts.first, name_parts.middle, name_parts.last) if p)

    return VoterRecord(
        voter_id=voter_id,
        full_name=full_name,
        name_parts=name_parts,
        gender=str(raw.get("gender") or ""),
        age=_parse_age(raw.get("age")),
        reference=build_reference(raw),
        raw=raw,
    )


def batched(items: Iterable[str], size: int) -> Iterator[list[str]]:
    """Yield consecutive lists of at most ``size`` items."""
    if size <= 0:
        msg = f"batch size must be positive, got {size}"
        raise ValueError(msg)
    batch: list[str] = []
    for item in items:
        batch.append(item)
        if len(batch) == size:
            yield batch
            batch = []
    if batch:
        yield batch


class ResultAssembler:
    """Fetches records for resolved voter IDs.

    Records within a batch are requested concurrently; batches run one after
    another, so at most ``batch_size`` reads are outstanding at a time.

    Args:
        store: Voter store to read from.
        batch_size: Records per batch.
    """

    def __init__(self, store: VoterStore, batch_size: int = DEFAULT_BATCH_SIZE) -> None:
        if batch_size <= 0:
            msg = f"batch_size must be positive, got {batch_size}"
            raise ValueError(msg)
        self._store = store
        self._batch_size = batch_size

    @property
    def batch_size(self) -> int:
        return self._batch_size

    async def fetch_records(self, voter_ids: Iterable[str]) -> RecordFetch:
        """Fetch and assemble records for ``voter_ids``.

        IDs with no stored record are dropped.  Read failures are recorded
        and the ID is dropped as well.

        Args:
            voter_ids: IDs to fetch (duplicates are fetched once).

        Returns:
            RecordFetch with results grouped by batch.
        """
        unique_ids = list(dict.fromkeys(voter_ids))
        fetch = RecordFetch()

        for batch_number, batch in enumerate(batched(unique_ids, self._batch_size), start=1):
            outcomes = await asyncio.gather(*(self._fetch_one(voter_id) for voter_id in batch))
            for voter_id, raw, failure in outcomes:
                if failure is not None:
                    fetch.failures.append(failure)
                elif raw is not None:
                    fetch.results.append(SearchResult(voter_id=voter_id, record=assemble_record(voter_id, raw)))
            logger.debug(f"Record batch {batch_number}: requested {len(batch)}, total assembled {len(fetch.results)}")

        missing = len(unique_ids) - len(fetch.results) - len(fetch.failures)
        if missing:
            logger.debug(f"{missing} voter ID(s) had no record in the store")
        return fetch

    async def _fetch_one(self, voter_id: str) -> tuple[str, dict[str, Any] | None, ProbeFailure | None]:
        try:
            return voter_id, await self._store.get_record(voter_id), None
        except StoreReadError as e:
            logger.warning(f"Failed to fetch voter record {voter_id}: {e.message}")
            return voter_id, None, ProbeFailure(path=f"{VOTERS_PATH}/{voter_id}", message=e.message)
