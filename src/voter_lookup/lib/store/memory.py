"""In-memory store over a Realtime Database JSON export."""

import json
from pathlib import Path
from typing import Any

from voter_lookup.lib.store.base import VoterStore


class InMemoryVoterStore(VoterStore):
    """Serve reads from a nested dict shaped like a database export.

    Args:
        data: Root object, e.g. ``{"voters": {...}, "name_index": {...}}``.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryVoterStore":
        """Load an export written by the database console or ``firebase database:get``."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            msg = f"Database export must be a JSON object: {path}"
            raise ValueError(msg)
        return cls(data)

    async def get(self, path: str) -> Any | None:
        node: Any = self._data
        for segment in path.strip("/").split("/"):
            if not segment:
                continue
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return node

    async def keys(self, path: str) -> list[str]:
        node = await self.get(path)
        if not isinstance(node, dict):
            return []
        return list(node.keys())
