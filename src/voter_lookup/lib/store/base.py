"""Abstract read-only voter store interface."""

from abc import ABC, abstractmethod
from typing import Any

from loguru import logger

VOTERS_PATH = "voters"


class StoreReadError(Exception):
    """Raised when a store read fails for transport or service reasons.

    Distinguishes an unreachable or failing store from a successful read of
    an absent path (which returns None).

    Args:
        path: Logical store path that was being read.
        message: Human-readable error description.
        status_code: Optional HTTP status code returned by the store.
    """

    def __init__(self, path: str, message: str, status_code: int | None = None) -> None:
        self.path = path
        self.message = message
        self.status_code = status_code
        super().__init__(f"{path}: {message}")


class VoterStore(ABC):
    """Read-only key-value view of the voter roll.

    Paths are ``/``-separated logical addresses such as ``voters/UXM8227381``
    or ``name_index_last/बधाले``.
    """

    @abstractmethod
    async def get(self, path: str) -> Any | None:
        """Read the value stored at ``path``.

        Returns:
            Decoded value, or None if nothing is stored there.

        Raises:
            StoreReadError: On transport or service errors.
        """

    @abstractmethod
    async def keys(self, path: str) -> list[str]:
        """List the child keys under ``path`` without reading their values.

        Raises:
            StoreReadError: On transport or service errors.
        """

    async def close(self) -> None:  # noqa: B027
        """Release any underlying resources."""

    async def __aenter__(self) -> "VoterStore":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def get_record(self, voter_id: str) -> dict[str, Any] | None:
        """Fetch one raw voter record, or None when absent or malformed."""
        value = await self.get(f"{VOTERS_PATH}/{voter_id}")
        if value is None:
            return None
        if not isinstance(value, dict):
            logger.warning(f"Ignoring non-object voter record at {VOTERS_PATH}/{voter_id}")
            return None
        return value

    async def get_index_members(self, index: str, key: str) -> set[str]:
        """Return the voter IDs flagged under ``index/key``.

        Only members whose flag is truthy are returned.
        """
        value = await self.get(f"{index}/{key}")
        if value is None:
            return set()
        if not isinstance(value, dict):
            logger.warning(f"Ignoring non-object index entry at {index}/{key}")
            return set()
        return {voter_id for voter_id, flag in value.items() if flag}

    async def list_voter_ids(self) -> list[str]:
        """Return every voter ID in the primary record store."""
        return await self.keys(VOTERS_PATH)
