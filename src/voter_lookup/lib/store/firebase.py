"""Firebase Realtime Database store over the REST API.

Every path is read with ``GET {database_url}/{path}.json``.  A JSON ``null``
body means the path holds no data.  Child keys are listed with
``shallow=true`` so large collections are not downloaded.

Firebase keys cannot contain `.`, `#`, `$`, `[` or `]`.  A path with such a
segment cannot hold data, so it is answered locally as absent.
"""

from typing import Any
from urllib.parse import quote

import httpx
from loguru import logger

from voter_lookup.lib.store.base import StoreReadError, VoterStore

DEFAULT_TIMEOUT = 10.0

FORBIDDEN_KEY_CHARS = frozenset(".#$[]")


def is_valid_path(path: str) -> bool:
    """Return True if no segment of ``path`` contains a character forbidden in keys."""
    return not any(char in FORBIDDEN_KEY_CHARS for char in path)


class FirebaseRealtimeStore(VoterStore):
    """Realtime Database REST client.

    Args:
        database_url: Database root URL, e.g. ``https://my-roll.firebaseio.com``.
        auth_token: Optional database secret or ID token.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``).
    """

    def __init__(
        self,
        database_url: str,
        auth_token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = database_url.rstrip("/")
        self._auth_token = auth_token
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    def url_for(self, path: str) -> str:
        """Build the REST URL for a logical path, percent-encoding each segment."""
        segments = [quote(segment, safe="") for segment in path.strip("/").split("/") if segment]
        return f"{self._base_url}/{'/'.join(segments)}.json"

    async def get(self, path: str) -> Any | None:
        if not is_valid_path(path):
            logger.debug(f"Skipping read of {path!r}: not a valid Realtime Database key")
            return None
        return await self._request(path, {})

    async def keys(self, path: str) -> list[str]:
        if not is_valid_path(path):
            return []
        value = await self._request(path, {"shallow": "true"})
        if not isinstance(value, dict):
            return []
        return list(value.keys())

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(self, path: str, params: dict[str, str]) -> Any | None:
        if self._auth_token:
            params = {**params, "auth": self._auth_token}

        try:
            response = await self._client.get(self.url_for(path), params=params)
            response.raise_for_status()
            return response.json()
        except httpx.TimeoutException as e:
            logger.warning(f"Realtime Database timeout reading {path}")
            raise StoreReadError(path, "Request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"Realtime Database HTTP error {e.response.status_code} reading {path}")
            raise StoreReadError(
                path,
                f"Store returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TransportError as e:
            logger.warning(f"Realtime Database connection error reading {path}")
            raise StoreReadError(path, "Connection to store failed") from e
        except ValueError as e:
            logger.warning(f"Realtime Database returned invalid JSON for {path}")
            raise StoreReadError(path, f"Invalid JSON response: {e}") from e
