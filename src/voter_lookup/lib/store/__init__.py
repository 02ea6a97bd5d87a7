"""Store library: read-only access to the voter roll and its name indexes.

Public API:
    - VoterStore: Abstract store interface
    - StoreReadError: Transport/service failure raised by stores
    - FirebaseRealtimeStore: Realtime Database REST client (httpx)
    - InMemoryVoterStore: Dict/JSON-export backed store
    - create_store: Build the configured remote store from settings
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from voter_lookup.lib.store.base import VOTERS_PATH, StoreReadError, VoterStore
from voter_lookup.lib.store.firebase import FirebaseRealtimeStore
from voter_lookup.lib.store.memory import InMemoryVoterStore

if TYPE_CHECKING:
    from voter_lookup.core.config import Settings


def create_store(settings: Settings) -> VoterStore:
    """Create the remote store described by ``settings``."""
    return FirebaseRealtimeStore(
        settings.firebase_database_url,
        auth_token=settings.firebase_auth_token,
        timeout=settings.store_timeout,
    )


__all__ = [
    "VOTERS_PATH",
    "FirebaseRealtimeStore",
    "InMemoryVoterStore",
    "StoreReadError",
    "VoterStore",
    "create_store",
]
