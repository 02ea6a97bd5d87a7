"""Shared test fixtures: a small electoral roll export, stores, and settings."""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from voter_lookup.core.config import Settings
from voter_lookup.lib.store import InMemoryVoterStore
from voter_lookup.services.search_service import SearchService

SAMPLE_ROLL: dict[str, Any] = {
    "voters": {
        "UXM8227381": {
            "full_name": "मंगेश रामदास बधाले",
            "gender": "पुरुष",
            "age": 34,
            "village": "वडगाव",
            "gan": "पिंपरी",
            "booth": "12",
            "serial_no": 245,
        },
        "UXM7902273": {
            "full_name": "दशरथ लक्ष्मण बधाले",
            "gender": "पुरुष",
            "age": "61",
            "village": "वडगाव",
            "booth": "3",
        },
        "ABC8227381": {
            "full_name": "उषा बधाले",
            "gender": "स्त्री",
            "age": 45,
            "reference": "यादी भाग 7",
        },
        "UXM1000001": {
            "full_name": "रंजना पाटील",
            "gender": "स्त्री",
            "age": 52,
            "ward": "4",
        },
    },
    "name_index": {
        "बधाले_मंगेश_रामदास": {"UXM8227381": True},
        "बधाले_दशरथ_लक्ष्मण": {"UXM7902273": True},
    },
    "name_index_first_last": {
        "मंगेश_बधाले": {"UXM8227381": True},
        "उषा_बधाले": {"ABC8227381": True},
        "रंजना_पाटील": {"UXM1000001": True},
    },
    "name_index_last": {
        "बधाले": {"UXM8227381": True, "UXM7902273": True, "ABC8227381": True},
        "पाटील": {"UXM1000001": True, "UXM9999999": True},
    },
}


@pytest.fixture
def sample_roll() -> dict[str, Any]:
    """A deep copy of the sample roll, safe to mutate per test."""
    return copy.deepcopy(SAMPLE_ROLL)


@pytest.fixture
def memory_store(sample_roll: dict[str, Any]) -> InMemoryVoterStore:
    """In-memory store over the sample roll."""
    return InMemoryVoterStore(sample_roll)


@pytest.fixture
def search_service(memory_store: InMemoryVoterStore) -> SearchService:
    """SearchService over the sample roll."""
    return SearchService(memory_store)


@pytest.fixture
def roll_file(tmp_path: Path, sample_roll: dict[str, Any]) -> Path:
    """The sample roll written as a JSON export file."""
    path = tmp_path / "roll.json"
    path.write_text(json.dumps(sample_roll, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        firebase_database_url="https://voter-roll-test.firebaseio.com",
    )
