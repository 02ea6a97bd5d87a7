"""Pydantic v2 schemas for voter search and transliteration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from voter_lookup.lib.search import SearchOutcome, SearchResult


class SearchFormData(BaseModel):
    """Search form input. Every field may be empty; blank strings count as empty."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(default="", max_length=100, alias="firstName")
    middle_name: str = Field(default="", max_length=100, alias="middleName")
    last_name: str = Field(default="", max_length=100, alias="lastName")
    voter_id: str = Field(default="", max_length=32, alias="voterId")
    query: str = Field(
        default="",
        max_length=200,
        description="Free text: a voter ID, or a name written surname first",
    )
    sequence: int | None = Field(
        default=None,
        ge=0,
        description="Client request sequence number, echoed back so stale responses can be discarded",
    )

    @field_validator("first_name", "middle_name", "last_name", "voter_id", "query", mode="before")
    @classmethod
    def none_to_empty(cls, v: object) -> object:
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def has_voter_id(self) -> bool:
        return bool(self.voter_id)

    @property
    def has_name(self) -> bool:
        return bool(self.first_name or self.middle_name or self.last_name)

    @property
    def has_query(self) -> bool:
        return bool(self.query)


class NamePartsResponse(BaseModel):
    """Positional name parts."""

    first: str
    middle: str
    last: str


class VoterResponse(BaseModel):
    """One voter in a search response."""

    voter_id: str
    full_name: str
    name_parts: NamePartsResponse
    gender: str
    age: int | None = None
    reference: str

    @classmethod
    def from_result(cls, result: SearchResult) -> "VoterResponse":
        record = result.record
        return cls(
            voter_id=result.voter_id,
            full_name=record.full_name,
            name_parts=NamePartsResponse(
                first=record.name_parts.first,
                middle=record.name_parts.middle,
                last=record.name_parts.last,
            ),
            gender=record.gender,
            age=record.age,
            reference=record.reference,
        )


class ProbeFailureResponse(BaseModel):
    """A store read that failed during the search."""

    path: str
    message: str


class SearchResponse(BaseModel):
    """Search results with an explicit ok/empty/degraded status."""

    status: str = Field(description="ok, empty, or degraded (some store reads failed)")
    mode: str = Field(description="voter_id, name, or none")
    keys: list[str] = Field(default_factory=list, description="Name index keys that were probed")
    total: int
    results: list[VoterResponse]
    failures: list[ProbeFailureResponse] = Field(default_factory=list)
    sequence: int | None = None

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome, sequence: int | None = None) -> "SearchResponse":
        return cls(
            status=outcome.status.value,
            mode=outcome.mode.value,
            keys=outcome.keys,
            total=len(outcome.results),
            results=[VoterResponse.from_result(r) for r in outcome.results],
            failures=[ProbeFailureResponse(path=f.path, message=f.message) for f in outcome.failures],
            sequence=sequence,
        )


class TransliterationResponse(BaseModel):
    """Transliteration of free text."""

    text: str
    is_marathi: bool
    transliterated: str
    variations: list[str]
