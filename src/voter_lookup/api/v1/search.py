"""Voter search API endpoints: form search, voter ID lookup, transliteration."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from voter_lookup.core.dependencies import get_search_service
from voter_lookup.lib.search import SearchStatus
from voter_lookup.schemas.search import SearchFormData, SearchResponse, TransliterationResponse
from voter_lookup.services.search_service import SearchService

search_router = APIRouter(tags=["search"])


@search_router.post(
    "/search",
    response_model=SearchResponse,
)
async def search_voters(
    form: SearchFormData,
    service: SearchService = Depends(get_search_service),  # noqa: B008
) -> SearchResponse:
    """Search the roll by voter ID, or by name when no voter ID is given.

    ``status`` is ``degraded`` when some store reads failed; results found
    through the remaining reads are still returned.
    """
    outcome = await service.perform_search(form)
    return SearchResponse.from_outcome(outcome, sequence=form.sequence)


@search_router.get(
    "/voters/{voter_id}",
    response_model=SearchResponse,
)
async def get_voter(
    voter_id: str,
    service: SearchService = Depends(get_search_service),  # noqa: B008
) -> SearchResponse:
    """Look up a voter by exact or partial voter ID."""
    if not voter_id.strip():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Voter ID must not be empty or whitespace-only.",
        )

    outcome = await service.lookup_voter(voter_id)
    if outcome.results:
        return SearchResponse.from_outcome(outcome)

    if outcome.status is SearchStatus.DEGRADED:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Voter store is temporarily unavailable. Please retry later.",
        )
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No voter found matching {voter_id.strip()!r}.",
    )


@search_router.get(
    "/transliterate",
    response_model=TransliterationResponse,
)
async def transliterate_text(
    text: str = Query(  # noqa: B008
        ...,
        min_length=1,
        max_length=200,
        description="Latin or Devanagari text (1-200 characters)",
    ),
    service: SearchService = Depends(get_search_service),  # noqa: B008
) -> TransliterationResponse:
    """Show the Devanagari form used to match ``text`` against the roll."""
    if not text.strip():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Text must not be empty or whitespace-only.",
        )
    return service.transliterate(text)
