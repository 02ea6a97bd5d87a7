"""Typer CLI root application: serve, search, and transliterate commands."""

import asyncio
from pathlib import Path

import typer

from voter_lookup.core.config import get_settings
from voter_lookup.core.logging import setup_logging
from voter_lookup.lib.search import SearchOutcome, SearchStatus
from voter_lookup.lib.store import InMemoryVoterStore, VoterStore, create_store
from voter_lookup.lib.transliterator import Transliterator, load_word_file
from voter_lookup.schemas.search import SearchFormData
from voter_lookup.services.search_service import SearchService, build_search_service

app = typer.Typer(name="voter-lookup", help="Electoral roll lookup CLI")


@app.callback()
def _main_callback(
    log_level: str = typer.Option("WARNING", "--log-level", help="Minimum log level for CLI output"),
) -> None:
    """Initialize logging for all CLI commands."""
    setup_logging(log_level)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "voter_lookup.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


@app.command()
def search(
    first: str = typer.Option("", "--first", help="First (given) name"),
    middle: str = typer.Option("", "--middle", help="Middle name"),
    last: str = typer.Option("", "--last", help="Last name (surname)"),
    voter_id: str = typer.Option("", "--voter-id", help="Full or partial voter ID; takes priority over names"),
    query: str = typer.Option(
        "",
        "--query",
        "-q",
        help="Free text: a voter ID, or a name written surname first ('Badale Dashrath Laxman')",
    ),
    data: Path | None = typer.Option(  # noqa: B008
        None,
        "--data",
        exists=True,
        dir_okay=False,
        help="Search a Realtime Database JSON export instead of the remote store",
    ),
) -> None:
    """Search the roll and print matching voters."""
    form = SearchFormData(first_name=first, middle_name=middle, last_name=last, voter_id=voter_id, query=query)
    if not (form.has_voter_id or form.has_name or form.has_query):
        typer.echo("Provide --voter-id, --query, or at least one of --first/--middle/--last.", err=True)
        raise typer.Exit(code=2)

    outcome = asyncio.run(_search(form, data))
    _print_outcome(outcome)
    if outcome.status is SearchStatus.DEGRADED:
        raise typer.Exit(code=1)


@app.command()
def transliterate(
    text: str = typer.Argument(..., help="Romanized Marathi text"),
    words: Path | None = typer.Option(  # noqa: B008
        None,
        "--words",
        exists=True,
        dir_okay=False,
        help="JSON file of extra word mappings",
    ),
) -> None:
    """Print the Devanagari form of TEXT."""
    transliterator = Transliterator()
    if words is not None:
        transliterator = transliterator.with_words(load_word_file(words))
    typer.echo(transliterator.transliterate(text))


async def _search(form: SearchFormData, data: Path | None) -> SearchOutcome:
    """Async implementation of the search command."""
    store: VoterStore
    if data is not None:
        store = InMemoryVoterStore.from_json_file(data)
        service = SearchService(store)
    else:
        settings = get_settings()
        store = create_store(settings)
        service = build_search_service(settings, store)

    async with store:
        return await service.perform_search(form)


def _print_outcome(outcome: SearchOutcome) -> None:
    if outcome.keys:
        typer.echo(f"Keys: {', '.join(outcome.keys)}")
    for result in outcome.results:
        record = result.record
        age = record.age if record.age is not None else "-"
        typer.echo(f"{result.voter_id}  {record.full_name}  {record.gender or '-'}  {age}")
        if record.reference:
            typer.echo(f"    {record.reference}")
    for failure in outcome.failures:
        typer.echo(f"  READ FAILED: {failure.path}: {failure.message}", err=True)
    typer.echo(f"\n{len(outcome.results)} result(s), status: {outcome.status.value}")
