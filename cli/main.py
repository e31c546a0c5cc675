"""CLI entry point — Typer app for studyrag commands.

Usage:
    studyrag chunk lecture.pdf --size 300 --output chunks.json
    studyrag search lecture.pdf "What is gradient descent?"
    studyrag search lecture.pdf "gradient descent" "learning rate update" -n 5
    studyrag status
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="studyrag",
    help="Study assistant retrieval — chunk documents and find relevant passages.",
    no_args_is_help=True,
)

console = Console()

_CHUNK_PATH = typer.Argument(..., help="Path to a PDF or TXT document")
_SEARCH_PATH = typer.Argument(..., help="Path to a PDF or TXT document")
_QUERIES = typer.Argument(..., help="Question, optionally followed by rephrasings")

PREVIEW_CHARS = 70


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _process(path: Path, size: int | None, overlap: int | None, collapse: bool):
    from studyrag.chunking.schemas import NormalizationMode
    from studyrag.config import load_settings
    from studyrag.pipeline.process import DocumentProcessor

    settings = load_settings()
    if size is not None:
        settings.chunking.target_size = size
    if overlap is not None:
        settings.chunking.overlap = overlap
    if collapse:
        settings.chunking.normalization = NormalizationMode.COLLAPSE_ALL

    try:
        processor = DocumentProcessor.from_settings(settings)
    except ValueError as exc:
        console.print(f"[bold red]Error:[/] {exc}")
        raise typer.Exit(code=1) from exc

    doc = processor.process_file(path)
    if not doc.is_ready:
        console.print(f"[bold red]Failed:[/] {path.name}: {doc.error}")
        raise typer.Exit(code=1)

    for w in doc.warnings:
        console.print(f"  [yellow]Warning:[/] {w}")
    return doc, settings


def _preview(text: str) -> str:
    flat = " ".join(text.split())
    return flat if len(flat) <= PREVIEW_CHARS else flat[:PREVIEW_CHARS] + "..."


@app.command()
def chunk(
    path: Annotated[Path, _CHUNK_PATH],
    size: int | None = typer.Option(
        None, "--size", "-s", help="Target words per chunk",
    ),
    overlap: int | None = typer.Option(
        None, "--overlap", "-o", help="Words repeated between chunks",
    ),
    collapse: bool = typer.Option(
        False, "--collapse", help="Ignore line breaks and split by words only",
    ),
    output: Path | None = typer.Option(
        None, "--output", help="Write chunks as JSON to this file",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Split a document into overlapping chunks."""
    _setup_logging(verbose)
    doc, _ = _process(path, size, overlap, collapse)

    table = Table(title=f"{path.name}: {len(doc.chunks)} chunks")
    table.add_column("Index", style="cyan", justify="right")
    table.add_column("Words", justify="right")
    table.add_column("Preview")
    for c in doc.chunks:
        table.add_row(str(c.chunk_index), str(c.word_count), _preview(c.content))
    console.print(table)

    if output is not None:
        records = [c.to_record() for c in doc.chunks]
        output.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8")
        console.print(f"[bold green]Wrote:[/] {output}")


@app.command()
def search(
    path: Annotated[Path, _SEARCH_PATH],
    queries: Annotated[list[str], _QUERIES],
    max_results: int | None = typer.Option(
        None, "--max-results", "-n", help="Number of chunks to return",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Find the chunks most relevant to a question."""
    from studyrag.pipeline.context import build_context, format_citations
    from studyrag.retrieval.ranker import find_relevant, find_relevant_multi

    _setup_logging(verbose)
    doc, settings = _process(path, None, None, False)
    ranker_config = settings.retrieval.to_ranker_config()

    if len(queries) > 1:
        if max_results is None:
            max_results = settings.chat.max_context_chunks
        hits = find_relevant_multi(
            doc.chunks,
            queries,
            results_per_query=settings.chat.results_per_query,
            max_results=max_results,
            config=ranker_config,
        )
    else:
        if max_results is None:
            max_results = settings.retrieval.max_results
        hits = find_relevant(
            doc.chunks,
            queries[0],
            max_results=max_results,
            config=ranker_config,
        )

    if not hits:
        console.print("[yellow]No relevant chunks found.[/]")
        return

    table = Table(title=f"Top {len(hits)} chunks")
    table.add_column("Index", style="cyan", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Keywords", justify="right")
    table.add_column("Preview")
    for h in hits:
        table.add_row(
            str(h.chunk_index), f"{h.score:.3f}", str(h.matched_word_count), _preview(h.content),
        )
    console.print(table)

    selection = build_context(hits)
    console.print(f"\n[dim]{format_citations(selection.chunk_indices)}[/]")


@app.command()
def status() -> None:
    """Show the effective settings."""
    from studyrag import __version__
    from studyrag.config import load_settings

    settings = load_settings()

    console.print(f"\n[bold green]studyrag[/] v{__version__}\n")

    table = Table(title="Settings")
    table.add_column("Section", style="cyan")
    table.add_column("Values")

    for name, section in settings:
        values = ", ".join(f"{k}={v}" for k, v in section.model_dump().items())
        table.add_row(name, values)

    console.print(table)


if __name__ == "__main__":
    app()
