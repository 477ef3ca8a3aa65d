"""Command line interface for building and inspecting the embedding asset."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from query_patterns.config import configure_logging, get_settings
from query_patterns.encoder import create_encoder
from query_patterns.errors import QueryPatternsError
from query_patterns.metadata import PATTERNS_METADATA
from query_patterns.patterns import EMBEDDED_PATTERNS, patterns_digest
from query_patterns.storage import (
    PatternEmbeddingStore,
    blob_path,
    get_packaged_asset_path,
    load_manifest,
)

from .generator import build_asset

app = typer.Typer(
    name="query-patterns",
    help="Build and inspect the query pattern embedding asset.",
    no_args_is_help=True,
)
console = Console()


def _asset_base(output: Path | None) -> Path:
    if output is not None:
        return output
    return get_settings().embeddings_path or get_packaged_asset_path()


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", "-l", help="Override QUERY_PATTERNS_LOG_LEVEL"
    ),
) -> None:
    configure_logging(log_level)


@app.command()
def build(
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Asset base path without suffix (default: configured or packaged)",
    ),
) -> None:
    """Encode every pattern's examples and write blob + manifest."""
    settings = get_settings()
    base = _asset_base(output)

    console.print(
        f"[dim]Loading encoder: {settings.encoder_backend}/{settings.encoder_model}[/dim]"
    )
    try:
        encoder = create_encoder(settings)
        manifest = build_asset(encoder, base)
    except (QueryPatternsError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    console.print(
        f"[green]Wrote {manifest.pattern_count} vectors "
        f"({manifest.dimension}-d) to {blob_path(base)}[/green]"
    )
    console.print(f"[dim]Digest: {manifest.patterns_sha256}[/dim]")


@app.command()
def verify(
    path: Path | None = typer.Option(
        None,
        "--path",
        "-p",
        help="Asset base path without suffix (default: configured or packaged)",
    ),
) -> None:
    """Load the asset through the accessor and report what it contains."""
    base = _asset_base(path)
    store = PatternEmbeddingStore(base)
    try:
        embeddings = store.embeddings()
        manifest = load_manifest(base)
    except QueryPatternsError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    table = Table(title="Pattern Embedding Asset")
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    table.add_row("Path", str(blob_path(base)))
    table.add_row("Model", manifest.model_name)
    table.add_row("Vectors", str(len(embeddings)))
    table.add_row("Dimension", str(manifest.dimension))
    table.add_row("Buffer bytes", str(len(store.raw)))
    table.add_row("Digest", manifest.patterns_sha256)
    generated = manifest.generated_at.isoformat() if manifest.generated_at else "-"
    table.add_row("Generated", generated)
    console.print(table)
    console.print("[green]OK: asset matches the pattern table[/green]")


@app.command()
def info() -> None:
    """Print pattern table metadata."""
    meta = PATTERNS_METADATA
    console.print(Panel.fit(f"[bold]Query patterns v{meta.version}[/bold]"))

    summary = Table(show_header=False)
    summary.add_column("", style="dim")
    summary.add_column("")
    summary.add_row("Patterns", str(meta.total_patterns))
    summary.add_row("Embedding dimensions", str(meta.embedding_dimensions))
    summary.add_row("Average confidence", f"{meta.average_confidence:.3f}")
    summary.add_row("Table bytes", str(meta.size_bytes.patterns))
    summary.add_row("Embedding bytes", str(meta.size_bytes.embeddings))
    summary.add_row("Digest", patterns_digest())
    console.print(summary)

    counts: dict[str, int] = {}
    for p in EMBEDDED_PATTERNS:
        counts[p.category] = counts.get(p.category, 0) + 1

    categories = Table(title="Categories")
    categories.add_column("Category", style="cyan")
    categories.add_column("Patterns", justify="right")
    for category in meta.categories:
        categories.add_row(category, str(counts[category]))
    console.print(categories)

    coverage = Table(title="Coverage")
    coverage.add_column("Domain", style="cyan")
    coverage.add_column("Estimate", justify="right")
    for domain, estimate in meta.coverage.items():
        coverage.add_row(domain, estimate)
    console.print(coverage)


if __name__ == "__main__":
    app()
