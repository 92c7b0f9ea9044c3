"""Command-line interface for Shortcode Stripper."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from shortcode_stripper import __version__
from shortcode_stripper.config import get_settings
from shortcode_stripper.core.models import BatchResult
from shortcode_stripper.core.runner import BatchRunner
from shortcode_stripper.core.stripper import ShortcodeStripper
from shortcode_stripper.logging_config import setup_logging
from shortcode_stripper.stores import DocumentStore, StoreError, get_store

app = typer.Typer(
    name="shortcode-stripper",
    help="Remove page-builder shortcodes from documents, keeping their inner content.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Shortcode Stripper v{__version__}")
        raise typer.Exit()


def run_batch(
    store: DocumentStore,
    stripper: ShortcodeStripper,
    dry_run: bool,
) -> BatchResult:
    """Run the batch with a progress bar. Returns the BatchResult."""
    runner = BatchRunner(store, stripper=stripper)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Stripping shortcodes...", total=None)

        def advance(document_id: str, total: int) -> None:
            progress.update(
                task, total=total, description=f"Processing {document_id}..."
            )
            progress.advance(task)

        return runner.run(dry_run=dry_run, progress=advance)


def print_report(result: BatchResult, verbose: bool) -> None:
    """Print the per-document changes and failures of a run."""
    if verbose and result.changed_ids:
        title = "Documents to rewrite" if result.dry_run else "Rewritten documents"
        table = Table(title=title)
        table.add_column("Document")
        table.add_column("Status")
        for outcome in result.outcomes:
            if not outcome.changed:
                continue
            if outcome.failed:
                status = "[red]failed[/red]"
            elif outcome.written:
                status = "[green]written[/green]"
            else:
                status = "[yellow]pending[/yellow]"
            table.add_row(outcome.id, status)
        console.print(table)

    for outcome in result.failures:
        console.print(f"[red]Error:[/red] {outcome.id}: {outcome.error}")


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        help="Folder of documents or .json export to process",
        exists=True,
    ),
    marker: Optional[list[str]] = typer.Option(
        None,
        "--marker",
        "-m",
        help="Shortcode name to strip (repeatable; default: configured list)",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Report which documents would change without writing them",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write log messages to this file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Strip shortcodes from every document, preserving inner content.

    Paired shortcodes like [vc_row]Hello[/vc_row] become Hello and
    standalone ones like [vc_column] are deleted. This rewrites files
    in place and cannot be undone, so keep a backup.

    Examples:

        python strip_shortcodes.py /path/to/export

        python strip_shortcodes.py posts.json --dry-run

        python strip_shortcodes.py /path/to/export -m vc_row -m vc_column
    """
    # pydantic's ValidationError is a ValueError too
    try:
        settings = get_settings()
        stripper = ShortcodeStripper(marker or settings.markers)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    setup_logging(
        "DEBUG" if verbose else settings.log_level,
        str(log_file) if log_file else None,
    )

    if verbose:
        console.print(f"[blue]Store:[/blue] {path}")
        console.print(f"[blue]Markers:[/blue] {', '.join(stripper.markers)}")
        if path.is_dir():
            console.print(
                f"[blue]Extensions:[/blue] {', '.join(settings.extensions)}"
            )
        if dry_run:
            console.print("[blue]Dry run:[/blue] No documents will be written")

    try:
        store = get_store(path, extensions=settings.extensions)
        result = run_batch(store, stripper, dry_run)
    except StoreError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    print_report(result, verbose)

    if dry_run:
        console.print(
            f"\n[bold]Dry run:[/bold] {result.changed} of {result.scanned} "
            f"document(s) would change, {result.failed} failed"
        )
    else:
        console.print(
            f"\n[bold]Complete:[/bold] {result.scanned} scanned, "
            f"{result.written} rewritten, {result.failed} failed"
        )
    raise typer.Exit(0 if result.success else 1)


if __name__ == "__main__":
    app()
