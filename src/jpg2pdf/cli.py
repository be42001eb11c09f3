"""Command-line interface for jpg2pdf."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TimeRemainingColumn,
)

from . import _resolve_pdf_path
from .assembler import ConversionResult, assemble_pdf
from .errors import ConversionError, EmptySelectionError
from .files import open_handle
from .geometry import PAGE_SIZES
from .selection import Selection, select_jpegs


def _format_size(num_bytes: int) -> str:
    """Format a byte count as a human-readable string."""
    value = float(num_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(value) < 1024:
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} TB"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jpg2pdf",
        description=(
            "Combine JPEG images into a single PDF, each image scaled to fit"
            " and centered on its own page."
        ),
    )
    parser.add_argument(
        "files",
        nargs="+",
        help=(
            "JPEG files or http(s) URLs, in page order. Files that are not"
            " .jpg/.jpeg are skipped."
        ),
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help=(
            "Output path: a .pdf file path, a directory, or omit for"
            " converted.pdf in CWD."
        ),
    )
    parser.add_argument(
        "--page-size",
        choices=sorted(PAGE_SIZES),
        default="letter",
        help="Page size for every page (default: letter, 612x792 pt)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log each placed page",
    )
    return parser


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


async def _convert_with_progress(
    *,
    console: Console,
    selection: Selection,
    output_path: Path,
    page_size: tuple[float, float],
) -> ConversionResult:
    """Convert the selection with a rich progress bar."""
    progress = Progress(
        SpinnerColumn(),
        "[progress.description]{task.description}",
        BarColumn(),
        MofNCompleteColumn(),
        TimeRemainingColumn(),
        console=console,
    )
    with progress:
        task_id = progress.add_task(
            description="Converting pages",
            total=selection.count,
        )
        return await assemble_pdf(
            selection=selection,
            output_path=output_path,
            page_size=page_size,
            on_page=lambda page: progress.advance(task_id=task_id),
        )


async def _async_main(args: argparse.Namespace) -> None:
    console = Console()
    start_time = time.monotonic()

    selection = select_jpegs(open_handle(source) for source in args.files)
    console.print(f"[green]{selection.summary()}[/green]")

    skipped = len(args.files) - selection.count
    if skipped:
        Console(stderr=True).print(
            f"  [yellow]Warning:[/yellow] skipped {skipped} non-JPG file(s)"
        )

    pdf_path = _resolve_pdf_path(output=args.output)

    result = await _convert_with_progress(
        console=console,
        selection=selection,
        output_path=pdf_path,
        page_size=PAGE_SIZES[args.page_size],
    )

    elapsed = time.monotonic() - start_time

    summary_lines = [
        f"[bold]Pages:[/bold] {result.page_count}",
        f"[bold]PDF size:[/bold] {_format_size(result.total_bytes)}",
        f"[bold]Output:[/bold] {result.output_path}",
    ]
    console.print(Panel(
        "\n".join(summary_lines),
        title=f"[bold green]Conversion successful in {elapsed:.1f}s[/bold green]",
        border_style="green",
    ))


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the ``jpg2pdf`` CLI command."""
    console = Console(stderr=True)
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(verbose=args.verbose)

    try:
        asyncio.run(_async_main(args=args))
    except EmptySelectionError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(1)
    except ConversionError as exc:
        console.print(f"[bold red]Error during PDF conversion:[/bold red] {exc}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted.[/dim]")
        sys.exit(130)
