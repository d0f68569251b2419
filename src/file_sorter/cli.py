"""Command line interface for file sorter."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .core.organizer import FileOrganizer, OrganizeReporter
from .exceptions import FileSorterError
from .models.category import folder_name_for
from .models.config import resolve_config
from .models.outcome import FileOutcome, OutcomeStatus, RelocationMethod, RunSummary

console = Console(soft_wrap=True, highlight=False)


def _display(value) -> str:
    """Make a path or message printable whatever bytes a file name holds."""
    text = os.fsdecode(value) if isinstance(value, (bytes, os.PathLike)) else str(value)
    try:
        return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")


def _show(value) -> str:
    """Printable and escaped for rich markup."""
    return escape(_display(value))


class PrintableLogFilter(logging.Filter):
    """Replace undecodable characters in log messages before rich renders them."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = _display(record.getMessage())
        record.args = ()
        return True


class ConsoleReporter(OrganizeReporter):
    """Narrate each file as it is processed."""

    def __init__(self, console: Console):
        self.console = console

    def file_started(self, path: Path, target_folder: Path) -> None:
        self.console.print(f"Moving {_show(path.name)} to {_show(target_folder)}")

    def file_finished(self, outcome: FileOutcome) -> None:
        name = _show(outcome.filename)
        target = _show(outcome.target_path)

        if outcome.status is OutcomeStatus.MOVED:
            how = " (copied, original deleted)" if outcome.method is RelocationMethod.COPY else ""
            self.console.print(f"  [green]✓ Moved {name} to {target}{how}[/green]")
        elif outcome.status is OutcomeStatus.SKIPPED:
            self.console.print(f"  [yellow]Skipped {name}: {target} already exists[/yellow]")
        elif outcome.status is OutcomeStatus.DUPLICATED:
            self.console.print(
                f"  [red]Duplicate: {name} was copied to {target} "
                f"but the original could not be deleted[/red]"
            )
        else:
            self.console.print(f"  [red]Error moving {name}: {_show(outcome.error)}[/red]")

    def run_finished(self, summary: RunSummary) -> None:
        if summary.total == 0:
            self.console.print("[yellow]No files to organize[/yellow]")
        else:
            self.console.print(_results_table(summary))

            if summary.errors:
                self.console.print("\n[red]Files not moved:[/red]")
                for error in summary.errors[:10]:
                    self.console.print(f"  • {_show(error)}")
                if len(summary.errors) > 10:
                    self.console.print(f"  ... and {len(summary.errors) - 10} more")

        self.console.print("All files have been organized.")


def _results_table(summary: RunSummary) -> Table:
    table = Table(title="Results")
    table.add_column("Folder", style="cyan")
    table.add_column("Moved", justify="right")

    for category, count in summary.by_category.items():
        table.add_row(folder_name_for(category), str(count))

    table.add_section()
    table.add_row("skipped", str(summary.skipped))
    table.add_row("duplicated", str(summary.duplicated))
    table.add_row("failed", str(summary.failed))
    return table


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.addFilter(PrintableLogFilter())
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


@click.command()
@click.version_option(__version__)
@click.argument(
    'directory',
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    '--config',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Configuration file path'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Verbose output'
)
def cli(directory: Optional[Path], config: Optional[Path], verbose: bool):
    """Sort the files in DIRECTORY into organized/<category> folders.

    DIRECTORY may also be given through the FILE_SORTER_PATH environment
    variable or the 'source_directory' key of a JSON config file.
    """
    try:
        cfg = resolve_config(directory=directory, config_path=config, verbose=verbose)
        setup_logging(cfg.verbose)

        console.print(f"[bold cyan]Organizing {_show(cfg.source_directory)}[/bold cyan]")

        organizer = FileOrganizer(reporter=ConsoleReporter(console))
        organizer.organize(cfg.source_directory)

    except FileSorterError as e:
        console.print(f"\n[red]Error: {_show(e)}[/red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[red]Unexpected error: {_show(e)}[/red]")
        if verbose:
            import traceback
            console.print(_display(traceback.format_exc()), markup=False)
        sys.exit(1)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
