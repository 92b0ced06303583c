"""Console reporter for clean-struct.

Prints one line per folder as the scaffolder reports it, then a final
summary.  The reporter holds no state besides the console it writes to.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from clean_struct.models import FolderOutcome, FolderStatus, RunOptions, RunResult
from clean_struct.utils import console as default_console
from clean_struct.utils import print_header, print_info, print_success, print_summary_table, print_warning

__all__ = ["Reporter"]

TITLE = "Clean Architecture Generator"
TAGLINE = "Generate clean, scalable folder structures for your projects"


class Reporter:
    """Output sink for a scaffolding run.

    Usage::

        reporter = Reporter()
        reporter.banner()
        scaffolder = FolderScaffolder(on_outcome=reporter.folder)
        result = asyncio.run(scaffolder.run(options, template, cwd))
        reporter.summary(result)
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def banner(self) -> None:
        print_header(TITLE, TAGLINE, out=self.console)

    def start(self, options: RunOptions) -> None:
        count = len(options.selected_folders)
        noun = "folder" if count == 1 else "folders"
        self.console.print()
        print_info(
            f"Creating folder structure ({count} {noun} under {escape(options.base_path.value)}/)...",
            out=self.console,
        )
        self.console.print()

    def folder(self, outcome: FolderOutcome) -> None:
        """Print the line for a single folder outcome."""
        path = escape(outcome.display_path)
        if outcome.status is FolderStatus.CREATED:
            self.console.print(f"[green]✔ Created:[/green] {path}")
        else:
            self.console.print(f"[yellow]⚠ Skipped:[/yellow] {path} (already exists)")

    def summary(self, result: RunResult) -> None:
        """Print the totals and the resolved base directory."""
        self.console.print()
        print_success("Done!", out=self.console)
        self.console.print(f"[green]{result.created_count} folder(s) created[/green]")
        if result.skipped_count > 0:
            print_warning(f"{result.skipped_count} folder(s) skipped (already exist)", out=self.console)
        self.console.print()
        print_summary_table(
            {
                "Created": str(result.created_count),
                "Skipped": str(result.skipped_count),
                "Location": escape(str(result.base_dir)),
            },
            title="Scaffold Summary",
            out=self.console,
        )
