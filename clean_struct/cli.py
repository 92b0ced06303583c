"""clean-struct command-line entry point.

Runs the prompt sequence, scaffolds the selected folders and prints the
report.  Every answer is gathered interactively; the command takes no
arguments.

Usage::

    clean-struct
    python -m clean_struct
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import traceback

from rich.markup import escape

from clean_struct.config import Config
from clean_struct.errors import CleanStructError, NonInteractiveEnvironmentError
from clean_struct.models import RunResult
from clean_struct.prompts import PromptSequence
from clean_struct.registry import get_template
from clean_struct.reporter import Reporter
from clean_struct.scaffolder import FolderScaffolder
from clean_struct.utils import err_console, print_error


def scaffold(
    config: Config,
    *,
    prompts: PromptSequence | None = None,
    reporter: Reporter | None = None,
) -> RunResult:
    """Ask the questions, create the folders and report the outcome.

    The prompts run before any event loop is started so that Ctrl-C at a
    pending question raises ``KeyboardInterrupt`` straight away.
    """
    reporter = reporter or Reporter()
    prompts = prompts or PromptSequence(config)

    reporter.banner()
    options = prompts.run()
    template = get_template(options.framework)

    reporter.start(options)
    scaffolder = FolderScaffolder(on_outcome=reporter.folder)
    result = asyncio.run(scaffolder.run(options, template, config.cwd))

    reporter.summary(result)
    return result


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``clean-struct`` / ``python -m clean_struct``."""
    parser = argparse.ArgumentParser(
        prog="clean-struct",
        description="Interactively scaffold a clean folder structure for a front-end project.",
        epilog="All options are asked interactively in the current directory.",
    )
    parser.parse_args(argv)

    config = Config()

    try:
        scaffold(config)
    except KeyboardInterrupt:
        print_error("Aborted.")
        sys.exit(130)
    except NonInteractiveEnvironmentError as exc:
        print_error(f"❌ {escape(str(exc))}")
        sys.exit(1)
    except CleanStructError as exc:
        print_error(f"❌ An error occurred: {escape(str(exc))}")
        sys.exit(1)
    except Exception as exc:
        print_error(f"❌ An error occurred: {escape(str(exc))}")
        err_console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
        sys.exit(1)


if __name__ == "__main__":
    main()
