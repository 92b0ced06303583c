"""Folder scaffolding.

Creates each selected folder under the chosen base path and fills it with the
placeholder files requested in :class:`~clean_struct.models.RunOptions`.
Folders that already exist are skipped and left untouched.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

from clean_struct.errors import FilesystemError
from clean_struct.models import (
    FolderOutcome,
    FolderStatus,
    FrameworkTemplate,
    RunOptions,
    RunResult,
)
from clean_struct.scaffolder.files import planned_files

OutcomeListener = Callable[[FolderOutcome], None]


class FolderScaffolder:
    """Creates the selected folders one at a time, in selection order.

    Each folder is an independent unit: nothing is rolled back when a later
    folder fails.  Any ``OSError`` is raised as :class:`FilesystemError` and
    ends the run.

    Usage::

        scaffolder = FolderScaffolder(on_outcome=reporter.folder)
        result = await scaffolder.run(options, template, Path.cwd())
    """

    def __init__(self, on_outcome: OutcomeListener | None = None) -> None:
        self.on_outcome = on_outcome

    # -- Public API --------------------------------------------------------

    async def run(
        self,
        options: RunOptions,
        template: FrameworkTemplate,
        cwd: str | Path,
    ) -> RunResult:
        """Scaffold every folder in ``options.selected_folders``.

        Args:
            options: Answers from the prompt sequence.
            template: Template the folders were chosen from (used for README
                descriptions).
            cwd: Directory the base path is resolved against.

        Returns:
            A :class:`RunResult` with one outcome per selected folder.

        Raises:
            FilesystemError: If a directory or file cannot be created.
        """
        base = options.target_base(cwd)
        result = RunResult(base_dir=base.resolve())

        for folder in options.selected_folders:
            outcome = await self._scaffold_folder(folder, base, options, template)
            result.outcomes.append(outcome)
            if self.on_outcome is not None:
                self.on_outcome(outcome)

        return result

    # -- Internal ----------------------------------------------------------

    async def _scaffold_folder(
        self,
        folder: str,
        base: Path,
        options: RunOptions,
        template: FrameworkTemplate,
    ) -> FolderOutcome:
        dir_path = base / folder
        display_path = f"{options.base_path.value}/{folder}"

        if await asyncio.to_thread(_exists, dir_path):
            return FolderOutcome(
                folder=folder,
                path=dir_path.absolute(),
                display_path=display_path,
                status=FolderStatus.SKIPPED,
            )

        await asyncio.to_thread(_make_dir, dir_path)

        written: list[str] = []
        for filename, content in planned_files(folder, options, template):
            await asyncio.to_thread(_write_file, dir_path / filename, content)
            written.append(filename)

        return FolderOutcome(
            folder=folder,
            path=dir_path.absolute(),
            display_path=display_path,
            status=FolderStatus.CREATED,
            files=written,
        )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _exists(path: Path) -> bool:
    """Existence of any kind, dangling symlinks included."""
    try:
        return path.exists() or path.is_symlink()
    except OSError as exc:
        raise FilesystemError(path, exc.strerror or str(exc)) from exc


def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(path, exc.strerror or str(exc)) from exc


def _write_file(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(path, exc.strerror or str(exc)) from exc
