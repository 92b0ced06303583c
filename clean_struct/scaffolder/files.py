"""Placeholder file contents written into newly created folders."""

from __future__ import annotations

from clean_struct.models import FileExtension, FrameworkTemplate, RunOptions

README_FILENAME = "README.md"
GITKEEP_FILENAME = ".gitkeep"


def capitalize_first(value: str) -> str:
    """Upper-case the first character only (``"apiRoutes"`` -> ``"ApiRoutes"``)."""
    return value[:1].upper() + value[1:]


def index_filename(extension: FileExtension) -> str | None:
    """``index.ts`` / ``index.js``, or ``None`` when no index file is wanted."""
    if extension is FileExtension.NONE:
        return None
    return f"index.{extension.value}"


def render_index(folder: str) -> str:
    """Two-line barrel file: a comment and an empty ES module export."""
    return f"// Export {folder} here\nexport {{}};\n"


def render_readme(folder: str, template: FrameworkTemplate) -> str:
    return (
        f"# {capitalize_first(folder)}\n"
        "\n"
        f"This folder contains {template.describe(folder)}.\n"
    )


def planned_files(folder: str, options: RunOptions, template: FrameworkTemplate) -> list[tuple[str, str]]:
    """Return ``(filename, content)`` pairs to write into a new *folder*.

    Order is fixed: index file, README, ``.gitkeep``.
    """
    files: list[tuple[str, str]] = []

    index_name = index_filename(options.file_extension)
    if index_name is not None:
        files.append((index_name, render_index(folder)))

    if options.add_readme:
        files.append((README_FILENAME, render_readme(folder, template)))

    if options.add_gitkeep:
        files.append((GITKEEP_FILENAME, ""))

    return files
