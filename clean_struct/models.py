"""Pydantic v2 models for clean-struct.

Defines the framework templates served by the registry, the per-run options
gathered by the prompt sequence, and the per-folder outcomes produced by the
scaffolder.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from clean_struct.errors import ValidationError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Framework(str, Enum):
    """Supported framework templates."""
    NEXTJS = "nextjs"
    REACT = "react"
    VITE = "vite"
    CUSTOM = "custom"


class BasePath(str, Enum):
    """Directory, relative to the working directory, that receives the folders."""
    ROOT = "."
    SRC = "src"
    APP = "app"


class FileExtension(str, Enum):
    """Extension of the generated index file, or ``none`` to skip it."""
    TS = "ts"
    JS = "js"
    NONE = "none"


class FolderStatus(str, Enum):
    """What happened to a selected folder."""
    CREATED = "created"
    SKIPPED = "skipped"


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

class FolderTemplate(BaseModel):
    """A candidate folder inside a framework template."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Folder name, e.g. 'components'")
    description: str = Field(default="", description="Shown in the prompt and the README")
    default_selected: bool = Field(default=False, description="Pre-selected in the prompt")


class FrameworkTemplate(BaseModel):
    """A named, ordered list of candidate folders for one framework."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    folders: tuple[FolderTemplate, ...] = Field(default_factory=tuple)

    @field_validator("folders")
    @classmethod
    def _unique_folder_names(cls, folders: tuple[FolderTemplate, ...]) -> tuple[FolderTemplate, ...]:
        seen: set[str] = set()
        for folder in folders:
            if folder.name in seen:
                raise ValueError(f"Duplicate folder name in template: {folder.name}")
            seen.add(folder.name)
        return folders

    def folder_names(self) -> list[str]:
        return [folder.name for folder in self.folders]

    def default_selection(self) -> list[str]:
        """Names of the folders that are pre-selected, in template order."""
        return [folder.name for folder in self.folders if folder.default_selected]

    def get_folder(self, name: str) -> FolderTemplate | None:
        for folder in self.folders:
            if folder.name == name:
                return folder
        return None

    def describe(self, name: str) -> str:
        """Return the folder's description, falling back to its name."""
        folder = self.get_folder(name)
        if folder is None or not folder.description:
            return name
        return folder.description


# ---------------------------------------------------------------------------
# Run options & results
# ---------------------------------------------------------------------------

def validate_selection(selected: list[str]) -> list[str]:
    """Reject an empty folder selection.

    Raises:
        ValidationError: If *selected* is empty.
    """
    if len(selected) < 1:
        raise ValidationError("You must select at least one folder!")
    return selected


class RunOptions(BaseModel):
    """Answers gathered by the prompt sequence for a single invocation."""

    framework: Framework = Field(default=Framework.REACT)
    base_path: BasePath = Field(default=BasePath.SRC)
    selected_folders: list[str] = Field(..., description="Folders to create, in template order")
    file_extension: FileExtension = Field(default=FileExtension.TS)
    add_readme: bool = Field(default=False, description="Only honoured when an index file is written")
    add_gitkeep: bool = Field(default=True)

    @field_validator("selected_folders")
    @classmethod
    def _non_empty_unique(cls, selected: list[str]) -> list[str]:
        validate_selection(selected)
        if len(set(selected)) != len(selected):
            raise ValueError("Folder selection contains duplicates")
        return selected

    @model_validator(mode="after")
    def _readme_requires_index(self) -> "RunOptions":
        if self.file_extension is FileExtension.NONE:
            self.add_readme = False
        return self

    def target_base(self, cwd: str | Path) -> Path:
        """Directory that receives the selected folders."""
        return Path(cwd) / self.base_path.value


class FolderOutcome(BaseModel):
    """Result of scaffolding a single folder."""

    folder: str
    path: Path = Field(..., description="Absolute path of the folder")
    display_path: str = Field(..., description="Path relative to the working directory, e.g. 'src/components'")
    status: FolderStatus
    files: list[str] = Field(default_factory=list, description="Files written inside the folder")


class RunResult(BaseModel):
    """Everything the scaffolder did during one run."""

    base_dir: Path = Field(..., description="Resolved absolute base directory")
    outcomes: list[FolderOutcome] = Field(default_factory=list)

    @property
    def created(self) -> list[FolderOutcome]:
        return [o for o in self.outcomes if o.status is FolderStatus.CREATED]

    @property
    def skipped(self) -> list[FolderOutcome]:
        return [o for o in self.outcomes if o.status is FolderStatus.SKIPPED]

    @property
    def created_count(self) -> int:
        return len(self.created)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)
