"""clean-struct configuration.

Typed defaults for a single run.  ``Config`` is built once by the CLI entry
point and passed to the prompt sequence and the scaffolder; nothing here is
read from or written to disk.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from clean_struct.models import BasePath, FileExtension, Framework


class PromptDefaults(BaseModel):
    """Pre-selected answer for each question of the prompt sequence."""

    framework: Framework = Field(default=Framework.REACT)
    base_path: BasePath = Field(default=BasePath.SRC)
    file_extension: FileExtension = Field(default=FileExtension.TS)
    add_readme: bool = Field(default=False)
    add_gitkeep: bool = Field(default=True)


class Config(BaseModel):
    """Global clean-struct configuration.

    Attributes:
        cwd: Directory the base path is resolved against.  Defaults to the
            process working directory at construction time.
        defaults: Default answers offered by the prompts.
    """

    cwd: Path = Field(default_factory=Path.cwd)
    defaults: PromptDefaults = Field(default_factory=PromptDefaults)
