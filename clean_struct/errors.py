"""Exception hierarchy for clean-struct.

Validation errors are recovered by the prompt layer (the question is asked
again).  Everything else propagates to the CLI entry point, which prints a
message and exits with a non-zero status.
"""

from __future__ import annotations

from pathlib import Path


class CleanStructError(Exception):
    """Base class for every error raised by clean-struct."""


class NonInteractiveEnvironmentError(CleanStructError):
    """Raised when the prompts cannot be rendered (no interactive terminal)."""

    def __init__(self, message: str = "Prompt couldn't be rendered in the current environment.") -> None:
        super().__init__(message)


class UnhandledPromptError(CleanStructError):
    """Raised when prompting fails for any reason other than a missing TTY."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message)


class ValidationError(CleanStructError, ValueError):
    """Raised when an answer is invalid (e.g. an empty folder selection)."""


class UnknownFrameworkError(CleanStructError):
    """Raised when a framework identifier is not in the template registry."""

    def __init__(self, framework: object) -> None:
        self.framework = framework
        super().__init__(f"Unknown framework: {framework!r}")


class FilesystemError(CleanStructError):
    """Raised when creating a folder or writing one of its files fails."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")
