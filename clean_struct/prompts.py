"""Interactive prompt sequence.

Asks the six questions that make up a :class:`~clean_struct.models.RunOptions`
one after another using ``rich.prompt``.  The README question is skipped when
no index file is requested; the folder multi-select is the only validated
answer and is asked again until at least one folder is selected.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, InvalidResponse, Prompt, PromptBase
from rich.text import Text

from clean_struct.config import Config
from clean_struct.errors import (
    CleanStructError,
    NonInteractiveEnvironmentError,
    UnhandledPromptError,
    ValidationError,
)
from clean_struct.models import (
    BasePath,
    FileExtension,
    FolderTemplate,
    Framework,
    FrameworkTemplate,
    RunOptions,
    validate_selection,
)
from clean_struct.registry import FRAMEWORK_LABELS, available_frameworks, get_template
from clean_struct.utils import console as default_console

BASE_PATH_LABELS: dict[BasePath, str] = {
    BasePath.ROOT: "In this folder (./)",
    BasePath.SRC: "Inside the src folder (./src)",
    BasePath.APP: "Inside the app folder (./app)",
}

FILE_EXTENSION_LABELS: dict[FileExtension, str] = {
    FileExtension.TS: "TypeScript (.ts/.tsx)",
    FileExtension.JS: "JavaScript (.js/.jsx)",
    FileExtension.NONE: "No index file",
}

README_QUESTION = "Add a README.md to every folder?"
GITKEEP_QUESTION = "Add a .gitkeep to keep empty folders in git?"

_TOKEN_SPLIT = re.compile(r"[,\s]+")


# ---------------------------------------------------------------------------
# Folder multi-select
# ---------------------------------------------------------------------------

def parse_folder_selection(
    value: str,
    names: Sequence[str],
    preselected: Sequence[str] = (),
) -> list[str]:
    """Turn a multi-select answer into folder names, in template order.

    Accepted tokens, separated by commas or whitespace: 1-based folder
    numbers, folder names, ``all`` or ``none``.  A token prefixed with ``-``
    drops a folder and one prefixed with ``+`` adds it.  When the first token
    carries a prefix the answer edits *preselected*; otherwise it replaces it.

    Examples::

        parse_folder_selection("1,3", names)              # exactly folders 1 and 3
        parse_folder_selection("-3 +store", names, pre)   # pre without 3, plus store

    Raises:
        ValidationError: On an unknown token or an empty selection.
    """
    tokens = [t for t in _TOKEN_SPLIT.split(value.strip().lower()) if t]
    picked: set[str] = set()
    if tokens and tokens[0][0] in "+-":
        picked.update(preselected)

    for token in tokens:
        op, item = ("", token)
        if token[0] in "+-":
            op, item = token[0], token[1:]
            if not item:
                raise ValidationError(f"Missing folder after {op!r}")

        if item == "all" and not op:
            picked.update(names)
        elif item == "none" and not op:
            picked.clear()
        else:
            name = _resolve_folder(item, names)
            if op == "-":
                picked.discard(name)
            else:
                picked.add(name)

    return validate_selection([name for name in names if name in picked])


def _resolve_folder(item: str, names: Sequence[str]) -> str:
    if item.isdigit():
        index = int(item)
        if not 1 <= index <= len(names):
            raise ValidationError(f"No folder numbered {index} (choose 1-{len(names)})")
        return names[index - 1]
    if item in names:
        return item
    raise ValidationError(f"Unknown folder: {item}")


class FolderSelectPrompt(PromptBase[list]):
    """Numbered multi-select over a template's folders.

    Pressing Enter keeps the pre-selected folders.
    """

    response_type = list
    validate_error_message = "[prompt.invalid]Enter folder numbers or names separated by commas"

    def __init__(
        self,
        prompt: str,
        folders: Sequence[FolderTemplate],
        *,
        console: Console | None = None,
    ) -> None:
        super().__init__(prompt, console=console)
        self.folders = list(folders)
        self.preselected = [folder.name for folder in self.folders if folder.default_selected]

    def pre_prompt(self) -> None:
        for number, folder in enumerate(self.folders, start=1):
            mark = "[green]◉[/green]" if folder.default_selected else "[dim]○[/dim]"
            self.console.print(
                f"  {mark} {number:>2}. [bold]{escape(folder.name)}[/bold]"
                f" [dim]- {escape(folder.description)}[/dim]"
            )

    def render_default(self, default: list) -> Text:
        return Text(f"({', '.join(default)})", "prompt.default")

    def process_response(self, value: str) -> list[str]:
        names = [folder.name for folder in self.folders]
        try:
            return parse_folder_selection(value, names, self.preselected)
        except ValidationError as exc:
            raise InvalidResponse(f"[prompt.invalid]{escape(str(exc))}") from exc


# ---------------------------------------------------------------------------
# Prompt sequence
# ---------------------------------------------------------------------------

class PromptSequence:
    """Gathers a complete :class:`RunOptions` from interactive input.

    Args:
        config: Supplies the default answers.
        console: Console used for questions and menus.
        stream: Input stream to read answers from.  ``None`` reads from the
            terminal via ``input()``.
        interactive: Override terminal detection.  ``None`` checks whether
            *stream* (or ``sys.stdin``) is a TTY.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        console: Console | None = None,
        stream: TextIO | None = None,
        interactive: bool | None = None,
    ) -> None:
        self.config = config or Config()
        self.console = console or default_console
        self.stream = stream
        self.interactive = interactive

    def is_interactive(self) -> bool:
        if self.interactive is not None:
            return self.interactive
        source = self.stream if self.stream is not None else sys.stdin
        if source is None:
            return False
        try:
            return source.isatty()
        except (AttributeError, ValueError):
            return False

    def run(self) -> RunOptions:
        """Ask every question and return the validated answers.

        Raises:
            NonInteractiveEnvironmentError: No interactive terminal, or input
                ended while a question was pending.
            UnhandledPromptError: Any other failure while prompting.
        """
        if not self.is_interactive():
            raise NonInteractiveEnvironmentError()

        try:
            return self._ask_all()
        except CleanStructError:
            raise
        except EOFError as exc:
            raise NonInteractiveEnvironmentError() from exc
        except Exception as exc:
            raise UnhandledPromptError(str(exc) or type(exc).__name__, cause=exc) from exc

    def _ask_all(self) -> RunOptions:
        framework = self.ask_framework()
        template = get_template(framework)
        base_path = self.ask_base_path()
        folders = self.ask_folders(template)
        file_extension = self.ask_file_extension()

        add_readme = False
        if file_extension is not FileExtension.NONE:
            add_readme = self.ask_readme()

        add_gitkeep = self.ask_gitkeep()

        return RunOptions(
            framework=framework,
            base_path=base_path,
            selected_folders=folders,
            file_extension=file_extension,
            add_readme=add_readme,
            add_gitkeep=add_gitkeep,
        )

    # -- Individual questions ----------------------------------------------

    def ask_framework(self) -> Framework:
        frameworks = available_frameworks()
        self._print_menu({fw.value: FRAMEWORK_LABELS[fw] for fw in frameworks})
        answer = Prompt.ask(
            "Which framework/template are you using?",
            choices=[fw.value for fw in frameworks],
            default=self.config.defaults.framework.value,
            console=self.console,
            stream=self.stream,
        )
        return Framework(answer)

    def ask_base_path(self) -> BasePath:
        self._print_menu({bp.value: label for bp, label in BASE_PATH_LABELS.items()})
        answer = Prompt.ask(
            "Where should the folders be created?",
            choices=[bp.value for bp in BasePath],
            default=self.config.defaults.base_path.value,
            console=self.console,
            stream=self.stream,
        )
        return BasePath(answer)

    def ask_folders(self, template: FrameworkTemplate) -> list[str]:
        prompt = FolderSelectPrompt(
            f"Select folders for {template.display_name} "
            "(numbers or names, comma separated; 'all', 'none', or -N/+N to edit the selection)",
            template.folders,
            console=self.console,
        )
        default = template.default_selection()
        if default:
            return prompt(default=default, stream=self.stream)
        return prompt(stream=self.stream)

    def ask_file_extension(self) -> FileExtension:
        self._print_menu({ext.value: label for ext, label in FILE_EXTENSION_LABELS.items()})
        answer = Prompt.ask(
            "Which extension should the index files use?",
            choices=[ext.value for ext in FileExtension],
            default=self.config.defaults.file_extension.value,
            console=self.console,
            stream=self.stream,
        )
        return FileExtension(answer)

    def ask_readme(self) -> bool:
        return Confirm.ask(
            README_QUESTION,
            default=self.config.defaults.add_readme,
            console=self.console,
            stream=self.stream,
        )

    def ask_gitkeep(self) -> bool:
        return Confirm.ask(
            GITKEEP_QUESTION,
            default=self.config.defaults.add_gitkeep,
            console=self.console,
            stream=self.stream,
        )

    # -- Helpers -----------------------------------------------------------

    def _print_menu(self, options: dict[str, str]) -> None:
        self.console.print()
        for value, label in options.items():
            self.console.print(f"  [bold cyan]{escape(value)}[/bold cyan]  {escape(label)}")
