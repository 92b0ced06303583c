"""Unit tests for the interactive prompt sequence (clean_struct.prompts).

Answers are fed through an in-memory stream; an exhausted stream reads as an
empty line, which accepts the default of every remaining question.
"""

from __future__ import annotations

import io

import pytest
from rich.prompt import Prompt

from clean_struct.config import Config, PromptDefaults
from clean_struct.errors import (
    NonInteractiveEnvironmentError,
    UnhandledPromptError,
    ValidationError,
)
from clean_struct.models import BasePath, FileExtension, Framework
from clean_struct.prompts import (
    GITKEEP_QUESTION,
    README_QUESTION,
    PromptSequence,
    parse_folder_selection,
)
from clean_struct.registry import REACT_TEMPLATE

pytestmark = pytest.mark.unit

REACT_NAMES = REACT_TEMPLATE.folder_names()


def _sequence(answers: str, console, config: Config | None = None) -> PromptSequence:
    return PromptSequence(config, console=console, stream=io.StringIO(answers), interactive=True)


# ---------------------------------------------------------------------------
# parse_folder_selection
# ---------------------------------------------------------------------------

class TestParseFolderSelection:
    def test_numbers(self):
        assert parse_folder_selection("1, 2", REACT_NAMES) == ["components", "pages"]

    def test_names_returned_in_template_order(self):
        assert parse_folder_selection("routes hooks components", REACT_NAMES) == [
            "components",
            "hooks",
            "routes",
        ]

    def test_mixed_and_duplicates(self):
        assert parse_folder_selection("2,pages,2", REACT_NAMES) == ["pages"]

    def test_all(self):
        assert parse_folder_selection("all", REACT_NAMES) == REACT_NAMES

    def test_case_insensitive(self):
        assert parse_folder_selection("Hooks", REACT_NAMES) == ["hooks"]

    @pytest.mark.parametrize("value", ["none", "", "  ", ",,"])
    def test_empty_selection_rejected(self, value):
        with pytest.raises(ValidationError, match="at least one folder"):
            parse_folder_selection(value, REACT_NAMES)

    def test_unknown_name_rejected(self):
        with pytest.raises(ValidationError, match="Unknown folder: widgets"):
            parse_folder_selection("widgets", REACT_NAMES)

    @pytest.mark.parametrize("value", ["0", "13"])
    def test_out_of_range_number_rejected(self, value):
        with pytest.raises(ValidationError, match="No folder numbered"):
            parse_folder_selection(value, REACT_NAMES)

    def test_none_then_pick(self):
        assert parse_folder_selection("all none 3", REACT_NAMES) == ["layouts"]

    def test_minus_drops_from_preselection(self):
        preselected = REACT_TEMPLATE.default_selection()
        result = parse_folder_selection("-3", REACT_NAMES, preselected)
        assert result == [name for name in preselected if name != "layouts"]

    def test_plus_adds_to_preselection(self):
        preselected = REACT_TEMPLATE.default_selection()
        result = parse_folder_selection("+store, -hooks", REACT_NAMES, preselected)
        assert "store" in result
        assert "hooks" not in result
        assert len(result) == len(preselected)

    def test_unprefixed_first_token_replaces_preselection(self):
        preselected = REACT_TEMPLATE.default_selection()
        assert parse_folder_selection("1 -1 2", REACT_NAMES, preselected) == ["pages"]

    def test_dropping_everything_rejected(self):
        with pytest.raises(ValidationError, match="at least one folder"):
            parse_folder_selection("-1", REACT_NAMES, ["components"])

    @pytest.mark.parametrize("value", ["-", "+widgets", "-all"])
    def test_bad_edit_tokens_rejected(self, value):
        with pytest.raises(ValidationError):
            parse_folder_selection(value, REACT_NAMES, ["components"])


# ---------------------------------------------------------------------------
# PromptSequence
# ---------------------------------------------------------------------------

class TestPromptSequence:
    def test_explicit_answers(self, record_console):
        options = _sequence("vite\n.\n1,3\njs\ny\nn\n", record_console).run()

        assert options.framework is Framework.VITE
        assert options.base_path is BasePath.ROOT
        assert options.selected_folders == ["components", "layouts"]
        assert options.file_extension is FileExtension.JS
        assert options.add_readme is True
        assert options.add_gitkeep is False

    def test_defaults_accepted(self, record_console):
        options = _sequence("", record_console).run()

        assert options.framework is Framework.REACT
        assert options.base_path is BasePath.SRC
        assert options.selected_folders == REACT_TEMPLATE.default_selection()
        assert options.file_extension is FileExtension.TS
        assert options.add_readme is False
        assert options.add_gitkeep is True

    def test_defaults_come_from_config(self, record_console):
        config = Config(defaults=PromptDefaults(framework="nextjs", base_path="app", add_gitkeep=False))
        options = _sequence("", record_console, config).run()

        assert options.framework is Framework.NEXTJS
        assert options.base_path is BasePath.APP
        assert "pages" not in options.selected_folders
        assert options.add_gitkeep is False

    def test_folder_menu_shows_every_folder(self, record_console):
        _sequence("custom\n", record_console).run()
        output = record_console.file.getvalue()
        assert "Select folders for Custom" in output
        assert "15. context" in output
        assert "Configuration files" in output

    def test_empty_folder_selection_is_asked_again(self, record_console):
        options = _sequence("react\nsrc\nnone\n2\nts\nn\ny\n", record_console).run()

        assert options.selected_folders == ["pages"]
        output = record_console.file.getvalue()
        assert "You must select at least one folder!" in output
        assert output.count("Select folders for React") == 2

    def test_unknown_folder_is_asked_again(self, record_console):
        options = _sequence("react\nsrc\nwidgets\nhooks,components\n", record_console).run()

        assert options.selected_folders == ["components", "hooks"]
        assert "Unknown folder: widgets" in record_console.file.getvalue()

    def test_folder_edit_drops_one_default(self, record_console):
        options = _sequence("react\nsrc\n-layouts\n", record_console).run()

        expected = [name for name in REACT_TEMPLATE.default_selection() if name != "layouts"]
        assert options.selected_folders == expected

    def test_invalid_framework_is_asked_again(self, record_console):
        options = _sequence("svelte\nvite\n", record_console).run()
        assert options.framework is Framework.VITE

    def test_readme_question_skipped_without_index(self, record_console):
        options = _sequence("react\nsrc\n1\nnone\nn\n", record_console).run()

        assert options.file_extension is FileExtension.NONE
        assert options.add_readme is False
        assert options.add_gitkeep is False
        output = record_console.file.getvalue()
        assert README_QUESTION not in output
        assert GITKEEP_QUESTION in output

    def test_readme_question_asked_with_index(self, record_console):
        _sequence("react\nsrc\n1\nts\n", record_console).run()
        assert README_QUESTION in record_console.file.getvalue()


class TestPromptFailures:
    def test_non_interactive_flag(self, record_console):
        with pytest.raises(NonInteractiveEnvironmentError):
            PromptSequence(console=record_console, interactive=False).run()

    def test_non_tty_stream_detected(self, record_console):
        sequence = PromptSequence(console=record_console, stream=io.StringIO("react\n"))
        assert sequence.is_interactive() is False
        with pytest.raises(NonInteractiveEnvironmentError):
            sequence.run()
        assert record_console.file.getvalue() == ""

    def test_missing_stdin(self, record_console, monkeypatch):
        monkeypatch.setattr("sys.stdin", None)
        assert PromptSequence(console=record_console).is_interactive() is False

    def test_eof_while_prompting(self, record_console, monkeypatch):
        def _raise_eof(*args, **kwargs):
            raise EOFError

        monkeypatch.setattr(Prompt, "ask", _raise_eof)
        with pytest.raises(NonInteractiveEnvironmentError):
            _sequence("", record_console).run()

    def test_unexpected_error_wrapped(self, record_console, monkeypatch):
        def _boom(*args, **kwargs):
            raise RuntimeError("terminal exploded")

        monkeypatch.setattr(Prompt, "ask", _boom)
        with pytest.raises(UnhandledPromptError, match="terminal exploded") as exc_info:
            _sequence("", record_console).run()
        assert isinstance(exc_info.value.cause, RuntimeError)

    def test_keyboard_interrupt_propagates(self, record_console, monkeypatch):
        def _interrupt(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr(Prompt, "ask", _interrupt)
        with pytest.raises(KeyboardInterrupt):
            _sequence("", record_console).run()
