"""Tests for the numbered-option menu used by list questions."""

import io

import pytest

from projstrap.messages import Messages
from projstrap.prompting.menu import MenuConfig, get_user_choice, read_line


def _config(input_fn, output=None):
    if output is None:
        output = io.StringIO()
    return MenuConfig(input_fn=input_fn, output=output)


@pytest.mark.unit
class TestGetUserChoiceValidInput:

    def test_returns_selected_option_index(self):
        choice = get_user_choice(
            "Select a linter", 1, ["eslint", "standard", "none"],
            config=_config(lambda _: "2"),
        )
        assert choice == 2

    def test_default_on_empty_input(self):
        choice = get_user_choice(
            "Select a linter", 2, ["eslint", "standard", "none"],
            config=_config(lambda _: ""),
        )
        assert choice == 2

    def test_surrounding_whitespace_is_ignored(self):
        choice = get_user_choice(
            "Select a linter", 1, ["eslint", "standard", "none"],
            config=_config(lambda _: " 3 "),
        )
        assert choice == 3


@pytest.mark.unit
class TestGetUserChoiceDisplaysMenu:

    def test_displays_numbered_options_and_default(self):
        buf = io.StringIO()
        get_user_choice(
            "Select a license", 1, ["MIT", "ISC"],
            config=_config(lambda _: "1", output=buf),
        )
        displayed = buf.getvalue()
        assert "Select a license" in displayed
        assert "1) MIT [default]" in displayed
        assert "2) ISC" in displayed

    def test_prompt_shows_range(self):
        prompts = []

        def record(prompt):
            prompts.append(prompt)
            return "1"

        get_user_choice("Select a license", None, ["MIT", "ISC"], config=_config(record))

        assert prompts == ["Enter your choice (1-2): "]

    def test_german_default_marker(self):
        buf = io.StringIO()
        get_user_choice(
            "Lizenz auswählen", 2, ["MIT", "ISC"],
            config=_config(lambda _: "", output=buf), messages=Messages("de"),
        )
        assert "2) ISC [Standard]" in buf.getvalue()


@pytest.mark.unit
class TestGetUserChoiceInvalidInput:

    def test_retries_on_invalid_then_accepts_valid(self):
        inputs = iter(["0", "99", "abc", "2"])
        choice = get_user_choice(
            "Select a linter", 1, ["eslint", "standard"],
            config=_config(lambda _: next(inputs)),
        )
        assert choice == 2

    def test_empty_input_without_default_retries(self):
        inputs = iter(["", "1"])
        buf = io.StringIO()
        choice = get_user_choice(
            "Select a linter", None, ["eslint", "standard"],
            config=_config(lambda _: next(inputs), output=buf),
        )
        assert choice == 1
        assert "Invalid choice. Please enter a number between 1 and 2." in buf.getvalue()


@pytest.mark.unit
class TestReadLineEOF:

    def test_eof_raises_system_exit_zero(self):
        def eof_input(_):
            raise EOFError()

        buf = io.StringIO()
        with pytest.raises(SystemExit) as exc_info:
            read_line("Project name: ", _config(eof_input, output=buf), Messages("en"))

        assert exc_info.value.code == 0
        assert "Input closed. Exiting." in buf.getvalue()

    def test_eof_in_menu_exits(self):
        def eof_input(_):
            raise EOFError()

        with pytest.raises(SystemExit):
            get_user_choice("Select a linter", 1, ["eslint"], config=_config(eof_input))
