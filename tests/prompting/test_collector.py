"""Tests for PromptCollector: defaults, validation, conditions and kinds."""

import io

import click
import pytest

from projstrap.messages import Message, Messages
from projstrap.prompting.collector import CONFIRM, LIST, PromptCollector, Question
from projstrap.prompting.menu import MenuConfig


class ScriptedInput:
    """Feeds canned answers and records the prompts shown."""

    def __init__(self, *answers):
        self._answers = iter(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        return next(self._answers)


def _collector(*answers, locale="en", assume_defaults=False):
    scripted = ScriptedInput(*answers)
    output = io.StringIO()
    collector = PromptCollector(
        Messages(locale),
        config=MenuConfig(input_fn=scripted, output=output),
        assume_defaults=assume_defaults,
    )
    return collector, scripted, output


def _must_be_lowercase(value):
    return True if value == value.lower() else Message.INVALID_PROJECT_NAME


@pytest.mark.unit
class TestInputQuestions:

    def test_returns_typed_answer(self):
        collector, _, _ = _collector("widget")

        answers = collector.ask([Question("project-name", Message.PROJECT_NAME)])

        assert answers == {"project-name": "widget"}

    def test_empty_answer_takes_default(self):
        collector, scripted, _ = _collector("")

        answers = collector.ask([Question("test-directory", Message.TEST_DIRECTORY, default="test")])

        assert answers["test-directory"] == "test"
        assert scripted.prompts[0].endswith(" [test]: ")

    def test_default_may_depend_on_earlier_answers(self):
        collector, _, _ = _collector("jane", "")

        answers = collector.ask([
            Question("gh-username", Message.GH_USERNAME),
            Question("license-owner", Message.LICENSE_OWNER, default=lambda a: a["gh-username"]),
        ])

        assert answers["license-owner"] == "jane"

    def test_invalid_answer_is_asked_again(self):
        collector, scripted, output = _collector("Widget", "widget")

        answers = collector.ask([
            Question("project-name", Message.PROJECT_NAME, validate=_must_be_lowercase),
        ])

        assert answers["project-name"] == "widget"
        assert len(scripted.prompts) == 2
        assert "Project names must be lowercase" in output.getvalue()

    def test_transform_applies_before_storing(self):
        collector, _, _ = _collector("a, b")

        answers = collector.ask([
            Question("dependencies", Message.DEPENDENCIES, transform=lambda v: v.split(", ")),
        ])

        assert answers["dependencies"] == ["a", "b"]

    def test_prompt_uses_locale(self):
        collector, scripted, _ = _collector("widget", locale="de")

        collector.ask([Question("project-name", Message.PROJECT_NAME)])

        assert scripted.prompts[0] == "Projektname: "


@pytest.mark.unit
class TestConditionalQuestions:

    def test_hidden_question_is_not_asked(self):
        collector, scripted, _ = _collector("n")

        answers = collector.ask([
            Question("is-fresh", Message.IS_FRESH, kind=CONFIRM, default=True),
            Question("gh-username", Message.GH_USERNAME, when=lambda a: a["is-fresh"]),
        ])

        assert answers == {"is-fresh": False}
        assert len(scripted.prompts) == 1

    def test_initial_answers_feed_conditions(self):
        collector, scripted, _ = _collector()

        answers = collector.ask(
            [Question("gh-username", Message.GH_USERNAME, when=lambda a: a["is-fresh"])],
            initial={"is-fresh": False},
        )

        assert answers == {"is-fresh": False}
        assert scripted.prompts == []


@pytest.mark.unit
class TestConfirmAndList:

    def test_confirm_accepts_german_yes(self):
        collector, _, _ = _collector("ja", locale="de")

        answers = collector.ask([Question("markdown-viewer", Message.MARKDOWN_VIEWER, kind=CONFIRM)])

        assert answers["markdown-viewer"] is True

    def test_confirm_empty_takes_default(self):
        collector, _, _ = _collector("")

        answers = collector.ask([Question("is-fresh", Message.IS_FRESH, kind=CONFIRM, default=True)])

        assert answers["is-fresh"] is True

    def test_list_returns_chosen_value(self):
        collector, _, output = _collector("2")

        answers = collector.ask([
            Question("linter", Message.LINTER, kind=LIST, choices=["eslint", "standard", "none"], default="none"),
        ])

        assert answers["linter"] == "standard"
        assert "3) none [default]" in output.getvalue()

    def test_list_empty_takes_default(self):
        collector, _, _ = _collector("")

        answers = collector.ask([
            Question("license", Message.LICENSE, kind=LIST, choices=["MIT", "ISC"], default="ISC"),
        ])

        assert answers["license"] == "ISC"


@pytest.mark.unit
class TestAssumeDefaults:

    def test_takes_defaults_without_prompting(self):
        collector, scripted, _ = _collector(assume_defaults=True)

        answers = collector.ask([
            Question("project-name", Message.PROJECT_NAME, default="widget"),
            Question("linter", Message.LINTER, kind=LIST, choices=["eslint", "standard"], default="standard"),
        ])

        assert answers == {"project-name": "widget", "linter": "standard"}
        assert scripted.prompts == []

    def test_invalid_default_is_a_usage_error(self):
        collector, _, _ = _collector(assume_defaults=True)

        with pytest.raises(click.UsageError, match="project-name: Project names must be lowercase"):
            collector.ask([
                Question("project-name", Message.PROJECT_NAME, default="Widget", validate=_must_be_lowercase),
            ])
