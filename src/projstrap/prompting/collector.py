"""PromptCollector: asks a declarative sequence of questions and returns the answers."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

import click

from projstrap.messages import Message, Messages
from projstrap.prompting.menu import MenuConfig, get_user_choice, read_line

INPUT = "input"
CONFIRM = "confirm"
LIST = "list"

Answers = Dict[str, Any]
Validator = Callable[[Any], Union[bool, Message, str]]


@dataclass(frozen=True)
class Question:
    """One prompt in a flow.

    ``message``, ``default`` and ``choices`` may be callables of the answers
    collected so far. ``when`` hides the question unless it returns True.
    ``validate`` returns True, or an error (a Message key or plain text).
    ``transform`` converts the raw answer before validation and storage.
    """

    key: str
    message: Union[Message, Callable[[Answers], str]]
    kind: str = INPUT
    default: Any = None
    choices: Union[Sequence[str], Callable[[Answers], Sequence[str]], None] = None
    when: Optional[Callable[[Answers], bool]] = None
    validate: Optional[Validator] = None
    transform: Optional[Callable[[Any], Any]] = None


def _resolve(value, answers):
    return value(answers) if callable(value) else value


class PromptCollector:
    """Collects answers interactively, or from defaults when assume_defaults is set."""

    def __init__(
        self,
        messages: Messages,
        config: Optional[MenuConfig] = None,
        assume_defaults: bool = False,
    ):
        self.messages = messages
        self.config = config or MenuConfig()
        self.assume_defaults = assume_defaults

    def ask(self, questions: List[Question], initial: Optional[Mapping[str, Any]] = None) -> Answers:
        """Ask each visible question in order and return the answer set.

        Raises:
            click.UsageError: If a default fails validation with assume_defaults.
        """
        answers: Answers = dict(initial or {})
        for question in questions:
            if question.when is not None and not question.when(answers):
                continue
            answers[question.key] = self._answer(question, answers)
        return answers

    def _answer(self, question: Question, answers: Answers):
        default = _resolve(question.default, answers)
        if self.assume_defaults:
            value = self._finish(question, default)
            error = self._validation_error(question, value)
            if error:
                raise click.UsageError(f"{question.key}: {error}")
            return value

        while True:
            value = self._finish(question, self._prompt(question, default, answers))
            error = self._validation_error(question, value)
            if not error:
                return value
            print(error, file=self.config.output)

    def _finish(self, question: Question, value):
        if question.transform is not None:
            return question.transform(value)
        return value

    def _validation_error(self, question: Question, value) -> Optional[str]:
        if question.validate is None:
            return None
        result = question.validate(value)
        if result is True:
            return None
        if isinstance(result, Message):
            return self.messages.get(result)
        return str(result) if result else None

    def _message_text(self, question: Question, answers: Answers) -> str:
        if isinstance(question.message, Message):
            return self.messages.get(question.message)
        return question.message(answers)

    def _prompt(self, question: Question, default, answers: Answers):
        text = self._message_text(question, answers)
        if question.kind == LIST:
            return self._prompt_list(question, text, default, answers)
        if question.kind == CONFIRM:
            return self._prompt_confirm(text, bool(default))
        return self._prompt_input(text, default)

    def _prompt_input(self, text: str, default):
        suffix = f" [{default}]" if default not in (None, "") else ""
        raw = read_line(f"{text}{suffix}: ", self.config, self.messages).strip()
        if raw == "" and default is not None:
            return default
        return raw

    def _prompt_confirm(self, text: str, default: bool) -> bool:
        suffix = self.messages.get(Message.CONFIRM_SUFFIX)
        raw = read_line(f"{text} {suffix}: ", self.config, self.messages).strip()
        if raw == "":
            return default
        return self.messages.is_yes(raw)

    def _prompt_list(self, question: Question, text: str, default, answers: Answers) -> str:
        choices = list(_resolve(question.choices, answers) or [])
        default_index = choices.index(default) + 1 if default in choices else None
        index = get_user_choice(
            text, default_index, choices, config=self.config, messages=self.messages,
        )
        return choices[index - 1]
