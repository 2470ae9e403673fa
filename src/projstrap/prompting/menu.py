"""Numbered-option menu and line input for interactive prompts."""

import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, TextIO

from projstrap.messages import Message, Messages


@dataclass
class MenuConfig:
    """I/O configuration for menu display and input."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def _display_options(prompt, options, default, output, messages):
    print("", file=output)
    print(prompt, file=output)
    for i, option in enumerate(options):
        label = f"  {i + 1}) {option}"
        if i + 1 == default:
            label += " " + messages.get(Message.DEFAULT_MARKER)
        print(label, file=output)
    print("", file=output)


def _build_prompt_text(option_count, default, messages):
    prompt_text = messages.get(Message.CHOICE_PROMPT, count=option_count)
    if default:
        prompt_text += f" [{default}]"
    prompt_text += ": "
    return prompt_text


def read_line(prompt_text: str, config: MenuConfig, messages: Messages) -> str:
    """Read one line of input; exit quietly if the input stream is closed."""
    try:
        return config.input_fn(prompt_text)
    except EOFError:
        print("", file=config.output)
        print(messages.get(Message.INPUT_CLOSED), file=config.output)
        sys.exit(0)


def _parse_choice(raw_input, option_count, default):
    raw_input = raw_input.strip()
    if raw_input == "" and default:
        return default
    if raw_input.isdigit() and 1 <= int(raw_input) <= option_count:
        return int(raw_input)
    return None


def get_user_choice(
    prompt: str,
    default: Optional[int],
    options: Sequence[str],
    *,
    config: Optional[MenuConfig] = None,
    messages: Optional[Messages] = None,
) -> int:
    """Display numbered options and return the user's selection.

    Args:
        prompt: Header text displayed above the options.
        default: 1-based index of the default option, or None.
        options: List of option label strings.
        config: MenuConfig with input_fn and output stream (defaults apply).
        messages: Message catalog for the menu's own text.

    Returns:
        1-based index of the selected option.

    Raises:
        SystemExit(0): On EOF (e.g. piped input closed).
    """
    if config is None:
        config = MenuConfig()
    if messages is None:
        messages = Messages()

    _display_options(prompt, options, default, config.output, messages)
    prompt_text = _build_prompt_text(len(options), default, messages)

    while True:
        choice = read_line(prompt_text, config, messages)
        parsed = _parse_choice(choice, len(options), default)
        if parsed is not None:
            return parsed
        print(messages.get(Message.INVALID_CHOICE, count=len(options)), file=config.output)
