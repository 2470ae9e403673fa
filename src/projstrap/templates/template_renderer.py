"""Render bundled templates: {tag} substitution for project files, Jinja2 for .j2 sources."""

import importlib.resources
import re
from typing import Mapping, Optional

import jinja2

from projstrap.messages import DEFAULT_LOCALE

_TAG_PATTERN = re.compile(r"\{\s*([A-Za-z][A-Za-z0-9_-]*)\s*\}")

_TEMPLATES_PACKAGE = "projstrap.templates"


def render_tags(template_text: str, tag_values: Mapping[str, Optional[object]]) -> str:
    """Replace {tag-name} placeholders with values from tag_values.

    Tag names are matched case-insensitively and may be padded with
    whitespace inside the braces. A tag mapped to None renders as the empty
    string. Placeholders for tags that are not keys of tag_values, and brace
    text that is not a tag name at all, are left as they are.

    Args:
        template_text: Text containing {tag} placeholders.
        tag_values: Mapping of tag names to values.

    Returns:
        The rendered text.
    """
    values = {name.lower(): value for name, value in tag_values.items()}

    def substitute(match):
        name = match.group(1).lower()
        if name not in values:
            return match.group(0)
        value = values[name]
        return "" if value is None else str(value)

    return _TAG_PATTERN.sub(substitute, template_text)


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_name: Template path relative to the package's ``templates``
            subpackage (e.g. "licenses/MIT.j2").
        package: The caller's package (pass __package__). Templates are loaded
            from a ``templates`` subpackage beneath it.
        **kwargs: Template variables.

    Returns:
        The rendered template string.

    Raises:
        FileNotFoundError: If the template does not exist.
    """
    templates = importlib.resources.files(f"{package}.templates")
    template = templates.joinpath(template_name)
    if not template.is_file():
        raise FileNotFoundError(f"Template not found: {template_name}")
    source = template.read_text(encoding="utf-8")
    return jinja2.Template(source, keep_trailing_newline=True).render(**kwargs)


class TemplateRenderer:
    """Renders the per-locale project file templates (README.md, gitignore)."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale

    def load(self, template_name: str) -> str:
        templates = importlib.resources.files(_TEMPLATES_PACKAGE)
        for locale in (self.locale, DEFAULT_LOCALE):
            candidate = templates.joinpath(locale, template_name)
            if candidate.is_file():
                return candidate.read_text(encoding="utf-8")
        raise FileNotFoundError(f"Template not found: {template_name}")

    def render(self, template_name: str, tag_values: Mapping[str, Optional[object]]) -> str:
        return render_tags(self.load(template_name), tag_values)
