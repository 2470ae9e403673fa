"""Question flows: which questions a bootstrap run asks, and with which defaults."""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from projstrap.dependencies import parse_package_list
from projstrap.messages import Message
from projstrap.project_options import DEFAULT_TEST_EXTENSION, normalize_directory
from projstrap.prompting.collector import CONFIRM, LIST, Question
from projstrap.toolchain import (
    NO_LINTER,
    TEST_FRAMEWORKS,
    UNLICENSED,
    license_choices,
    linter_choices,
)

_PROJECT_NAME = re.compile(r"^(?:@[a-z0-9~-][a-z0-9._~-]*/)?[a-z0-9~-][a-z0-9._~-]*$")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_GITHUB_URL = re.compile(r"^https://github\.com/[\w.-]+/[\w.-]+/?$")
_TEST_EXTENSION = re.compile(r"^\.?[\w.-]*\.(js|mjs|cjs|ts)$")
_GITHUB_OWNER = re.compile(r"^[A-Za-z0-9-]+$")


def validate_project_name(value):
    if not value:
        return Message.REQUIRED
    if len(value) > 214 or not _PROJECT_NAME.match(value):
        return Message.INVALID_PROJECT_NAME
    return True


def validate_email(value):
    if value and not _EMAIL.match(value):
        return Message.INVALID_EMAIL
    return True


def validate_github_url(value):
    if value and not _GITHUB_URL.match(value):
        return Message.INVALID_GITHUB_URL
    return True


def validate_directory(value):
    if not value:
        return True
    cleaned = str(value).strip().replace("\\", "/")
    if cleaned.startswith("/") or re.match(r"^[A-Za-z]:", cleaned):
        return Message.INVALID_DIRECTORY
    if ".." in cleaned.split("/"):
        return Message.INVALID_DIRECTORY
    return True


def validate_extension(value):
    if not value or not _TEST_EXTENSION.match(str(value).strip()):
        return Message.INVALID_EXTENSION
    return True


def validate_required(value):
    if value is None or not str(value).strip():
        return Message.REQUIRED
    return True


def default_project_name(directory_name: str) -> str:
    name = re.sub(r"[^a-z0-9._~-]+", "-", directory_name.lower()).strip("-.")
    return name or "project"


def default_github_url(answers) -> str:
    username = answers.get("gh-username")
    if not username or not _GITHUB_OWNER.match(username):
        return ""
    return f"https://github.com/{username}/{answers.get('project-name')}"


def _is_fresh(answers) -> bool:
    return bool(answers.get("is-fresh"))


def _is_licensed(answers) -> bool:
    return answers.get("license") not in (None, "", UNLICENSED)


def _directory_text(value) -> str:
    return normalize_directory(value) or ""


@dataclass
class ProjectContext:
    """What the flows know about the target directory before asking anything."""
    directory_name: str
    has_git_repository: bool = False
    git_user_name: str = ""
    git_user_email: str = ""


@dataclass
class QuestionFlow:
    """A named question set plus preset answers for the questions it does not ask."""
    name: str
    questions: List[Question]
    presets: Dict[str, Any] = field(default_factory=dict)


def project_questions(context: ProjectContext) -> Dict[str, Question]:
    """Every question a flow may ask, keyed by answer key."""
    questions = [
        Question("project-name", Message.PROJECT_NAME,
                 default=default_project_name(context.directory_name),
                 validate=validate_project_name),
        Question("description", Message.DESCRIPTION, default=""),
        Question("is-fresh", Message.IS_FRESH, kind=CONFIRM,
                 default=not context.has_git_repository),
        Question("gh-username", Message.GH_USERNAME, when=_is_fresh,
                 default=context.git_user_name),
        Question("gh-email", Message.GH_EMAIL, when=_is_fresh,
                 default=context.git_user_email, validate=validate_email),
        Question("github-url", Message.GITHUB_URL, default=default_github_url,
                 validate=validate_github_url),
        Question("license", Message.LICENSE, kind=LIST, choices=license_choices(), default="MIT"),
        Question("license-owner", Message.LICENSE_OWNER, when=_is_licensed,
                 default=lambda answers: answers.get("gh-username") or context.git_user_name,
                 validate=validate_required),
        Question("src-directory", Message.SRC_DIRECTORY, default="src",
                 validate=validate_directory, transform=_directory_text),
        Question("test-directory", Message.TEST_DIRECTORY, default="test",
                 validate=validate_directory, transform=_directory_text),
        Question("test-framework", Message.TEST_FRAMEWORK, kind=LIST,
                 choices=list(TEST_FRAMEWORKS), default="mocha"),
        Question("test-extension", Message.TEST_EXTENSION, default=DEFAULT_TEST_EXTENSION,
                 validate=validate_extension),
        Question("linter", Message.LINTER, kind=LIST, choices=linter_choices(), default="standard"),
        Question("dependencies", Message.DEPENDENCIES, default="", transform=parse_package_list),
        Question("dev-dependencies", Message.DEV_DEPENDENCIES, default="", transform=parse_package_list),
        Question("markdown-viewer", Message.MARKDOWN_VIEWER, kind=CONFIRM, default=False),
    ]
    return {question.key: question for question in questions}


def _select(questions: Dict[str, Question], keys: List[str]) -> List[Question]:
    return [questions[key] for key in keys]


def default_flow(context: ProjectContext) -> QuestionFlow:
    questions = project_questions(context)
    return QuestionFlow("default", list(questions.values()))


def quick_flow(context: ProjectContext) -> QuestionFlow:
    """Ask only for identity and license; everything else takes the standard toolchain."""
    questions = project_questions(context)
    return QuestionFlow(
        "quick",
        _select(questions, [
            "project-name", "description", "gh-username", "gh-email",
            "github-url", "license", "license-owner",
        ]),
        presets={
            "is-fresh": not context.has_git_repository,
            "src-directory": "src",
            "test-directory": "test",
            "test-framework": "mocha",
            "test-extension": DEFAULT_TEST_EXTENSION,
            "linter": "standard",
            "dependencies": [],
            "dev-dependencies": [],
            "markdown-viewer": False,
        },
    )


def minimal_flow(context: ProjectContext) -> QuestionFlow:
    """A manifest, tests and a README only: no linter, no license, no extra tooling."""
    questions = project_questions(context)
    return QuestionFlow(
        "minimal",
        _select(questions, ["project-name", "description", "test-directory", "test-framework"]),
        presets={
            "is-fresh": not context.has_git_repository,
            "license": UNLICENSED,
            "src-directory": "",
            "test-extension": DEFAULT_TEST_EXTENSION,
            "linter": NO_LINTER,
            "dependencies": [],
            "dev-dependencies": [],
            "markdown-viewer": False,
        },
    )


FLOWS: Dict[str, Callable[[ProjectContext], QuestionFlow]] = {
    "default": default_flow,
    "quick": quick_flow,
    "minimal": minimal_flow,
}


def build_flow(name: str, context: ProjectContext) -> QuestionFlow:
    if name not in FLOWS:
        raise ValueError(f"Unknown flow '{name}'. Available: {', '.join(FLOWS)}")
    return FLOWS[name](context)


def collect_answers(flow: QuestionFlow, collector) -> Dict[str, Any]:
    """Run the flow's questions through the collector, seeded with its presets."""
    return collector.ask(flow.questions, initial=flow.presets)
