"""ProjectOptions: the answer set normalized into typed settings for one bootstrap run."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from projstrap.dependencies import parse_package_list
from projstrap.toolchain import NO_LINTER, UNLICENSED

DEFAULT_TEST_EXTENSION = ".test.js"


def normalize_directory(value: Optional[str]) -> Optional[str]:
    """Return a clean relative directory ("./src/" -> "src"), or None when empty."""
    if value is None:
        return None
    cleaned = str(value).strip().replace("\\", "/").strip("/")
    while cleaned.startswith("./"):
        cleaned = cleaned[2:]
    if cleaned in ("", "."):
        return None
    return cleaned


def normalize_extension(value: Optional[str]) -> str:
    """Return a test-file extension with exactly one leading dot."""
    if value is None or not str(value).strip():
        return DEFAULT_TEST_EXTENSION
    return "." + str(value).strip().lstrip(".*")


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in ("y", "yes", "j", "ja", "true", "1")


def _as_text(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class ProjectOptions:
    """Settings for one bootstrap run."""

    project_name: str
    description: str = ""
    is_fresh: bool = True
    gh_username: Optional[str] = None
    gh_email: Optional[str] = None
    github_url: Optional[str] = None
    license_id: str = UNLICENSED
    license_owner: Optional[str] = None
    src_directory: Optional[str] = None
    test_directory: Optional[str] = None
    test_framework: str = "mocha"
    test_extension: str = DEFAULT_TEST_EXTENSION
    linter: str = NO_LINTER
    dependencies: Tuple[str, ...] = ()
    dev_dependencies: Tuple[str, ...] = ()
    markdown_viewer: bool = False
    package_manager: str = "npm"

    @property
    def licensed(self) -> bool:
        return self.license_id != UNLICENSED

    @classmethod
    def from_answers(
        cls, answers: Mapping[str, object], *, project_dir: str, package_manager: str = "npm",
    ) -> "ProjectOptions":
        """Build options from a collected answer set.

        Missing answers fall back to the dataclass defaults; the project name
        falls back to the project directory's basename.
        """
        project_name = _as_text(answers.get("project-name")) or os.path.basename(
            os.path.abspath(project_dir)
        )
        license_id = _as_text(answers.get("license")) or UNLICENSED
        linter = (_as_text(answers.get("linter")) or NO_LINTER).lower()
        return cls(
            project_name=project_name,
            description=_as_text(answers.get("description")) or "",
            is_fresh=_as_bool(answers.get("is-fresh", True)),
            gh_username=_as_text(answers.get("gh-username")),
            gh_email=_as_text(answers.get("gh-email")),
            github_url=_as_text(answers.get("github-url")),
            license_id=license_id,
            license_owner=_as_text(answers.get("license-owner")) or _as_text(answers.get("gh-username")),
            src_directory=normalize_directory(answers.get("src-directory")),
            test_directory=normalize_directory(answers.get("test-directory")),
            test_framework=(_as_text(answers.get("test-framework")) or "mocha").lower(),
            test_extension=normalize_extension(answers.get("test-extension")),
            linter=linter,
            dependencies=tuple(parse_package_list(answers.get("dependencies"))),
            dev_dependencies=tuple(parse_package_list(answers.get("dev-dependencies"))),
            markdown_viewer=_as_bool(answers.get("markdown-viewer")),
            package_manager=package_manager,
        )
