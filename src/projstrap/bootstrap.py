"""Bootstrapper: runs the named, existence-gated bootstrap steps in order.

Every step decides whether to run by checking the filesystem right before
it runs. Steps that shell out raise BootstrapError on a non-zero exit, which
aborts the remaining steps and leaves whatever was already written on disk.
"""

import json
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional

from projstrap.badges import readme_badges
from projstrap.dependencies import (
    DependencyPlan,
    init_command,
    install_command,
    package_manager_executable,
    plan_dependencies,
)
from projstrap.errors import BootstrapError
from projstrap.git_init import GIT_DIR, GitInitializer, is_git_repository
from projstrap.license_generator import LICENSE_FILE, LicenseGenerator
from projstrap.manifest import MANIFEST_FILE, load_manifest, manifest_path, with_manifest_update
from projstrap.manifest_synthesizer import synthesize
from projstrap.messages import Message, Messages
from projstrap.project_files import DirectoryDecision, ProjectFiles
from projstrap.reporter import ProgressReporter
from projstrap.shell import ShellExecutor
from projstrap.templates.template_renderer import TemplateRenderer, render_template
from projstrap.toolchain import find_linter, find_test_framework

README_FILE = "README.md"
IGNORE_FILE = ".gitignore"
COVERAGE_CONFIG_FILE = ".nycrc"
EXISTING_LICENSE_FILES = (LICENSE_FILE, "LICENSE", "LICENSE.txt")
SAMPLE_TEST_BASENAME = "index"

STEP_NAMES = (
    "version-control-init",
    "manifest-init",
    "source-directory-create",
    "test-directory-create",
    "dependency-install",
    "manifest-update",
    "readme-write",
    "ignore-file-write",
    "license-generate",
    "lint-tool-scaffold",
    "sample-tests-create",
    "coverage-config-write",
)


class StepOutcome(Enum):
    DONE = "done"
    SKIPPED = "skipped"


@dataclass
class StepRecord:
    step: str
    outcome: StepOutcome
    reason: str = ""


@dataclass
class BootstrapReport:
    """Outcome of every step that was reached, in order."""
    records: List[StepRecord] = field(default_factory=list)

    def outcome(self, step: str) -> Optional[StepOutcome]:
        for record in self.records:
            if record.step == step:
                return record.outcome
        return None

    @property
    def completed(self) -> List[str]:
        return [r.step for r in self.records if r.outcome is StepOutcome.DONE]

    @property
    def skipped(self) -> List[str]:
        return [r.step for r in self.records if r.outcome is StepOutcome.SKIPPED]


@dataclass
class BootstrapTools:
    """Bundles the external collaborators the bootstrap steps call into."""
    shell: ShellExecutor
    git: GitInitializer
    licenses: LicenseGenerator
    templates: TemplateRenderer
    reporter: ProgressReporter

    @classmethod
    def default(cls, messages: Messages) -> "BootstrapTools":
        return cls(
            shell=ShellExecutor(),
            git=GitInitializer(),
            licenses=LicenseGenerator(),
            templates=TemplateRenderer(messages.locale),
            reporter=ProgressReporter(messages),
        )


@dataclass
class _Step:
    name: str
    skip_reason: Callable[[], Optional[str]]
    action: Callable[[], None]


def coverage_config(src_directory: Optional[str], test_extension: str) -> dict:
    include = f"{src_directory}/**/*.js" if src_directory else "**/*.js"
    return {
        "all": True,
        "check-coverage": True,
        "include": [include],
        "exclude": [f"**/*{test_extension}"],
        "reporter": ["html", "lcov", "text"],
        "branches": 100,
        "lines": 100,
        "functions": 100,
        "statements": 100,
    }


class Bootstrapper:
    """Sequences the bootstrap steps for one project directory."""

    def __init__(
        self,
        project_dir: str,
        options,
        tools: BootstrapTools,
        messages: Messages,
        year: Optional[int] = None,
        platform: str = sys.platform,
    ):
        self._files = ProjectFiles(project_dir)
        self._options = options
        self._tools = tools
        self._messages = messages
        self._year = year or datetime.now().year
        self._platform = platform
        self._initial_manifest = None
        self._manifest = None
        self._manifest_created = False
        self._test_dir_fresh = False
        self._plan = DependencyPlan()

    @property
    def project_dir(self) -> str:
        return self._files.root

    @property
    def manifest(self) -> Optional[dict]:
        """The manifest as written by the manifest-update step."""
        return self._manifest

    def run(self) -> BootstrapReport:
        """Run every step in order.

        Raises:
            ManifestError: If an existing package.json is malformed. Nothing
                has been written at that point.
            BootstrapError: If a step fails. Earlier steps' effects remain.
                A file in the way of a requested directory fails before any
                step runs.
        """
        self._initial_manifest = load_manifest(manifest_path(self.project_dir))
        self._check_directories()
        self._test_dir_fresh = self._files.is_freshly_empty(self._options.test_directory)

        report = BootstrapReport()
        reporter = self._tools.reporter
        for step in self._steps():
            reason = step.skip_reason()
            if reason:
                reporter.skipped(step.name, reason)
                report.records.append(StepRecord(step.name, StepOutcome.SKIPPED, reason))
                continue
            reporter.started(step.name)
            step.action()
            reporter.done(step.name)
            report.records.append(StepRecord(step.name, StepOutcome.DONE))
        return report

    def _steps(self) -> List[_Step]:
        return [
            _Step("version-control-init", self._skip_git_init, self._git_init),
            _Step("manifest-init", self._skip_manifest_init, self._manifest_init),
            _Step(
                "source-directory-create",
                lambda: self._skip_directory(self._options.src_directory),
                lambda: self._files.mkdir(self._options.src_directory),
            ),
            _Step(
                "test-directory-create",
                lambda: self._skip_directory(self._options.test_directory),
                lambda: self._files.mkdir(self._options.test_directory),
            ),
            _Step("dependency-install", self._skip_install, self._install),
            _Step("manifest-update", lambda: None, self._manifest_update),
            _Step("readme-write", lambda: None, self._readme_write),
            _Step("ignore-file-write", lambda: self._skip_if_exists(IGNORE_FILE), self._ignore_file_write),
            _Step("license-generate", self._skip_license, self._license_generate),
            _Step("lint-tool-scaffold", self._skip_lint_scaffold, self._lint_scaffold),
            _Step("sample-tests-create", self._skip_sample_tests, self._sample_tests_create),
            _Step("coverage-config-write", self._skip_coverage_config, self._coverage_config_write),
        ]

    def _check_directories(self):
        requested = (
            ("source-directory-create", self._options.src_directory),
            ("test-directory-create", self._options.test_directory),
        )
        for step, relative in requested:
            if self._files.is_blocked(relative):
                raise BootstrapError(step, reason=f"{relative} is in the way of a directory")

    # --- Shell helpers ---

    def _run_checked(self, step: str, cmd: List[str], interactive: bool = False):
        shell = self._tools.shell
        if interactive:
            result = shell.run_interactive(cmd, cwd=self.project_dir)
        else:
            result = shell.run(cmd, cwd=self.project_dir)
        if not result.succeeded:
            raise BootstrapError(step, command=cmd, returncode=result.returncode, stderr=result.stderr)
        return result

    def _msg(self, key: Message, **kwargs) -> str:
        return self._messages.get(key, **kwargs)

    def _skip_if_exists(self, relative: str) -> Optional[str]:
        if self._files.exists(relative):
            return self._msg(Message.SKIP_EXISTS, path=relative)
        return None

    # --- version-control-init ---

    def _skip_git_init(self):
        if not self._options.is_fresh:
            return self._msg(Message.SKIP_NOT_FRESH)
        if is_git_repository(self.project_dir):
            return self._msg(Message.SKIP_EXISTS, path=GIT_DIR)
        return None

    def _git_init(self):
        self._tools.git.init(self.project_dir, self._options.gh_username, self._options.gh_email)

    # --- manifest-init ---

    def _skip_manifest_init(self):
        return self._skip_if_exists(MANIFEST_FILE)

    def _manifest_init(self):
        self._run_checked("manifest-init", init_command(self._options.package_manager, self._platform))
        self._manifest_created = True

    # --- directory creation ---

    def _skip_directory(self, relative):
        decision = self._files.decide_directory(relative)
        if decision is DirectoryDecision.SKIP:
            return self._msg(Message.SKIP_NOT_REQUESTED)
        if decision is DirectoryDecision.ALREADY_EXISTS:
            return self._msg(Message.SKIP_EXISTS, path=relative)
        return None

    # --- dependency-install ---

    def _skip_install(self):
        self._plan = plan_dependencies(self._options, self._initial_manifest)
        if self._plan.empty:
            return self._msg(Message.SKIP_NOTHING_TO_INSTALL)
        return None

    def _install(self):
        batches = ((self._plan.runtime, False), (self._plan.dev, True))
        for specs, dev in batches:
            for spec in specs:
                self._tools.reporter.installing(spec)
                cmd = install_command(self._options.package_manager, spec, dev, self._platform)
                self._run_checked("dependency-install", cmd)

    # --- manifest-update ---

    def _manifest_update(self):
        with with_manifest_update(manifest_path(self.project_dir)) as manifest:
            existing = dict(manifest) if manifest else None
            if existing and self._manifest_created:
                # Fields written by "npm init -y" are defaults, not user choices.
                existing.pop("description", None)
                existing.pop("license", None)
            try:
                updated = synthesize(existing, self._options)
            except ValueError as e:
                raise BootstrapError("manifest-update", reason=str(e)) from e
            manifest.clear()
            manifest.update(updated)
        self._manifest = updated

    # --- readme-write / ignore-file-write ---

    def _readme_write(self):
        manifest = self._manifest or {}
        options = self._options
        license_file = self._files.first_existing(EXISTING_LICENSE_FILES) or LICENSE_FILE
        tags = {
            "project-name": options.project_name,
            "description": manifest.get("description") or options.description,
            "license-section": None,
        }
        tags.update(readme_badges(
            options.project_name,
            options.gh_username,
            manifest.get("license") or options.license_id,
            options.linter,
            license_file,
        ))
        if options.licensed:
            tags["license-section"] = self._msg(Message.README_LICENSE_SECTION, file=license_file)
        content = self._tools.templates.render(README_FILE, tags)
        self._files.write_text(README_FILE, content)

    def _ignore_file_write(self):
        content = self._tools.templates.render("gitignore", {"project-name": self._options.project_name})
        self._files.write_text(IGNORE_FILE, content)

    # --- license-generate ---

    def _skip_license(self):
        if not self._options.licensed:
            return self._msg(Message.SKIP_UNLICENSED)
        existing = self._files.first_existing(EXISTING_LICENSE_FILES)
        if existing:
            return self._msg(Message.SKIP_EXISTS, path=existing)
        return None

    def _license_generate(self):
        owner = self._options.license_owner
        if not owner:
            raise BootstrapError("license-generate", reason="a license owner is required")
        try:
            text = self._tools.licenses.generate(self._options.license_id, owner, self._year)
        except ValueError as e:
            raise BootstrapError("license-generate", reason=str(e)) from e
        self._files.write_text(LICENSE_FILE, text)

    # --- lint-tool-scaffold ---

    def _skip_lint_scaffold(self):
        linter = find_linter(self._options.linter)
        if linter is None:
            return self._msg(Message.SKIP_NOT_REQUESTED)
        if not linter.init_command:
            return self._msg(Message.SKIP_NO_LINT_CONFIG, linter=linter.name)
        existing = self._files.first_existing(linter.config_files)
        if existing:
            return self._msg(Message.SKIP_EXISTS, path=existing)
        return None

    def _lint_scaffold(self):
        linter = find_linter(self._options.linter)
        executable, *args = linter.init_command
        cmd = [package_manager_executable(executable, self._platform), *args]
        self._run_checked("lint-tool-scaffold", cmd, interactive=True)

    # --- sample-tests-create ---

    def _skip_sample_tests(self):
        test_directory = self._options.test_directory
        if not test_directory:
            return self._msg(Message.SKIP_NOT_REQUESTED)
        if not self._test_dir_fresh:
            return self._msg(Message.SKIP_NOT_EMPTY, path=test_directory)
        return None

    def _sample_tests_create(self):
        options = self._options
        framework = find_test_framework(options.test_framework)
        if framework is None:
            raise BootstrapError("sample-tests-create", reason=f"unknown test framework '{options.test_framework}'")
        relative_src = None
        if options.src_directory:
            relative_src = os.path.relpath(options.src_directory, options.test_directory).replace(os.sep, "/")
        content = render_template(
            framework.sample_template,
            package="projstrap",
            project_name=options.project_name,
            src_directory=options.src_directory,
            relative_src=relative_src,
        )
        target = f"{options.test_directory}/{SAMPLE_TEST_BASENAME}{options.test_extension}"
        self._files.write_text(target, content)

    # --- coverage-config-write ---

    def _skip_coverage_config(self):
        framework = find_test_framework(self._options.test_framework)
        if framework is None or not framework.uses_nyc:
            return self._msg(Message.SKIP_NOT_APPLICABLE, tool=self._options.test_framework)
        return self._skip_if_exists(COVERAGE_CONFIG_FILE)

    def _coverage_config_write(self):
        config = coverage_config(self._options.src_directory, self._options.test_extension)
        self._files.write_text(COVERAGE_CONFIG_FILE, json.dumps(config, indent=2) + "\n")
