"""InitCommand encapsulates the init workflow: collect answers, then bootstrap."""

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass

import click

from projstrap.bootstrap import Bootstrapper
from projstrap.git_init import git_identity, is_git_repository
from projstrap.manifest import load_manifest, manifest_path
from projstrap.messages import DEFAULT_LOCALE, Message
from projstrap.project_options import ProjectOptions
from projstrap.questions import ProjectContext, build_flow, collect_answers


@dataclass
class InitOpts:
    """All options for the init command."""

    path: str = "."
    flow: str = "default"
    locale: str = DEFAULT_LOCALE
    assume_defaults: bool = False
    package_manager: str = "npm"


@contextmanager
def with_error_handling():
    try:
        yield
    except ValueError as e:
        click.echo(str(e), err=True)
        sys.exit(1)


class InitCommand:
    """Bootstraps a project directory from the answers to a question flow."""

    def __init__(self, opts, messages, collector, tools, identity_fn=None, echo=click.echo):
        self.opts = opts
        self.messages = messages
        self.collector = collector
        self.tools = tools
        self.identity_fn = identity_fn or git_identity
        self.echo = echo

    def execute(self):
        """Create the directory if needed, ask the flow's questions and run the bootstrap.

        Returns:
            The BootstrapReport of the run.
        """
        project_dir = os.path.abspath(self.opts.path)
        if not os.path.isdir(project_dir):
            self.echo(self.messages.get(Message.CREATING_PROJECT_DIR, path=self.opts.path))
            os.makedirs(project_dir)

        # Fail on a malformed package.json before asking anything.
        load_manifest(manifest_path(project_dir))

        user_name, user_email = self.identity_fn()
        context = ProjectContext(
            directory_name=os.path.basename(project_dir),
            has_git_repository=is_git_repository(project_dir),
            git_user_name=user_name,
            git_user_email=user_email,
        )
        flow = build_flow(self.opts.flow, context)
        answers = collect_answers(flow, self.collector)
        options = ProjectOptions.from_answers(
            answers, project_dir=project_dir, package_manager=self.opts.package_manager,
        )

        report = Bootstrapper(project_dir, options, self.tools, self.messages).run()
        self.echo(self.messages.get(Message.BOOTSTRAP_COMPLETE, name=options.project_name))
        return report
