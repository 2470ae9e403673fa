"""Top-level Click group for the projstrap CLI."""

import click

from projstrap.bootstrap import BootstrapTools
from projstrap.dependencies import PACKAGE_MANAGERS
from projstrap.init_command import InitCommand, InitOpts, with_error_handling
from projstrap.messages import DEFAULT_LOCALE, Messages, available_locales
from projstrap.prompting.collector import PromptCollector
from projstrap.questions import FLOWS
from projstrap.toolchain import LICENSES, UNLICENSED


@click.group()
@click.version_option(package_name="projstrap")
def main():
    """projstrap - bootstrap Node.js projects: git, package.json, tests, lint and docs."""


@main.command("init")
@click.argument("path", required=False, default=".")
@click.option("--flow", type=click.Choice(list(FLOWS)), default="default", show_default=True,
              help="Question set to ask.")
@click.option("--locale", type=click.Choice(available_locales()), default=DEFAULT_LOCALE,
              show_default=True, help="Language of prompts and generated files.")
@click.option("--yes", "-y", "assume_defaults", is_flag=True,
              help="Accept every default without prompting.")
@click.option("--package-manager", type=click.Choice(PACKAGE_MANAGERS), default="npm",
              show_default=True, help="Package manager used to create the manifest and install.")
def init_cmd(path, flow, locale, assume_defaults, package_manager):
    """Bootstrap a project in PATH (created if missing, defaults to the current directory)."""
    opts = InitOpts(
        path=path,
        flow=flow,
        locale=locale,
        assume_defaults=assume_defaults,
        package_manager=package_manager,
    )
    messages = Messages(opts.locale)
    collector = PromptCollector(messages, assume_defaults=opts.assume_defaults)
    tools = BootstrapTools.default(messages)
    with with_error_handling():
        InitCommand(opts, messages, collector, tools).execute()


@main.command("licenses")
def licenses_cmd():
    """List the licenses a LICENSE.md can be generated for."""
    for license_id in LICENSES:
        click.echo(license_id)
    click.echo(f"{UNLICENSED} (no license file)")
