"""Localized progress output for bootstrap steps."""

import click

from projstrap.messages import Message, Messages


class ProgressReporter:
    """Prints one line per step transition through click.echo."""

    def __init__(self, messages: Messages, echo=click.echo):
        self.messages = messages
        self._echo = echo

    def started(self, step: str):
        self._echo(self.messages.get(Message.STEP_STARTED, step=step))

    def done(self, step: str):
        self._echo(self.messages.get(Message.STEP_DONE, step=step))

    def skipped(self, step: str, reason: str):
        self._echo(self.messages.get(Message.STEP_SKIPPED, step=step, reason=reason))

    def installing(self, package: str):
        self._echo("  " + self.messages.get(Message.INSTALLING, package=package))
