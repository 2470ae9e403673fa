"""ShellExecutor: runs one external command to completion and reports its result."""

import subprocess
from dataclasses import dataclass
from typing import List


@dataclass
class CommandResult:
    """Exit status and captured output of one command."""
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


class ShellExecutor:
    """Runs commands synchronously; a non-zero exit status is the only failure signal."""

    def run(self, cmd: List[str], cwd: str) -> CommandResult:
        """Run a command, capturing stdout and stderr."""
        try:
            result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)
        except FileNotFoundError as e:
            return CommandResult(returncode=127, stderr=str(e))
        return CommandResult(
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )

    def run_interactive(self, cmd: List[str], cwd: str) -> CommandResult:
        """Run a command attached to the terminal, for tools that prompt the user."""
        try:
            result = subprocess.run(cmd, cwd=cwd)
        except FileNotFoundError as e:
            return CommandResult(returncode=127, stderr=str(e))
        return CommandResult(returncode=result.returncode)
