"""Exceptions raised while bootstrapping a project."""

import shlex
from typing import List, Optional


class ProjstrapError(ValueError):
    """Base class for errors the CLI reports and exits on."""


class ManifestError(ProjstrapError):
    """The existing package.json cannot be parsed or has the wrong shape."""

    def __init__(self, manifest_path: str, reason: str):
        super().__init__(f"Invalid manifest {manifest_path}: {reason}")
        self.manifest_path = manifest_path
        self.reason = reason


class BootstrapError(ProjstrapError):
    """A bootstrap step failed; the remaining steps were not run."""

    def __init__(
        self,
        step: str,
        command: Optional[List[str]] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
        reason: str = "",
    ):
        self.step = step
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        self.reason = reason
        super().__init__(self._describe())

    def _describe(self) -> str:
        lines = [f"Step '{self.step}' failed"]
        if self.command:
            lines[0] += f": {shlex.join(self.command)}"
        if self.returncode is not None:
            lines.append(f"  exit status {self.returncode}")
        if self.reason:
            lines.append(f"  {self.reason}")
        if self.stderr.strip():
            lines.append(f"  {self.stderr.strip()}")
        return "\n".join(lines)
