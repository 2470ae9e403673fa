"""Initialize a git repository and its user identity with GitPython."""

import configparser
import os
from typing import Optional, Tuple

from git import Repo
from git.config import GitConfigParser
from git.exc import GitCommandError, GitError

from projstrap.errors import BootstrapError

GIT_DIR = ".git"


def is_git_repository(project_dir: str) -> bool:
    return os.path.isdir(os.path.join(project_dir, GIT_DIR))


class GitInitializer:
    """Creates the repository for a fresh project."""

    def init(self, project_dir: str, username: Optional[str] = None, email: Optional[str] = None):
        """Run ``git init`` in project_dir and set user.name / user.email when given.

        Raises:
            BootstrapError: If git fails.
        """
        try:
            repo = Repo.init(project_dir)
            if username or email:
                with repo.config_writer() as config:
                    if username:
                        config.set_value("user", "name", username)
                    if email:
                        config.set_value("user", "email", email)
        except GitCommandError as e:
            raise BootstrapError(
                "version-control-init",
                command=["git", "init"],
                returncode=e.status if isinstance(e.status, int) else None,
                stderr=str(e.stderr or ""),
            ) from e
        except (GitError, OSError) as e:
            raise BootstrapError("version-control-init", command=["git", "init"], reason=str(e)) from e
        return repo


def git_identity() -> Tuple[str, str]:
    """Return the (user.name, user.email) from the user's git configuration, if set."""
    try:
        reader = GitConfigParser(read_only=True)
        name = reader.get_value("user", "name", "")
        email = reader.get_value("user", "email", "")
    except (OSError, configparser.Error):
        return "", ""
    return str(name), str(email)
