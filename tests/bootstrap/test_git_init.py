"""Tests for GitInitializer against a real temporary repository."""

import pytest
from git import Repo

from projstrap.errors import BootstrapError
from projstrap.git_init import GitInitializer, git_identity, is_git_repository


@pytest.mark.integration
class TestGitInitializer:

    def test_creates_repository(self, tmp_path):
        GitInitializer().init(str(tmp_path))

        assert is_git_repository(str(tmp_path))

    def test_sets_user_identity(self, tmp_path):
        GitInitializer().init(str(tmp_path), "jane", "jane@example.com")

        reader = Repo(str(tmp_path)).config_reader("repository")
        assert reader.get_value("user", "name") == "jane"
        assert reader.get_value("user", "email") == "jane@example.com"

    def test_failure_becomes_bootstrap_error(self, tmp_path):
        not_a_directory = tmp_path / "file"
        not_a_directory.write_text("")

        with pytest.raises(BootstrapError) as exc_info:
            GitInitializer().init(str(not_a_directory))

        assert exc_info.value.step == "version-control-init"


@pytest.mark.unit
class TestIsGitRepository:

    def test_plain_directory_is_not_a_repository(self, tmp_path):
        assert not is_git_repository(str(tmp_path))


@pytest.mark.unit
def test_git_identity_returns_strings():
    name, email = git_identity()

    assert isinstance(name, str)
    assert isinstance(email, str)
