"""Shared fixtures for CLI tests."""

import os
import sys

import pytest

# The bootstrap fakes live in tests/bootstrap/.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "bootstrap"))

from fake_shell_executor import FakeShellExecutor  # noqa: E402
from fake_tools import make_tools  # noqa: E402


@pytest.fixture
def fake_shell():
    shell = FakeShellExecutor()
    shell.simulate_package_manager()
    return shell


@pytest.fixture
def fake_tools(fake_shell):
    return make_tools(shell=fake_shell)
