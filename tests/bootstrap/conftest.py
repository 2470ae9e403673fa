"""Shared fixtures for bootstrap tests."""

import os
import sys

import pytest

# Ensure tests/bootstrap/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_git_initializer import FakeGitInitializer  # noqa: E402
from fake_license_generator import FakeLicenseGenerator  # noqa: E402
from fake_shell_executor import FakeShellExecutor  # noqa: E402
from fake_tools import make_tools  # noqa: E402


@pytest.fixture
def fake_shell():
    shell = FakeShellExecutor()
    shell.simulate_package_manager()
    return shell


@pytest.fixture
def fake_git():
    return FakeGitInitializer()


@pytest.fixture
def fake_licenses():
    return FakeLicenseGenerator()


@pytest.fixture
def echoed():
    return []


@pytest.fixture
def tools(fake_shell, fake_git, fake_licenses, echoed):
    return make_tools(fake_shell, fake_git, fake_licenses, echoed)
