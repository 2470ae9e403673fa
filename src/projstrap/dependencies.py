"""Dependency planning: which packages to install, and the command that installs each one."""

import re
import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from projstrap.manifest import declared_packages
from projstrap.toolchain import (
    BASE_DEV_DEPENDENCIES,
    MARKDOWN_VIEWER,
    find_linter,
    find_test_framework,
)

PACKAGE_MANAGERS = ("npm", "yarn")

_SEPARATORS = re.compile(r"[\s,]+")


def parse_package_list(value) -> List[str]:
    """Split a free-text or list answer into package specs."""
    if value is None:
        return []
    if isinstance(value, str):
        items = _SEPARATORS.split(value)
    else:
        items = [str(item) for item in value]
    return [item.strip() for item in items if item and item.strip()]


def package_name(spec: str) -> str:
    """Strip the version range from a package spec ("@scope/pkg@^1.0" -> "@scope/pkg")."""
    if spec.startswith("@"):
        scope, _, rest = spec[1:].partition("/")
        if not rest:
            return spec
        return "@" + scope + "/" + rest.split("@", 1)[0]
    return spec.split("@", 1)[0]


def _unique_sorted(specs: Iterable[str], exclude: set) -> List[str]:
    chosen = {}
    for spec in specs:
        name = package_name(spec)
        if name in exclude or name in chosen:
            continue
        chosen[name] = spec
    return [chosen[name] for name in sorted(chosen)]


@dataclass
class DependencyPlan:
    runtime: List[str] = field(default_factory=list)
    dev: List[str] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.runtime and not self.dev


def required_dev_dependencies(options) -> List[str]:
    """Dev dependencies implied by the chosen toolchain plus the user's extras."""
    specs = list(BASE_DEV_DEPENDENCIES)
    linter = find_linter(options.linter)
    if linter:
        specs.extend(linter.dev_dependencies)
    framework = find_test_framework(options.test_framework)
    if framework:
        specs.extend(framework.dev_dependencies)
    if options.markdown_viewer:
        specs.append(MARKDOWN_VIEWER)
    specs.extend(options.dev_dependencies)
    return specs


def plan_dependencies(options, manifest: Optional[dict]) -> DependencyPlan:
    """Compute the runtime and dev packages still to install.

    Packages already declared in any of the manifest's dependency maps are
    excluded, and a package requested as both runtime and dev dependency is
    installed once, as a runtime dependency.
    """
    declared = declared_packages(manifest)
    runtime = _unique_sorted(options.dependencies, declared)
    runtime_names = {package_name(spec) for spec in runtime}
    dev = _unique_sorted(required_dev_dependencies(options), declared | runtime_names)
    return DependencyPlan(runtime=runtime, dev=dev)


def package_manager_executable(package_manager: str, platform: str = sys.platform) -> str:
    """npm, npx and yarn are .cmd shims on Windows."""
    if platform == "win32":
        return f"{package_manager}.cmd"
    return package_manager


def install_command(package_manager: str, spec: str, dev: bool, platform: str = sys.platform) -> List[str]:
    executable = package_manager_executable(package_manager, platform)
    if package_manager == "yarn":
        return [executable, "add", "--dev", spec] if dev else [executable, "add", spec]
    return [executable, "install", "--save-dev" if dev else "--save", spec]


def init_command(package_manager: str, platform: str = sys.platform) -> List[str]:
    return [package_manager_executable(package_manager, platform), "init", "-y"]
