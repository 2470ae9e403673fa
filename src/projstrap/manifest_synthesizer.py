"""Compute the next package.json state from the existing manifest and the run's options.

The merge never overwrites a field the user has already filled in, with one
exception: tool-managed scripts and config entries are recomputed on every
run so they stay in sync with the chosen directories, extension and tools.
"""

import copy
from typing import Dict, Optional

from projstrap.toolchain import find_linter, find_test_framework

COMMITIZEN_PATH = "node_modules/cz-conventional-changelog"

# Scripts recomputed and overwritten on every run.
MANAGED_SCRIPTS = (
    "pretest",
    "lint",
    "lint:fix",
    "test",
    "test:nix",
    "test:win32",
    "test:coverage",
    "prerelease",
    "commit",
    "release",
)

LINT_SCRIPTS = ("pretest", "lint", "lint:fix")


def lint_command(linter_name: Optional[str], src_directory: Optional[str]) -> Optional[str]:
    """Return the lint command for the linter, or None when no linter is used."""
    linter = find_linter(linter_name)
    if linter is None:
        return None
    return linter.command(src_directory)


def test_scripts(framework_name: str, test_directory: Optional[str], extension: str) -> Dict[str, str]:
    """Return the test script family for the framework.

    ``test`` dispatches through run-script-os to ``test:nix`` or
    ``test:win32``, which differ only in how NODE_ENV is set.
    """
    framework = find_test_framework(framework_name)
    if framework is None:
        raise ValueError(f"Unknown test framework: {framework_name}")
    runner = framework.runner(test_directory or ".", extension)
    return {
        "test": "run-script-os",
        "test:nix": f"NODE_ENV=test {runner}",
        "test:win32": f"set NODE_ENV=test& {runner}",
        "test:watch": framework.watch_script,
        "test:coverage": framework.coverage_script,
        "prerelease": "npm run test:coverage",
    }


def compute_scripts(options) -> Dict[str, str]:
    scripts = {}
    lint = lint_command(options.linter, options.src_directory)
    if lint:
        scripts["pretest"] = "npm run lint"
        scripts["lint"] = lint
        scripts["lint:fix"] = "npm run lint -- --fix"
    scripts.update(test_scripts(options.test_framework, options.test_directory, options.test_extension))
    scripts.update({
        "commit": "git-cz",
        "release": "standard-version",
        "first-release": "npm run release -- --first-release && git push origin --tags",
        "release:dry-run": "npm run release -- --dry-run",
        "first-release:dry-run": "npm run first-release -- --dry-run",
    })
    if options.markdown_viewer:
        scripts["view-readme"] = "./node_modules/.bin/markdown-viewer -b"
        scripts["view-license"] = "./node_modules/.bin/markdown-viewer -f LICENSE.md -b"
    return scripts


def pre_commit_hook(options) -> str:
    if lint_command(options.linter, options.src_directory):
        return "npm run lint && npm run test:coverage"
    return "npm run test:coverage"


def merge_scripts(existing: Dict[str, str], computed: Dict[str, str]) -> Dict[str, str]:
    merged = dict(existing)
    for name in LINT_SCRIPTS:
        if name not in computed:
            merged.pop(name, None)
    for name, command in computed.items():
        if name in MANAGED_SCRIPTS or name not in merged:
            merged[name] = command
    return merged


def merge_config(existing: dict, options) -> dict:
    merged = copy.deepcopy(existing)
    for key in ("commitizen", "ghooks"):
        if not isinstance(merged.setdefault(key, {}), dict):
            raise ValueError(f"config.{key} must be an object")
    merged["commitizen"]["path"] = COMMITIZEN_PATH
    merged["ghooks"]["pre-commit"] = pre_commit_hook(options)
    return merged


def github_base_url(url: str) -> str:
    """Normalize a GitHub URL to its bare form, without trailing slash or .git."""
    base = url.strip().rstrip("/")
    while base.endswith(".git"):
        base = base[:-len(".git")].rstrip("/")
    return base


def github_metadata(url: str) -> Dict[str, object]:
    base = github_base_url(url)
    return {
        "repository": {"type": "git", "url": f"{base}.git"},
        "bugs": {"url": f"{base}/issues"},
        "homepage": f"{base}#readme",
    }


def _is_empty(value) -> bool:
    return value is None or value == "" or value == {} or value == []


def synthesize(existing: Optional[dict], options) -> dict:
    """Return the next manifest state; ``existing`` is not modified.

    Args:
        existing: The current manifest, or None when there is none yet.
        options: ProjectOptions built from the collected answers.

    Returns:
        A new manifest dict.
    """
    manifest = copy.deepcopy(existing) if existing else {}

    manifest["scripts"] = merge_scripts(manifest.get("scripts") or {}, compute_scripts(options))
    manifest["config"] = merge_config(manifest.get("config") or {}, options)

    if _is_empty(manifest.get("description")) and options.description:
        manifest["description"] = options.description
    if _is_empty(manifest.get("license")) and options.license_id:
        manifest["license"] = options.license_id

    if options.github_url:
        for field_name, value in github_metadata(options.github_url).items():
            if _is_empty(manifest.get(field_name)):
                manifest[field_name] = value

    return manifest
