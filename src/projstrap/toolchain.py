"""Catalog of supported linters, test frameworks and licenses."""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

UNLICENSED = "UNLICENSED"

LICENSES: Tuple[str, ...] = (
    "MIT",
    "ISC",
    "BSD-2-Clause",
    "BSD-3-Clause",
    "0BSD",
    "Unlicense",
)

# Dev dependencies every bootstrapped project gets, whatever the answers.
BASE_DEV_DEPENDENCIES: Tuple[str, ...] = (
    "commitizen",
    "cz-conventional-changelog",
    "ghooks",
    "run-script-os",
    "standard-version",
)

MARKDOWN_VIEWER = "markdown-viewer"

NO_LINTER = "none"


@dataclass(frozen=True)
class Linter:
    name: str
    executable: str
    dev_dependencies: Tuple[str, ...]
    config_files: Tuple[str, ...] = ()
    init_command: Optional[Tuple[str, ...]] = None

    def command(self, src_directory: Optional[str]) -> str:
        if src_directory:
            return f"{self.executable} {src_directory}"
        return self.executable


@dataclass(frozen=True)
class TestFramework:
    name: str
    dev_dependencies: Tuple[str, ...]
    runner: Callable[[str, str], str]
    watch_script: str
    coverage_script: str
    sample_template: str
    uses_nyc: bool = False

    __test__ = False


def _mocha_runner(test_directory: str, extension: str) -> str:
    return f'mocha {test_directory}/"{{,/**/}}*{extension}"'


def _jest_runner(test_directory: str, extension: str) -> str:
    return f'jest {test_directory} --testMatch "**/*{extension}"'


LINTERS: Dict[str, Linter] = {
    "eslint": Linter(
        name="eslint",
        executable="./node_modules/.bin/eslint",
        dev_dependencies=("eslint",),
        config_files=(
            "eslint.config.js",
            "eslint.config.mjs",
            "eslint.config.cjs",
            ".eslintrc",
            ".eslintrc.js",
            ".eslintrc.cjs",
            ".eslintrc.json",
            ".eslintrc.yml",
            ".eslintrc.yaml",
        ),
        init_command=("npx", "eslint", "--init"),
    ),
    "standard": Linter(
        name="standard",
        executable="standard",
        dev_dependencies=("standard",),
    ),
}

TEST_FRAMEWORKS: Dict[str, TestFramework] = {
    "mocha": TestFramework(
        name="mocha",
        dev_dependencies=("chai", "mocha", "nyc"),
        runner=_mocha_runner,
        watch_script="npm test -- -w",
        coverage_script="nyc npm test",
        sample_template="samples/mocha.test.js.j2",
        uses_nyc=True,
    ),
    "jest": TestFramework(
        name="jest",
        dev_dependencies=("jest",),
        runner=_jest_runner,
        watch_script="npm test -- --watch",
        coverage_script="npm test -- --coverage",
        sample_template="samples/jest.test.js.j2",
    ),
}


def find_linter(name: Optional[str]) -> Optional[Linter]:
    if not name:
        return None
    return LINTERS.get(name.strip().lower())


def find_test_framework(name: Optional[str]) -> Optional[TestFramework]:
    if not name:
        return None
    return TEST_FRAMEWORKS.get(name.strip().lower())


def linter_choices() -> List[str]:
    return list(LINTERS) + [NO_LINTER]


def license_choices() -> List[str]:
    return list(LICENSES) + [UNLICENSED]
