"""Tests for turning answers into ProjectOptions."""

import pytest

from projstrap.project_options import ProjectOptions, normalize_directory, normalize_extension


@pytest.mark.unit
class TestNormalize:

    @pytest.mark.parametrize("value,expected", [
        ("src", "src"),
        ("./src/", "src"),
        (" lib\\core ", "lib/core"),
        ("", None),
        (".", None),
        (None, None),
    ])
    def test_directory(self, value, expected):
        assert normalize_directory(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (".test.js", ".test.js"),
        ("spec.js", ".spec.js"),
        ("*.test.ts", ".test.ts"),
        ("", ".test.js"),
    ])
    def test_extension(self, value, expected):
        assert normalize_extension(value) == expected


@pytest.mark.unit
class TestFromAnswers:

    def test_maps_answer_keys(self):
        options = ProjectOptions.from_answers({
            "project-name": "widget",
            "description": "A widget",
            "is-fresh": True,
            "gh-username": "jane",
            "license": "ISC",
            "src-directory": "./src",
            "test-directory": "test/",
            "test-framework": "Jest",
            "linter": "ESLint",
            "dependencies": "lodash express",
            "markdown-viewer": "yes",
        }, project_dir="/work/widget", package_manager="yarn")

        assert options.src_directory == "src"
        assert options.test_directory == "test"
        assert options.test_framework == "jest"
        assert options.linter == "eslint"
        assert options.dependencies == ("lodash", "express")
        assert options.markdown_viewer is True
        assert options.package_manager == "yarn"
        assert options.license_owner == "jane"
        assert options.licensed

    def test_missing_answers_fall_back(self):
        options = ProjectOptions.from_answers({}, project_dir="/work/widget")

        assert options.project_name == "widget"
        assert options.is_fresh is True
        assert options.license_id == "UNLICENSED"
        assert not options.licensed
        assert options.linter == "none"
        assert options.test_extension == ".test.js"
