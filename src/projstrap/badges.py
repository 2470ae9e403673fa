"""README badge markdown."""

from typing import Dict, Optional

from projstrap.templates.template_renderer import render_tags

LICENSE_BADGE = (
    "[![License](https://img.shields.io/github/license/{gh-username}/{project-name})]"
    "(https://github.com/{gh-username}/{project-name}/blob/master/{license-file})"
)
CONVENTIONAL_COMMITS_BADGE = (
    "[![Conventional commits](https://img.shields.io/badge/Conventional%20Commits-1.0.0-brightgreen.svg)]"
    "(https://conventionalcommits.org)"
)
STANDARD_STYLE_BADGE = (
    "[![JavaScript Style Guide](https://img.shields.io/badge/code_style-standard-brightgreen.svg)]"
    "(https://standardjs.com)"
)


def readme_badges(
    project_name: str,
    gh_username: Optional[str],
    license_id: Optional[str],
    linter: Optional[str],
    license_file: str = "LICENSE.md",
) -> Dict[str, Optional[str]]:
    """Return the badge tags for the README template.

    The license badge needs a GitHub owner to point at, so it is left empty
    when no username is known or the project is unlicensed.
    """
    license_badge = None
    if gh_username and license_id and license_id != "UNLICENSED":
        license_badge = render_tags(LICENSE_BADGE, {
            "gh-username": gh_username,
            "project-name": project_name,
            "license-file": license_file,
        })
    return {
        "license-badge": license_badge,
        "conventional-commits-badge": CONVENTIONAL_COMMITS_BADGE,
        "js-style-guide-badge": STANDARD_STYLE_BADGE if linter == "standard" else None,
    }
