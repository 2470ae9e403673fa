"""User-facing strings, keyed by an enumerated Message and looked up per locale."""

from enum import Enum
from typing import Dict

DEFAULT_LOCALE = "en"


class Message(Enum):
    # Questions
    PROJECT_NAME = "project-name"
    DESCRIPTION = "description"
    IS_FRESH = "is-fresh"
    GH_USERNAME = "gh-username"
    GH_EMAIL = "gh-email"
    GITHUB_URL = "github-url"
    LICENSE = "license"
    LICENSE_OWNER = "license-owner"
    SRC_DIRECTORY = "src-directory"
    TEST_DIRECTORY = "test-directory"
    TEST_FRAMEWORK = "test-framework"
    TEST_EXTENSION = "test-extension"
    LINTER = "linter"
    DEPENDENCIES = "dependencies"
    DEV_DEPENDENCIES = "dev-dependencies"
    MARKDOWN_VIEWER = "markdown-viewer"

    # Validation
    REQUIRED = "required"
    INVALID_PROJECT_NAME = "invalid-project-name"
    INVALID_EMAIL = "invalid-email"
    INVALID_GITHUB_URL = "invalid-github-url"
    INVALID_DIRECTORY = "invalid-directory"
    INVALID_EXTENSION = "invalid-extension"

    # Menu and input
    CHOICE_PROMPT = "choice-prompt"
    INVALID_CHOICE = "invalid-choice"
    DEFAULT_MARKER = "default-marker"
    CONFIRM_SUFFIX = "confirm-suffix"
    INPUT_CLOSED = "input-closed"

    # Progress
    CREATING_PROJECT_DIR = "creating-project-dir"
    STEP_STARTED = "step-started"
    STEP_DONE = "step-done"
    STEP_SKIPPED = "step-skipped"
    INSTALLING = "installing"
    BOOTSTRAP_COMPLETE = "bootstrap-complete"

    # Skip reasons
    SKIP_EXISTS = "skip-exists"
    SKIP_NOT_REQUESTED = "skip-not-requested"
    SKIP_NOT_FRESH = "skip-not-fresh"
    SKIP_NOTHING_TO_INSTALL = "skip-nothing-to-install"
    SKIP_UNLICENSED = "skip-unlicensed"
    SKIP_NOT_EMPTY = "skip-not-empty"
    SKIP_NO_LINT_CONFIG = "skip-no-lint-config"
    SKIP_NOT_APPLICABLE = "skip-not-applicable"

    # Generated files
    README_LICENSE_SECTION = "readme-license-section"


_EN: Dict[Message, str] = {
    Message.PROJECT_NAME: "Project name",
    Message.DESCRIPTION: "Project description",
    Message.IS_FRESH: "Fresh project? (No git init yet)",
    Message.GH_USERNAME: "GitHub username (git config user.name value)",
    Message.GH_EMAIL: "GitHub email (git config user.email value)",
    Message.GITHUB_URL: "GitHub repository URL (leave empty to skip)",
    Message.LICENSE: "Select a license",
    Message.LICENSE_OWNER: "License owner (copyright holder)",
    Message.SRC_DIRECTORY: "Source directory (will be created if it does not exist, empty to skip)",
    Message.TEST_DIRECTORY: "Test directory (will be created if it does not exist, empty to skip)",
    Message.TEST_FRAMEWORK: "Select a test framework",
    Message.TEST_EXTENSION: "Test file extension",
    Message.LINTER: "Select a linter",
    Message.DEPENDENCIES: "Dependencies (space or comma separated, empty for none)",
    Message.DEV_DEPENDENCIES: "Additional dev dependencies (space or comma separated, empty for none)",
    Message.MARKDOWN_VIEWER: "Install markdown-viewer? (https://npmjs.com/package/markdown-viewer)",

    Message.REQUIRED: "A value is required.",
    Message.INVALID_PROJECT_NAME: "Project names must be lowercase and may contain letters, digits, '-', '.' and '_'.",
    Message.INVALID_EMAIL: "Please enter a valid email address.",
    Message.INVALID_GITHUB_URL: "Please enter a URL of the form https://github.com/<owner>/<repo>.",
    Message.INVALID_DIRECTORY: "Please enter a relative directory inside the project.",
    Message.INVALID_EXTENSION: "Extensions must end in .js, .mjs, .cjs or .ts.",

    Message.CHOICE_PROMPT: "Enter your choice (1-{count})",
    Message.INVALID_CHOICE: "Invalid choice. Please enter a number between 1 and {count}.",
    Message.DEFAULT_MARKER: "[default]",
    Message.CONFIRM_SUFFIX: "[y/n]",
    Message.INPUT_CLOSED: "Input closed. Exiting.",

    Message.CREATING_PROJECT_DIR: "Creating {path}...",
    Message.STEP_STARTED: "{step}...",
    Message.STEP_DONE: "{step}: done",
    Message.STEP_SKIPPED: "{step}: skipped ({reason})",
    Message.INSTALLING: "Installing {package}",
    Message.BOOTSTRAP_COMPLETE: "Project {name} is ready.",

    Message.SKIP_EXISTS: "{path} already exists",
    Message.SKIP_NOT_REQUESTED: "not requested",
    Message.SKIP_NOT_FRESH: "not a fresh project",
    Message.SKIP_NOTHING_TO_INSTALL: "all dependencies already declared",
    Message.SKIP_UNLICENSED: "unlicensed",
    Message.SKIP_NOT_EMPTY: "{path} already contains files",
    Message.SKIP_NO_LINT_CONFIG: "{linter} needs no configuration file",
    Message.SKIP_NOT_APPLICABLE: "not used with {tool}",

    Message.README_LICENSE_SECTION: "## License\n\nSee [{file}]({file}).",
}

_DE: Dict[Message, str] = {
    Message.PROJECT_NAME: "Projektname",
    Message.DESCRIPTION: "Projektbeschreibung",
    Message.IS_FRESH: "Neues Projekt? (noch kein git init)",
    Message.GH_USERNAME: "GitHub-Benutzername (Wert für git config user.name)",
    Message.GH_EMAIL: "GitHub-E-Mail (Wert für git config user.email)",
    Message.GITHUB_URL: "GitHub-Repository-URL (leer lassen zum Überspringen)",
    Message.LICENSE: "Lizenz auswählen",
    Message.LICENSE_OWNER: "Lizenzinhaber (Urheberrechtsinhaber)",
    Message.SRC_DIRECTORY: "Quellverzeichnis (wird angelegt, falls nicht vorhanden; leer zum Überspringen)",
    Message.TEST_DIRECTORY: "Testverzeichnis (wird angelegt, falls nicht vorhanden; leer zum Überspringen)",
    Message.TEST_FRAMEWORK: "Test-Framework auswählen",
    Message.TEST_EXTENSION: "Dateiendung der Tests",
    Message.LINTER: "Linter auswählen",
    Message.DEPENDENCIES: "Abhängigkeiten (durch Leerzeichen oder Komma getrennt, leer für keine)",
    Message.DEV_DEPENDENCIES: "Weitere Entwicklungsabhängigkeiten (durch Leerzeichen oder Komma getrennt)",
    Message.MARKDOWN_VIEWER: "markdown-viewer installieren? (https://npmjs.com/package/markdown-viewer)",

    Message.REQUIRED: "Ein Wert ist erforderlich.",
    Message.INVALID_EMAIL: "Bitte eine gültige E-Mail-Adresse eingeben.",
    Message.INVALID_CHOICE: "Ungültige Auswahl. Bitte eine Zahl zwischen 1 und {count} eingeben.",
    Message.CHOICE_PROMPT: "Auswahl eingeben (1-{count})",
    Message.DEFAULT_MARKER: "[Standard]",
    Message.CONFIRM_SUFFIX: "[j/n]",
    Message.INPUT_CLOSED: "Eingabe geschlossen. Beende.",

    Message.CREATING_PROJECT_DIR: "Lege {path} an...",
    Message.STEP_DONE: "{step}: fertig",
    Message.STEP_SKIPPED: "{step}: übersprungen ({reason})",
    Message.INSTALLING: "Installiere {package}",
    Message.BOOTSTRAP_COMPLETE: "Projekt {name} ist bereit.",

    Message.SKIP_EXISTS: "{path} existiert bereits",
    Message.SKIP_NOT_REQUESTED: "nicht angefordert",
    Message.SKIP_NOT_FRESH: "kein neues Projekt",
    Message.SKIP_NOTHING_TO_INSTALL: "alle Abhängigkeiten bereits eingetragen",
    Message.SKIP_UNLICENSED: "ohne Lizenz",
    Message.SKIP_NOT_EMPTY: "{path} enthält bereits Dateien",

    Message.README_LICENSE_SECTION: "## Lizenz\n\nSiehe [{file}]({file}).",
}

CATALOG: Dict[str, Dict[Message, str]] = {
    "en": _EN,
    "de": _DE,
}

# Affirmative answers accepted by confirm questions, per locale.
YES_ANSWERS: Dict[str, tuple] = {
    "en": ("y", "yes"),
    "de": ("j", "ja", "y", "yes"),
}


def available_locales():
    return sorted(CATALOG)


class Messages:
    """Resolves Message keys for one locale, falling back to English."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        if locale not in CATALOG:
            raise ValueError(
                f"Unknown locale '{locale}'. Available: {', '.join(available_locales())}"
            )
        self.locale = locale
        self._strings = CATALOG[locale]

    def get(self, key: Message, **kwargs) -> str:
        text = self._strings.get(key)
        if text is None:
            text = CATALOG[DEFAULT_LOCALE][key]
        return text.format(**kwargs) if kwargs else text

    def is_yes(self, answer: str) -> bool:
        return answer.strip().lower() in YES_ANSWERS.get(self.locale, YES_ANSWERS[DEFAULT_LOCALE])
