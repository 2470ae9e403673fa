"""ProjectFiles: UTF-8 file access scoped to the project directory."""

import os
from enum import Enum
from typing import Iterable, Optional

# Files that do not make a directory "non-empty" for sample generation.
IGNORED_ENTRIES = frozenset({".gitkeep", ".DS_Store", "Thumbs.db"})


class DirectoryDecision(Enum):
    CREATE = "create"
    SKIP = "skip"
    ALREADY_EXISTS = "already-exists"


class ProjectFiles:
    """Reads, writes and checks files relative to a project root."""

    def __init__(self, root: str):
        self.root = os.path.abspath(root)

    def path(self, relative: str) -> str:
        return os.path.join(self.root, relative)

    def exists(self, relative: str) -> bool:
        return os.path.exists(self.path(relative))

    def is_dir(self, relative: str) -> bool:
        return os.path.isdir(self.path(relative))

    def first_existing(self, candidates: Iterable[str]) -> Optional[str]:
        for candidate in candidates:
            if self.exists(candidate):
                return candidate
        return None

    def write_text(self, relative: str, content: str) -> None:
        target = self.path(relative)
        os.makedirs(os.path.dirname(target), exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            f.write(content)

    def is_blocked(self, relative: Optional[str]) -> bool:
        """True when something other than a directory sits where the directory should go."""
        if not relative:
            return False
        parts = relative.split("/")
        for end in range(1, len(parts) + 1):
            prefix = "/".join(parts[:end])
            if self.exists(prefix) and not self.is_dir(prefix):
                return True
        return False

    def decide_directory(self, relative: Optional[str]) -> DirectoryDecision:
        if not relative:
            return DirectoryDecision.SKIP
        if self.is_dir(relative):
            return DirectoryDecision.ALREADY_EXISTS
        return DirectoryDecision.CREATE

    def mkdir(self, relative: str) -> bool:
        """Create the directory unless it exists now; return True if it was created."""
        target = self.path(relative)
        if os.path.isdir(target):
            return False
        os.makedirs(target)
        return True

    def is_freshly_empty(self, relative: Optional[str]) -> bool:
        """True when the directory is missing or holds only ignorable entries."""
        if not relative:
            return False
        target = self.path(relative)
        if not os.path.isdir(target):
            return not os.path.exists(target)
        return all(entry in IGNORED_ENTRIES for entry in os.listdir(target))
