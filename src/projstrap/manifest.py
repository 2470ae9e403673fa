"""package.json I/O: validation, atomic writes and a read-modify-write context manager."""

import json
import os
import tempfile
from contextlib import contextmanager
from typing import Optional, Set

from projstrap.errors import ManifestError

MANIFEST_FILE = "package.json"

DEPENDENCY_FIELDS = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)

_OBJECT_FIELDS = ("scripts", "config", "repository", "bugs") + DEPENDENCY_FIELDS

# config entries the bootstrap writes into.
_CONFIG_OBJECT_FIELDS = ("commitizen", "ghooks")


def manifest_path(project_dir: str) -> str:
    return os.path.join(project_dir, MANIFEST_FILE)


def atomic_write(file_path: str, content: str) -> None:
    """Write content to file atomically using temp file + rename."""
    dir_name = os.path.dirname(os.path.abspath(file_path))
    fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(content)
        os.replace(tmp_path, file_path)
    except Exception:
        os.unlink(tmp_path)
        raise


def parse_manifest(text: str, source: str = MANIFEST_FILE) -> dict:
    """Parse manifest text, raising ManifestError when it is not a usable package.json."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(source, f"not valid JSON ({e.msg} at line {e.lineno})") from e
    if not isinstance(data, dict):
        raise ManifestError(source, "top-level value must be an object")
    for field_name in _OBJECT_FIELDS:
        if field_name == "repository" and isinstance(data.get(field_name), str):
            continue
        if field_name in data and not isinstance(data[field_name], dict):
            raise ManifestError(source, f"'{field_name}' must be an object")
    config = data.get("config") or {}
    for field_name in _CONFIG_OBJECT_FIELDS:
        if field_name in config and not isinstance(config[field_name], dict):
            raise ManifestError(source, f"'config.{field_name}' must be an object")
    return data


def load_manifest(file_path: str) -> Optional[dict]:
    """Load the manifest, returning None when the file does not exist."""
    if not os.path.isfile(file_path):
        return None
    with open(file_path, "r", encoding="utf-8") as f:
        return parse_manifest(f.read(), source=file_path)


def dump_manifest(data: dict) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


@contextmanager
def with_manifest_update(file_path: str):
    """Yield the manifest as a mutable dict and write it back if it changed.

    The manifest is read once on entry and written once on exit; an
    exception inside the block leaves the file untouched.
    """
    existing = load_manifest(file_path)
    original_text = dump_manifest(existing) if existing is not None else None
    handle = {} if existing is None else existing
    yield handle
    result = dump_manifest(handle)
    if result != original_text:
        atomic_write(file_path, result)


def declared_packages(manifest: Optional[dict]) -> Set[str]:
    """Names of every package declared in the manifest's dependency maps."""
    if not manifest:
        return set()
    names = set()
    for field_name in DEPENDENCY_FIELDS:
        names.update(manifest.get(field_name) or {})
    return names
