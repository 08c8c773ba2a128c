"""In-place edits of files generated by external tools.

``tsc --init`` writes a ``tsconfig.json`` full of commented-out options, so it
is not strict JSON and cannot be round-tripped through a parser without losing
those comments.  The ``rootDir`` option is therefore switched on with a single
line-anchored substitution that leaves every other byte alone.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

from .errors import ConfigReadError, ConfigWriteError
from .utils import print_warning

ROOT_DIR_PATTERN = re.compile(r'//\s*"rootDir":\s*".*?",?')


# ---------------------------------------------------------------------------
# tsconfig.json
# ---------------------------------------------------------------------------


def patch_tsconfig(path: str | Path, root_dir: str = "./src") -> bool:
    """Uncomment the ``rootDir`` option in *path* and point it at *root_dir*.

    Only the first commented-out ``rootDir`` line is replaced.  When no such
    line exists the file is left untouched and a warning is printed.

    Returns:
        ``True`` if the file was rewritten, ``False`` if nothing matched.

    Raises:
        ConfigReadError: If the file cannot be read or is not UTF-8.
        ConfigWriteError: If the patched content cannot be written back.
    """
    file_path = Path(path)
    content = _read_text(file_path)

    replacement = json.dumps({"rootDir": root_dir})[1:-1] + ","
    patched, count = ROOT_DIR_PATTERN.subn(lambda _m: replacement, content, count=1)
    if count == 0:
        print_warning(
            f"No commented-out \"rootDir\" option found in {file_path}; left unchanged."
        )
        return False

    _write_text(file_path, patched)
    return True


# ---------------------------------------------------------------------------
# package.json
# ---------------------------------------------------------------------------


def ensure_dependency_keys(manifest_path: str | Path) -> bool:
    """Make sure ``dependencies`` and ``devDependencies`` are objects.

    Some package managers drop empty dependency maps when they rewrite the
    manifest; the bundler config reads both keys, so they are put back.

    Returns:
        ``True`` if the manifest had to be rewritten.
    """
    file_path = Path(manifest_path)
    raw = _read_text(file_path)
    try:
        manifest = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigReadError(file_path, f"invalid JSON ({exc.msg})") from exc
    if not isinstance(manifest, dict):
        raise ConfigReadError(file_path, "expected a JSON object")

    changed = False
    for key in ("dependencies", "devDependencies"):
        if not isinstance(manifest.get(key), dict):
            manifest[key] = {}
            changed = True

    if changed:
        _write_text(file_path, json.dumps(manifest, indent=2) + "\n")
    return changed


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _read_text(path: Path) -> str:
    """Read *path* as UTF-8 without translating line endings."""
    try:
        with open(path, encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(path, str(exc)) from exc


def _write_text(path: Path, content: str) -> None:
    """Overwrite *path* with *content*, line endings as given."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        raise ConfigWriteError(path, str(exc)) from exc
