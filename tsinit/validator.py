"""Project name validation.

A project name becomes a directory on disk, so it must be usable as a folder
name on every platform the generated project might be checked out on.
"""

from __future__ import annotations

import re

from .errors import InvalidNameError

MAX_NAME_LENGTH = 255

RESERVED_NAMES: frozenset[str] = frozenset(
    ["con", "prn", "aux", "nul"]
    + [f"com{i}" for i in range(1, 10)]
    + [f"lpt{i}" for i in range(1, 10)]
)

_FORBIDDEN_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def validate_project_name(name: str) -> str:
    """Check *name* and return it unchanged if it is usable.

    Raises:
        InvalidNameError: If the name is empty or blank, longer than
            ``MAX_NAME_LENGTH``, contains a character forbidden in Windows
            file names (or a control character), or is a reserved device name.
    """
    if not name or not name.strip():
        raise InvalidNameError(name, "name is empty")
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidNameError(name, f"name is longer than {MAX_NAME_LENGTH} characters")
    if _FORBIDDEN_CHARS.search(name):
        raise InvalidNameError(name, "name contains a forbidden character")
    if name.lower() in RESERVED_NAMES:
        raise InvalidNameError(name, "name is reserved by the operating system")
    return name
