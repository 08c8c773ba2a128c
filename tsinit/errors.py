"""Exception hierarchy for tsinit.

Every error a bootstrap step can raise derives from ``TsinitError``.  The
orchestrator catches them once, prints a single error line and turns the
error's ``exit_code`` into the process exit status.
"""

from __future__ import annotations

from pathlib import Path


class TsinitError(Exception):
    """Base class for all tsinit failures."""

    exit_code: int = 1


class InvalidNameError(TsinitError):
    """Raised when a proposed project name cannot be used as a directory name."""

    exit_code = 2

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid project name: {reason}.")


class DirectoryExistsError(TsinitError):
    """Raised when the scaffold target (or its ``src`` folder) already exists."""

    exit_code = 3

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Folder already exists: {self.path}")


class InstallError(TsinitError):
    """Raised when a package manager or compiler command fails."""

    exit_code = 4

    def __init__(self, message: str, command: str = "", returncode: int | None = None) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(message)


class ConfigReadError(TsinitError):
    """Raised when a generated config file cannot be read."""

    exit_code = 5

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        detail = f": {reason}" if reason else ""
        super().__init__(f"Could not read {self.path}{detail}")


class ConfigWriteError(TsinitError):
    """Raised when a generated config file cannot be rewritten."""

    exit_code = 6

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        detail = f": {reason}" if reason else ""
        super().__init__(f"Could not write {self.path}{detail}")
