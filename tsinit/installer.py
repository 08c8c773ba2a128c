"""Dev-dependency installation and compiler initialisation.

Runs the resolved package manager's add-dev command, then the TypeScript
compiler initializer, inside the new project.  Both run with the parent's
standard streams so their output reaches the terminal as it happens.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from pathlib import Path

from .errors import InstallError
from .package_manager import CommandTable, PackageManagerKind
from .utils import console, format_command, run_command

DEV_DEPENDENCIES: tuple[str, ...] = ("typescript", "tsx", "esbuild")
COMPILER_INIT_COMMAND = "npx tsc --init"


async def install(
    kind: PackageManagerKind,
    commands: CommandTable,
    cwd: str | Path,
    *,
    packages: Sequence[str] = DEV_DEPENDENCIES,
    init_command: str = COMPILER_INIT_COMMAND,
    timeout: int | None = None,
) -> None:
    """Install the dev toolchain and generate ``tsconfig.json`` in *cwd*.

    Raises:
        InstallError: If either command is missing, exits non-zero or times
            out.  Nothing is retried.
    """
    kind = PackageManagerKind(kind)
    console.print(f"[magenta]Installing dependencies with {kind.value}...[/magenta]")
    await _run_checked([*shlex.split(commands.add_dev), *packages], cwd, timeout)

    console.print("[magenta]Initializing tsconfig.json...[/magenta]")
    await _run_checked(shlex.split(init_command), cwd, timeout)


async def _run_checked(argv: list[str], cwd: str | Path, timeout: int | None) -> None:
    """Run *argv* with inherited streams; raise ``InstallError`` on failure."""
    command = format_command(argv)
    try:
        returncode, _, stderr = await run_command(argv, cwd=cwd, timeout=timeout, capture=False)
    except FileNotFoundError as exc:
        raise InstallError(
            f"Command not found: {argv[0]}. Is it installed and in your PATH?",
            command=command,
        ) from exc

    if returncode == -1 and stderr:
        raise InstallError(stderr, command=command, returncode=returncode)
    if returncode != 0:
        raise InstallError(
            f"Command failed with exit code {returncode}: {command}",
            command=command,
            returncode=returncode,
        )
