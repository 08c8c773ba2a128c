"""Package manager detection and command tables.

When tsinit is launched through ``npx``, ``yarn create`` or ``pnpm create``
the launching tool leaves hints in the environment.  This module turns those
hints into a ``PackageManagerKind`` and maps each kind to the commands used to
install dependencies and run scripts.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from .config import Config

EXEC_PATH_VAR = "npm_execpath"
USER_AGENT_VAR = "npm_config_user_agent"


class PackageManagerKind(str, Enum):
    """Package managers tsinit knows how to drive."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


class CommandTable(BaseModel):
    """Command prefixes for one package manager."""

    model_config = ConfigDict(frozen=True)

    install: str
    add_dev: str
    run: str


_COMMANDS: dict[PackageManagerKind, CommandTable] = {
    PackageManagerKind.NPM: CommandTable(
        install="npm install", add_dev="npm install --save-dev", run="npm run"
    ),
    PackageManagerKind.YARN: CommandTable(install="yarn", add_dev="yarn add -D", run="yarn"),
    PackageManagerKind.PNPM: CommandTable(
        install="pnpm install", add_dev="pnpm add -D", run="pnpm"
    ),
}


def detect_package_manager(env: Mapping[str, str] | None = None) -> PackageManagerKind:
    """Classify the invoking package manager from environment hints.

    The npm exec-path hint is checked first so that ``npx`` run from inside a
    yarn or pnpm script still resolves to npm.  Falls back to npm when no hint
    is present.
    """
    if env is None:
        env = os.environ
    exec_path = env.get(EXEC_PATH_VAR, "") or ""
    user_agent = env.get(USER_AGENT_VAR, "") or ""

    if "npm-cli.js" in exec_path or "npx" in exec_path:
        return PackageManagerKind.NPM
    if user_agent.startswith("yarn"):
        return PackageManagerKind.YARN
    if user_agent.startswith("pnpm"):
        return PackageManagerKind.PNPM
    return PackageManagerKind.NPM


def get_commands(kind: PackageManagerKind) -> CommandTable:
    """Return the command table for *kind*."""
    return _COMMANDS[PackageManagerKind(kind)]


def resolve_package_manager(
    config: Config, env: Mapping[str, str] | None = None
) -> PackageManagerKind:
    """Pick the package manager for a run.

    An explicit ``config.package_manager`` wins.  With detection switched off
    the single-manager behaviour applies and npm is always used.
    """
    if config.package_manager is not None:
        return PackageManagerKind(config.package_manager)
    if not config.detect_package_manager:
        return PackageManagerKind.NPM
    return detect_package_manager(env)
