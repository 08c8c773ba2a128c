"""Shared pytest fixtures for the tsinit test suite.

Provides reusable fixtures for:
- Temporary parent directories for generated projects
- Package manager environment hints
- A sample ``tsc --init`` output
- A fake ``run_command`` that stands in for npm/yarn/pnpm and ``tsc``
"""

from __future__ import annotations

import json
import shlex
import textwrap
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty folder that projects are created in (auto-cleanup)."""
    parent = tmp_path / "workspace"
    parent.mkdir()
    yield parent


# ---------------------------------------------------------------------------
# Environment hints
# ---------------------------------------------------------------------------

@pytest.fixture
def yarn_env() -> dict[str, str]:
    """Environment as seen under ``yarn create``."""
    return {
        "npm_execpath": "/usr/lib/node_modules/yarn/bin/yarn.js",
        "npm_config_user_agent": "yarn/1.22.22 npm/? node/v20.11.0 linux x64",
    }


@pytest.fixture
def pnpm_env() -> dict[str, str]:
    """Environment as seen under ``pnpm create``."""
    return {
        "npm_execpath": "/home/user/.local/share/pnpm/pnpm.cjs",
        "npm_config_user_agent": "pnpm/9.1.0 npm/? node/v20.11.0 linux x64",
    }


@pytest.fixture
def npx_env() -> dict[str, str]:
    """Environment as seen under ``npx`` launched from a yarn script."""
    return {
        "npm_execpath": "/usr/lib/node_modules/npm/bin/npx-cli.js",
        "npm_config_user_agent": "yarn/1.22.22 npm/? node/v20.11.0 linux x64",
    }


# ---------------------------------------------------------------------------
# tsconfig.json
# ---------------------------------------------------------------------------

SAMPLE_TSCONFIG = textwrap.dedent("""\
    {
      "compilerOptions": {
        /* Visit https://aka.ms/tsconfig to read more about this file */

        /* Modules */
        "module": "commonjs",                                /* Specify what module code is generated. */
        // "rootDir": "./",                                  /* Specify the root folder within your source files. */
        // "moduleResolution": "node10",                     /* Specify how TypeScript looks up a file from a given module specifier. */

        /* Emit */
        // "outDir": "./",                                   /* Specify an output folder for all emitted files. */
        "esModuleInterop": true,                             /* Emit additional JavaScript to ease support for importing CommonJS modules. */
        "strict": true,                                      /* Enable all strict type-checking options. */
        "skipLibCheck": true                                 /* Skip type checking all .d.ts files. */
      }
    }
""")


@pytest.fixture
def sample_tsconfig_text() -> str:
    """A trimmed-down ``tsc --init`` output with a commented ``rootDir``."""
    return SAMPLE_TSCONFIG


# ---------------------------------------------------------------------------
# Mock subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_toolchain():
    """Factory for an ``AsyncMock`` that replaces ``run_command``.

    The mock records every call.  ``tsc --init`` writes ``SAMPLE_TSCONFIG``
    into the call's ``cwd``.  An ``add`` / ``install`` call mimics pnpm by
    dropping the empty dependency maps from ``package.json``.

    Usage::

        def test_install(fake_toolchain):
            runner = fake_toolchain(fail_on="tsc")
    """

    def factory(
        fail_on: str | None = None,
        returncode: int = 1,
        strip_dependency_maps: bool = False,
    ) -> AsyncMock:
        async def _run(cmd: Any, cwd: Any = None, **kwargs: Any) -> tuple[int, str, str]:
            argv = cmd if isinstance(cmd, list) else shlex.split(cmd)
            joined = " ".join(argv)
            if fail_on and fail_on in joined:
                return (returncode, "", "")
            root = Path(cwd) if cwd else Path.cwd()
            if "tsc" in argv and "--init" in argv:
                (root / "tsconfig.json").write_text(SAMPLE_TSCONFIG, encoding="utf-8")
            elif strip_dependency_maps:
                manifest_path = root / "package.json"
                manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
                manifest.pop("dependencies", None)
                manifest.pop("devDependencies", None)
                manifest_path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
            return (0, "", "")

        return AsyncMock(side_effect=_run)

    return factory
