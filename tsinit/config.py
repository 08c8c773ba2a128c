"""tsinit configuration.

Typed settings for a single bootstrap run.  Settings use a Pydantic v2 model so
they are validated at construction time and can be assembled from environment
variables before CLI flags are layered on top.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .package_manager import PackageManagerKind

DEFAULT_DEV_DEPENDENCIES: list[str] = ["typescript", "tsx", "esbuild"]
DEFAULT_COMPILER_INIT = "npx tsc --init"

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Settings for one tsinit run.

    Instances are created once by the CLI entry point (usually via
    :meth:`from_env`) and handed to ``Bootstrapper``.
    """

    project_name: str = Field(default="", description="Name of the project folder to create")
    parent_dir: Path = Field(default=Path("."), description="Folder the project is created in")
    package_manager: PackageManagerKind | None = Field(
        default=None, description="Force a package manager instead of detecting one"
    )
    detect_package_manager: bool = Field(
        default=True, description="Detect the invoking package manager; npm only when off"
    )
    skip_install: bool = Field(
        default=False, description="Write the skeleton only; no installs, no tsconfig"
    )
    dev_dependencies: list[str] = Field(default_factory=lambda: list(DEFAULT_DEV_DEPENDENCIES))
    compiler_init_command: str = Field(default=DEFAULT_COMPILER_INIT)
    install_timeout: int | None = Field(
        default=None, ge=1, description="Per-command timeout in seconds; None waits forever"
    )
    root_dir_value: str = Field(default="./src", description="Value written to tsconfig rootDir")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def project_root(self) -> Path:
        """Absolute path of the project folder."""
        return (self.parent_dir / self.project_name).resolve()

    @property
    def manifest_path(self) -> Path:
        """Path to the generated ``package.json``."""
        return self.project_root / "package.json"

    @property
    def tsconfig_path(self) -> Path:
        """Path to the ``tsconfig.json`` written by the compiler initializer."""
        return self.project_root / "tsconfig.json"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, env: dict[str, str] | None = None) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            TSINIT_PROJECT_NAME, TSINIT_PARENT_DIR, TSINIT_PACKAGE_MANAGER,
            TSINIT_NO_DETECT, TSINIT_SKIP_INSTALL, TSINIT_INSTALL_TIMEOUT,
            TSINIT_COMPILER_INIT.
        """
        source = os.environ if env is None else env
        kwargs: dict[str, Any] = {}

        if source.get("TSINIT_PROJECT_NAME"):
            kwargs["project_name"] = source["TSINIT_PROJECT_NAME"]
        if source.get("TSINIT_PARENT_DIR"):
            kwargs["parent_dir"] = Path(source["TSINIT_PARENT_DIR"])
        if source.get("TSINIT_PACKAGE_MANAGER"):
            kwargs["package_manager"] = source["TSINIT_PACKAGE_MANAGER"].strip().lower()
        if source.get("TSINIT_NO_DETECT", "").strip().lower() in _TRUTHY:
            kwargs["detect_package_manager"] = False
        if source.get("TSINIT_SKIP_INSTALL", "").strip().lower() in _TRUTHY:
            kwargs["skip_install"] = True
        if source.get("TSINIT_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(source["TSINIT_INSTALL_TIMEOUT"])
        if source.get("TSINIT_COMPILER_INIT"):
            kwargs["compiler_init_command"] = source["TSINIT_COMPILER_INIT"]

        return cls(**kwargs)
