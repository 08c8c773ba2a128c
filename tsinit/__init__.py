"""tsinit -- bootstrap a TypeScript + esbuild project from the command line."""

from tsinit.config import Config
from tsinit.errors import (
    ConfigReadError,
    ConfigWriteError,
    DirectoryExistsError,
    InstallError,
    InvalidNameError,
    TsinitError,
)
from tsinit.pipeline import Bootstrapper

__version__ = "0.1.0"

__all__ = [
    "Bootstrapper",
    "Config",
    "ConfigReadError",
    "ConfigWriteError",
    "DirectoryExistsError",
    "InstallError",
    "InvalidNameError",
    "TsinitError",
    "__version__",
]
