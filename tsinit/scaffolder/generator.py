"""Project skeleton generator.

Takes a target folder and writes the fixed TypeScript + esbuild skeleton into
it: an entry-point stub, ``package.json``, ``esbuild.config.cjs`` and
``.gitignore``.  The target must not exist yet; the generator never merges
into or overwrites an existing project.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..errors import DirectoryExistsError
from ..utils import print_created
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Skeleton constants
# ---------------------------------------------------------------------------

SOURCE_DIR = "src"
ENTRY_POINT = "src/main.ts"
BUNDLE_PATH = "dist/bundle.cjs"
MANIFEST_FILE = "package.json"
BUNDLER_CONFIG_FILE = "esbuild.config.cjs"
IGNORE_FILE = ".gitignore"
BUNDLE_TARGET = "ES2015"
BUNDLE_PLATFORM = "node"
GREETING = "Hello World!"

DEFAULT_SCRIPTS: dict[str, str] = {
    "start": f"node {BUNDLE_PATH}",
    "dev": f"tsx --watch {ENTRY_POINT}",
    "build": f"node {BUNDLER_CONFIG_FILE}",
    "type": "tsc --watch --noEmit",
}

GITIGNORE_PATTERNS: tuple[str, ...] = (
    "node_modules/",
    "dist/",
    ".env",
    "*.log",
    ".vscode/",
    ".idea/",
    ".DS_Store",
    "*.tsbuildinfo",
)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ScaffoldFile(BaseModel):
    """One file of the skeleton: a root-relative POSIX path and its content."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str


class PackageManifest(BaseModel):
    """The ``package.json`` written into a fresh project."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    version: str = "1.0.0"
    module_type: str = Field(default="module", alias="type")
    main: str = ENTRY_POINT
    scripts: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_SCRIPTS))
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")
    license: str = "MIT"

    def to_json(self) -> str:
        """Serialise with the ``package.json`` key names and 2-space indent."""
        return json.dumps(self.model_dump(by_alias=True), indent=2) + "\n"


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes the project skeleton into *root*.

    The skeleton is a fixed list of ``ScaffoldFile`` objects built by
    :meth:`build_files`; :meth:`generate` creates the folders and writes
    them.  Nothing is rolled back if a write fails part-way.
    """

    def __init__(self, root: str | Path, renderer: TemplateRenderer | None = None) -> None:
        self.root = Path(root)
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def build_files(self) -> list[ScaffoldFile]:
        """Return the skeleton files in the order they are written."""
        context = self._build_context()
        manifest = PackageManifest(name=self.root.name)
        return [
            ScaffoldFile(path=ENTRY_POINT, content=self.renderer.render("src/main.ts.j2", context)),
            ScaffoldFile(path=MANIFEST_FILE, content=manifest.to_json()),
            ScaffoldFile(
                path=BUNDLER_CONFIG_FILE,
                content=self.renderer.render("esbuild.config.cjs.j2", context),
            ),
            ScaffoldFile(path=IGNORE_FILE, content=self.renderer.render(".gitignore.j2", context)),
        ]

    async def generate(self) -> Path:
        """Create the project folders and write every skeleton file.

        Returns:
            The project root.

        Raises:
            DirectoryExistsError: If the root or its ``src`` folder exists.
        """
        files = self.build_files()

        await asyncio.to_thread(_create_folder, self.root)
        await asyncio.to_thread(_create_folder, self.root / SOURCE_DIR)

        for scaffold_file in files:
            target = self.root / scaffold_file.path
            await asyncio.to_thread(_write_file, target, scaffold_file.content)
            print_created(target)

        return self.root

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, object]:
        """Build the Jinja2 template context."""
        return {
            "project_name": self.root.name,
            "greeting": GREETING,
            "manifest_file": MANIFEST_FILE,
            "bundle_path": BUNDLE_PATH,
            "platform": BUNDLE_PLATFORM,
            "target": BUNDLE_TARGET,
            "ignore_patterns": GITIGNORE_PATTERNS,
        }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _create_folder(path: Path) -> None:
    """Create exactly one new folder; refuse if anything is already there."""
    if path.exists():
        raise DirectoryExistsError(path)
    try:
        path.mkdir()
    except FileExistsError as exc:
        raise DirectoryExistsError(path) from exc
    print_created(path, label="Folder created:")


def _write_file(path: Path, content: str) -> None:
    """Write *content* verbatim (no newline translation)."""
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(content)
