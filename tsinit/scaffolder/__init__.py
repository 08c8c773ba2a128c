"""tsinit scaffolder -- writes the TypeScript + esbuild project skeleton.

Quick usage::

    from tsinit.scaffolder import ProjectGenerator

    generator = ProjectGenerator("/tmp/my-app")
    project_path = await generator.generate()
"""

from tsinit.scaffolder.generator import (
    DEFAULT_SCRIPTS,
    GITIGNORE_PATTERNS,
    PackageManifest,
    ProjectGenerator,
    ScaffoldFile,
)
from tsinit.scaffolder.templates import TemplateRenderer

__all__ = [
    "DEFAULT_SCRIPTS",
    "GITIGNORE_PATTERNS",
    "PackageManifest",
    "ProjectGenerator",
    "ScaffoldFile",
    "TemplateRenderer",
]
