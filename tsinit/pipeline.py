"""tsinit bootstrap orchestrator.

Runs the bootstrap sequence for a new TypeScript project:

1. Resolve the package manager (explicit, detected, or npm-only).
2. Obtain and validate the project name.
3. Scaffold ``<name>/`` with ``src/main.ts``, ``package.json``,
   ``esbuild.config.cjs`` and ``.gitignore``.
4. Install the dev toolchain and run the compiler initializer.
5. Repair the manifest's dependency maps and patch ``tsconfig.json``.
6. Print the available commands.

Usage::

    tsinit
    tsinit my-app --package-manager pnpm
    python -m tsinit my-app -d ~/code --skip-install
"""

from __future__ import annotations

import asyncio
import sys
import traceback
from collections.abc import Mapping
from pathlib import Path

from rich.panel import Panel
from rich.prompt import Prompt

from .config import Config
from .errors import TsinitError
from .installer import install
from .package_manager import (
    CommandTable,
    PackageManagerKind,
    get_commands,
    resolve_package_manager,
)
from .patcher import ensure_dependency_keys, patch_tsconfig
from .scaffolder import ProjectGenerator
from .utils import (
    console,
    err_console,
    print_error,
    print_step,
    print_success,
    print_summary_table,
)
from .validator import validate_project_name


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class Bootstrapper:
    """Sequences one tsinit run.

    Every step receives the project root explicitly; the process working
    directory is never changed.

    Attributes:
        config: Settings for this run.
        env: Environment consulted for package manager hints.
    """

    def __init__(self, config: Config, env: Mapping[str, str] | None = None) -> None:
        self.config = config
        self.env = env

    async def run(self, name: str | None = None) -> int:
        """Execute the bootstrap sequence.

        Any ``TsinitError`` aborts the remaining steps and is reported as a
        single error line.  Files written before the failure are left on
        disk.

        Returns:
            ``0`` on success, otherwise the failing error's exit code.
        """
        try:
            await self._run(name)
        except TsinitError as exc:
            print_error(str(exc))
            return exc.exit_code
        except Exception as exc:
            print_error(str(exc) or exc.__class__.__name__)
            err_console.print(traceback.format_exc(), style="dim", markup=False)
            return 1
        return 0

    async def _run(self, name: str | None) -> Path:
        kind = resolve_package_manager(self.config, self.env)
        commands = get_commands(kind)
        console.print(f"[magenta]Using package manager: {kind.value}[/magenta]")

        project_name = validate_project_name(await self._ask_name(name))
        self.config = self.config.model_copy(update={"project_name": project_name})
        root = self.config.project_root

        print_step("Scaffolding")
        await ProjectGenerator(root).generate()

        if self.config.skip_install:
            console.print("[dim]Skipping dependency installation.[/dim]")
        else:
            print_step("Installing")
            await install(
                kind,
                commands,
                root,
                packages=self.config.dev_dependencies,
                init_command=self.config.compiler_init_command,
                timeout=self.config.install_timeout,
            )
            ensure_dependency_keys(self.config.manifest_path)
            patch_tsconfig(self.config.tsconfig_path, self.config.root_dir_value)

        self._print_final_summary(root, commands)
        return root

    async def _ask_name(self, name: str | None) -> str:
        """Return the project name from the argument, config or a prompt."""
        answer = name if name is not None else self.config.project_name
        if not answer:
            try:
                answer = await asyncio.to_thread(
                    Prompt.ask, "[cyan]Enter project name[/cyan]", console=console
                )
            except EOFError:
                console.print()
                answer = ""
        return (answer or "").strip()

    def _cd_target(self, root: Path) -> str:
        """Return the path a user should ``cd`` into from the current directory."""
        if self.config.parent_dir == Path("."):
            return self.config.project_name
        try:
            return str(root.relative_to(Path.cwd().resolve()))
        except ValueError:
            return str(root)

    def _print_final_summary(self, root: Path, commands: CommandTable) -> None:
        print_success(f'Project "{self.config.project_name}" created successfully!')
        console.print(
            Panel(
                f"[bold]cd {self._cd_target(root)}[/bold]",
                title="To get started",
                border_style="green",
                expand=False,
            )
        )
        print_summary_table(
            {
                f"{commands.run} dev": "Start development server",
                f"{commands.run} build": "Build the project",
                f"{commands.run} start": "Run bundled output",
                f"{commands.run} type": "Check TypeScript types",
            },
            title="Available commands",
        )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_config(args, base: Config | None = None) -> Config:
    """Layer parsed CLI arguments on top of *base* (env-derived by default)."""
    config = base if base is not None else Config.from_env()
    updates: dict[str, object] = {}
    if args.directory is not None:
        updates["parent_dir"] = Path(args.directory)
    if args.package_manager is not None:
        updates["package_manager"] = PackageManagerKind(args.package_manager)
    if args.no_detect:
        updates["detect_package_manager"] = False
    if args.skip_install:
        updates["skip_install"] = True
    return config.model_copy(update=updates)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``tsinit`` / ``python -m tsinit``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="tsinit",
        description="Bootstrap a TypeScript + esbuild project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  tsinit\n"
            "  tsinit my-app --package-manager pnpm\n"
            "  tsinit my-app -d ~/code --skip-install\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project name (prompted for if omitted)",
    )
    parser.add_argument(
        "--directory", "-d",
        default=None,
        help="Folder to create the project in (default: current directory)",
    )
    parser.add_argument(
        "--package-manager",
        choices=[k.value for k in PackageManagerKind],
        default=None,
        help="Use this package manager instead of detecting one",
    )
    parser.add_argument(
        "--no-detect",
        action="store_true",
        help="Skip package manager detection and always use npm",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Only write the skeleton; do not install or create tsconfig.json",
    )

    args = parser.parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    try:
        exit_code = asyncio.run(Bootstrapper(config).run(args.name))
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user.[/yellow]")
        sys.exit(130)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
