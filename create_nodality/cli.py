"""create-nodality command-line entry point.

Runs the whole scaffolding pipeline for one project:

1. Resolve the project name into an absolute path.
2. Refuse to continue if that path is already taken.
3. Write the starter files.
4. Install dependencies and build the library bundle.
5. Print the ready banner and usage hint.

Usage::

    create-nodality my-app
    python -m create_nodality my-app --package-manager pnpm
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from . import __version__
from .builder import BuildOrchestrator, ProcessRunner
from .config import Config
from .guard import check_project_available
from .models import BuildOutcome, ProjectSpec, ScaffoldError, UsageError
from .resolver import USAGE, resolve
from .scaffolder import ProjectGenerator
from .utils import print_banner, print_error, print_usage_hint


async def create_project(
    spec: ProjectSpec,
    config: Config | None = None,
    runner: ProcessRunner | None = None,
) -> list[BuildOutcome]:
    """Scaffold, install and build *spec*, then report success.

    Raises:
        PathExistsError: If ``spec.path`` is already taken.  Nothing is written.
        SubprocessFailure: If the install or build step fails.  The written
            files are left in place.
    """
    config = config or Config()
    check_project_available(spec)

    await ProjectGenerator(config).emit(spec)
    outcomes = await BuildOrchestrator(config, runner).run(spec)

    print_banner(f'Project "{spec.name}" is ready! 🎉')
    print_usage_hint(spec.name, config.package_manager)
    return outcomes


class _ArgumentParser(argparse.ArgumentParser):
    """Reports bad arguments as a :class:`UsageError` instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(
            f"{message}\n{USAGE}\n"
            "Names starting with '-' must follow '--', e.g. create-nodality -- -my-app"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="create-nodality",
        description="Create a new Nodality project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-nodality my-app\n"
            "  create-nodality my-app --package-manager pnpm\n"
            "  create-nodality -- -my-app\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Name of the folder to create in the current directory",
    )
    parser.add_argument(
        "--package-manager",
        default=None,
        help="Package manager executable (default: npm, or $CREATE_NODALITY_PACKAGE_MANAGER)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Sequence[str] | None = None,
    cwd: str | Path | None = None,
    runner: ProcessRunner | None = None,
) -> int:
    """CLI entry point.  Returns the process exit status."""
    try:
        args = build_parser().parse_args(argv)
        spec = resolve([args.project_name] if args.project_name is not None else [], cwd=cwd)
        config = Config.from_env(package_manager=args.package_manager)
        asyncio.run(create_project(spec, config, runner))
    except ScaffoldError as exc:
        print_error(str(exc))
        return 1
    except (OSError, ValueError) as exc:
        print_error(f"Error: {exc}")
        return 1
    return 0
