"""Runs the package manager against a freshly generated project.

Installs the declared dependencies, then runs the project's ``build`` script
so the library bundle exists before the user first opens the project.  Each
step must succeed before the next one starts.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Protocol

from .config import Config
from .models import BuildOutcome, BuildStep, ProjectSpec, SubprocessFailure
from .utils import format_duration, print_step, print_success, run_command


class ProcessRunner(Protocol):
    """Runs one external command to completion and reports its exit status."""

    async def run(self, command: list[str], cwd: Path) -> int: ...


class SubprocessRunner:
    """Default runner: spawns the command with the terminal's streams inherited."""

    async def run(self, command: list[str], cwd: Path) -> int:
        return await run_command(command, cwd=cwd)


class BuildOrchestrator:
    """Drives the ``install`` then ``build`` steps for a generated project."""

    _MESSAGES: dict[BuildStep, str] = {
        BuildStep.INSTALL: "Installing dependencies...",
        BuildStep.BUILD: "Building {library} bundle...",
    }

    def __init__(self, config: Config | None = None, runner: ProcessRunner | None = None) -> None:
        self.config = config or Config()
        self.runner = runner or SubprocessRunner()

    def command_for(self, step: BuildStep) -> list[str]:
        """Return the package-manager command line for *step*."""
        if step is BuildStep.INSTALL:
            return self.config.install_command
        return self.config.build_command

    async def run(self, spec: ProjectSpec) -> list[BuildOutcome]:
        """Run both steps inside ``spec.path``.

        Returns:
            One :class:`BuildOutcome` per step, both successful.

        Raises:
            SubprocessFailure: On the first step that exits non-zero; later
                steps are not attempted.
        """
        outcomes: list[BuildOutcome] = []
        for step in (BuildStep.INSTALL, BuildStep.BUILD):
            outcomes.append(await self.run_step(step, spec.path))
        return outcomes

    async def run_step(self, step: BuildStep, cwd: Path) -> BuildOutcome:
        """Announce *step*, run its command in *cwd* and report how long it took.

        Raises:
            SubprocessFailure: If the command exits non-zero.
        """
        command = self.command_for(step)
        print_step(self._MESSAGES[step].format(library=self.config.library_name.capitalize()))

        start = time.monotonic()
        exit_code = await self.runner.run(command, cwd)
        outcome = BuildOutcome(step=step, exit_code=exit_code)
        if not outcome.ok:
            raise SubprocessFailure(outcome, command)

        print_success(f"{step.value} finished in {format_duration(time.monotonic() - start)}")
        return outcome
