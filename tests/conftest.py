"""Shared pytest fixtures for the create-nodality test suite.

Provides reusable fixtures for:
- A clean environment (no ``CREATE_NODALITY_*`` overrides)
- Default configuration and resolved project specs
- A recording process runner so no real package manager is spawned
"""

from __future__ import annotations

from pathlib import Path

import pytest

from create_nodality.config import Config
from create_nodality.models import ProjectSpec


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip configuration overrides inherited from the developer's shell."""
    monkeypatch.delenv("CREATE_NODALITY_PACKAGE_MANAGER", raising=False)
    monkeypatch.delenv("CREATE_NODALITY_PORT", raising=False)


# ---------------------------------------------------------------------------
# Config & project
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> Config:
    """Default scaffolder configuration."""
    return Config()


@pytest.fixture
def demo_spec(tmp_path: Path) -> ProjectSpec:
    """A ``demo`` project rooted in a fresh temporary directory."""
    return ProjectSpec(name="demo", path=tmp_path / "demo")


# ---------------------------------------------------------------------------
# Mock process runner
# ---------------------------------------------------------------------------

class RecordingRunner:
    """ProcessRunner double that records commands and replays exit codes.

    Exit codes are consumed in order; once exhausted every command succeeds.
    """

    def __init__(self, exit_codes: list[int] | None = None) -> None:
        self.exit_codes = list(exit_codes or [])
        self.calls: list[tuple[list[str], Path]] = []

    async def run(self, command: list[str], cwd: Path) -> int:
        self.calls.append((list(command), Path(cwd)))
        if self.exit_codes:
            return self.exit_codes.pop(0)
        return 0

    @property
    def commands(self) -> list[list[str]]:
        return [command for command, _ in self.calls]


@pytest.fixture
def runner() -> RecordingRunner:
    """A runner where every command succeeds."""
    return RecordingRunner()


@pytest.fixture
def make_runner():
    """Factory for runners that replay the given exit codes."""
    def _make(*exit_codes: int) -> RecordingRunner:
        return RecordingRunner(list(exit_codes))
    return _make
