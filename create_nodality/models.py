"""Pydantic v2 models and error types for the create-nodality scaffolder.

Defines the transient values that flow through the pipeline: the resolved
project, the files emitted for it, the ``package.json`` manifest, and the
outcome of each external build step.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for every failure that terminates a scaffolding run."""


class UsageError(ScaffoldError):
    """Raised when no usable project name was supplied."""


class PathExistsError(ScaffoldError):
    """Raised when the target project path is already occupied."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Folder {name} already exists.")


class SubprocessFailure(ScaffoldError):
    """Raised when the install or build subprocess exits non-zero."""

    def __init__(self, outcome: "BuildOutcome", command: list[str]) -> None:
        self.outcome = outcome
        self.command = command
        super().__init__(
            f"Step '{outcome.step.value}' failed: "
            f"`{' '.join(command)}` exited with code {outcome.exit_code}"
        )


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class BuildStep(str, Enum):
    """External steps run after the files are written, in order."""
    INSTALL = "install"
    BUILD = "build"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ProjectSpec(BaseModel):
    """The project requested on the command line."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Raw project name as supplied")
    path: Path = Field(..., description="Absolute path of the project root")


class FileArtifact(BaseModel):
    """A single generated file, relative to the project root."""

    model_config = ConfigDict(frozen=True)

    relative_path: str = Field(..., description="POSIX-style path, e.g. 'src/app.js'")
    content: str = Field(default="")


class ManifestDescriptor(BaseModel):
    """The ``package.json`` written into the generated project."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    version: str = Field(default="1.0.0")
    type: str = Field(default="module", description="Module-type marker")
    scripts: dict[str, str] = Field(default_factory=dict)
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")

    def to_json(self) -> str:
        """Serialise with the field names and ordering ``npm`` expects."""
        return self.model_dump_json(by_alias=True, indent=2)


class BuildOutcome(BaseModel):
    """Exit status of one external build step."""

    model_config = ConfigDict(frozen=True)

    step: BuildStep
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
