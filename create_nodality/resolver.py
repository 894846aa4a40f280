"""Turns the command-line arguments into a :class:`ProjectSpec`."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from .models import ProjectSpec, UsageError

USAGE = "Usage: create-nodality <project-name>"

_SEPARATORS = ("/", "\\")
_RESERVED_NAMES = (".", "..")


def resolve(argv: Sequence[str], cwd: str | Path | None = None) -> ProjectSpec:
    """Resolve the requested project from positional arguments.

    The first element of *argv* is taken verbatim as the project name and
    joined onto *cwd* (the process working directory by default).

    Raises:
        UsageError: If no name was given, or the name is not a single path
            component inside *cwd*.
    """
    if not argv or not argv[0]:
        raise UsageError(USAGE)

    name = argv[0]
    _validate_name(name)

    base = Path(cwd) if cwd is not None else Path(os.getcwd())
    return ProjectSpec(name=name, path=(base / name).absolute())


def _validate_name(name: str) -> None:
    """Reject names that would create the project outside the working directory."""
    if name in _RESERVED_NAMES or any(sep in name for sep in _SEPARATORS):
        raise UsageError(
            f"Invalid project name '{name}': must be a single folder name, "
            "not a path.\n" + USAGE
        )
    if any(ord(ch) < 32 or ord(ch) == 127 for ch in name):
        raise UsageError(
            f"Invalid project name {name!r}: control characters are not allowed.\n" + USAGE
        )
