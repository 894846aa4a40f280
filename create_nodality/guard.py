"""Collision guard run before anything is written to disk."""

from __future__ import annotations

import os
from pathlib import Path

from .models import PathExistsError, ProjectSpec


def check_available(path: str | Path, name: str | None = None) -> None:
    """Fail if any filesystem entry already occupies *path*.

    Files, directories (empty or not) and symlinks, including dangling ones,
    are all treated as collisions.

    Raises:
        PathExistsError: If *path* is taken.
    """
    target = Path(path)
    if os.path.lexists(target):
        raise PathExistsError(name or target.name, target)


def check_project_available(spec: ProjectSpec) -> None:
    """:func:`check_available` for a resolved project."""
    check_available(spec.path, spec.name)
