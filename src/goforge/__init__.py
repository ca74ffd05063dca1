"""Utilities for starting new Go projects from a layout template.

The package clones the template repository, rewrites its module path to the
one chosen by the user, refreshes ``go.mod`` and ``go.sum`` through the Go
toolchain and removes the template's git history. The pipeline is available
programmatically through :class:`ProjectScaffolder` and via the ``goforge``
command line interface.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ProjectRequest, ScaffoldSettings
from .errors import CommandError, ManifestError, ScaffoldError
from .naming import folder_name
from .scaffold import ProjectScaffolder

__all__ = [
    "CommandError",
    "ManifestError",
    "ProjectRequest",
    "ProjectScaffolder",
    "ScaffoldError",
    "ScaffoldSettings",
    "folder_name",
]
