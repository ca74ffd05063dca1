"""Path and module identifier helpers used throughout the project."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

__all__ = ["folder_name", "is_source_file"]


_SEPARATORS = re.compile(r"[/\\]+")


def folder_name(identifier: str) -> str:
    """Return the local directory name for a module ``identifier``.

    The folder is the final path segment of the identifier, so a fully
    qualified module path such as ``github.com/acme/widget`` maps to
    ``widget``. Trailing separators are ignored and both ``/`` and ``\\`` are
    treated as separators.
    """

    segments = [segment for segment in _SEPARATORS.split(identifier.strip()) if segment]
    if not segments:
        raise ValueError(f"cannot derive a folder name from {identifier!r}")

    candidate = segments[-1]
    if candidate in {".", ".."}:
        raise ValueError(f"{identifier!r} does not end in a usable folder name")
    return candidate


def is_source_file(path: str | Path, suffixes: Iterable[str]) -> bool:
    """Return ``True`` when ``path`` carries one of ``suffixes``."""

    return Path(path).suffix in set(suffixes)
