"""Literal module path substitution across a project tree."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from .errors import ScaffoldError
from .naming import is_source_file

LOGGER = logging.getLogger(__name__)

__all__ = ["RewriteReport", "iter_source_files", "replace_in_file", "replace_in_tree"]


@dataclass(slots=True)
class RewriteReport:
    """Files visited and modified by :func:`replace_in_tree`."""

    scanned: list[Path] = field(default_factory=list)
    changed: list[Path] = field(default_factory=list)


def _raise_walk_error(exc: OSError) -> None:
    raise exc


def iter_source_files(root: str | Path, suffixes: Iterable[str]) -> Iterator[Path]:
    """Yield files under ``root`` matching ``suffixes`` in a stable order."""

    wanted = tuple(suffixes)
    for directory, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(directory, filename)
            if is_source_file(path, wanted) and not path.is_dir():
                yield path


def replace_in_file(path: str | Path, old: bytes, new: bytes) -> bool:
    """Replace every occurrence of ``old`` with ``new`` inside ``path``.

    The file is rewritten in place, which keeps its permission bits. Returns
    ``True`` when the contents changed.
    """

    path = Path(path)
    data = path.read_bytes()
    updated = data.replace(old, new)
    if updated == data:
        return False
    with path.open("r+b") as handle:
        handle.write(updated)
        handle.truncate()
    return True


def replace_in_tree(
    root: str | Path,
    old: str,
    new: str,
    suffixes: Iterable[str] = (".go",),
) -> RewriteReport:
    """Substitute ``old`` with ``new`` in every source file below ``root``.

    Replacement is a plain substring match, so occurrences inside comments,
    string literals or longer identifiers are rewritten too. The walk stops at
    the first file that cannot be read or written; files already rewritten
    stay rewritten.
    """

    if not old:
        raise ValueError("old module path must not be empty")

    old_bytes = old.encode("utf-8")
    new_bytes = new.encode("utf-8")
    report = RewriteReport()
    try:
        for path in iter_source_files(root, suffixes):
            report.scanned.append(path)
            try:
                if replace_in_file(path, old_bytes, new_bytes):
                    report.changed.append(path)
                    LOGGER.debug("rewrote %s", path)
            except OSError as exc:
                raise ScaffoldError(f"walk file do replace error: {path}: {exc}") from exc
    except OSError as exc:
        raise ScaffoldError(f"walk file do replace error: {exc}") from exc

    LOGGER.info(
        "replaced %s with %s in %d of %d files", old, new, len(report.changed), len(report.scanned)
    )
    return report
