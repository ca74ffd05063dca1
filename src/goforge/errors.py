"""Custom exception types raised while creating a project."""

from __future__ import annotations

from typing import Sequence


class ScaffoldError(RuntimeError):
    """Raised when a pipeline stage cannot complete."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ManifestError(ScaffoldError):
    """Raised when ``go.mod`` is missing or has no module directive."""


class CommandError(ScaffoldError):
    """Raised when an external command exits unsuccessfully."""

    def __init__(self, args: Sequence[str], returncode: int, output: str = "") -> None:
        self.command = tuple(args)
        self.returncode = returncode
        self.output = output
        super().__init__(f"{' '.join(self.command)} failed with exit code {returncode}")


__all__ = ["CommandError", "ManifestError", "ScaffoldError"]
