"""External command execution."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .errors import CommandError

LOGGER = logging.getLogger(__name__)

__all__ = ["CommandResult", "CommandRunner", "SubprocessRunner"]


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a finished command with stdout and stderr combined."""

    args: tuple[str, ...]
    returncode: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def check(self) -> "CommandResult":
        """Return ``self`` or raise :class:`CommandError` on a non-zero exit."""

        if not self.ok:
            raise CommandError(self.args, self.returncode, self.output)
        return self


class CommandRunner(ABC):
    """Run an executable and capture its output."""

    @abstractmethod
    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        *,
        cwd: str | Path | None = None,
    ) -> CommandResult:
        """Run ``command`` with ``args`` inside ``cwd`` and wait for it to exit."""


class SubprocessRunner(CommandRunner):
    """Blocking :mod:`subprocess` backed runner. No timeout is applied."""

    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        *,
        cwd: str | Path | None = None,
    ) -> CommandResult:
        argv = (command, *args)
        LOGGER.debug("running %s (cwd=%s)", " ".join(argv), cwd or ".")
        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as exc:
            # executable missing or not runnable; mirror the shell's exit code
            LOGGER.debug("could not start %s: %s", command, exc)
            return CommandResult(argv, 127, str(exc))

        output = completed.stdout or ""
        if output:
            LOGGER.debug("%s output:\n%s", command, output.rstrip())
        return CommandResult(argv, completed.returncode, output)
