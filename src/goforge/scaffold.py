"""Create a Go project from the layout template."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.text import Text

from .config import ProjectRequest, ScaffoldSettings
from .errors import ScaffoldError
from .manifest import read_module_name
from .prompt import Confirmer, ConsoleConfirmer
from .rewrite import replace_in_tree
from .runner import CommandRunner, SubprocessRunner

LOGGER = logging.getLogger(__name__)

__all__ = ["ProjectScaffolder", "build_console", "success_message"]


OVERWRITE_HELP = "Remove old project and create new project."


def build_console(settings: ScaffoldSettings, stream: TextIO | None = None) -> Console:
    """Return the console used for progress lines and the banner.

    Colour follows the terminal and ``NO_COLOR`` unless ``settings.color`` is
    off. Lines are never wrapped so commands and paths stay copyable.
    """

    return Console(
        file=stream,
        no_color=True if not settings.color else None,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def success_message(request: ProjectRequest, settings: ScaffoldSettings) -> Text:
    """Return the banner printed once a project has been created."""

    return Text.assemble(
        "🎉 🎉 🎉 Project ",
        (request.project_name, "cyan"),
        " created successfully!\n\n",
        "Now run:\n\n",
        "› ",
        (f"cd {request.folder_name}", "cyan"),
        "\n› ",
        (settings.run_command, "cyan"),
        "\n",
    )


@dataclass(slots=True)
class ProjectScaffolder:
    """Clone the template and turn it into a project owned by the caller.

    Every collaborator is injectable: ``runner`` executes ``git`` and ``go``,
    ``confirm`` answers the overwrite question and ``console`` (or a plain
    ``stream`` wrapped in one) receives the progress lines and the final
    banner. Paths are resolved against ``workdir``.
    """

    settings: ScaffoldSettings
    runner: CommandRunner
    confirm: Confirmer
    console: Console
    workdir: Path

    def __init__(
        self,
        settings: ScaffoldSettings | None = None,
        *,
        runner: CommandRunner | None = None,
        confirm: Confirmer | None = None,
        stream: TextIO | None = None,
        console: Console | None = None,
        workdir: str | Path = ".",
    ) -> None:
        self.settings = settings or ScaffoldSettings()
        self.runner = runner or SubprocessRunner()
        self.confirm = confirm or ConsoleConfirmer(help_text=OVERWRITE_HELP)
        self.console = console or build_console(self.settings, stream)
        self.workdir = Path(workdir)

    def _echo(self, text: str | Text = "") -> None:
        self.console.print(text, markup=False)

    def project_dir(self, request: ProjectRequest) -> Path:
        return self.workdir / request.folder_name

    def fetch(self, request: ProjectRequest) -> bool:
        """Clone the template into the project folder.

        Returns ``False`` when the folder already exists and the user declines
        to overwrite it; nothing is changed in that case.
        """

        target = self.project_dir(request)
        if target.exists() or target.is_symlink():
            question = f"Folder {request.folder_name} already exists, do you want to overwrite it?"
            if not self.confirm(question):
                LOGGER.info("keeping existing folder %s", target)
                return False
            try:
                if target.is_dir() and not target.is_symlink():
                    shutil.rmtree(target)
                else:
                    target.unlink()
            except OSError as exc:
                raise ScaffoldError(f"remove old project error: {exc}") from exc
            LOGGER.debug("removed %s", target)

        url = self.settings.template_url
        self._echo(f"git clone {url}")
        self.runner.run(
            self.settings.git_command,
            ["clone", url, request.folder_name],
            cwd=self.workdir,
        ).check()
        return True

    def rewrite_identity(self, request: ProjectRequest) -> str:
        """Replace the template's module path with the project's one.

        Returns the module path the template declared before the rewrite.
        """

        target = self.project_dir(request)
        old_name = read_module_name(target / self.settings.manifest_name)
        LOGGER.debug("template module is %s", old_name)

        report = replace_in_tree(target, old_name, request.project_name, self.settings.source_suffixes)
        LOGGER.debug(
            "rewrote %d of %d source files in %s", len(report.changed), len(report.scanned), target
        )

        self.runner.run(
            self.settings.go_command,
            ["mod", "edit", "-module", request.project_name],
            cwd=target,
        ).check()
        return old_name

    def tidy(self, request: ProjectRequest) -> None:
        """Run ``go mod tidy`` inside the project folder."""

        self._echo("go mod tidy")
        self.runner.run(
            self.settings.go_command,
            ["mod", "tidy"],
            cwd=self.project_dir(request),
        ).check()

    def finalize(self, request: ProjectRequest) -> None:
        """Drop version control metadata and print the next steps.

        Removing the metadata is best effort: a failure is logged and the
        project is still reported as created.
        """

        vcs_dir = self.project_dir(request) / self.settings.vcs_dir
        try:
            shutil.rmtree(vcs_dir)
        except FileNotFoundError:
            pass
        except OSError as exc:
            LOGGER.warning("could not remove %s: %s", vcs_dir, exc)

        self._echo(success_message(request, self.settings))

    def create(self, request: ProjectRequest) -> bool:
        """Run every stage in order and stop at the first failure.

        Returns ``False`` if the user declined to overwrite an existing folder
        and ``True`` once the project has been created. Failures raise
        :class:`~goforge.errors.ScaffoldError`.
        """

        if not self.fetch(request):
            return False
        self.rewrite_identity(request)
        self.tidy(request)
        self.finalize(request)
        return True
