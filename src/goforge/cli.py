"""Command line interface for goforge."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from . import __version__
from .config import ProjectRequest, ScaffoldSettings
from .errors import CommandError, ScaffoldError
from .prompt import Confirmer
from .runner import CommandRunner
from .scaffold import ProjectScaffolder

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goforge", description="Create Go projects from the gin layout template"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser(
        "new",
        help="create a new project",
        description="Create a new project with gin-layout-base.",
        epilog="example: goforge new github.com/acme/widget",
    )
    new_parser.add_argument(
        "name",
        nargs="?",
        help="Module path of the new project, e.g. github.com/acme/widget",
    )

    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _report_failure(exc: ScaffoldError) -> None:
    sys.stderr.write(f"error: {exc}\n")
    if isinstance(exc, CommandError) and exc.output.strip():
        sys.stderr.write(exc.output.rstrip() + "\n")


def _handle_new(
    args: argparse.Namespace,
    settings: ScaffoldSettings,
    *,
    runner: CommandRunner | None,
    confirm: Confirmer | None,
    workdir: Path,
) -> int:
    try:
        request = ProjectRequest.from_name(args.name)
    except ValueError as exc:
        print(exc)
        return EXIT_USAGE

    scaffolder = ProjectScaffolder(settings, runner=runner, confirm=confirm, workdir=workdir)
    try:
        created = scaffolder.create(request)
    except ScaffoldError as exc:
        LOGGER.debug("scaffolding %s failed", request.project_name, exc_info=True)
        _report_failure(exc)
        return EXIT_FAILURE

    if not created:
        LOGGER.info("nothing to do for %s", request.project_name)
    return EXIT_OK


def main(
    argv: Sequence[str] | None = None,
    *,
    settings: ScaffoldSettings | None = None,
    runner: CommandRunner | None = None,
    confirm: Confirmer | None = None,
    workdir: str | Path | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if settings is None:
        try:
            settings = ScaffoldSettings()
        except ValidationError as exc:
            sys.stderr.write(f"error: invalid configuration\n{exc}\n")
            return EXIT_FAILURE
    _configure_logging(settings.log_level)
    if args.command == "new":
        return _handle_new(
            args,
            settings,
            runner=runner,
            confirm=confirm,
            workdir=Path(workdir) if workdir is not None else Path.cwd(),
        )
    parser.error("no command provided")
    return EXIT_USAGE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
