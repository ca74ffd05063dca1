"""Configuration helpers shared by the project scaffolder and CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .naming import folder_name

__all__ = ["DEFAULT_TEMPLATE_URL", "ProjectRequest", "ScaffoldSettings"]


DEFAULT_TEMPLATE_URL = "https://github.com/Q1mi/gin-layout-base.git"


@dataclass(frozen=True, slots=True)
class ProjectRequest:
    """Identifiers describing the project being created.

    Attributes
    ----------
    project_name:
        The module identifier supplied by the user, for example
        ``github.com/acme/widget``. It is kept verbatim and becomes the new
        Go module path.
    folder_name:
        The final path segment of :attr:`project_name`. The template is cloned
        into a directory with this name.
    """

    project_name: str
    folder_name: str

    @classmethod
    def from_name(cls, name: str | None) -> "ProjectRequest":
        """Build a :class:`ProjectRequest` from the command line argument."""

        if name is None or not name.strip():
            raise ValueError("need project name")

        return cls(project_name=name, folder_name=folder_name(name))


class ScaffoldSettings(BaseSettings):
    """Tunable values for the scaffolding pipeline.

    Every field can be overridden with a ``GOFORGE_`` prefixed environment
    variable, e.g. ``GOFORGE_TEMPLATE_URL`` or ``GOFORGE_GO_COMMAND``.
    Colour also follows the terminal and ``NO_COLOR``; see
    :func:`goforge.scaffold.build_console`.
    """

    model_config = SettingsConfigDict(
        env_prefix="GOFORGE_",
        extra="forbid",
        frozen=True,
        case_sensitive=False,
        env_ignore_empty=True,
    )

    template_url: str = Field(DEFAULT_TEMPLATE_URL, description="Repository cloned for every new project.")
    manifest_name: str = Field("go.mod", description="Dependency manifest at the template root.")
    source_suffixes: tuple[str, ...] = Field((".go",), description="File suffixes rewritten with the new module path.")
    vcs_dir: str = Field(".git", description="Version control metadata removed after generation.")
    git_command: str = Field("git", description="Executable used to clone the template.")
    go_command: str = Field("go", description="Executable used for go mod edit and go mod tidy.")
    run_command: str = Field("go run cmd/server/main.go", description="Entry point suggested after generation.")
    color: bool = Field(True, description="Allow coloured output; when off the output is always plain.")
    log_level: str = Field("WARNING", description="Logging level configured by the CLI.")

    @field_validator("source_suffixes")
    @classmethod
    def _check_suffixes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one source suffix is required")
        for suffix in value:
            if not suffix.startswith(".") or len(suffix) < 2:
                raise ValueError(f"invalid source suffix {suffix!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level
