from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from goforge.config import ScaffoldSettings  # noqa: E402
from tests.fixtures.go_toolchain_fake import FakeToolchainRunner, write_template  # noqa: E402


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    """A gin layout template checked out on local disk."""

    return write_template(tmp_path / "template")


@pytest.fixture()
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture()
def runner(template_dir: Path) -> FakeToolchainRunner:
    return FakeToolchainRunner(template_dir)


@pytest.fixture()
def settings(template_dir: Path) -> ScaffoldSettings:
    return ScaffoldSettings(template_url=str(template_dir), color=False)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's GOFORGE_* and colour variables out of the tests."""

    for name in list(os.environ):
        if name.upper().startswith("GOFORGE_") or name in {"NO_COLOR", "FORCE_COLOR", "TTY_COMPATIBLE"}:
            monkeypatch.delenv(name, raising=False)
