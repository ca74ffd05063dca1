"""Reading the module directive from ``go.mod``."""

from __future__ import annotations

from pathlib import Path

from .errors import ManifestError

__all__ = ["parse_module_name", "read_module_name"]


def _strip_comment(line: str) -> str:
    index = line.find("//")
    if index != -1:
        line = line[:index]
    return line.strip()


def parse_module_name(text: str) -> str:
    """Return the module path declared by the first meaningful line of ``text``.

    Blank lines and ``//`` comments are skipped. The first remaining line must
    read ``module <path>``; a quoted path is unquoted.
    """

    for raw_line in text.splitlines():
        line = _strip_comment(raw_line)
        if not line:
            continue

        parts = line.split()
        if len(parts) != 2 or parts[0] != "module":
            raise ManifestError(f"expected 'module <path>', found {raw_line.strip()!r}")

        name = parts[1]
        if len(name) >= 2 and name[0] == name[-1] and name[0] in {'"', "`"}:
            name = name[1:-1]
        if not name:
            raise ManifestError("module path is empty")
        return name

    raise ManifestError("manifest does not declare a module")


def read_module_name(path: str | Path) -> str:
    """Read ``path`` and return its declared module path."""

    manifest = Path(path)
    try:
        text = manifest.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestError(f"{manifest} does not exist") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"cannot read {manifest}: {exc}") from exc

    try:
        return parse_module_name(text)
    except ManifestError as exc:
        raise ManifestError(f"{manifest}: {exc}") from exc
