from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from goforge.errors import ScaffoldError
from goforge.rewrite import iter_source_files, replace_in_file, replace_in_tree

OLD = "github.com/Q1mi/gin-layout-base"
NEW = "example.com/foo/bar"


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_iter_source_files_is_sorted_and_filtered(tmp_path: Path):
    _write(tmp_path / "b.go", "")
    _write(tmp_path / "a.go", "")
    _write(tmp_path / "pkg" / "z.go", "")
    _write(tmp_path / "notes.txt", "")
    (tmp_path / "dir.go").mkdir()

    found = [path.relative_to(tmp_path).as_posix() for path in iter_source_files(tmp_path, (".go",))]
    assert found == ["a.go", "b.go", "pkg/z.go"]


def test_replace_in_tree_rewrites_only_source_files(tmp_path: Path):
    main = _write(tmp_path / "cmd" / "main.go", f'import "{OLD}/internal"\n// see {OLD}\n')
    untouched = _write(tmp_path / "internal" / "util.go", "package internal\n")
    readme = _write(tmp_path / "README.md", f"go get {OLD}\n")

    report = replace_in_tree(tmp_path, OLD, NEW)

    assert main.read_text(encoding="utf-8") == f'import "{NEW}/internal"\n// see {NEW}\n'
    assert untouched.read_text(encoding="utf-8") == "package internal\n"
    assert readme.read_text(encoding="utf-8") == f"go get {OLD}\n"
    assert report.changed == [main]
    assert sorted(report.scanned) == sorted([main, untouched])


def test_replace_is_not_boundary_aware(tmp_path: Path):
    source = _write(tmp_path / "x.go", f'const s = "{OLD}-extra"\n')
    replace_in_tree(tmp_path, OLD, NEW)
    assert source.read_text(encoding="utf-8") == f'const s = "{NEW}-extra"\n'


def test_replace_in_file_preserves_permissions(tmp_path: Path):
    source = _write(tmp_path / "tool.go", f"// {OLD}\n")
    os.chmod(source, 0o750)

    assert replace_in_file(source, OLD.encode(), NEW.encode()) is True
    assert stat.S_IMODE(source.stat().st_mode) == 0o750
    assert source.read_text(encoding="utf-8") == f"// {NEW}\n"


def test_replace_in_file_shrinking_content_is_truncated(tmp_path: Path):
    source = _write(tmp_path / "short.go", f"{OLD}\n")
    replace_in_file(source, OLD.encode(), b"x")
    assert source.read_bytes() == b"x\n"


def test_replace_in_file_reports_unchanged(tmp_path: Path):
    source = _write(tmp_path / "plain.go", "package plain\n")
    assert replace_in_file(source, OLD.encode(), NEW.encode()) is False


def test_replace_in_tree_requires_old_name(tmp_path: Path):
    with pytest.raises(ValueError):
        replace_in_tree(tmp_path, "", NEW)


def test_replace_in_tree_stops_on_unreadable_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    first = _write(tmp_path / "a.go", f"// {OLD}\n")
    _write(tmp_path / "b.go", f"// {OLD}\n")
    third = _write(tmp_path / "c.go", f"// {OLD}\n")

    original = Path.read_bytes

    def failing_read(self: Path) -> bytes:
        if self.name == "b.go":
            raise PermissionError("denied")
        return original(self)

    monkeypatch.setattr(Path, "read_bytes", failing_read)

    with pytest.raises(ScaffoldError, match="b.go"):
        replace_in_tree(tmp_path, OLD, NEW)

    assert first.read_text(encoding="utf-8") == f"// {NEW}\n"
    assert third.read_text(encoding="utf-8") == f"// {OLD}\n"
