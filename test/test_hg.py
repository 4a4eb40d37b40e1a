from __future__ import annotations
from pathlib import Path
import pytest
from promptline.errors import FailureKind, ProbeError
from promptline.hg import HgIdentity, hg_identity
from promptline.styles import DARK_THEME, ANSIStyler, Painter

DIRSTATE = bytes.fromhex("0a1b2c3d4e5f") + b"\x00" * 34


def mkrepo(root: Path) -> Path:
    hgdir = root / ".hg"
    hgdir.mkdir()
    (hgdir / "dirstate").write_bytes(DIRSTATE)
    return hgdir


def test_node_only(tmp_path: Path) -> None:
    mkrepo(tmp_path)
    assert hg_identity(tmp_path) == HgIdentity(
        bookmark=None, branch=None, node="0a1b2c3d4e5f"
    )


def test_bookmark_and_branch(tmp_path: Path) -> None:
    hgdir = mkrepo(tmp_path)
    (hgdir / "bookmarks.current").write_text("feature\n", encoding="utf-8")
    (hgdir / "branch").write_text("default\n", encoding="utf-8")
    (tmp_path / "src").mkdir()
    ident = hg_identity(tmp_path / "src")
    assert str(ident) == "feature default 0a1b2c3d4e5f"
    paint = Painter(ANSIStyler(), DARK_THEME)
    assert ident.display(paint) == "\x1B[32;1mfeature default 0a1b2c3d4e5f\x1B[m"


def test_empty_parts_skipped(tmp_path: Path) -> None:
    hgdir = mkrepo(tmp_path)
    (hgdir / "bookmarks.current").write_text("", encoding="utf-8")
    (hgdir / "branch").write_text("stable\n", encoding="utf-8")
    assert str(hg_identity(tmp_path)) == "stable 0a1b2c3d4e5f"


def test_nothing_to_show(tmp_path: Path) -> None:
    (tmp_path / ".hg").mkdir()
    with pytest.raises(ProbeError) as excinfo:
        hg_identity(tmp_path)
    assert excinfo.value.kind is FailureKind.EMPTY_METADATA


def test_not_a_repo(tmp_path: Path) -> None:
    with pytest.raises(ProbeError) as excinfo:
        hg_identity(tmp_path)
    assert excinfo.value.kind is FailureKind.NOT_A_REPO
