from __future__ import annotations
from dataclasses import dataclass
import logging
from pathlib import Path
from .errors import FailureKind, ProbeError
from .styles import Painter
from .styles import StyleClass as SC
from .util import cat, find_marker

log = logging.getLogger(__name__)

#: Number of bytes of the working directory's parent node to display
NODE_BYTES = 6


@dataclass
class HgIdentity:
    #: The active bookmark, if any
    bookmark: str | None

    #: The name of the current branch, if recorded
    branch: str | None

    #: Hex form of the first `NODE_BYTES` bytes of the working directory's
    #: parent revision
    node: str | None

    def __str__(self) -> str:
        return " ".join(p for p in (self.bookmark, self.branch, self.node) if p)

    def display(self, paint: Painter) -> str:
        return paint(str(self), SC.HG)


def hg_identity(start_dir: Path | None = None) -> HgIdentity:
    """
    Determine the active bookmark, branch, & parent revision of the Mercurial
    repository containing ``start_dir`` (default: the current directory).
    Parts that cannot be read are left out; if none of them can be read, a
    `ProbeError` is raised.
    """
    hgdir = find_marker(start_dir, ".hg")
    bookmark = maybe_cat(hgdir / "bookmarks.current")
    branch = maybe_cat(hgdir / "branch")
    try:
        with (hgdir / "dirstate").open("rb") as fp:
            node = fp.read(NODE_BYTES).hex() or None
    except OSError as e:
        log.debug("Could not read dirstate: %s", e)
        node = None
    if not (bookmark or branch or node):
        raise ProbeError(
            FailureKind.EMPTY_METADATA, f"nothing to show in {hgdir}"
        )
    return HgIdentity(bookmark=bookmark, branch=branch, node=node)


def maybe_cat(path: Path) -> str | None:
    try:
        return cat(path) or None
    except (OSError, UnicodeDecodeError) as e:
        log.debug("Could not read %s: %s", path, e)
        return None
