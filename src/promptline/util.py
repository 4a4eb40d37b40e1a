from __future__ import annotations
import logging
from pathlib import Path
from .errors import FailureKind, ProbeError

log = logging.getLogger(__name__)


def cat(path: Path) -> str | None:
    """
    Return the contents of the given file with leading & trailing whitespace
    stripped.  If the file does not exist, return `None`.
    """
    try:
        return path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return None


def find_marker(start_dir: Path | None, marker: str) -> Path:
    """
    Starting at ``start_dir`` (default: the current working directory) and
    moving upwards one directory at a time, find the first directory that
    contains an entry (file or directory) named ``marker``, and return the
    path to that entry.

    ``start_dir`` is canonicalized first so that symlinks are resolved before
    the walk.  If this fails, a `ProbeError` with kind `FailureKind.NO_CWD`
    is raised.  If the filesystem root is reached without finding
    ``marker``, a `ProbeError` with kind `FailureKind.NOT_A_REPO` is raised.
    """
    try:
        d = (start_dir if start_dir is not None else Path.cwd()).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise ProbeError(
            FailureKind.NO_CWD, "could not determine working directory"
        ) from e
    while True:
        candidate = d / marker
        if candidate.exists() or candidate.is_symlink():
            log.debug("Found %s at %s", marker, candidate)
            return candidate
        if d.parent == d:
            raise ProbeError(
                FailureKind.NOT_A_REPO, f"no {marker} found in any parent directory"
            )
        d = d.parent
