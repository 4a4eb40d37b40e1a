from __future__ import annotations
from dataclasses import dataclass
import logging
from pathlib import Path, PurePosixPath
from .errors import FailureKind, ProbeError
from .styles import Painter
from .styles import StyleClass as SC
from .util import find_marker

log = logging.getLogger(__name__)

#: Number of characters of the commit hash to display
SHORT_ID_LEN = 14

#: Prefix of a ``.git`` file that points to the real metadata directory
GITDIR_PREFIX = "gitdir: "

#: Prefix of a ``HEAD`` file that points to a ref
REF_PREFIX = "ref: "


@dataclass
class SymbolicHead:
    #: Path of the checked-out ref relative to the Git directory, e.g.,
    #: ``refs/heads/main``
    ref: str

    @property
    def name(self) -> str | None:
        """
        The final component of the ref path (e.g., the branch name), or `None`
        if the path does not have one
        """
        name = PurePosixPath(self.ref).name
        if name in ("", ".", ".."):
            return None
        return name


@dataclass
class DetachedHead:
    #: The commit hash stored directly in ``HEAD``
    oid: str


Head = SymbolicHead | DetachedHead


@dataclass
class GitIdentity:
    #: The name of the current branch, or `None` if ``HEAD`` is detached
    name: str | None

    #: The first `SHORT_ID_LEN` characters of the current commit hash
    short_id: str

    def __str__(self) -> str:
        if self.name is not None:
            return f"{self.name} {self.short_id}"
        else:
            return self.short_id

    def display(self, paint: Painter) -> str:
        return paint(str(self), SC.GIT)


def git_identity(start_dir: Path | None = None) -> GitIdentity:
    """
    Determine the current branch & commit of the Git repository containing
    ``start_dir`` (default: the current directory) by reading the repository's
    metadata files directly.

    Raises a `ProbeError` describing the first problem encountered if
    ``start_dir`` is not in a Git repository or the repository's metadata
    cannot be made sense of.
    """
    gitdir = resolve_gitdir(locate(start_dir))
    head = read_head(gitdir)
    if isinstance(head, SymbolicHead):
        if head.name is None:
            raise ProbeError(
                FailureKind.NO_REF_NAME, f"ref {head.ref!r} has no name component"
            )
        oid = resolve_ref(gitdir, head.ref)
    else:
        oid = head.oid
    return format_identity(head, oid)


def locate(start_dir: Path | None = None) -> Path:
    """
    Return the path to the ``.git`` entry (file or directory) of the
    repository containing ``start_dir``
    """
    return find_marker(start_dir, ".git")


def resolve_gitdir(marker: Path) -> Path:
    """
    Given the path to a ``.git`` entry, return the path to the repository's
    Git directory.  If ``marker`` is a directory, it is returned unchanged;
    otherwise, it must be a file of the form ``gitdir: <path>``, and
    ``<path>`` (resolved relative to the directory containing ``marker``) is
    returned.
    """
    if marker.is_dir():
        return marker
    try:
        content = marker.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ProbeError(
            FailureKind.UNREADABLE_MARKER, f"failed to read {marker}"
        ) from e
    if not content.startswith(GITDIR_PREFIX):
        raise ProbeError(
            FailureKind.BAD_REDIRECT,
            f"unexpected content in {marker}: {content[:40]!r}",
        )
    gitdir = marker.parent / content[len(GITDIR_PREFIX) :].strip()
    if not gitdir.is_dir():
        raise ProbeError(
            FailureKind.MISSING_GITDIR,
            f"{marker} points to {gitdir}, which is not a directory",
        )
    log.debug("Git directory redirected to %s", gitdir)
    return gitdir


def read_head(gitdir: Path) -> Head:
    try:
        content = (gitdir / "HEAD").read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ProbeError(FailureKind.UNREADABLE_HEAD, "failed to read HEAD") from e
    if content.startswith(REF_PREFIX):
        head: Head = SymbolicHead(content[len(REF_PREFIX) :].strip())
    else:
        head = DetachedHead(content.strip())
    log.debug("HEAD: %r", head)
    return head


def resolve_ref(gitdir: Path, ref: str) -> str:
    """Return the commit hash stored in the ref file at ``gitdir/ref``"""
    try:
        return (gitdir / ref).read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        raise ProbeError(FailureKind.UNREADABLE_REF, f"failed to read ref {ref}") from e


def format_identity(head: Head, oid: str) -> GitIdentity:
    """
    Combine the branch name (if any) from ``head`` with the shortened form of
    the commit hash ``oid``
    """
    name: str | None
    if isinstance(head, SymbolicHead):
        name = head.name
        if name is None:
            raise ProbeError(
                FailureKind.NO_REF_NAME, f"ref {head.ref!r} has no name component"
            )
    else:
        name = None
    if len(oid) < SHORT_ID_LEN:
        raise ProbeError(
            FailureKind.ID_TOO_SHORT,
            f"commit id {oid!r} is shorter than {SHORT_ID_LEN} characters",
        )
    return GitIdentity(name=name, short_id=oid[:SHORT_ID_LEN])
