from __future__ import annotations
from enum import Enum


class Category(Enum):
    """Broad classes of probe failures"""

    #: The process environment itself is unusable (no cwd, no user, etc.)
    ENVIRONMENT = "environment"
    #: There is simply nothing to report here (e.g., not in a repository)
    ABSENCE = "absence"
    #: Metadata exists but is not in the expected format
    MALFORMED = "malformed"
    #: Metadata exists but could not be read
    IO = "io"
    #: A reference path has no usable name
    STRUCTURAL = "structural"


class FailureKind(Enum):
    """
    The distinct reasons a probe can fail to produce a segment.  Each member's
    value is a stable tag suitable for display in diagnostic output.
    """

    NO_CWD = "no-cwd"
    NOT_A_REPO = "not-a-repo"
    UNREADABLE_MARKER = "unreadable-marker"
    BAD_REDIRECT = "bad-redirect-format"
    MISSING_GITDIR = "missing-gitdir"
    UNREADABLE_HEAD = "unreadable-head"
    UNREADABLE_REF = "unreadable-ref"
    NO_REF_NAME = "no-ref-name"
    ID_TOO_SHORT = "id-too-short"
    EMPTY_METADATA = "empty-metadata"
    NO_USER = "no-user"
    NO_HOSTNAME = "no-hostname"
    NO_EXIT_STATUS = "no-exit-status"

    @property
    def category(self) -> Category:
        return CATEGORIES[self]


CATEGORIES = {
    FailureKind.NO_CWD: Category.ENVIRONMENT,
    FailureKind.NOT_A_REPO: Category.ABSENCE,
    FailureKind.UNREADABLE_MARKER: Category.IO,
    FailureKind.BAD_REDIRECT: Category.MALFORMED,
    FailureKind.MISSING_GITDIR: Category.IO,
    FailureKind.UNREADABLE_HEAD: Category.IO,
    FailureKind.UNREADABLE_REF: Category.IO,
    FailureKind.NO_REF_NAME: Category.STRUCTURAL,
    FailureKind.ID_TOO_SHORT: Category.MALFORMED,
    FailureKind.EMPTY_METADATA: Category.MALFORMED,
    FailureKind.NO_USER: Category.ENVIRONMENT,
    FailureKind.NO_HOSTNAME: Category.ENVIRONMENT,
    FailureKind.NO_EXIT_STATUS: Category.ENVIRONMENT,
}


class ProbeError(Exception):
    """
    Raised by a probe when it cannot contribute a segment to the prompt.  The
    low-level exception that caused the failure (if any) is available as
    ``__cause__`` and is included in the string form of the error.
    """

    def __init__(self, kind: FailureKind, message: str) -> None:
        super().__init__(kind, message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        s = self.message
        cause = self.__cause__
        while cause is not None:
            s += f": {cause}"
            cause = cause.__cause__
        return s
