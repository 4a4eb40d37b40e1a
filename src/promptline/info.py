from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
import getpass
import os
from pathlib import Path
import socket
from .errors import FailureKind, ProbeError
from .git import GitIdentity, git_identity
from .hg import HgIdentity, hg_identity
from .styles import Painter
from .styles import StyleClass as SC

#: Shown in place of the working directory when it can't be determined
MISSING_CWD = "!!!"

#: File whose presence means we are inside a Docker container
DOCKERENV = Path("/.dockerenv")


@dataclass
class PromptInfo:
    #: The current local time as ``HH:MM``
    time: str

    user: str | None

    hostname: str | None

    #: The path to the current working directory.  If the directory is at or
    #: under :envvar:`HOME`, the path will start with ``~``.  `None` if the
    #: working directory could not be determined.
    cwdstr: str | None

    #: The exit status of the previous command, as passed on the command line
    status: str | None

    #: `True` iff we're running inside a Docker container
    docker: bool

    #: If we're inside a ``nix-shell``, the value of :envvar:`IN_NIX_SHELL`
    nix_shell: str | None

    hg: HgIdentity | None

    git: GitIdentity | None

    #: Failures from the probes that did not produce a value
    errors: list[ProbeError] = field(default_factory=list)

    @classmethod
    def get(
        cls,
        status: str | None = None,
        start_dir: Path | None = None,
        vcs: bool = True,
    ) -> PromptInfo:
        errors: list[ProbeError] = []

        user: str | None = None
        try:
            user = username()
        except ProbeError as e:
            errors.append(e)

        hostname: str | None = None
        try:
            hostname = local_hostname()
        except ProbeError as e:
            errors.append(e)

        if status is None:
            errors.append(ProbeError(FailureKind.NO_EXIT_STATUS, "no exit status"))

        hg: HgIdentity | None = None
        gs: GitIdentity | None = None
        if vcs:
            try:
                hg = hg_identity(start_dir)
            except ProbeError as e:
                errors.append(e)
            try:
                gs = git_identity(start_dir)
            except ProbeError as e:
                errors.append(e)

        return cls(
            time=datetime.now().strftime("%H:%M"),
            user=user,
            hostname=hostname,
            cwdstr=cwdstr(),
            status=status,
            docker=DOCKERENV.exists(),
            nix_shell=os.environ.get("IN_NIX_SHELL"),
            hg=hg,
            git=gs,
            errors=errors,
        )

    def segments(self, paint: Painter) -> list[str]:
        """Return the painted segments of the prompt, in display order"""
        segs = [paint(self.time, SC.TIME)]
        if self.user is not None:
            segs.append(
                paint(self.user, SC.ROOT_USER if self.user == "root" else SC.USER)
            )
        if self.hostname is not None:
            segs.append(paint(self.hostname, SC.HOST))
        if self.cwdstr is not None:
            segs.append(paint(self.cwdstr, SC.CWD))
        else:
            segs.append(paint(MISSING_CWD, SC.CWD_MISSING))
        if self.status is not None:
            segs.append(
                paint(
                    self.status, SC.STATUS_OK if self.status == "0" else SC.STATUS_FAIL
                )
            )
        if self.docker:
            segs.append(paint("docker", SC.CONTAINER))
        if self.nix_shell is not None:
            # $IN_NIX_SHELL is "pure" or "impure" for `nix-shell`, "1" for
            # some older tools
            if self.nix_shell in ("pure", "impure"):
                segs.append(paint(f"nix-shell:{self.nix_shell}", SC.CONTAINER))
            else:
                segs.append(paint("nix-shell", SC.CONTAINER))
        if self.hg is not None:
            segs.append(self.hg.display(paint))
        if self.git is not None:
            segs.append(self.git.display(paint))
        return segs

    def display(self, paint: Painter) -> str:
        """
        Construct & return a complete prompt string for the current environment
        """
        return "┌[" + "]-[".join(self.segments(paint)) + "]\n└> "


def cwdstr() -> str | None:
    """
    Show the path to the current working directory.  If the directory is at or
    under :envvar:`HOME`, the path will start with ``~``.  Returns `None` if
    the working directory cannot be determined.
    """
    # Prefer $PWD to os.getcwd() as the former does not resolve symlinks
    try:
        cwd = Path(os.environ.get("PWD") or os.getcwd())
    except FileNotFoundError:
        return None
    try:
        cwd = "~" / cwd.relative_to(Path.home())
    except (ValueError, RuntimeError):
        pass
    return str(cwd)


def username() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError) as e:
        raise ProbeError(FailureKind.NO_USER, "failed to retrieve username") from e


def local_hostname() -> str:
    try:
        hostname = socket.gethostname()
    except OSError as e:
        raise ProbeError(FailureKind.NO_HOSTNAME, "failed to get hostname") from e
    if not hostname:
        raise ProbeError(FailureKind.NO_HOSTNAME, "hostname is empty")
    return hostname
