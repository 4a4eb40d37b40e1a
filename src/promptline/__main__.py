from __future__ import annotations
import argparse
import logging
import os
import sys
from . import __version__
from .info import PromptInfo
from .styles import THEMES, ANSIStyler, BashStyler, Painter, ZshStyler

log = logging.getLogger(__name__)

#: Environment variable that, when set to "1", makes the program report why
#: any segments are missing
DEBUG_ENV = "DEBUG_PROMPTLINE"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Two-line shell prompt with Git & Mercurial awareness"
    )
    parser.add_argument(
        "--ansi",
        action="store_const",
        dest="stylecls",
        const=ANSIStyler,
        help="Format prompt for direct display (default)",
    )
    parser.add_argument(
        "--bash",
        action="store_const",
        dest="stylecls",
        const=BashStyler,
        help="Format prompt for Bash's PS1",
    )
    parser.add_argument(
        "--no-vcs",
        action="store_true",
        help="Do not look for Git or Mercurial repositories",
    )
    parser.add_argument(
        "-T",
        "--theme",
        choices=list(THEMES.keys()),
        default="dark",
        help="Select the color theme to use  [default: dark]",
    )
    parser.add_argument(
        "--zsh",
        action="store_const",
        dest="stylecls",
        const=ZshStyler,
        help="Format prompt for zsh's PS1",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("status", nargs="?", help="Exit status of the last command")
    args = parser.parse_args(argv)
    debug = os.environ.get(DEBUG_ENV) == "1"
    if debug:
        logging.basicConfig(
            format="[%(levelname)-8s] %(name)s: %(message)s",
            level=logging.DEBUG,
            stream=sys.stderr,
        )
    styler = (args.stylecls or ANSIStyler)()
    paint = Painter(styler=styler, theme=THEMES[args.theme])
    info = PromptInfo.get(status=args.status, vcs=not args.no_vcs)
    if debug:
        for e in info.errors:
            log.warning("%s [%s]", e, e.kind.value)
    print(info.display(paint), end="")


if __name__ == "__main__":
    main()
