from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Color(Enum):
    """
    An enumeration of the supported foreground colors.  Each color's value
    equals its xterm number.
    """

    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    LIGHT_RED = 9
    LIGHT_GREEN = 10
    LIGHT_YELLOW = 11
    LIGHT_BLUE = 12
    LIGHT_MAGENTA = 13
    LIGHT_CYAN = 14

    def asfg(self) -> int:
        """
        Return the ANSI SGR parameter for setting the color as the foreground
        color
        """
        c = self.value
        return c + 30 if c < 8 else c + 82


@dataclass
class Style:
    color: Color | None = None
    bold: bool = False

    def as_params(self) -> list[str]:
        params = []
        if self.color is not None:
            params.append(str(self.color.asfg()))
        if self.bold:
            params.append("1")
        return params


class Styler(Protocol):
    def __call__(self, s: str, style: Style) -> str: ...


class ANSIStyler:
    """Class for styling strings for display immediately in the terminal"""

    def __call__(self, s: str, style: Style) -> str:
        r"""
        Stylize the string ``s`` with ANSI escape sequences.  If
        ``style.color`` is non-`None`, the string will be stylized with the
        given foreground color.  If ``style.bold`` is true, the string will be
        stylized bold.

        :param str s: the string to stylize
        :param Style style: the color & weight to stylize the string with
        """
        if params := style.as_params():
            s = f"\x1B[{';'.join(params)}m{s}\x1B[m"
        return s


class BashStyler:
    """Class for escaping & styling strings for use in Bash's PS1 variable"""

    def __call__(self, s: str, style: Style) -> str:
        r"""
        Return the string ``s`` escaped for use in a PS1 variable, wrapped in
        the escape sequences for ``style``.  All escape sequences are wrapped
        in ``\[ ... \]`` so that Bash does not count them towards the length
        of the prompt.

        :param str s: the string to stylize
        :param Style style: the color & weight to stylize the string with
        """
        s = self.escape(s)
        if params := style.as_params():
            s = rf"\[\e[{';'.join(params)}m\]{s}\[\e[m\]"
        return s

    def escape(self, s: str) -> str:
        """
        Escape characters in the string ``s`` that have special meaning in a
        PS1 variable
        """
        return s.replace("\\", r"\\")


class ZshStyler:
    """Class for escaping & styling strings for use in zsh's PS1 variable"""

    def __call__(self, s: str, style: Style) -> str:
        s = self.escape(s)
        if style.bold:
            s = f"%B{s}%b"
        if style.color is not None:
            s = f"%F{{{style.color.value}}}{s}%f"
        return s

    def escape(self, s: str) -> str:
        return s.replace("%", "%%")


StyleClass = Enum(
    "StyleClass",
    [
        "TIME",
        "USER",
        "ROOT_USER",
        "HOST",
        "CWD",
        "CWD_MISSING",
        "STATUS_OK",
        "STATUS_FAIL",
        "CONTAINER",
        "HG",
        "GIT",
    ],
)

Theme = dict[StyleClass, Style]

DARK_THEME = {
    StyleClass.TIME: Style(Color.CYAN, bold=True),
    StyleClass.USER: Style(Color.MAGENTA, bold=True),
    StyleClass.ROOT_USER: Style(Color.RED, bold=True),
    StyleClass.HOST: Style(Color.GREEN, bold=True),
    StyleClass.CWD: Style(Color.BLUE, bold=True),
    StyleClass.CWD_MISSING: Style(Color.RED, bold=True),
    StyleClass.STATUS_OK: Style(Color.GREEN, bold=True),
    StyleClass.STATUS_FAIL: Style(Color.RED, bold=True),
    StyleClass.CONTAINER: Style(Color.YELLOW, bold=True),
    StyleClass.HG: Style(Color.GREEN, bold=True),
    StyleClass.GIT: Style(Color.GREEN, bold=True),
}

# Cyan & yellow are hard to read on a white background:
LIGHT_THEME = DARK_THEME | {
    StyleClass.TIME: Style(Color.BLUE),
    StyleClass.CONTAINER: Style(Color.MAGENTA),
}

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}


@dataclass
class Painter:
    styler: Styler
    theme: Theme

    def __call__(self, s: str, klass: StyleClass) -> str:
        return self.styler(s, self.theme[klass])
