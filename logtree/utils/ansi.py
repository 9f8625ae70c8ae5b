"""
ANSI escape codes used to style tree output.

Only SGR (select graphic rendition) codes are provided: text attributes and
the 16-color foreground/background palette.
"""

from __future__ import annotations


RESET = "\u001b[0m"

BOLD = "\u001b[1m"
DIM = "\u001b[2m"
ITALIC = "\u001b[3m"
UNDERLINE = "\u001b[4m"
INVERSE = "\u001b[7m"

FOREGROUND: dict[str, str] = {
    "black": "\u001b[30m",
    "red": "\u001b[31m",
    "green": "\u001b[32m",
    "yellow": "\u001b[33m",
    "blue": "\u001b[34m",
    "magenta": "\u001b[35m",
    "cyan": "\u001b[36m",
    "white": "\u001b[37m",
    "bright_black": "\u001b[90m",
    "bright_red": "\u001b[91m",
    "bright_green": "\u001b[92m",
    "bright_yellow": "\u001b[93m",
    "bright_blue": "\u001b[94m",
    "bright_magenta": "\u001b[95m",
    "bright_cyan": "\u001b[96m",
    "bright_white": "\u001b[97m",
}

BACKGROUND: dict[str, str] = {
    "black": "\u001b[40m",
    "red": "\u001b[41m",
    "green": "\u001b[42m",
    "yellow": "\u001b[43m",
    "blue": "\u001b[44m",
    "magenta": "\u001b[45m",
    "cyan": "\u001b[46m",
    "white": "\u001b[47m",
    "bright_black": "\u001b[100m",
    "bright_red": "\u001b[101m",
    "bright_green": "\u001b[102m",
    "bright_yellow": "\u001b[103m",
    "bright_blue": "\u001b[104m",
    "bright_magenta": "\u001b[105m",
    "bright_cyan": "\u001b[106m",
    "bright_white": "\u001b[107m",
}

PALETTE: tuple[str, ...] = tuple(FOREGROUND)


class UnknownColorError(KeyError):
    """Raised when a style names a color outside the palette."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown color '{self.name}' (expected one of: {', '.join(PALETTE)})"


def foreground(name: str) -> str:
    """Return the foreground escape code for a palette color."""
    try:
        return FOREGROUND[name]
    except KeyError:
        raise UnknownColorError(name) from None


def background(name: str) -> str:
    """Return the background escape code for a palette color."""
    try:
        return BACKGROUND[name]
    except KeyError:
        raise UnknownColorError(name) from None
