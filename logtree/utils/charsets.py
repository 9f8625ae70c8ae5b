"""
Glyph tables for drawing tree branches.

Each character set defines four strings:
- indent:   filler below an ancestor that was the last child
- straight: continuing vertical line below an ancestor with later siblings
- split:    branch marker for a child that has later siblings
- elbow:    branch marker for the last child
"""

from __future__ import annotations

from dataclasses import dataclass


DEFAULT_CHAR_SET = "default"


@dataclass(frozen=True)
class CharSet:
    """The four glyph strings of one tree-drawing style."""

    indent: str
    straight: str
    split: str
    elbow: str

    def branch(self, is_last: bool) -> str:
        """Glyph that connects a node to its parent."""
        return self.elbow if is_last else self.split

    def continuation(self, is_last: bool) -> str:
        """Prefix token a node leaves for its own descendants."""
        return self.indent if is_last else self.straight


CHAR_SETS: dict[str, CharSet] = {
    "ascii": CharSet(indent="   ", straight="|  ", split="|- ", elbow="`- "),
    "heavy": CharSet(indent="   ", straight="┃  ", split="┣━ ", elbow="┗━ "),
    "double": CharSet(indent="   ", straight="║  ", split="╠═ ", elbow="╚═ "),
    "rounded": CharSet(indent="   ", straight="│  ", split="╰─ ", elbow="╰─ "),
    "arrows": CharSet(indent="   ", straight="→  ", split="↳ ", elbow="↴ "),
    "bullets": CharSet(indent="   ", straight="   ", split="•  ", elbow="•  "),
    "bulbs": CharSet(indent="   ", straight="│  ", split="├○ ", elbow="└○ "),
    "default": CharSet(indent="   ", straight="│  ", split="├─ ", elbow="└─ "),
}


class UnknownCharSetError(KeyError):
    """Raised when a node names a character set that is not in CHAR_SETS."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown character set '{self.name}' (expected one of: {', '.join(CHAR_SETS)})"


def get_char_set(name: str) -> CharSet:
    """Look up a character set by name."""
    try:
        return CHAR_SETS[name]
    except KeyError:
        raise UnknownCharSetError(name) from None
