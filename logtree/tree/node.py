"""Tree nodes built incrementally through nested calls."""

from __future__ import annotations

import logging
import weakref
from functools import partialmethod
from typing import Any, Mapping

from ..models import LogOptions, ResolvedConfig
from ..sinks import LineSink, StreamSink
from ..utils.ansi import PALETTE
from .renderer import render_tree
from .styles import resolve, style_text

logger = logging.getLogger(__name__)


class Node:
    """One logged message and the messages logged beneath it.

    A node is created once and never changes afterwards, apart from its
    children list growing as new messages are added under it. Parent and
    root links are weak; a node is owned by its parent's children list.
    """

    def __init__(self, message: str, options: LogOptions | None = None, parent: Node | None = None):
        inherited = parent.config if parent is not None else ResolvedConfig()
        style, config = resolve(inherited, options or LogOptions())

        self.message = message
        self.rendered_message = style_text(message, style)
        self.config = config
        self.children: list[Node] = []

        if parent is None:
            self._parent = None
            self._root = weakref.ref(self)
        else:
            self._parent = weakref.ref(parent)
            self._root = parent._root
            parent.children.append(self)
            logger.debug("Added %r as child #%d of %r", message, len(parent.children), parent.message)

    def __repr__(self) -> str:
        return f"Node({self.message!r}, char_set={self.char_set!r}, children={len(self.children)})"

    @property
    def parent(self) -> Node | None:
        return self._parent() if self._parent is not None else None

    @property
    def root(self) -> Node | None:
        """The ultimate ancestor, or None once it has been garbage collected."""
        return self._root()

    @property
    def char_set(self) -> str:
        return self.config.char_set

    @property
    def is_last(self) -> bool:
        """True if this node is the final child of its parent (always true for a root)."""
        parent = self.parent
        if parent is None:
            return True
        return parent.children[-1] is self

    def add(self, message: str, options: LogOptions | Mapping[str, Any] | None = None, **overrides: Any) -> Node:
        """Log a message as the next child of this node and return the new node.

        Options can be passed as a LogOptions, a mapping, or keyword
        arguments (styles, cascading_styles, child_styles, char_set).
        """
        return Node(message, build_options(options, overrides), parent=self)

    def add_colored(
        self, color: str, message: str, options: LogOptions | Mapping[str, Any] | None = None, **overrides: Any
    ) -> Node:
        """Like add(), with the foreground color forced to the given palette color.

        The forced color replaces any color passed in the explicit styles.
        """
        return Node(message, build_options(options, overrides).with_color(color), parent=self)

    def draw(self, sink: LineSink | None = None) -> None:
        """Render this node and everything beneath it, standard output by default."""
        render_tree(self, sink if sink is not None else StreamSink())


# One shorthand per palette color: node.red(...), node.bright_red(...), ...
# Each name maps to its own color; yellow is not swapped with bright_yellow.
for _color in PALETTE:
    setattr(Node, _color, partialmethod(Node.add_colored, _color))
del _color


def build_options(options: LogOptions | Mapping[str, Any] | None, overrides: Mapping[str, Any]) -> LogOptions:
    """Normalize the option forms accepted by tree-building calls."""
    if options is not None and overrides:
        raise TypeError("Pass either an options object or keyword overrides, not both")
    if isinstance(options, LogOptions):
        return options
    return LogOptions.create(**(options if options is not None else overrides))


def create_root(message: str, options: LogOptions | Mapping[str, Any] | None = None, **overrides: Any) -> Node:
    """Start a new tree whose root logs the given message."""
    return Node(message, build_options(options, overrides))


log = create_root
