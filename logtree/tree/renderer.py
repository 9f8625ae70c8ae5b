"""Terminal and JSON rendering for log trees."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from ..sinks import LineSink, ListSink
from ..utils import ansi
from ..utils.charsets import get_char_set

if TYPE_CHECKING:
    from .node import Node

logger = logging.getLogger(__name__)

# Color of the branch glyphs and indentation drawn before each message.
PREFIX_COLOR = "bright_black"


def render_tree(root: Node, sink: LineSink) -> int:
    """Write the tree to sink, one line per non-empty message.

    Returns the number of lines written.
    """
    total = _render_subtree(root, [], is_last=True, is_root=True, sink=sink)
    logger.debug("Rendered %d lines for tree %r", total, root.message)
    return total


def _render_subtree(node: Node, prefix: list[str], is_last: bool, is_root: bool, sink: LineSink) -> int:
    """Recursively render a subtree. prefix holds one token per non-root ancestor."""
    lines = 0
    glyphs = None if is_root else get_char_set(node.char_set)

    if node.message:
        if glyphs is None:
            sink.write_line(node.rendered_message)
        else:
            sink.write_line(
                ansi.foreground(PREFIX_COLOR)
                + "".join(prefix)
                + glyphs.branch(is_last)
                + ansi.RESET
                + node.rendered_message
            )
        lines += 1

    # The root leaves no indentation token for its children.
    child_prefix = prefix if glyphs is None else [*prefix, glyphs.continuation(is_last)]
    last_index = len(node.children) - 1
    for i, child in enumerate(node.children):
        lines += _render_subtree(child, child_prefix, i == last_index, False, sink)
    return lines


def render_lines(root: Node) -> list[str]:
    """Render the tree and return its lines."""
    sink = ListSink()
    render_tree(root, sink)
    return sink.lines


def render_text(root: Node) -> str:
    """Render the tree as a single newline-terminated string."""
    sink = ListSink()
    render_tree(root, sink)
    return sink.getvalue()


def render_json(root: Node) -> str:
    """Render the tree structure (raw messages, no ANSI codes) as a JSON string."""
    output = {
        "total_nodes": _count_nodes(root),
        "total_lines": _count_lines(root),
        "max_depth": _max_depth(root),
        "tree": _node_to_dict(root),
    }
    return json.dumps(output, indent=2, ensure_ascii=False)


def _node_to_dict(node: Node) -> dict:
    """Convert a Node to a JSON-serializable dictionary."""
    return {
        "message": node.message,
        **node.config.to_dict(),
        "children": [_node_to_dict(child) for child in node.children],
    }


def _count_nodes(node: Node) -> int:
    return 1 + sum(_count_nodes(child) for child in node.children)


def _count_lines(node: Node) -> int:
    return (1 if node.message else 0) + sum(_count_lines(child) for child in node.children)


def _max_depth(node: Node) -> int:
    return max((1 + _max_depth(child) for child in node.children), default=0)
