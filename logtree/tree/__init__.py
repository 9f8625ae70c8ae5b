"""Log tree building and rendering."""

from .node import Node, create_root, log
from .renderer import render_json, render_lines, render_text, render_tree
from .styles import resolve, style_text

__all__ = [
    "Node",
    "create_root",
    "log",
    "render_json",
    "render_lines",
    "render_text",
    "render_tree",
    "resolve",
    "style_text",
]
