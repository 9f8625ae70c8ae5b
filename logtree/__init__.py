"""Hierarchical terminal logging rendered as a styled tree."""

import logging

from .models import LogOptions, ResolvedConfig, StyleOptions
from .sinks import LineSink, ListSink, StreamSink
from .tree import Node, create_root, log, render_json, render_lines, render_text, render_tree
from .utils import CHAR_SETS, PALETTE, CharSet, UnknownCharSetError, UnknownColorError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LogOptions",
    "ResolvedConfig",
    "StyleOptions",
    "LineSink",
    "ListSink",
    "StreamSink",
    "Node",
    "create_root",
    "log",
    "render_json",
    "render_lines",
    "render_text",
    "render_tree",
    "CHAR_SETS",
    "PALETTE",
    "CharSet",
    "UnknownCharSetError",
    "UnknownColorError",
]
