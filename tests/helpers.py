"""Helpers shared across logtree tests."""

import re

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

DIM = "\u001b[90m"
RESET = "\u001b[0m"


def plain(text):
    """Strip ANSI escape codes."""
    return ANSI_PATTERN.sub("", text)


def plain_lines(lines):
    return [plain(line) for line in lines]
