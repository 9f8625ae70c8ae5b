"""Style resolution for tree nodes.

Three style buckets arrive with every call:
- styles: applied to the new node only
- cascading_styles: applied to the new node and inherited by its descendants
- child_styles: inherited by descendants but never applied to the new node
"""

from __future__ import annotations

from ..models import LogOptions, ResolvedConfig, StyleOptions
from ..utils import ansi


def resolve(inherited: ResolvedConfig, overrides: LogOptions) -> tuple[StyleOptions, ResolvedConfig]:
    """Merge a caller's configuration with one call's overrides.

    Returns the effective style for the new node's own text and the
    configuration the new node hands to its children.
    """
    cascading = inherited.cascading_styles.merge(overrides.cascading_styles)
    # On the node itself, inherited cascading styles win over the call's own.
    effective = (
        overrides.cascading_styles.merge(inherited.cascading_styles)
        .merge(inherited.child_styles)
        .merge(overrides.styles)
    )
    for_children = ResolvedConfig(
        char_set=overrides.char_set if overrides.char_set is not None else inherited.char_set,
        cascading_styles=cascading,
        child_styles=inherited.child_styles.merge(overrides.child_styles),
    )
    return effective, for_children


def style_prefix(style: StyleOptions) -> str:
    """Escape codes for a style, in the order color, background, bold, underline, inverse, italic."""
    codes: list[str] = []
    if style.color:
        codes.append(ansi.foreground(style.color))
    if style.background:
        codes.append(ansi.background(style.background))
    if style.bold:
        codes.append(ansi.BOLD)
    if style.underline:
        codes.append(ansi.UNDERLINE)
    if style.inverse:
        codes.append(ansi.INVERSE)
    if style.italic:
        codes.append(ansi.ITALIC)
    return "".join(codes)


def style_text(message: str, style: StyleOptions) -> str:
    """Wrap a message in its style codes followed by a single reset."""
    return style_prefix(style) + message + ansi.RESET
