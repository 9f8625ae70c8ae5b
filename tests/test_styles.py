"""
Tests for style resolution and message styling.

Covers the three style buckets, their precedence, and the escape codes
produced for each attribute.
"""

import pytest

from logtree.models import LogOptions, ResolvedConfig, StyleOptions
from logtree.tree.styles import resolve, style_prefix, style_text
from logtree.utils.ansi import UnknownColorError


class TestStyleOptions:
    """Test suite for StyleOptions merging."""

    def test_merge_only_overrides_specified_fields(self):
        base = StyleOptions(color="red", bold=True)
        merged = base.merge(StyleOptions(background="blue"))
        assert merged == StyleOptions(color="red", background="blue", bold=True)

    def test_explicit_false_overrides_true(self):
        merged = StyleOptions(bold=True).merge(StyleOptions(bold=False))
        assert merged.bold is False

    def test_from_dict_ignores_unknown_keys(self):
        styles = StyleOptions.from_dict({"color": "green", "blink": True})
        assert styles.to_dict() == {"color": "green"}

    def test_coerce_accepts_none_mapping_and_instance(self):
        styles = StyleOptions(italic=True)
        assert StyleOptions.coerce(None).is_empty()
        assert StyleOptions.coerce({"italic": True}) == styles
        assert StyleOptions.coerce(styles) is styles


class TestResolve:
    """Test suite for merging inherited configuration with call overrides."""

    def test_cascading_applies_to_node_and_children(self):
        effective, for_children = resolve(
            ResolvedConfig(), LogOptions.create(cascading_styles={"color": "red"})
        )
        assert effective.color == "red"
        assert for_children.cascading_styles.color == "red"

    def test_child_styles_skip_declaring_node(self):
        effective, for_children = resolve(
            ResolvedConfig(), LogOptions.create(child_styles={"bold": True})
        )
        assert effective.bold is None, "child styles must not apply to the node that declares them"
        assert for_children.child_styles.bold is True

    def test_inherited_child_styles_apply(self):
        inherited = ResolvedConfig(child_styles=StyleOptions(underline=True))
        effective, for_children = resolve(inherited, LogOptions())
        assert effective.underline is True
        assert for_children.child_styles.underline is True

    def test_precedence_order(self):
        """Test call cascading < inherited cascading < inherited child < explicit styles."""
        inherited = ResolvedConfig(
            cascading_styles=StyleOptions(color="red", background="white", bold=True),
            child_styles=StyleOptions(background="black", italic=True),
        )
        overrides = LogOptions.create(
            styles={"italic": False},
            cascading_styles={"color": "green", "underline": True},
        )
        effective, for_children = resolve(inherited, overrides)
        assert effective == StyleOptions(
            color="red", background="black", bold=True, underline=True, italic=False
        )
        assert for_children.cascading_styles == StyleOptions(
            color="green", background="white", bold=True, underline=True
        )

    def test_explicit_styles_do_not_propagate(self):
        inherited = ResolvedConfig(cascading_styles=StyleOptions(color="red"))
        effective, for_children = resolve(inherited, LogOptions.create(styles={"color": "blue"}))
        assert effective.color == "blue"
        assert for_children.cascading_styles.color == "red"
        assert for_children.child_styles.is_empty()

    def test_char_set_inherited_unless_overridden(self):
        inherited = ResolvedConfig(char_set="heavy")
        _, kept = resolve(inherited, LogOptions())
        _, changed = resolve(inherited, LogOptions.create(char_set="ascii"))
        assert kept.char_set == "heavy"
        assert changed.char_set == "ascii"


class TestStyleText:
    """Test suite for escape code generation."""

    def test_unstyled_text_still_reset(self):
        assert style_text("hello", StyleOptions()) == "hello\u001b[0m"

    def test_attribute_order(self):
        style = StyleOptions(
            italic=True, inverse=True, underline=True, bold=True, background="blue", color="red"
        )
        assert style_prefix(style) == "\u001b[31m\u001b[44m\u001b[1m\u001b[4m\u001b[7m\u001b[3m"

    def test_bright_colors(self):
        style = StyleOptions(color="bright_cyan", background="bright_black")
        assert style_text("x", style) == "\u001b[96m\u001b[100mx\u001b[0m"

    def test_false_attributes_emit_nothing(self):
        assert style_prefix(StyleOptions(bold=False, italic=False)) == ""

    def test_unknown_color_is_lookup_error(self):
        with pytest.raises(UnknownColorError) as exc_info:
            style_text("x", StyleOptions(color="orange"))
        assert isinstance(exc_info.value, KeyError)
        assert "orange" in str(exc_info.value)
