#!/usr/bin/env python3
"""
Data models for tree logging.

Contains the style and option structures passed to tree-building calls and
the resolved configuration each node hands down to its children.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional, Union

from .utils.charsets import DEFAULT_CHAR_SET


@dataclass(frozen=True)
class StyleOptions:
    """Text styling for a single message.

    Every field defaults to None, meaning "not specified". Only specified
    fields take part in a merge, so an explicit False still overrides an
    inherited True.
    """
    color: Optional[str] = None
    background: Optional[str] = None
    bold: Optional[bool] = None
    underline: Optional[bool] = None
    inverse: Optional[bool] = None
    italic: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StyleOptions":
        """Build styles from a mapping. Unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def coerce(cls, value: Union["StyleOptions", Mapping[str, Any], None]) -> "StyleOptions":
        """Accept StyleOptions, a plain mapping, or None."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.from_dict(value)

    def merge(self, other: "StyleOptions") -> "StyleOptions":
        """Overlay the specified fields of other on top of self."""
        overrides = other.to_dict()
        if not overrides:
            return self
        return replace(self, **overrides)

    def is_empty(self) -> bool:
        """Check if no field is specified."""
        return not self.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        """Convert specified fields to a dictionary."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


StyleLike = Union[StyleOptions, Mapping[str, Any], None]


@dataclass(frozen=True)
class LogOptions:
    """Overrides given to a single tree-building call."""
    styles: StyleOptions = field(default_factory=StyleOptions)  # this node only
    cascading_styles: StyleOptions = field(default_factory=StyleOptions)  # this node and descendants
    child_styles: StyleOptions = field(default_factory=StyleOptions)  # descendants only
    char_set: Optional[str] = None

    def __post_init__(self):
        for name in ("styles", "cascading_styles", "child_styles"):
            object.__setattr__(self, name, StyleOptions.coerce(getattr(self, name)))

    @classmethod
    def create(
        cls,
        styles: StyleLike = None,
        cascading_styles: StyleLike = None,
        child_styles: StyleLike = None,
        char_set: Optional[str] = None,
    ) -> "LogOptions":
        """Create options, accepting mappings wherever styles are expected."""
        return cls(
            styles=StyleOptions.coerce(styles),
            cascading_styles=StyleOptions.coerce(cascading_styles),
            child_styles=StyleOptions.coerce(child_styles),
            char_set=char_set,
        )

    def with_color(self, color: str) -> "LogOptions":
        """Return a copy whose explicit styles carry the given color."""
        return replace(self, styles=replace(self.styles, color=color))


@dataclass(frozen=True)
class ResolvedConfig:
    """Configuration a node passes down to the children it creates."""
    char_set: str = DEFAULT_CHAR_SET
    cascading_styles: StyleOptions = field(default_factory=StyleOptions)
    child_styles: StyleOptions = field(default_factory=StyleOptions)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for JSON serialization."""
        return {
            "char_set": self.char_set,
            "cascading_styles": self.cascading_styles.to_dict(),
            "child_styles": self.child_styles.to_dict(),
        }
