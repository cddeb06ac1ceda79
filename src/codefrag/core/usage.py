"""
Name usage tracking.

Every fragment carries a map from identifier text to the number of times the
fragment references it. Composing fragments merges the child's counts into the
parent exactly once per child; a negative increment removes a child's counts
again when the generator drops it.
"""

from typing import Any, Literal

from codefrag.core.fragment import Fragment, UsedNames
from codefrag.core.names import Name


def update_used_names(source: Any, names: UsedNames, inc: Literal[1, -1] = 1) -> None:
    """
    Add the name usage of source into names.

    source is a Name, a Fragment, or any object with a ``used_names`` mapping.
    Missing keys start from zero.
    """
    if isinstance(source, Name):
        names[source.text] = names.get(source.text, 0) + inc
        return
    counts = getattr(source, "used_names", None)
    if not counts:
        return
    for name, count in counts.items():
        names[name] = names.get(name, 0) + inc * (count or 0)


def merge_usage(into: UsedNames, source: Any, inc: Literal[1, -1] = 1) -> None:
    update_used_names(source, into, inc)


def used_names(value: Any) -> UsedNames | None:
    """Return the usage map of a code value, or None for plain data."""
    if isinstance(value, Name):
        return {value.text: 1}
    if isinstance(value, Fragment):
        return value.used_names
    return None


usage_of = used_names
