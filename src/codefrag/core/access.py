"""Property access expressions."""

from codefrag.core.fragment import Fragment
from codefrag.core.names import CodeOrName, is_identifier
from codefrag.core.template import code


def get_property(key: CodeOrName | str | int | float) -> Fragment:
    """Return ``.key`` for identifier keys and ``[key]`` for everything else."""
    if isinstance(key, str) and is_identifier(key):
        return Fragment(f".{key}")
    return code(["[", "]"], key)


property_access = get_property
