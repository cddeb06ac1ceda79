"""
Constant folding of string expressions.

A string expression is a run of items joined by the ``+`` operator. Adjacent
quoted literals are merged into one literal, and scalars next to a literal are
absorbed into it, so the generated program does not concatenate constants at
run time. Names always stay live references.
"""

from codefrag.core.items import (
    CONCAT_OPERATOR,
    CodeItem,
    is_quoted_end,
    is_quoted_start,
    render_item,
)
from codefrag.core.names import Name


def _merge(a: CodeItem, b: CodeItem) -> str | None:
    """Merge the operands of one ``a + b`` if both are known at generation time."""
    if isinstance(a, str) and isinstance(b, str):
        if is_quoted_end(a) and is_quoted_start(b):
            return a[:-1] + b[1:]
        return None
    if is_quoted_end(a) and not isinstance(b, Name):
        return f'{a[:-1]}{render_item(b)}"'
    if is_quoted_start(b) and not isinstance(a, Name):
        return f'"{render_item(a)}{b[1:]}'
    return None


def fold_concatenations(items: list[CodeItem]) -> int:
    """
    Fold constant concatenations in place.

    Returns the number of merges performed. A merged literal is re-examined
    against the operators on both sides, so chains like ``"a" + 1 + "b"`` and
    ``1 + 2 + "b"`` collapse fully and a second pass merges nothing.
    """
    merges = 0
    i = 1
    while i < len(items) - 1:
        if items[i] == CONCAT_OPERATOR:
            res = _merge(items[i - 1], items[i + 1])
            if res is not None:
                items[i - 1 : i + 2] = [res]
                merges += 1
                # the merged literal may now join the operand before it
                i = max(i - 2, 1)
                continue
        i += 1
    return merges
