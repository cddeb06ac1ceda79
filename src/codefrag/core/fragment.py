"""
Fragments of generated source code.

A Fragment is an ordered list of code items plus a count of the names it
references. Fragments are built by the template functions and rendered with
``str()``. String expression fragments can be constant folded in place with
``optimize()``.
"""

from dataclasses import dataclass
from typing import Any

import structlog

from codefrag.core.folding import fold_concatenations
from codefrag.core.items import CodeItem, render_item
from codefrag.core.names import CodeOrName, Name

logger = structlog.get_logger()

UsedNames = dict[str, int]


@dataclass(eq=False)
class Fragment(CodeOrName):
    """
    A piece of generated code.

    ``items`` may be given as a single string, which becomes the only item.
    A list is kept as is, so folding compacts the caller's list.
    """

    items: list[CodeItem]
    used_names: UsedNames | None = None
    is_expression: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.items, str):
            self.items = [self.items]

    @property
    def text(self) -> str:
        return "".join(render_item(item) for item in self.items)

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Fragment):
            return NotImplemented
        return self.text == other.text and self.is_expression == other.is_expression

    __hash__ = None  # type: ignore[assignment]

    def push_to(self, items: list[CodeItem]) -> None:
        items.extend(self.items)

    def is_empty(self) -> bool:
        text = self.text
        return text == "" or text == '""'

    def optimize(self) -> "Fragment":
        """Fold constant concatenations and return self."""
        merges = fold_concatenations(self.items)
        if merges:
            logger.debug("fragment_folded", merges=merges, items=len(self.items))
        return self


Code = Fragment | Name

# Values that are safe to splice into code without encoding
SafeExpr = Fragment | Name | int | float | bool | None

nil = Fragment("")
