"""
Identifier values and the common base for code items.

A Name is a live reference to a variable in the generated program. It is never
folded into a string literal and every fragment that embeds it counts it as a
use.
"""

import re
from abc import ABC, abstractmethod
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict

from codefrag.core.errors import InvalidIdentifierError

logger = structlog.get_logger()

IDENTIFIER = re.compile(r"[a-z$_][a-z$_0-9]*", re.IGNORECASE | re.ASCII)


def is_identifier(text: str) -> bool:
    """Check whether text is a bare identifier in the target language."""
    return IDENTIFIER.fullmatch(text) is not None


class CodeOrName(ABC):
    """
    Anything that can be spliced into a fragment as code.

    Subclasses expose a ``text`` attribute with their rendered source, push
    their items onto an item list and report whether they represent an empty
    string.
    """

    text: str

    # String expressions are constant folded before being spliced into code.
    is_expression = False

    @abstractmethod
    def push_to(self, items: list[Any]) -> None:
        """Append this value's code items to items."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Whether this renders as an empty string or empty string literal."""

    def optimize(self) -> "CodeOrName":
        return self

    def __str__(self) -> str:
        return self.text


class Name(CodeOrName, BaseModel):
    """
    A validated identifier.

    Two names with the same text are equal and hash alike, so they can be
    shared freely between fragments.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str

    def __init__(self, text: str) -> None:
        if not isinstance(text, str) or not is_identifier(text):
            logger.debug("name_rejected", text=text)
            raise InvalidIdentifierError(text)
        super().__init__(text=text)

    def push_to(self, items: list[Any]) -> None:
        items.append(self)

    def is_empty(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Name({self.text!r})"
