"""
Error types raised by the fragment engine.

Every error here signals a bug in the generator driving the engine, not bad
user data, so none of them are caught internally.
"""

from typing import Any


class CodegenError(Exception):
    """Base class for fragment engine errors."""


class InvalidIdentifierError(CodegenError, ValueError):
    """Raised when a Name is built from text that is not a bare identifier."""

    def __init__(self, text: str) -> None:
        super().__init__(f"CodeGen: name must be a valid identifier, got {text!r}")
        self.text = text


class EncodingError(CodegenError, TypeError):
    """Raised when a value cannot be encoded as a quoted JSON literal."""

    def __init__(self, value: Any, reason: str) -> None:
        super().__init__(f"Cannot encode {type(value).__name__} as a literal: {reason}")
        self.value = value


class TemplateArityError(CodegenError, ValueError):
    """Raised when template segments and arguments do not interleave."""
