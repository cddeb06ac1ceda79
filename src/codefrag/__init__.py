"""
codefrag

An intermediate representation for generated source code.

Generators assemble Fragments from literal segments and interpolated values:

- Name → validated identifier, a live reference in the generated program
- Fragment → ordered code items with a count of the names they use
- code / str_expr → template interpolation as code or as a run-time string
- optimize → constant folding of adjacent string literals
"""

__version__ = "0.1.0"

from codefrag.core import (
    CONCAT_OPERATOR,
    IDENTIFIER,
    Code,
    CodegenError,
    CodeItem,
    CodeOrName,
    EncodingError,
    Fragment,
    InvalidIdentifierError,
    Name,
    SafeExpr,
    TemplateArityError,
    UsedNames,
    code,
    code_format,
    concat,
    fold_concatenations,
    get_property,
    is_identifier,
    merge_usage,
    nil,
    property_access,
    safe_stringify,
    split_format,
    str_concat,
    str_expr,
    str_format,
    stringify,
    update_used_names,
    usage_of,
    used_names,
)

__all__ = [
    "__version__",
    "CONCAT_OPERATOR",
    "IDENTIFIER",
    "Code",
    "CodeItem",
    "CodeOrName",
    "CodegenError",
    "EncodingError",
    "Fragment",
    "InvalidIdentifierError",
    "Name",
    "SafeExpr",
    "TemplateArityError",
    "UsedNames",
    "code",
    "code_format",
    "concat",
    "fold_concatenations",
    "get_property",
    "is_identifier",
    "merge_usage",
    "nil",
    "property_access",
    "safe_stringify",
    "split_format",
    "str_concat",
    "str_expr",
    "str_format",
    "stringify",
    "update_used_names",
    "usage_of",
    "used_names",
]
