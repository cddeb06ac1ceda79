"""Core abstractions for building generated code fragments."""

from codefrag.core.access import get_property, property_access
from codefrag.core.errors import (
    CodegenError,
    EncodingError,
    InvalidIdentifierError,
    TemplateArityError,
)
from codefrag.core.folding import fold_concatenations
from codefrag.core.fragment import Code, Fragment, SafeExpr, UsedNames, nil
from codefrag.core.items import CONCAT_OPERATOR, CodeItem
from codefrag.core.literal import safe_stringify, stringify
from codefrag.core.names import IDENTIFIER, CodeOrName, Name, is_identifier
from codefrag.core.template import (
    code,
    code_format,
    concat,
    split_format,
    str_concat,
    str_expr,
    str_format,
)
from codefrag.core.usage import merge_usage, update_used_names, usage_of, used_names

__all__ = [
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
