"""
Safe literal encoding.

Data values are embedded in generated source as JSON literals. JSON allows the
U+2028 and U+2029 separators inside strings but older JavaScript grammars end
a line there, so both are escaped after encoding. Lone surrogates are escaped
too, otherwise the literal could not be written out as UTF-8.
"""

import json
import re
from typing import Any

import structlog

from codefrag.core.errors import EncodingError
from codefrag.core.fragment import Fragment

logger = structlog.get_logger()

_UNSAFE_CHARS = re.compile("[\\u2028\\u2029\\ud800-\\udfff]")


def safe_stringify(value: Any) -> str:
    """Encode value as a quoted literal safe to embed in generated source."""
    try:
        encoded = json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug("literal_encoding_failed", value_type=type(value).__name__, error=str(e))
        raise EncodingError(value, str(e)) from e
    return _UNSAFE_CHARS.sub(lambda m: f"\\u{ord(m.group()):04x}", encoded)


def stringify(value: Any) -> Fragment:
    """Wrap the safe literal encoding of value as a fragment."""
    return Fragment(safe_stringify(value))
