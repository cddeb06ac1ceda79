#!/usr/bin/env python3
"""
Example: Generating a Validator

Demonstrates:
- Name values as live references in generated code
- code() splicing fragments and encoding data as literals
- str_expr() building error messages that fold into constants
- Usage counts flowing from child fragments into the function body

This shows the fragment pipeline:
SCHEMA -> FRAGMENTS -> FOLD -> SOURCE TEXT
"""

import logging

import structlog

from codefrag import Fragment, Name, code, get_property, nil, str_concat, str_expr

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)
logging.basicConfig(level=logging.DEBUG, format="%(message)s")

SCHEMA = {
    "required": ["id", "display-name"],
    "maxLength": {"id": 8},
}


def required_check(data: Name, errors: Name, prop: str) -> Fragment:
    """Emit a presence check for one required property."""
    access = get_property(prop)
    message = str_expr(["missing property '", "'"], prop)
    return code(
        ["if (", "", " === undefined) ", ".push(", ");\n"],
        data,
        access,
        errors,
        message,
    )


def max_length_check(data: Name, errors: Name, prop: str, limit: int) -> Fragment:
    """Emit a length check whose message mixes data and a run-time value."""
    value = code(["", "", ""], data, get_property(prop))
    message = str_concat(
        str_expr(["", " must be at most ", " characters, got "], prop, limit),
        str_expr(["", ""], code(["", ".length"], value)),
    )
    return code(
        ["if (", ".length > ", ") ", ".push(", ");\n"],
        value,
        limit,
        errors,
        message,
    )


def main():
    print("=" * 60)
    print("Validator Generation Example")
    print("=" * 60)
    print()

    data = Name("data")
    errors = Name("errors")

    body = nil
    for prop in SCHEMA["required"]:
        body = code(["", "", ""], body, required_check(data, errors, prop))
    for prop, limit in SCHEMA["maxLength"].items():
        body = code(["", "", ""], body, max_length_check(data, errors, prop, limit))

    function = code(
        ["function validate(", ") {\n  const ", " = [];\n", "  return ", ";\n}\n"],
        data,
        errors,
        body,
        errors,
    )

    print("Generated source:")
    print("-" * 40)
    print(function)
    print("Name usage:")
    print("-" * 40)
    for name, count in sorted((function.used_names or {}).items()):
        print(f"  {name}: {count}")


if __name__ == "__main__":
    main()
