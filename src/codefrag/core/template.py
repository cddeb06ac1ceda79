"""
Template interpolation.

Templates are given as literal segments and arguments interleaved as
``L0 A1 L1 ... An Ln``. ``code`` splices arguments as code, ``str_expr`` builds
an expression evaluating to a run-time string with each argument embedded as
data.

Arguments that are Names, Fragments, numbers, booleans or None go in as they
are. Any other value is data and is encoded as a quoted literal.
"""

from collections.abc import Sequence
from string import Formatter
from typing import Any

from codefrag.core.errors import TemplateArityError
from codefrag.core.fragment import Fragment, UsedNames
from codefrag.core.items import CONCAT_OPERATOR, CodeItem, render_item
from codefrag.core.literal import safe_stringify
from codefrag.core.names import CodeOrName
from codefrag.core.usage import update_used_names


def _check_arity(segments: Sequence[str], args: tuple[Any, ...]) -> None:
    if len(segments) != len(args) + 1:
        raise TemplateArityError(
            f"Template needs {len(args) + 1} segments for {len(args)} arguments, "
            f"got {len(segments)}"
        )


def interpolate(arg: Any) -> Any:
    """Pass code and scalars through, encode anything else as a literal."""
    if isinstance(arg, (CodeOrName, int, float)) or arg is None:
        return arg
    return safe_stringify(arg)


def interpolate_str(arg: Any) -> Any:
    if isinstance(arg, (list, tuple)):
        arg = ",".join("" if x is None else render_item(x) for x in arg)
    return interpolate(arg)


def code(segments: Sequence[str], *args: Any) -> Fragment:
    """
    Build a code fragment.

    Example::

        code(["const ", " = ", ";"], Name("x"), 5)  # const x = 5;
    """
    _check_arity(segments, args)
    names: UsedNames = {}
    items: list[CodeItem] = [segments[0]]
    for i, raw in enumerate(args, 1):
        arg = interpolate(raw)
        if isinstance(arg, CodeOrName):
            update_used_names(arg, names)
            if arg.is_expression:
                arg.optimize()
            arg.push_to(items)
        else:
            items.append(arg)
        items.append(segments[i])
    return Fragment(items, names)


def str_expr(segments: Sequence[str], *args: Any) -> Fragment:
    """
    Build a string expression fragment.

    Literal segments become quoted literals joined to the arguments with
    ``+``. Empty segments are skipped. List and tuple arguments are joined with
    commas first. The result is folded when it is spliced into code.
    """
    _check_arity(segments, args)
    names: UsedNames = {}
    items: list[CodeItem] = [safe_stringify(segments[0])] if segments[0] else []
    for i, raw in enumerate(args, 1):
        if items:
            items.append(CONCAT_OPERATOR)
        arg = interpolate_str(raw)
        if isinstance(arg, CodeOrName):
            update_used_names(arg, names)
            arg.push_to(items)
        else:
            items.append(arg)
        if segments[i]:
            items.extend((CONCAT_OPERATOR, safe_stringify(segments[i])))
    return Fragment(items, names, is_expression=True)


def split_format(template: str) -> list[str]:
    """
    Split a format string with anonymous ``{}`` fields into literal segments.

    Doubled braces stand for literal braces. Only bare ``{}`` fields are
    accepted since arguments are always positional and applied in order.
    """
    segments = [""]
    for literal, field, spec, conversion in Formatter().parse(template):
        segments[-1] += literal
        if field is None:
            continue
        if field or spec or conversion:
            raise TemplateArityError(f"Only bare {{}} fields are supported, got {template!r}")
        segments.append("")
    return segments


def code_format(template: str, *args: Any) -> Fragment:
    """Like ``code`` with segments taken from a ``{}`` format string."""
    return code(split_format(template), *args)


def str_format(template: str, *args: Any) -> Fragment:
    """Like ``str_expr`` with segments taken from a ``{}`` format string."""
    return str_expr(split_format(template), *args)


def str_concat(c1: CodeOrName, c2: CodeOrName) -> CodeOrName:
    """Concatenate two string expressions, dropping an empty operand."""
    if c2.is_empty():
        return c1
    if c1.is_empty():
        return c2
    return str_expr(["", "", ""], c1, c2)


concat = str_concat
