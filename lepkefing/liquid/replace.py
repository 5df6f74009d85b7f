"""Substitution and removal of ``{{ variable }}`` placeholders."""

from __future__ import annotations

from collections.abc import Mapping

from lepkefing.liquid.scanning import (
    Cursor,
    LiquidError,
    advance_past_whitespace,
    read_liquid_variable_content,
)
from lepkefing.liquid.variables import is_valid_variable_name, resolve_nested_path


def replace_template_variables(template: str, variables: Mapping[str, str]) -> str:
    """Replace each ``{{ name }}`` with its value.

    Unknown names are kept as a normalised ``{{ name }}`` placeholder. Raises
    LiquidError for an unclosed placeholder or an invalid variable name.
    """
    parts: list[str] = []
    cursor = Cursor(template)

    for ch in cursor:
        if ch == "{" and cursor.peek() == "{":
            next(cursor)
            var_name = read_liquid_variable_content(cursor).strip()
            if not is_valid_variable_name(var_name):
                raise LiquidError(f"Invalid variable name: {var_name}")
            value = resolve_nested_path(var_name, variables)
            parts.append(value if value is not None else "{{ " + var_name + " }}")
        else:
            parts.append(ch)

    return "".join(parts)


def remove_liquid_variables(text: str) -> str:
    """Remove every ``{{ ... }}`` placeholder, braces included.

    Raises LiquidError for a ``{{`` inside a placeholder or an unclosed one.
    """
    parts: list[str] = []
    cursor = Cursor(text)
    in_variable = False

    for ch in cursor:
        if ch == "{" and cursor.peek() == "{":
            if in_variable:
                raise LiquidError(
                    "Nested opening braces '{{' found inside a variable"
                )
            in_variable = True
            next(cursor)
            advance_past_whitespace(cursor)
        elif in_variable:
            if ch == "}" and cursor.peek() == "}":
                in_variable = False
                next(cursor)
        else:
            parts.append(ch)

    if in_variable:
        raise LiquidError("Unclosed Liquid variable")

    return "".join(parts)