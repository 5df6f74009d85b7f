"""Processing of ``{% assign name = expression %}`` tags."""

from __future__ import annotations

from collections.abc import MutableMapping, Mapping

from lepkefing.liquid.scanning import Cursor, LiquidError
from lepkefing.liquid.tags import (
    extract_tag_parameter,
    parse_assignment,
    read_until_closing_tag,
)
from lepkefing.liquid.text import (
    parse_filter_invocation,
    split_respecting_quotes,
    trim_quotes,
)
from lepkefing.liquid.variables import (
    clear_variables_with_prefix,
    get_array_items,
    resolve_variable_value,
)


def process_liquid_assign_tags(
    template: str, variables: MutableMapping[str, str]
) -> str:
    """Evaluate assign tags into ``variables`` and remove them from the template.

    ``{% assign x = y %}`` copies a variable or a quoted literal.
    ``{% assign active = users | where: "active", "true" %}`` stores the
    matching items as ``active.<i>.<prop>``. Other tags are kept, normalised
    to ``{% content %}``. Raises LiquidError for malformed tags.
    """
    parts: list[str] = []
    cursor = Cursor(template)

    for ch in cursor:
        if ch == "{" and cursor.peek() == "%":
            next(cursor)
            trimmed = read_until_closing_tag(cursor).strip()
            assign_content = extract_tag_parameter(trimmed, "assign")
            if assign_content is not None:
                _process_assign_statement(assign_content, variables)
            else:
                parts.append("{% " + trimmed + " %}")
        else:
            parts.append(ch)

    return "".join(parts)


def _process_assign_statement(
    statement: str, variables: MutableMapping[str, str]
) -> None:
    parsed = parse_assignment(statement)
    if parsed is None:
        raise LiquidError("Invalid assign syntax")
    variable_name, expression = parsed

    source, pipe, filter_part = expression.partition("|")
    if pipe:
        filtered = _apply_filter(source.strip(), filter_part.strip(), variables)
        clear_variables_with_prefix(variables, variable_name)
        for index, item in enumerate(filtered):
            for key, value in item.items():
                variables[f"{variable_name}.{index}.{key}"] = value
    else:
        value = resolve_variable_value(expression, variables)
        if value is not None:
            variables[variable_name] = value


def _apply_filter(
    source: str, filter_expression: str, variables: Mapping[str, str]
) -> list[dict[str, str]]:
    invocation = parse_filter_invocation(filter_expression)
    if invocation is None:
        raise LiquidError("Invalid filter syntax")
    filter_name, filter_args = invocation

    if filter_name == "where":
        return _apply_where_filter(source, filter_args, variables)
    raise LiquidError(f"Unknown filter: {filter_name}")


def _apply_where_filter(
    source: str, args: str, variables: Mapping[str, str]
) -> list[dict[str, str]]:
    parts = split_respecting_quotes(args)
    if len(parts) != 2:
        raise LiquidError("where filter requires exactly 2 arguments")

    prop = trim_quotes(parts[0])
    target_value = trim_quotes(parts[1])

    def matches(item: Mapping[str, str]) -> bool:
        value = item.get(prop)
        if target_value == "nil":
            return value is None or value == "" or value == "nil"
        return value == target_value

    return [item for item in get_array_items(source, variables) if matches(item)]