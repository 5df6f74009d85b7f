"""Expansion of ``{% for item in collection %}`` blocks into indexed references."""

from __future__ import annotations

import re
from collections.abc import Mapping

from lepkefing.liquid.scanning import (
    Cursor,
    LiquidError,
    read_liquid_tag_content,
    read_until_endunless,
    skip_to_endunless,
)
from lepkefing.liquid.tags import read_nested_block, read_until_closing_tag
from lepkefing.liquid.text import (
    parse_space_separated_key_value_params,
    variable_placeholders,
)
from lepkefing.liquid.variables import find_collection_size

_LIMIT = re.compile(r"\+?[0-9]+")


def process_liquid_for_loops(template: str, variables: Mapping[str, str]) -> str:
    """Expand for loops until none remain.

    ``{% for person in people %}{{ person.name }}{% endfor %}`` becomes
    ``{{ people.0.name }}{{ people.1.name }}...`` so that ordinary variable
    substitution can fill the values in afterwards. Nested loops are expanded
    one level per pass. Raises LiquidError for malformed loops.
    """
    current = template
    while True:
        processed = _process_single_pass(current, variables)
        if processed == current:
            return current
        current = processed


def _parse_limit(params_text: str) -> int | None:
    if not params_text:
        return None
    limit_text = parse_space_separated_key_value_params(params_text).get("limit")
    if limit_text is not None and _LIMIT.fullmatch(limit_text):
        return int(limit_text)
    return None


def _process_single_pass(template: str, variables: Mapping[str, str]) -> str:
    parts: list[str] = []
    cursor = Cursor(template)

    for ch in cursor:
        if not (ch == "{" and cursor.peek() == "%"):
            parts.append(ch)
            continue

        next(cursor)
        tag_content = read_until_closing_tag(cursor).strip()

        if not tag_content.startswith("for "):
            parts.append("{% " + tag_content + " %}")
            continue

        sides = tag_content[len("for ") :].split(" in ")
        if len(sides) != 2:
            raise LiquidError("Invalid for loop syntax")

        item_var = sides[0].strip()
        rhs_tokens = sides[1].split()
        if not rhs_tokens:
            raise LiquidError("Invalid for loop syntax")
        collection_var = rhs_tokens[0]
        limit = _parse_limit(" ".join(rhs_tokens[1:]))

        loop_body = read_nested_block(cursor, "for ", "endfor")
        parts.append(
            _expand_for_loop(item_var, collection_var, loop_body, variables, limit)
        )

    return "".join(parts)


def _expand_for_loop(
    item_var: str,
    collection_var: str,
    loop_body: str,
    variables: Mapping[str, str],
    limit: int | None,
) -> str:
    total_size = find_collection_size(collection_var, variables)
    if total_size == 0:
        return ""

    loop_len = total_size if limit is None else min(total_size, limit)
    patterns = variable_placeholders(item_var)
    expanded_items: list[str] = []

    for i in range(loop_len):
        body = _replace_forloop_context(
            loop_body,
            is_last=i == loop_len - 1,
            is_first=i == 0,
            index=i + 1,
            index0=i,
            length=loop_len,
        )

        item_ref = f"{collection_var}.{i}"
        replacements = (
            "{{" + item_ref + ".",
            "{ " + item_ref + ".",
            "{{" + item_ref + "}}",
            "{ " + item_ref + " }",
        )
        for pattern, replacement in zip(patterns, replacements):
            body = body.replace(pattern, replacement)

        body = body.replace(f" in {item_var}.", f" in {item_ref}.")
        body = body.replace("{% if " + item_var + ".", "{% if " + item_ref + ".")

        expanded_items.append(body)

    return "".join(expanded_items)


def _replace_forloop_context(
    template: str,
    *,
    is_last: bool,
    is_first: bool,
    index: int,
    index0: int,
    length: int,
) -> str:
    """Fill in ``forloop`` values and ``unless forloop.last`` blocks outside nested loops."""
    values = {
        "{{ forloop.last }}": "true" if is_last else "false",
        "{{ forloop.first }}": "true" if is_first else "false",
        "{{ forloop.index }}": str(index),
        "{{ forloop.index0 }}": str(index0),
        "{{ forloop.length }}": str(length),
    }
    result: list[str] = []
    cursor = Cursor(template)
    nesting_level = 0

    for ch in cursor:
        if ch == "{" and cursor.peek() == "%":
            tag_start = len(result)
            result.append(ch)
            result.append(next(cursor))
            tag_content, found_closing = read_liquid_tag_content(cursor)
            result.append(tag_content)
            if not found_closing:
                continue
            result.append("%}")

            tag = tag_content.strip()
            if tag.startswith("for "):
                nesting_level += 1
            elif tag == "endfor":
                nesting_level -= 1
            elif nesting_level == 0 and tag.startswith("unless forloop.last"):
                del result[tag_start:]
                if is_last:
                    skip_to_endunless(cursor)
                else:
                    result.append(read_until_endunless(cursor))
        elif ch == "{" and cursor.peek() == "{":
            expr = [ch, next(cursor)]
            for c in cursor:
                expr.append(c)
                if c == "}" and cursor.peek() == "}":
                    expr.append(next(cursor))
                    break
            text = "".join(expr)
            if nesting_level == 0:
                result.append(values.get(text, text))
            else:
                result.append(text)
        else:
            result.append(ch)

    return "".join(result)