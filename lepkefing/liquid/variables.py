"""Lookups over flattened template variables (``users.0.name`` style keys)."""

from __future__ import annotations

import re
from collections.abc import Mapping, MutableMapping

_INDEX = re.compile(r"\+?[0-9]+")


def get_array_items(source: str, variables: Mapping[str, str]) -> list[dict[str, str]]:
    """Collect ``source.<i>.<prop>`` entries into one dict per consecutive index from 0."""
    items: list[dict[str, str]] = []
    source_prefix = f"{source}."
    index = 0
    while True:
        item_prefix = f"{source_prefix}{index}."
        item = {
            key[len(item_prefix) :]: value
            for key, value in variables.items()
            if key.startswith(item_prefix)
        }
        if not item:
            return items
        items.append(item)
        index += 1


def resolve_variable_value(expression: str, variables: Mapping[str, str]) -> str | None:
    """Return a quoted literal's text, or else the value of the named variable."""
    if (expression.startswith('"') and expression.endswith('"')) or (
        expression.startswith("'") and expression.endswith("'")
    ):
        return expression[1:-1]
    return variables.get(expression)


def find_collection_size(collection_name: str, variables: Mapping[str, str]) -> int:
    """Return one more than the highest numeric index under ``collection_name.``."""
    prefix = f"{collection_name}."
    size = 0
    for key in variables:
        if not key.startswith(prefix):
            continue
        index_text = key[len(prefix) :].split(".", 1)[0]
        if _INDEX.fullmatch(index_text):
            size = max(size, int(index_text) + 1)
    return size


def clear_variables_with_prefix(variables: MutableMapping[str, str], prefix: str) -> None:
    """Remove every variable whose key starts with ``prefix.``."""
    full_prefix = f"{prefix}."
    for key in [key for key in variables if key.startswith(full_prefix)]:
        del variables[key]


def resolve_nested_path(path: str, variables: Mapping[str, str]) -> str | None:
    """Look up a dotted path in the flattened variables."""
    return variables.get(path)


def is_valid_variable_name(name: str) -> bool:
    """True for names made of letters, digits, ``_`` and ``.``, not starting with a digit or dot."""
    if not name:
        return False
    first, rest = name[0], name[1:]
    if not (first.isalpha() or first == "_"):
        return False
    return all(ch.isalnum() or ch in "_." for ch in rest)