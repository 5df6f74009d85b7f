"""String helpers shared by the Liquid template processors."""

from __future__ import annotations

import re
from collections.abc import Iterable

_QUOTES = "\"'"

_PARAM_PATTERN = re.compile(
    r"""
    (?P<key>[^:\s]*)\s*:
    (?:
        (?P<quote>["'])(?P<quoted>.*?)(?:(?P=quote)|\Z)
      | (?P<plain>\S*)
    )
    """,
    re.VERBOSE | re.DOTALL,
)


def trim_quotes(s: str) -> str:
    """Strip every leading and trailing single or double quote."""
    return s.strip(_QUOTES)


def split_respecting_quotes(text: str) -> list[str]:
    """Split on commas that are not inside single or double quotes.

    Parts are trimmed; an empty trailing part is dropped.
    """
    parts: list[str] = []
    current: list[str] = []
    quote_char: str | None = None

    for ch in text:
        if quote_char is None and ch in _QUOTES:
            quote_char = ch
            current.append(ch)
        elif quote_char is not None and ch == quote_char:
            quote_char = None
            current.append(ch)
        elif quote_char is None and ch == ",":
            parts.append("".join(current).strip())
            current.clear()
        else:
            current.append(ch)

    last = "".join(current).strip()
    if last:
        parts.append(last)
    return parts


def find_byte_index(haystack: str | bytes, needle: str | bytes | int) -> int | None:
    """Return the position of the first occurrence of ``needle``, or None."""
    index = haystack.find(needle)  # type: ignore[arg-type]
    return None if index < 0 else index


def find_equal_index(haystack: str | bytes) -> int | None:
    """Return the position of the first ``=``, or None."""
    needle = b"=" if isinstance(haystack, (bytes, bytearray)) else "="
    return find_byte_index(haystack, needle)


def is_quoted_literal(s: str) -> bool:
    """True if ``s`` starts and ends with the same kind of quote."""
    return (s.startswith('"') and s.endswith('"')) or (
        s.startswith("'") and s.endswith("'")
    )


def extract_literal_value(expression: str) -> str | None:
    """Return the text inside a quoted literal, or None if not quoted."""
    if is_quoted_literal(expression):
        return expression[1:-1]
    return None


def parse_key_value_pair(pair: str) -> tuple[str, str] | None:
    """Parse ``key:value`` (value optionally quoted); None unless exactly one colon."""
    parts = pair.split(":")
    if len(parts) != 2:
        return None
    key, value = parts
    return key.strip(), trim_quotes(value.strip())


def parse_space_separated_key_value_params(text: str) -> dict[str, str]:
    """Parse ``key:value key:"quoted value"`` pairs into a dict.

    Tokens without a colon are skipped; a later duplicate key wins.
    """
    properties: dict[str, str] = {}
    for match in _PARAM_PATTERN.finditer(text):
        key = match.group("key")
        if not key:
            continue
        if match.group("quote") is not None:
            value = match.group("quoted")
        else:
            value = match.group("plain")
        properties[key.strip()] = value
    return properties


def variable_placeholders(var: str) -> tuple[str, str, str, str]:
    """The four placeholder spellings searched for when expanding a loop item."""
    return (
        "{{" + var + ".",
        "{ " + var + ".",
        "{{" + var + "}}",
        "{ " + var + " }",
    )


def parse_filter_invocation(s: str) -> tuple[str, str] | None:
    """Split ``name: args`` into ``(name, args)``; None if there is no colon."""
    index = find_byte_index(s, ":")
    if index is None:
        return None
    return s[:index].strip(), s[index + 1 :].strip()


def apply_replacements_in_reverse(
    target: str, replacements: Iterable[tuple[int, int, str]]
) -> str:
    """Apply ``(start, end, replacement)`` ranges from last to first and return the result."""
    result = target
    for start, end, replacement in reversed(list(replacements)):
        result = result[:start] + replacement + result[end:]
    return result