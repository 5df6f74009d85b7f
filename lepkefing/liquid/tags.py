"""Locating and parsing Liquid ``{% ... %}`` tags."""

from __future__ import annotations

from dataclasses import dataclass

from lepkefing.liquid.scanning import Cursor, LiquidError, read_liquid_tag_content
from lepkefing.liquid.text import find_equal_index


@dataclass(frozen=True)
class TagBlock:
    """A block such as ``{% if x %}...{% endif %}`` found in a template."""

    start: int
    end: int
    tag_content: str
    inner_content: str


def find_tag_block(
    template: str, start_tag: str, end_tag: str, start_pos: int
) -> TagBlock | None:
    """Find the first complete block at or after ``start_pos``, or None."""
    tag_start = template.find(start_tag, start_pos)
    if tag_start < 0:
        return None

    closing = template.find("%}", tag_start)
    if closing < 0:
        return None
    opening_tag_end = closing + 2

    end_index = template.find(end_tag, opening_tag_end)
    if end_index < 0:
        return None
    tag_end = end_index + len(end_tag)

    tag_content = template[tag_start + len(start_tag) : opening_tag_end - 2].strip()
    inner_content = template[opening_tag_end:end_index]

    return TagBlock(
        start=tag_start,
        end=tag_end,
        tag_content=tag_content,
        inner_content=inner_content,
    )


def skip_whitespace(cursor: Cursor) -> None:
    """Consume whitespace characters from the cursor."""
    while (ch := cursor.peek()) is not None and ch.isspace():
        next(cursor)


def read_until_closing_tag(cursor: Cursor) -> str:
    """Read a tag's content up to ``%}``, consuming it; raise if it never closes."""
    content, found_closing = read_liquid_tag_content(cursor)
    if not found_closing:
        raise LiquidError("Unclosed liquid tag")
    return content


def parse_assignment(content: str) -> tuple[str, str] | None:
    """Split ``name = value`` into its trimmed sides; None unless exactly one ``=``."""
    index = find_equal_index(content)
    if index is None:
        return None
    right = content[index + 1 :]
    if "=" in right:
        return None
    return content[:index].strip(), right.strip()


def extract_tag_parameter(tag_content: str, tag_type: str) -> str | None:
    """Return what follows ``tag_type`` in a tag's content, or None if absent or empty."""
    trimmed = tag_content.strip()
    if not trimmed.startswith(tag_type):
        return None
    param = trimmed[len(tag_type) :].strip()
    return param or None


def extract_tag_inner(full_tag: str, tag_name: str) -> str | None:
    """Return the trimmed text between ``{% tag_name`` and ``%}`` of a full tag."""
    trimmed = full_tag.strip()
    prefix = "{% " + tag_name
    if not trimmed.startswith(prefix) or not trimmed.endswith("%}"):
        return None
    return trimmed[len(prefix) : len(trimmed) - 2].strip()


def read_nested_block(cursor: Cursor, start_keyword: str, end_keyword: str) -> str:
    """Read a balanced block body up to its matching ``{% end_keyword %}``.

    The opening tag is assumed already consumed. Nested tags are re-emitted
    in the normalised form ``{% content %}``.
    """
    content: list[str] = []
    depth = 1

    while depth > 0:
        try:
            ch = next(cursor)
        except StopIteration:
            raise LiquidError(
                "Unclosed block - missing {% " + end_keyword + " %}"
            ) from None

        if ch == "{" and cursor.peek() == "%":
            next(cursor)
            inner_tag, _ = read_liquid_tag_content(cursor)
            trimmed = inner_tag.strip()
            if trimmed.startswith(start_keyword):
                depth += 1
            elif trimmed == end_keyword:
                depth -= 1
            if depth > 0:
                content.append("{% " + trimmed + " %}")
        else:
            content.append(ch)

    return "".join(content)