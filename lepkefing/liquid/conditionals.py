"""Evaluation of ``{% if %}`` and ``{% unless %}`` blocks."""

from __future__ import annotations

from collections.abc import Mapping

from lepkefing.liquid.scanning import LiquidError
from lepkefing.liquid.tags import find_tag_block
from lepkefing.liquid.text import apply_replacements_in_reverse


def _evaluate_blocks(
    template: str,
    start_tag: str,
    end_tag: str,
    keep_inner,
) -> str:
    """Replace each block with its inner content or nothing, as ``keep_inner`` decides."""
    replacements: list[tuple[int, int, str]] = []
    position = 0
    while (block := find_tag_block(template, start_tag, end_tag, position)) is not None:
        replacement = block.inner_content if keep_inner(block.tag_content.strip()) else ""
        replacements.append((block.start, block.end, replacement))
        position = block.end
    return apply_replacements_in_reverse(template, replacements)


def process_liquid_conditional_tags(template: str, variables: Mapping[str, str]) -> str:
    """Keep ``{% if name %}...{% endif %}`` content only when ``name`` is truthy.

    A variable is truthy when it exists and its trimmed value is neither empty
    nor ``false``. Raises LiquidError when an ``if`` has no ``endif``.
    """
    if not template:
        return template

    def is_truthy(condition: str) -> bool:
        value = variables.get(condition)
        if value is None:
            return False
        trimmed = value.strip()
        return bool(trimmed) and trimmed != "false"

    result = _evaluate_blocks(template, "{% if", "{% endif %}", is_truthy)
    if "{% if" in result:
        raise LiquidError("Missing {% endif %} tag")
    return result


def process_liquid_unless_tags(template: str, variables: Mapping[str, str]) -> str:
    """Drop ``{% unless name %}...{% endunless %}`` content when ``name`` is ``true``.

    Raises LiquidError when an ``unless`` has no ``endunless``.
    """

    def keep(condition: str) -> bool:
        return variables.get(condition) != "true"

    result = _evaluate_blocks(template, "{% unless", "{% endunless %}", keep)
    if "{% unless" in result:
        raise LiquidError("Missing {% endunless %} tag")
    return result