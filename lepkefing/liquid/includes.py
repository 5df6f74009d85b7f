"""Parsing and expansion of ``{% include name key:"value" %}`` tags."""

from __future__ import annotations

from collections.abc import Mapping

from lepkefing.liquid.replace import replace_template_variables
from lepkefing.liquid.tags import extract_tag_inner
from lepkefing.liquid.text import parse_space_separated_key_value_params


def _extract_template_name(content: str) -> tuple[str, str] | None:
    """Split include content into the template name and the text after it."""
    stripped = content.lstrip()
    tokens = stripped.split(None, 1)
    if not tokens:
        return None
    name = tokens[0]
    return name, stripped[len(name) :]


def parse_liquid_include_tag(tag: str) -> tuple[str, dict[str, str]] | None:
    """Return the template name and parameters of an include tag, or None."""
    content = extract_tag_inner(tag, "include")
    if content is None:
        return None
    parsed = _extract_template_name(content)
    if parsed is None:
        return None
    template_name, remaining = parsed
    return template_name, parse_space_separated_key_value_params(remaining)


def process_liquid_includes(text: str, templates: Mapping[str, str]) -> str:
    """Replace include tags with their templates, filled with the tag's parameters.

    Tags that cannot be parsed or name an unknown template are left as they are.
    """
    result = text
    start = 0

    while (tag_start := result.find("{% include", start)) >= 0:
        closing = result.find("%}", tag_start)
        if closing < 0:
            break
        tag_end = closing + 2

        parsed = parse_liquid_include_tag(result[tag_start:tag_end])
        if parsed is not None and parsed[0] in templates:
            template_name, params = parsed
            processed = replace_template_variables(templates[template_name], params)
            result = result[:tag_start] + processed + result[tag_end:]
            start = tag_start + len(processed)
        else:
            start = tag_end

    return result