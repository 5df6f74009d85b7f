"""The single entry point that renders Liquid and Markdown in a template string."""

from __future__ import annotations

from collections.abc import Mapping

from lepkefing.liquid.assign import process_liquid_assign_tags
from lepkefing.liquid.conditionals import (
    process_liquid_conditional_tags,
    process_liquid_unless_tags,
)
from lepkefing.liquid.for_loop import process_liquid_for_loops
from lepkefing.liquid.pipeline import process_liquid_tags_with_assigns
from lepkefing.liquid.replace import remove_liquid_variables, replace_template_variables
from lepkefing.markdown import markdown_to_html

ContentItem = dict[str, str]
ContentCollection = list[ContentItem]
TemplateIncludes = dict[str, str]
Variables = dict[str, str]


def process_template_tags(
    text: str,
    variables: Mapping[str, str],
    includes: Mapping[str, str] | None = None,
    content_item: Mapping[str, str] | None = None,
) -> str:
    """Render all Liquid tags and variables in ``text``.

    Content item values override ``variables``. Includes are expanded when
    given. If a content item is given and its ``file_type`` is missing or
    ``md``, the text is converted from Markdown before variables are filled
    in. Unresolved placeholders are removed. The caller's mappings are not
    changed. Raises LiquidError for malformed markup.
    """
    combined: dict[str, str] = dict(variables)
    if content_item is not None:
        combined.update(content_item)

    if includes is not None:
        result = process_liquid_tags_with_assigns(
            text, list(combined), includes, combined
        )
    else:
        result = process_liquid_assign_tags(text, combined)
        result = process_liquid_for_loops(result, combined)
        result = process_liquid_unless_tags(result, combined)
        result = process_liquid_conditional_tags(result, combined)

    if content_item is not None and content_item.get("file_type", "md") == "md":
        result = markdown_to_html(result)

    result = replace_template_variables(result, combined)
    return remove_liquid_variables(result)