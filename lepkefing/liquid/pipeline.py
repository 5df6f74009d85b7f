"""The full Liquid tag pass: assigns, loops, conditionals and includes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping

from lepkefing.liquid.assign import process_liquid_assign_tags
from lepkefing.liquid.conditionals import (
    process_liquid_conditional_tags,
    process_liquid_unless_tags,
)
from lepkefing.liquid.for_loop import process_liquid_for_loops
from lepkefing.liquid.includes import process_liquid_includes


def process_liquid_tags_with_assigns(
    template: str,
    conditions: Iterable[str],
    templates: Mapping[str, str],
    variables: MutableMapping[str, str],
) -> str:
    """Process assign, for, unless and if tags, then includes, in that order.

    Assign tags write into ``variables``. ``conditions`` is accepted for
    compatibility and not used; truthiness comes from ``variables``.
    """
    del conditions
    result = process_liquid_assign_tags(template, variables)
    result = process_liquid_for_loops(result, variables)
    result = process_liquid_unless_tags(result, variables)
    result = process_liquid_conditional_tags(result, variables)
    return process_liquid_includes(result, templates)