# lepkefing

Building blocks for a small static site generator: a Liquid-style template
engine that works on flat string variables, a minimal markdown converter and a
helper for writing page JSON.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Variables

Templates are rendered against a flat `dict[str, str]`. Nested data uses dotted
keys, and lists use numeric indices:

```python
variables = {
    "site.title": "My site",
    "users.0.name": "Alice",
    "users.0.active": "true",
    "users.1.name": "Bob",
    "users.1.active": "false",
}
```

## Rendering templates

`lepkefing.templates.process_template_tags(text, variables, includes=None, content_item=None)`
runs the full pipeline: `assign` tags, `for` loops, `unless` and `if` blocks,
includes (when `includes` is given), and variable substitution. Values in
`content_item` override `variables`; if a `content_item` is given and its
`file_type` is missing or `md`, the text is converted from markdown before
variables are filled in. Variables that cannot be resolved are removed from the
output. The mappings passed in are not modified.

```python
from lepkefing.templates import process_template_tags

includes = {"greeting.liquid": "Hello {{ name }}!"}
text = (
    "{% assign active = users | where: 'active', 'true' %}"
    "{% for user in active %}{{ user.name }}{% unless forloop.last %}, {% endunless %}{% endfor %}"
    " {% include greeting.liquid name:\"World\" %}"
)
print(process_template_tags(text, variables, includes, None))
# Alice Hello World!
```

Supported syntax:

- `{{ name }}`, `{{ user.name }}`, `{{ items.0.title }}`
- `{% if flag %}...{% endif %}`: true when the value is present, non-empty and not `false`
- `{% unless flag %}...{% endunless %}`: removed only when the value is `true`
- `{% for item in items limit:2 %}...{% endfor %}` with `forloop.index`,
  `forloop.index0`, `forloop.first`, `forloop.last` and `forloop.length`
- `{% assign x = "literal" %}`, `{% assign x = other %}` and
  `{% assign x = items | where: "prop", "value" %}` (`nil` matches missing,
  empty or `nil` values)
- `{% include name.liquid key:"value" %}`

Malformed templates raise `lepkefing.liquid.scanning.LiquidError`.

The individual stages are also available on their own:

- `lepkefing.liquid.assign.process_liquid_assign_tags`
- `lepkefing.liquid.for_loop.process_liquid_for_loops`
- `lepkefing.liquid.conditionals.process_liquid_conditional_tags` and
  `process_liquid_unless_tags`
- `lepkefing.liquid.includes.process_liquid_includes` and
  `parse_liquid_include_tag`
- `lepkefing.liquid.replace.replace_template_variables` and
  `remove_liquid_variables`
- `lepkefing.liquid.pipeline.process_liquid_tags_with_assigns`, which runs
  assigns, loops, unless, if and includes in that order

Lower-level helpers live in `lepkefing.liquid.text`, `lepkefing.liquid.tags`,
`lepkefing.liquid.variables` and `lepkefing.liquid.scanning`.

## Markdown

```python
from lepkefing.markdown import markdown_to_html

markdown_to_html("- one\n- two")  # '<ul><li>one</li><li>two</li></ul>'
```

Lines starting with `-` become list items (`list_to_html`), and the remaining
line breaks become `<br />` (`single_line_breaks_to_html`).

## Page JSON

`lepkefing.write.write_json_to_file(path, content, title, css)` writes a
`{"content", "title", "css"}` document, creating parent directories as needed.
A `title` or `css` of `None` is written as `null`. `escape_json_string` gives
the escaping it uses.

## What this package does not do

It has no command line, no development server and no file watcher. It does not
read a site directory, apply layouts, write or minify HTML pages, or generate a
whole site: it provides the template, markdown and JSON pieces that such a tool
would be built from.