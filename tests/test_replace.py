import pytest

from lepkefing.liquid.replace import remove_liquid_variables, replace_template_variables
from lepkefing.liquid.scanning import LiquidError


def test_replace_multiple_variables():
    variables = {"foo": "apple", "bar": "banana"}
    result = replace_template_variables("Lorem ipsum {{foo}} dolor {{bar}} sit amet.", variables)
    assert result == "Lorem ipsum apple dolor banana sit amet."


def test_replace_multiple_variables_with_spaces():
    variables = {"foo": "apple", "bar": "banana"}
    result = replace_template_variables(
        "Lorem ipsum {{ foo }} dolor {{ bar }} sit amet.", variables
    )
    assert result == "Lorem ipsum apple dolor banana sit amet."


def test_replace_multiple_variables_with_nested_access():
    variables = {
        "user.name": "Alice",
        "items.0.title": "First Item",
        "items.1.title": "Second Item",
    }
    template = "Hello {{user.name}}! Items: {{items.0.title}}, {{items.1.title}}"
    assert (
        replace_template_variables(template, variables)
        == "Hello Alice! Items: First Item, Second Item"
    )


def test_replace_variables_simple():
    assert replace_template_variables("Hello {{name}}!", {"name": "Alice"}) == "Hello Alice!"


def test_replace_variables_dot_notation():
    variables = {"user.name": "Bob", "user.age": "30"}
    template = "Hello {{user.name}}, you are {{user.age}} years old!"
    assert (
        replace_template_variables(template, variables)
        == "Hello Bob, you are 30 years old!"
    )


def test_replace_variables_array_indices():
    variables = {"people.0.name": "Alice", "people.1.name": "Bob"}
    template = "First: {{people.0.name}}, Second: {{people.1.name}}"
    assert replace_template_variables(template, variables) == "First: Alice, Second: Bob"


def test_replace_variables_not_found():
    assert (
        replace_template_variables("Hello {{missing.variable}}!", {})
        == "Hello {{ missing.variable }}!"
    )


def test_replace_variables_complex():
    variables = {"data.0.details.1.value": "test"}
    assert (
        replace_template_variables("Value: {{data.0.details.1.value}}", variables)
        == "Value: test"
    )


def test_replace_variables_invalid_name():
    with pytest.raises(LiquidError, match="Invalid variable name"):
        replace_template_variables("Hello {{invalid-name}}!", {})


def test_replace_variables_unclosed():
    with pytest.raises(LiquidError, match="Unclosed"):
        replace_template_variables("Hello, {{ name }!", {"name": "World"})


def test_remove_liquid_variables():
    assert (
        remove_liquid_variables("Lorem ipsum {{foo}} dolor {{ bar }} sit amet.")
        == "Lorem ipsum  dolor  sit amet."
    )


def test_remove_liquid_variables_with_error():
    with pytest.raises(LiquidError, match="Nested opening braces"):
        remove_liquid_variables("Lorem ipsum {{foo dolor {{ bar }} sit amet.")


def test_remove_nested_variables():
    assert (
        remove_liquid_variables("Hello {{user.name}} and {{deeply.nested.value}}!")
        == "Hello  and !"
    )


def test_remove_empty_template():
    assert remove_liquid_variables("") == ""


def test_remove_whitespace_handling():
    assert remove_liquid_variables("Hello {{  user.name  }} World") == "Hello  World"


def test_remove_unclosed_variable():
    with pytest.raises(LiquidError, match="Unclosed"):
        remove_liquid_variables("Hello {{user.name World")