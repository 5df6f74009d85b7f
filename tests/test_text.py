import pytest

from lepkefing.liquid.text import (
    apply_replacements_in_reverse,
    extract_literal_value,
    find_byte_index,
    find_equal_index,
    is_quoted_literal,
    parse_filter_invocation,
    parse_key_value_pair,
    parse_space_separated_key_value_params,
    split_respecting_quotes,
    trim_quotes,
    variable_placeholders,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('"hello"', "hello"),
        ("'hello'", "hello"),
        ("hello", "hello"),
        ("\"hello'", "hello"),
        ("", ""),
    ],
)
def test_trim_quotes(raw, expected):
    assert trim_quotes(raw) == expected


def test_is_quoted_literal():
    assert is_quoted_literal('"hello"')
    assert is_quoted_literal("'hello'")
    assert not is_quoted_literal("hello")
    assert not is_quoted_literal("\"hello'")


def test_extract_literal_value():
    assert extract_literal_value('"hello"') == "hello"
    assert extract_literal_value("'world'") == "world"
    assert extract_literal_value("hello") is None


def test_parse_key_value_pair():
    assert parse_key_value_pair('name:"Alice"') == ("name", "Alice")
    assert parse_key_value_pair("age:25") == ("age", "25")
    assert parse_key_value_pair("invalid") is None


def test_parse_space_separated_key_value_params():
    params = parse_space_separated_key_value_params(
        'name:"Alice" greeting:"Hello World" count:42'
    )
    assert params == {"name": "Alice", "greeting": "Hello World", "count": "42"}


def test_parse_space_separated_params_skips_malformed_tokens():
    params = parse_space_separated_key_value_params('malformed greeting:"Hello"')
    assert params == {"greeting": "Hello"}


def test_parse_space_separated_params_single_quotes_and_empty():
    assert parse_space_separated_key_value_params("limit:'10'") == {"limit": "10"}
    assert parse_space_separated_key_value_params("") == {}


def test_variable_placeholders():
    p = variable_placeholders("item")
    assert p[0] == "{{item."
    assert p[1] == "{ item."
    assert p[2] == "{{item}}"
    assert p[3] == "{ item }"


def test_parse_filter_invocation():
    assert parse_filter_invocation("where: 'a', 'b'") == ("where", "'a', 'b'")
    assert parse_filter_invocation("invalid") is None


def test_apply_replacements_in_reverse():
    result = apply_replacements_in_reverse(
        "0123456789", [(2, 4, "AB"), (6, 9, "XYZ")]
    )
    assert result == "01AB45XYZ9"


def test_apply_replacements_with_length_change():
    result = apply_replacements_in_reverse("abcdef", [(0, 1, ""), (3, 4, "XYZ")])
    assert result == "bcXYZef"


def test_split_respecting_quotes():
    assert split_respecting_quotes('"active", "true"') == ['"active"', '"true"']
    assert split_respecting_quotes('active, true, "quoted, value"') == [
        "active",
        "true",
        '"quoted, value"',
    ]
    assert split_respecting_quotes("simple, values") == ["simple", "values"]


def test_split_respecting_quotes_edge_cases():
    assert split_respecting_quotes("") == []
    assert split_respecting_quotes("simple string") == ["simple string"]
    assert split_respecting_quotes("\"outer 'inner' outer\", next") == [
        "\"outer 'inner' outer\"",
        "next",
    ]
    assert split_respecting_quotes(
        '"part1, still part1", "part2, still part2"'
    ) == ['"part1, still part1"', '"part2, still part2"']
    assert split_respecting_quotes("'single, quote', normal") == [
        "'single, quote'",
        "normal",
    ]


def test_find_byte_index():
    assert find_byte_index(b"abc:def", b":") == 3
    assert find_byte_index(b"abcdef", b":") is None
    assert find_byte_index(b"", b":") is None
    assert find_byte_index(b"a:b:c", b":") == 1


def test_find_byte_index_on_text():
    assert find_byte_index("key: value", ":") == 3
    assert find_byte_index("no colon", ":") is None


def test_find_equal_index():
    assert find_equal_index(b"a=b") == 1
    assert find_equal_index(b"abc") is None
    assert find_equal_index(b"") is None
    assert find_equal_index(b"a==b") == 1
    assert find_equal_index("x = y") == 2