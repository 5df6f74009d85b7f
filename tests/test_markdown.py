from lepkefing.markdown import list_to_html, markdown_to_html, single_line_breaks_to_html


def test_list_to_html():
    markdown = (
        "\n- Item 1\n- Item 2\n- Item 3\n\nSome other text.\n\n- Item 1\n- Item 2\n"
    )
    expected = (
        "<ul><li>Item 1</li><li>Item 2</li><li>Item 3</li></ul>"
        "Some other text.<ul><li>Item 1</li><li>Item 2</li></ul>"
    )
    assert list_to_html(markdown) == expected


def test_list_to_html_empty():
    assert list_to_html("") == ""


def test_list_to_html_indented_item_keeps_dash():
    assert list_to_html("  - Item") == "<ul><li>- Item</li></ul>"


def test_list_to_html_strips_carriage_return():
    assert list_to_html("a\r\nb\r\n") == "ab"


def test_single_line_breaks_to_html():
    markdown = "This is a line.\nThis is another line.\n\nThis is a new paragraph."
    expected = "This is a line.<br />This is another line.<br /><br />This is a new paragraph."
    assert single_line_breaks_to_html(markdown) == expected


def test_single_line_breaks_edge_cases():
    assert single_line_breaks_to_html("") == ""
    assert single_line_breaks_to_html("\n") == "<br />"
    assert single_line_breaks_to_html("\n\n\n") == "<br /><br /><br />"
    assert single_line_breaks_to_html("no newlines here") == "no newlines here"
    assert single_line_breaks_to_html("\nstart with newline") == "<br />start with newline"
    assert single_line_breaks_to_html("end with newline\n") == "end with newline<br />"
    assert single_line_breaks_to_html("line1\nline2\nline3") == "line1<br />line2<br />line3"


def test_single_line_breaks_large_input():
    text = "".join(f"Line {i}\n" for i in range(1000))
    result = single_line_breaks_to_html(text)
    assert result.count("<br />") == 1000
    assert "Line 0<br />" in result
    assert "Line 999<br />" in result


def test_markdown_to_html_joins_paragraph_lines():
    assert markdown_to_html("# Test Heading\n\nThis is a paragraph.") == (
        "# Test HeadingThis is a paragraph."
    )


def test_markdown_to_html_list():
    assert markdown_to_html("Intro\n- a\n- b\nOutro") == (
        "Intro<ul><li>a</li><li>b</li></ul>Outro"
    )