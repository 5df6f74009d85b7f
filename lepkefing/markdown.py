"""A minimal Markdown-to-HTML conversion: bullet lists and line breaks."""

from __future__ import annotations


def _lines(text: str) -> list[str]:
    """Split into lines on ``\\n``, without a trailing empty line, dropping a final ``\\r``."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def list_to_html(text: str) -> str:
    """Turn runs of lines starting with ``-`` into ``<ul>`` lists.

    Lines are joined without separators.
    """
    parts: list[str] = []
    in_list = False

    for line in _lines(text):
        if line.lstrip().startswith("-"):
            if not in_list:
                in_list = True
                parts.append("<ul>")
            parts.append("<li>" + line.lstrip("-").strip() + "</li>")
        else:
            if in_list:
                in_list = False
                parts.append("</ul>")
            parts.append(line)

    if in_list:
        parts.append("</ul>")

    return "".join(parts)


def single_line_breaks_to_html(text: str) -> str:
    """Replace every newline with ``<br />``."""
    return text.replace("\n", "<br />")


def markdown_to_html(text: str) -> str:
    """Convert lists, then line breaks, to HTML."""
    return single_line_breaks_to_html(list_to_html(text))