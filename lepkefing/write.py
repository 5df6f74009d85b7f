"""Writing rendered pages to disk as JSON documents."""

from __future__ import annotations

import os
import unicodedata

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape_char(ch: str) -> str:
    escaped = _ESCAPES.get(ch)
    if escaped is not None:
        return escaped
    if unicodedata.category(ch) == "Cc":
        return f"\\u{ord(ch):04x}"
    return ch


def escape_json_string(s: str) -> str:
    """Escape ``s`` for use inside a JSON string literal (without the quotes)."""
    return "".join(_escape_char(ch) for ch in s)


def _json_string_or_null(value: str | None) -> str:
    return "null" if value is None else f'"{escape_json_string(value)}"'


def write_json_to_file(
    path: str | os.PathLike[str],
    content: str,
    title: str | None,
    css: str | None,
) -> None:
    """Write a JSON document with ``content``, ``title`` and ``css`` fields.

    Missing title or css become ``null``. Parent directories are created.
    """
    directory = os.path.dirname(os.fspath(path))
    if directory:
        os.makedirs(directory, exist_ok=True)

    document = (
        "{\n"
        f'  "content": "{escape_json_string(content)}",\n'
        f'  "title": {_json_string_or_null(title)},\n'
        f'  "css": {_json_string_or_null(css)}\n'
        "}"
    )

    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(document)