"""Character cursor and low-level scanners for Liquid markup."""

from __future__ import annotations


class LiquidError(Exception):
    """Raised when a template contains malformed Liquid markup."""


class Cursor:
    """An iterator over the characters of a string that can look one ahead."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def __iter__(self) -> Cursor:
        return self

    def __next__(self) -> str:
        if self._pos >= len(self._text):
            raise StopIteration
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def peek(self) -> str | None:
        """Return the next character without consuming it, or None at the end."""
        if self._pos >= len(self._text):
            return None
        return self._text[self._pos]

    def remaining(self) -> str:
        """Return the text not yet consumed, without consuming it."""
        return self._text[self._pos :]

    def _starts_with(self, prefix: str) -> bool:
        return self._text.startswith(prefix, self._pos)


def skip_to_endunless(cursor: Cursor) -> None:
    """Consume characters up to and including the next ``{% endunless %}`` tag."""
    for ch in cursor:
        if ch == "{" and cursor.peek() == "%":
            next(cursor)
            tag: list[str] = []
            for tc in cursor:
                if tc == "%" and cursor.peek() == "}":
                    next(cursor)
                    if "".join(tag).strip() == "endunless":
                        return
                    break
                tag.append(tc)


def read_until_endunless(cursor: Cursor) -> str:
    """Return the text before the next ``{% endunless %}``, consuming the tag too.

    Other tags met on the way are kept verbatim.
    """
    content: list[str] = []
    for ch in cursor:
        if ch == "{" and cursor.peek() == "%":
            tag_start = len(content)
            content.append(ch)
            content.append(next(cursor))
            tag: list[str] = []
            for tc in cursor:
                if tc == "%" and cursor.peek() == "}":
                    next(cursor)
                    if "".join(tag).strip() == "endunless":
                        del content[tag_start:]
                        return "".join(content)
                    content.append("%}")
                    break
                tag.append(tc)
                content.append(tc)
        else:
            content.append(ch)
    return "".join(content)


def read_liquid_tag_content(cursor: Cursor) -> tuple[str, bool]:
    """Read up to ``%}``; return the content and whether the closing was found."""
    content: list[str] = []
    for ch in cursor:
        if ch == "%" and cursor.peek() == "}":
            next(cursor)
            return "".join(content), True
        content.append(ch)
    return "".join(content), False


def advance_past_whitespace(cursor: Cursor) -> None:
    """Consume whitespace characters."""
    while (ch := cursor.peek()) is not None and ch.isspace():
        next(cursor)


def detect_variable_start(cursor: Cursor) -> bool:
    """Consume ``{{`` if it comes next and report whether it did."""
    if cursor._starts_with("{{"):
        next(cursor)
        next(cursor)
        return True
    return False


def read_liquid_variable_content(cursor: Cursor) -> str:
    """Read a variable's content up to the closing ``}}``, consuming it."""
    content: list[str] = []
    for ch in cursor:
        if ch == "}" and cursor.peek() == "}":
            next(cursor)
            return "".join(content)
        content.append(ch)
    raise LiquidError("Unclosed variable in template")