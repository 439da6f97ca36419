"""Scanners for function annotation comments and emphasis markup.

An annotation comment has the form ``// fn Name: docstring`` (or
``# fn Name: docstring`` in Python sources). Inside the docstring,
parameter names are written as ``*name*``; those tokens supply the
argument names shown in the rendered signature.
"""

from collections.abc import Iterator
from typing import Optional

from funcdoc.parsers.structure import ParsedAnnotation

_KEYWORD = "fn"
_EMPHASIS = "*"


def strip_comment_marker(text: str) -> str:
    """Remove the comment marker and surrounding whitespace from a comment.

    Handles ``//`` and ``#`` line comments and ``/* ... */`` block
    comments. The physical lines of a block comment are joined with
    single spaces. Text without a marker is only trimmed.

    Args:
        text: Raw comment text.

    Returns:
        The comment body.
    """
    body = text.strip()
    if body.startswith("/*"):
        body = body[2:]
        if body.endswith("*/"):
            body = body[:-2]
        return " ".join(part.strip() for part in body.splitlines() if part.strip())
    if body.startswith("//"):
        body = body[2:]
    elif body.startswith("#"):
        body = body[1:]
    return body.strip()


def match_annotation(text: str) -> Optional[ParsedAnnotation]:
    """Match one comment line against the ``fn Name: docstring`` grammar.

    The function name is everything between ``fn`` and the first colon,
    trimmed. The docstring is the trimmed remainder and may be empty.

    Args:
        text: Raw comment text, with or without its comment marker.

    Returns:
        The parsed annotation, or None if the line is not an annotation.
    """
    body = strip_comment_marker(text)
    if not body.startswith(_KEYWORD):
        return None

    rest = body[len(_KEYWORD) :]
    if not rest or not rest[0].isspace():
        return None

    name, colon, docstring = rest.partition(":")
    name = name.strip()
    if not colon or not name:
        return None

    return ParsedAnnotation(func_name=name, docstring=docstring.strip())


def _is_word_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def _iter_emphasis(text: str) -> Iterator[tuple[int, int, str]]:
    """Yield ``(start, end, token)`` for every ``*token*`` pair in text.

    ``start`` is the index of the opening marker and ``end`` the index
    just past the closing one. Pairs never overlap.
    """
    index = 0
    length = len(text)
    while index < length:
        if text[index] == _EMPHASIS:
            end = index + 1
            while end < length and _is_word_char(text[end]):
                end += 1
            if end > index + 1 and end < length and text[end] == _EMPHASIS:
                yield index, end + 1, text[index + 1 : end]
                index = end + 1
                continue
        index += 1


def extract_argument_names(docstring: str) -> list[str]:
    """Extract emphasized argument names from a docstring.

    Args:
        docstring: Docstring text, e.g. ``"adds *a* and *b* together."``.

    Returns:
        Each emphasized token in order of first appearance, without
        duplicates. Empty if the docstring has no emphasis markers.
    """
    names: list[str] = []
    for _, _, token in _iter_emphasis(docstring):
        if token not in names:
            names.append(token)
    return names


def strip_emphasis(text: str) -> str:
    """Replace every ``*token*`` pair in text with the bare token."""
    pieces: list[str] = []
    position = 0
    for start, end, token in _iter_emphasis(text):
        pieces.append(text[position:start])
        pieces.append(token)
        position = end
    pieces.append(text[position:])
    return "".join(pieces)
