"""Shared helpers for reading source files and grouping their comments."""

import logging
from pathlib import Path
from typing import Optional

from funcdoc.errors import ParseError
from funcdoc.parsers.structure import CommentGroup, CommentLine, Language

logger = logging.getLogger(__name__)

_SUFFIX_LANGUAGES = {
    ".py": Language.PYTHON,
    ".js": Language.JAVASCRIPT,
    ".jsx": Language.JAVASCRIPT,
    ".mjs": Language.JAVASCRIPT,
    ".cjs": Language.JAVASCRIPT,
    ".ts": Language.TYPESCRIPT,
    ".tsx": Language.TYPESCRIPT,
    ".go": Language.GO,
}

SUPPORTED_SUFFIXES = tuple(_SUFFIX_LANGUAGES)


def detect_language(file_path: str) -> Language:
    """Pick the source language of a file from its suffix.

    Args:
        file_path: Path to the source file.

    Returns:
        The Language the file is written in.

    Raises:
        ParseError: If the suffix is not one of the supported languages.
    """
    suffix = Path(file_path).suffix.lower()
    language: Optional[Language] = _SUFFIX_LANGUAGES.get(suffix)
    if language is None:
        raise ParseError(f"Unsupported source file type: {file_path}")
    return language


def read_source(file_path: str) -> str:
    """Read a UTF-8 source file.

    Args:
        file_path: Path to the source file.

    Returns:
        The decoded file contents, without a byte order mark.

    Raises:
        ParseError: If the file cannot be opened, read, or decoded.
    """
    try:
        with open(file_path, "rb") as handle:
            data = handle.read()
    except OSError as e:
        raise ParseError(f"Cannot read {file_path}: {e.strerror or e}") from e

    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"{file_path} is not valid UTF-8: {e.reason}") from e


def group_comments(comments: list[CommentLine]) -> list[CommentGroup]:
    """Split a file's comments into contiguous comment groups.

    Consecutive comments belong to the same group when no blank line
    separates them. A comment sharing its line with code always forms a
    group of its own.

    Args:
        comments: Every comment in the file, in source order.

    Returns:
        Comment groups in source order.
    """
    groups: list[CommentGroup] = []
    previous: Optional[CommentLine] = None

    for comment in comments:
        if (
            previous is None
            or comment.inline
            or previous.inline
            or comment.line > previous.end_line + 1
        ):
            groups.append(CommentGroup())
        groups[-1].lines.append(comment)
        previous = comment

    logger.debug("Grouped %d comments into %d groups", len(comments), len(groups))
    return groups
