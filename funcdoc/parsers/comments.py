"""Source comment scanner.

Dispatches a source file to the parser for its language and returns
the file's comment groups in source order.
"""

import logging

from funcdoc.parsers.python_parser import PythonParser
from funcdoc.parsers.source import detect_language
from funcdoc.parsers.structure import CommentGroup, Language
from funcdoc.parsers.tree_sitter_parser import TreeSitterParser

logger = logging.getLogger(__name__)


def scan_comment_groups(file_path: str) -> list[CommentGroup]:
    """Parse one source file into ordered comment groups.

    Args:
        file_path: Path to a Python, JavaScript, TypeScript or Go file.

    Returns:
        Comment groups in file order.

    Raises:
        ParseError: If the file cannot be read, has an unsupported type,
            or is structurally malformed.
    """
    language = detect_language(file_path)
    if language == Language.PYTHON:
        groups = PythonParser().parse_file(file_path)
    else:
        groups = TreeSitterParser().parse_file(file_path)

    logger.debug("Found %d comment groups in %s", len(groups), file_path)
    return groups
